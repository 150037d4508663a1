from __future__ import annotations

__all__ = ["SuperSet"]

from enum import Enum
from itertools import chain
from typing import (
    AbstractSet,
    Callable,
    Hashable,
    Iterable,
    Iterator,
    Literal,
    MutableSet,
    TypeVar,
)

from .exceptions import EmptyAccessError, EmptyReduceError

Element = TypeVar("Element", bound=Hashable)
Mapped = TypeVar("Mapped", bound=Hashable)
Accumulator = TypeVar("Accumulator")


class _Missing(Enum):
    missing = "missing"


def _membership(other: Iterable[Hashable]) -> AbstractSet[Hashable] | dict[Hashable, None]:
    if isinstance(other, SuperSet):
        return other._items
    elif isinstance(other, AbstractSet):
        return other
    else:
        return dict.fromkeys(other)


class SuperSet(MutableSet[Element]):
    """A set that remembers insertion order and has a functional API.

    Iteration yields elements in the order in which they were first added.
    Removing an element and adding it again moves it to the end. All of the
    algebraic and functional operations return a new ``SuperSet``; only
    ``add``, ``remove``, ``discard``, ``clear``, and ``update`` mutate, and
    they return the set itself so that calls can be chained.

    Arguments to the algebraic operations and predicates may be any finite
    iterable, not only another ``SuperSet``.
    """

    def __init__(self, items: Iterable[Element] = ()):
        # Rely on stable dictionary
        self._items: dict[Element, None] = dict.fromkeys(items)

    @classmethod
    def _from_iterable(cls, items: Iterable[Element]) -> SuperSet[Element]:
        return cls(items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, x: object) -> bool:
        return x in self._items

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def __reversed__(self) -> SuperSet[Element]:
        return self._from_iterable(reversed(self._items))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AbstractSet):
            return self.equals(other)
        else:
            return NotImplemented

    def __repr__(self) -> str:
        name = type(self).__name__
        if len(self._items) == 0:
            return f"{name}()"
        return f"{name}([{', '.join(repr(item) for item in self._items)}])"

    # Operators follow the built-in set and only accept other sets
    def __or__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self.union(other)
        else:
            return NotImplemented

    def __ror__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self._from_iterable(other).union(self)
        else:
            return NotImplemented

    def __and__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self.intersect(other)
        else:
            return NotImplemented

    def __rand__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self._from_iterable(other).intersect(self)
        else:
            return NotImplemented

    def __sub__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self.subtract(other)
        else:
            return NotImplemented

    def __rsub__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self._from_iterable(other).subtract(self)
        else:
            return NotImplemented

    def __xor__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self.xor(other)
        else:
            return NotImplemented

    def __rxor__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self._from_iterable(other).xor(self)
        else:
            return NotImplemented

    def __ior__(self, other: AbstractSet[Element]) -> SuperSet[Element]:
        if isinstance(other, AbstractSet):
            return self.update(other)
        else:
            return NotImplemented

    def copy(self) -> SuperSet[Element]:
        return self._from_iterable(self._items)

    def add(self, element: Element, /) -> SuperSet[Element]:
        self._items[element] = None
        return self

    def remove(self, element: Element, /) -> SuperSet[Element]:
        """Remove an element if it is present.

        Unlike ``set.remove``, removing an absent element does nothing.
        """
        self._items.pop(element, None)
        return self

    def discard(self, element: Element, /) -> SuperSet[Element]:
        return self.remove(element)

    def clear(self) -> SuperSet[Element]:
        self._items.clear()
        return self

    def update(self, items: Iterable[Element], /) -> SuperSet[Element]:
        # Consume the input fully before touching the set
        new_items = dict.fromkeys(items)
        self._items.update(new_items)
        return self

    @property
    def first(self) -> Element:
        """The earliest added element.

        Raises:
            EmptyAccessError: If the set is empty.
        """
        try:
            return next(iter(self._items))
        except StopIteration:
            raise EmptyAccessError() from None

    def map(self, transform: Callable[[Element], Mapped]) -> SuperSet[Mapped]:
        """Apply ``transform`` to each element in order.

        Results that compare equal collapse into one element, so the result
        can be smaller than this set.
        """
        return self._from_iterable(transform(item) for item in self._items)

    def filter(self, predicate: Callable[[Element], bool]) -> SuperSet[Element]:
        return self._from_iterable(item for item in self._items if predicate(item))

    def reduce(
        self,
        combine: Callable[[Accumulator, Element], Accumulator],
        initial: Accumulator | Literal[_Missing.missing] = _Missing.missing,
    ) -> Accumulator:
        """Fold the elements from left to right in insertion order.

        If ``initial`` is not given, the first element is the starting value
        and the fold runs over the remaining elements.

        Raises:
            EmptyReduceError: If the set is empty and ``initial`` is not given.
        """
        items = iter(self._items)
        if initial is _Missing.missing:
            try:
                accumulator = next(items)
            except StopIteration:
                raise EmptyReduceError() from None
        else:
            accumulator = initial

        for item in items:
            accumulator = combine(accumulator, item)
        return accumulator

    def find(self, predicate: Callable[[Element], bool]) -> Element | None:
        for item in self._items:
            if predicate(item):
                return item
        return None

    def every(self, predicate: Callable[[Element], bool]) -> bool:
        return all(predicate(item) for item in self._items)

    def some(self, predicate: Callable[[Element], bool]) -> bool:
        return any(predicate(item) for item in self._items)

    def join(self, separator: str = ",") -> str:
        return separator.join(str(item) for item in self._items)

    def union(self, other: Iterable[Element]) -> SuperSet[Element]:
        return self._from_iterable(chain(self._items, other))

    def intersect(self, other: Iterable[Element]) -> SuperSet[Element]:
        other_items = _membership(other)
        return self._from_iterable(item for item in self._items if item in other_items)

    def subtract(self, other: Iterable[Element]) -> SuperSet[Element]:
        other_items = _membership(other)
        return self._from_iterable(item for item in self._items if item not in other_items)

    def xor(self, other: Iterable[Element]) -> SuperSet[Element]:
        other_items = _membership(other)
        return self._from_iterable(
            chain(
                (item for item in self._items if item not in other_items),
                (item for item in other_items if item not in self._items),
            )
        )

    def is_subset_of(self, other: Iterable[Element]) -> bool:
        other_items = _membership(other)
        return all(item in other_items for item in self._items)

    def is_superset_of(self, other: Iterable[Element]) -> bool:
        return all(item in self._items for item in other)

    def equals(self, other: Iterable[Element]) -> bool:
        """Test whether ``other`` holds exactly the same elements.

        Order does not matter. ``other`` can be any finite iterable; repeated
        values in it count once.
        """
        other_items = _membership(other)
        return len(self._items) == len(other_items) and all(
            item in other_items for item in self._items
        )
