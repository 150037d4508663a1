__all__ = ["EmptyAccessError", "EmptyReduceError"]

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmptyReduceError(ValueError):
    def __str__(self) -> str:
        return (
            "Expected a non-empty set or an initial value when reducing, "
            "but the set was empty and no initial value was given"
        )


@dataclass(frozen=True, slots=True)
class EmptyAccessError(ValueError):
    def __str__(self) -> str:
        return "Expected a non-empty set when accessing the first element, but the set was empty"
