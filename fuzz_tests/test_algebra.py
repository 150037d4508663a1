from hypothesis import given

from superset import SuperSet

from .strategies import element_lists, supersets


def unique_in_order(items):
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


@given(element_lists)
def test_construction_keeps_first_occurrences(items):
    assert list(SuperSet(items)) == unique_in_order(items)


@given(supersets(), supersets())
def test_union_is_disjoint_parts(a, b):
    assert a.union(b) == a.subtract(b).union(a.intersect(b)).union(b.subtract(a))


@given(supersets(), supersets())
def test_union_order(a, b):
    assert list(a.union(b)) == list(a) + [item for item in b if item not in a]


@given(supersets(), supersets())
def test_xor_is_both_differences(a, b):
    assert list(a.xor(b)) == list(a.subtract(b).union(b.subtract(a)))


@given(supersets(), supersets())
def test_intersect_is_double_subtract(a, b):
    assert list(a.intersect(b)) == list(a.subtract(a.subtract(b)))


@given(supersets(), supersets())
def test_algebra_matches_builtin_set(a, b):
    assert set(a.union(b)) == set(a) | set(b)
    assert set(a.intersect(b)) == set(a) & set(b)
    assert set(a.subtract(b)) == set(a) - set(b)
    assert set(a.xor(b)) == set(a) ^ set(b)


@given(supersets(), supersets())
def test_subset_iff_difference_empty(a, b):
    assert a.is_subset_of(b) == (len(a.subtract(b)) == 0)


@given(supersets())
def test_subset_of_self_and_empty_subset(a):
    assert a.is_subset_of(a)
    assert SuperSet().is_subset_of(a)


@given(supersets(), supersets())
def test_superset_mirrors_subset(a, b):
    assert a.is_subset_of(b) == b.is_superset_of(a)


@given(supersets(), supersets())
def test_equals_is_symmetric(a, b):
    assert a.equals(b) == b.equals(a)


@given(element_lists)
def test_equals_any_container_with_same_elements(items):
    a = SuperSet(items)
    assert a.equals(a)
    assert a.equals(items)
    assert a.equals(set(items))
    assert a.equals(reversed(a))
    assert a == set(items)


@given(supersets())
def test_map_identity(a):
    assert list(a.map(lambda x: x)) == list(a)


@given(supersets())
def test_map_constant_collapses(a):
    assert len(a.map(lambda x: 0)) == min(len(a), 1)


@given(supersets())
def test_vacuous_predicates_only_when_empty(a):
    assert a.every(lambda x: False) == (len(a) == 0)
    assert a.some(lambda x: True) == (len(a) > 0)


@given(supersets())
def test_join_matches_str_join(a):
    assert a.join("|") == "|".join(str(item) for item in a)


@given(supersets())
def test_reduce_with_initial_collects_in_order(a):
    assert a.reduce(lambda accumulator, x: [*accumulator, x], []) == list(a)


@given(supersets(), element_lists)
def test_remove_and_add_moves_to_end(a, elements_to_toggle):
    expected = list(a)
    for item in elements_to_toggle:
        if item in expected:
            expected.remove(item)
        expected.append(item)
        a.remove(item).add(item)
    assert list(a) == expected
