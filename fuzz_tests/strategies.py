import hypothesis.strategies as st

from superset import SuperSet

# A small domain so that generated sets overlap often
elements = st.integers(min_value=-8, max_value=8) | st.sampled_from(["a", "b", "c", None])
element_lists = st.lists(elements, max_size=12)


@st.composite
def supersets(draw, items=element_lists) -> SuperSet:
    return SuperSet(draw(items))
