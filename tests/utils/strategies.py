from __future__ import annotations

import numpy as np
from hypothesis import strategies as st
from hypothesis.extra import numpy as hnp

TRAVERSALS = ("iterative", "recursive")

_ints = st.integers(min_value=-1000, max_value=1000)

int_lists = st.lists(_ints, max_size=40)
mixed_lists = st.lists(st.one_of(_ints, st.text(max_size=4), st.none()), max_size=40)
int_arrays = hnp.arrays(
    dtype=np.int64,
    shape=st.integers(min_value=0, max_value=40),
    elements=_ints,
)
traversals = st.sampled_from(TRAVERSALS)
