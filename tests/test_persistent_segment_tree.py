import pytest
from hypothesis import given, strategies as st

from contestlib.persistent_segment_tree import PersistentSegmentTree


@given(st.lists(st.integers(0, 30), min_size=1, max_size=25), st.data())
def test_kth_on_subarrays(values, data):
    tree = PersistentSegmentTree(31)
    for v in values:
        tree.add(tree.versions - 1, v)
    i = data.draw(st.integers(0, len(values) - 1))
    j = data.draw(st.integers(i + 1, len(values)))
    part = sorted(values[i:j])
    k = data.draw(st.integers(1, len(part)))
    assert tree.kth(i, j, k) == part[k - 1]


def test_versions_are_persistent():
    tree = PersistentSegmentTree(10)
    v1 = tree.add(0, 5)
    v2 = tree.add(v1, 2)
    branch = tree.add(v1, 9)
    assert tree.kth(0, v2, 1) == 2
    assert tree.kth(0, branch, 2) == 9
    assert tree.kth(0, v1, 1) == 5


def test_errors():
    tree = PersistentSegmentTree(4)
    with pytest.raises(ValueError):
        tree.add(0, 4)
    v = tree.add(0, 1)
    with pytest.raises(ValueError):
        tree.kth(0, v, 2)