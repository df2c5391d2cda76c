import pytest
from hypothesis import given, strategies as st

from contestlib.trees import HeavyLightDecomposition, LowestCommonAncestor


@st.composite
def trees(draw):
    n = draw(st.integers(1, 12))
    parents = [-1] + [draw(st.integers(0, i - 1)) for i in range(1, n)]
    return n, parents


def _edges(parents):
    return [(i, p) for i, p in enumerate(parents) if p != -1]


def _ancestors(parents, v):
    chain = [v]
    while parents[chain[-1]] != -1:
        chain.append(parents[chain[-1]])
    return chain


def _path(parents, u, v):
    up_u, up_v = _ancestors(parents, u), _ancestors(parents, v)
    meet = next(x for x in up_u if x in set(up_v))
    return up_u[: up_u.index(meet) + 1] + up_v[: up_v.index(meet)]


def test_path_tree_lca():
    lca = LowestCommonAncestor(4, [(0, 1), (1, 2), (2, 3)])
    assert lca.lca(3, 1) == 1
    assert lca.lca(2, 2) == 2


@given(trees(), st.data())
def test_lca_is_deepest_common_ancestor(tree, data):
    n, parents = tree
    lca = LowestCommonAncestor(n, _edges(parents))
    u = data.draw(st.integers(0, n - 1))
    v = data.draw(st.integers(0, n - 1))
    common = set(_ancestors(parents, v))
    expected = next(x for x in _ancestors(parents, u) if x in common)
    assert lca.lca(u, v) == expected
    assert lca.lca(v, u) == expected


@given(trees(), st.data())
def test_path_sum_matches_path(tree, data):
    n, parents = tree
    values = data.draw(st.lists(st.integers(-50, 50), min_size=n, max_size=n))
    hld = HeavyLightDecomposition(n, _edges(parents))
    for vertex, value in enumerate(values):
        hld.update(vertex, value)
    u = data.draw(st.integers(0, n - 1))
    v = data.draw(st.integers(0, n - 1))
    assert hld.path_sum(u, v) == sum(values[x] for x in _path(parents, u, v))


@given(trees(), st.data())
def test_other_root_gives_same_path_sums(tree, data):
    n, parents = tree
    root = data.draw(st.integers(0, n - 1))
    values = data.draw(st.lists(st.integers(0, 9), min_size=n, max_size=n))
    a = HeavyLightDecomposition(n, _edges(parents))
    b = HeavyLightDecomposition(n, _edges(parents), root=root)
    for vertex, value in enumerate(values):
        a.update(vertex, value)
        b.update(vertex, value)
    u = data.draw(st.integers(0, n - 1))
    v = data.draw(st.integers(0, n - 1))
    assert a.path_sum(u, v) == b.path_sum(u, v)


def test_update_overwrites_value():
    hld = HeavyLightDecomposition(3, [(0, 1), (1, 2)])
    hld.update(1, 7)
    hld.update(1, 2)
    assert hld.path_sum(0, 2) == 2


def test_invalid_trees_rejected():
    with pytest.raises(ValueError):
        LowestCommonAncestor(3, [(0, 1)])
    with pytest.raises(ValueError):
        HeavyLightDecomposition(4, [(0, 1), (1, 2), (2, 0)])