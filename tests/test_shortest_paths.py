import math

import pytest
from hypothesis import given, strategies as st

from contestlib.shortest_paths import (
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    dijkstra_path,
    floyd_warshall,
)


@st.composite
def graphs(draw):
    n = draw(st.integers(1, 7))
    vertex = st.integers(0, n - 1)
    edges = draw(st.lists(st.tuples(vertex, vertex, st.integers(0, 20)), max_size=20))
    source = draw(vertex)
    return n, edges, source


@st.composite
def dags_with_negative_weights(draw):
    n = draw(st.integers(2, 7))
    pairs = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)).filter(
                lambda p: p[0] < p[1]
            ),
            max_size=15,
        )
    )
    edges = [(u, v, draw(st.integers(-10, 10))) for u, v in pairs]
    return n, edges, draw(st.integers(0, n - 1))


def test_small_example():
    edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]
    assert bellman_ford(3, edges, 0) == [0, 3, 1]
    assert dijkstra(3, edges, 0) == bellman_ford(3, edges, 0)
    assert dijkstra_path(3, edges, 0, 1) == [0, 2, 1]


@given(graphs())
def test_algorithms_agree(graph):
    n, edges, source = graph
    expected = floyd_warshall(n, edges)[source]
    assert dijkstra(n, edges, source) == expected
    assert bellman_ford(n, edges, source) == expected


@given(dags_with_negative_weights())
def test_bellman_ford_negative_edges(graph):
    n, edges, source = graph
    assert bellman_ford(n, edges, source) == floyd_warshall(n, edges)[source]


@given(graphs(), st.data())
def test_dijkstra_path_is_shortest(graph, data):
    n, edges, source = graph
    target = data.draw(st.integers(0, n - 1))
    dist = dijkstra(n, edges, source)
    if dist[target] == math.inf:
        with pytest.raises(ValueError):
            dijkstra_path(n, edges, source, target)
    else:
        path = dijkstra_path(n, edges, source, target)
        assert path[0] == source and path[-1] == target
        total = sum(
            min(w for u, v, w in edges if (u, v) == (a, b))
            for a, b in zip(path, path[1:])
        )
        assert total == dist[target]


def test_negative_cycle_detected():
    edges = [(0, 1, 1), (1, 2, -3), (2, 1, 1)]
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, edges, 0)


def test_unreachable_negative_cycle_ignored():
    edges = [(1, 2, -3), (2, 1, 1)]
    dist = bellman_ford(3, edges, 0)
    assert dist[0] == 0
    assert dist[1] == math.inf and dist[2] == math.inf


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(0, 1, -1)], 0)


def test_unreachable_target_raises():
    with pytest.raises(ValueError):
        dijkstra_path(2, [], 0, 1)
    assert dijkstra(2, [], 0)[1] == math.inf


def test_floyd_keeps_lightest_parallel_edge():
    dist = floyd_warshall(2, [(0, 1, 9), (0, 1, 4)])
    assert dist[0][1] == 4
    assert dist[1][0] == math.inf


def test_bad_source_raises():
    with pytest.raises(IndexError):
        bellman_ford(2, [], 5)