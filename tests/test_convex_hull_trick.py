import pytest
from hypothesis import given, strategies as st

from contestlib.convex_hull_trick import LineContainer, MonotoneCHT

line_st = st.tuples(st.integers(-50, 50), st.integers(-1000, 1000))


@given(st.lists(line_st, min_size=1, max_size=20), st.lists(st.integers(-100, 100), min_size=1, max_size=20))
def test_line_container_matches_max(lines, xs):
    lc = LineContainer()
    for k, m in lines:
        lc.add(k, m)
    for x in xs:
        assert lc.query(x) == max(k * x + m for k, m in lines)


@given(st.lists(line_st, min_size=1, max_size=20), st.lists(st.integers(-100, 100), min_size=1, max_size=20))
def test_monotone_cht_matches_max(lines, xs):
    lines = sorted(lines)
    cht = MonotoneCHT()
    for i, (k, m) in enumerate(lines):
        cht.add(k, m, i)
    for x in sorted(xs):
        value, idx = cht.query(x)
        assert value == max(k * x + m for k, m in lines)
        assert lines[idx][0] * x + lines[idx][1] == value


def test_empty_queries_raise():
    with pytest.raises(ValueError):
        LineContainer().query(0)
    with pytest.raises(IndexError):
        MonotoneCHT().query(0)


def test_clear_resets():
    cht = MonotoneCHT()
    cht.add(1, 100, 0)
    cht.clear()
    cht.add(2, 0, 7)
    assert cht.query(3) == (6, 7)