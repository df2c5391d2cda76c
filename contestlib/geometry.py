"""Integer plane geometry on points given as (x, y) tuples."""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import Optional, Sequence, Tuple

Point = Tuple[int, int]

_FAR = 1_000_000_000 + 1
_QUADRANTS = (5, 4, 3, 6, -1, 2, 7, 0, 1)


def _sub(p1: Point, p2: Point) -> Point:
    return (p1[0] - p2[0], p1[1] - p2[1])


def dot(p1: Point, p2: Point) -> int:
    """Dot product of two vectors."""
    return p1[0] * p2[0] + p1[1] * p2[1]


def cross(p1: Point, p2: Point) -> int:
    """Cross product (z component) of two vectors."""
    return p1[0] * p2[1] - p2[0] * p1[1]


def sign(value: int) -> int:
    """Return 1, -1 or 0 according to the sign of value."""
    return (value > 0) - (value < 0)


def dist2(p1: Point, p2: Point) -> int:
    """Squared distance between two points."""
    d = _sub(p2, p1)
    return dot(d, d)


def signed_area(p1: Point, p2: Point, p3: Point) -> int:
    """Twice the signed area of the triangle p1, p2, p3."""
    return cross(_sub(p2, p1), _sub(p3, p1))


def ccw(p1: Point, p2: Point, p3: Point) -> int:
    """1 for a counter-clockwise turn, -1 for clockwise, 0 if collinear."""
    return sign(signed_area(p1, p2, p3))


def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Counter-clockwise convex hull, collinear boundary points dropped."""
    pts = list(points)
    if len(pts) <= 1:
        return pts
    pivot = min(pts)
    pts.remove(pivot)

    def compare(a: Point, b: Point) -> int:
        direction = ccw(pivot, a, b)
        if direction:
            return -1 if direction > 0 else 1
        return sign(dist2(pivot, a) - dist2(pivot, b))

    hull: list[Point] = []
    for p in [pivot, *sorted(pts, key=cmp_to_key(compare))]:
        while len(hull) >= 2 and ccw(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    return hull


def calipers(hull: Sequence[Point]) -> tuple[Point, Point]:
    """Farthest pair of points of a counter-clockwise convex polygon."""
    if not hull:
        raise ValueError("hull is empty")
    n = len(hull)
    best = 0
    a = b = hull[0]
    j = 0
    for i in range(n):
        edge = _sub(hull[(i + 1) % n], hull[i])
        while j + 1 < n and cross(edge, _sub(hull[j + 1], hull[j])) >= 0:
            now = dist2(hull[i], hull[j])
            if now > best:
                best, a, b = now, hull[i], hull[j]
            j += 1
        now = dist2(hull[i], hull[j])
        if now > best:
            best, a, b = now, hull[i], hull[j]
    return a, b


def point_in_convex_polygon(polygon: Sequence[Point], point: Point) -> bool:
    """True if point lies inside or on a counter-clockwise convex polygon."""
    v = polygon
    if ccw(v[0], v[1], point) < 0:
        return False
    lo, hi = 1, len(v) - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if ccw(v[0], v[mid], point) >= 0:
            lo = mid
        else:
            hi = mid - 1
    if lo == len(v) - 1:
        return ccw(v[0], v[-1], point) == 0 and v[0] <= point <= v[-1]
    return (
        ccw(v[0], v[lo], point) >= 0
        and ccw(v[lo], v[lo + 1], point) >= 0
        and ccw(v[lo + 1], v[0], point) >= 0
    )


def point_in_polygon(polygon: Sequence[Point], point: Point) -> bool:
    """True if point lies inside or on a simple polygon."""
    far = (point[0] + 1, _FAR)
    count = 0
    n = len(polygon)
    for i, a in enumerate(polygon):
        b = polygon[(i + 1) % n]
        if min(a, b) <= point <= max(a, b) and ccw(a, b, point) == 0:
            return True
        if segments_intersect(a, b, point, far):
            count += 1
    return count % 2 == 1


def quadrant_id(point: Point) -> int:
    """Angular bucket of a point around the origin; -1 for the origin."""
    return _QUADRANTS[sign(point[0]) * 3 + sign(point[1]) + 4]


def polar_sort(points: Sequence[Point]) -> list[Point]:
    """Sort by angle around the origin, starting on the positive x axis."""

    def compare(p1: Point, p2: Point) -> int:
        q1, q2 = quadrant_id(p1), quadrant_id(p2)
        if q1 != q2:
            return -1 if q1 < q2 else 1
        return -sign(cross(p1, p2))

    return sorted(points, key=cmp_to_key(compare))


def polygon_area2(polygon: Sequence[Point]) -> int:
    """Twice the area of a simple polygon."""
    n = len(polygon)
    return abs(sum(cross(p, polygon[(i + 1) % n]) for i, p in enumerate(polygon)))


def segments_intersect(s1: Point, e1: Point, s2: Point, e2: Point) -> bool:
    """True if closed segments s1-e1 and s2-e2 share a point."""
    ab = ccw(s1, e1, s2) * ccw(s1, e1, e2)
    cd = ccw(s2, e2, s1) * ccw(s2, e2, e1)
    if ab == 0 and cd == 0:
        if s1 > e1:
            s1, e1 = e1, s1
        if s2 > e2:
            s2, e2 = e2, s2
        return not (e1 < s2 or e2 < s1)
    return ab <= 0 and cd <= 0


class IntersectionKind(Enum):
    NONE = 0
    POINT = 1
    OVERLAP = -1


def segment_intersection(
    s1: Point, e1: Point, s2: Point, e2: Point
) -> tuple[IntersectionKind, Optional[tuple[float, float]]]:
    """Classify the intersection; the point is given only for POINT."""
    if not segments_intersect(s1, e1, s2, e2):
        return IntersectionKind.NONE, None
    det = cross(_sub(e1, s1), _sub(e2, s2))
    if det == 0:
        if s1 > e1:
            s1, e1 = e1, s1
        if s2 > e2:
            s2, e2 = e2, s2
        if e1 == s2:
            return IntersectionKind.POINT, (float(s2[0]), float(s2[1]))
        if e2 == s1:
            return IntersectionKind.POINT, (float(s1[0]), float(s1[1]))
        return IntersectionKind.OVERLAP, None
    t = cross(_sub(s2, s1), _sub(e2, s2)) / det
    return IntersectionKind.POINT, (
        s1[0] + (e1[0] - s1[0]) * t,
        s1[1] + (e1[1] - s1[1]) * t,
    )