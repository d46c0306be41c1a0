from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Sequence

from blastanalysis.model.geometry_primitives import Point, PointLike


class Orientation(IntEnum):
    """Turn direction of an ordered point triplet (P, Q, R)."""
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2

    def reversed(self) -> Orientation:
        """
        Classification of the same triplet with Q and R swapped.

        Convenience for callers comparing turn directions without
        recomputing the cross product:

            orientation(p, r, q) is orientation(p, q, r).reversed()
        """
        if self is Orientation.CLOCKWISE:
            return Orientation.COUNTER_CLOCKWISE
        if self is Orientation.COUNTER_CLOCKWISE:
            return Orientation.CLOCKWISE
        return Orientation.COLLINEAR


def orientation(p: PointLike, q: PointLike, r: PointLike) -> Orientation:
    """
    Classify the turn P -> Q -> R.

    Args:
        p: First point.
        q: Second point.
        r: Third point.

    Returns:
        COLLINEAR, CLOCKWISE or COUNTER_CLOCKWISE.

    Notes:
        - val = (Qy - Py)(Rx - Qx) - (Qx - Px)(Ry - Qy), with I as x and P as y.
        - The collinear case is an exact comparison with zero. Near-collinear
          triplets may be classified by the sign of a cancellation error.
    """
    p, q, r = Point.coerce(p), Point.coerce(q), Point.coerce(r)
    val = (q.p - p.p) * (r.i - q.i) - (q.i - p.i) * (r.p - q.p)

    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTER_CLOCKWISE


def do_segments_intersect(a: PointLike, b: PointLike, c: PointLike, d: PointLike) -> bool:
    """
    Check whether segment AB crosses segment CD.

    General-position test only: collinear overlaps and touching endpoints are
    not detected separately and may be reported as non-intersecting.
    """
    o1 = orientation(a, b, c)
    o2 = orientation(a, b, d)
    o3 = orientation(c, d, a)
    o4 = orientation(c, d, b)

    return o1 != o2 and o3 != o4


def edges(points: Sequence[Point]) -> Iterator[tuple[Point, Point]]:
    """Yield consecutive (start, end) pairs of a polyline."""
    for start, end in zip(points[:-1], points[1:]):
        yield start, end
