"""Strict point-in-triangle test using fixed-point arithmetic."""

from __future__ import annotations

from fixbsp.fixed import Fixed
from fixbsp.point import Point


def _edge_side(start: Point, end: Point, point: Point) -> Fixed:
    """Cross product telling on which side of the edge start->end the point lies."""
    return (end.x - start.x) * (point.y - start.y) - (end.y - start.y) * (point.x - start.x)


def bsp(a: Point, b: Point, c: Point, point: Point) -> bool:
    """Return True if point lies strictly inside triangle abc.

    Points on a vertex or an edge count as outside.
    """
    sides = [_edge_side(a, b, point), _edge_side(b, c, point), _edge_side(c, a, point)]
    if any(side == 0 for side in sides):
        return False
    return all(side > 0 for side in sides) or all(side < 0 for side in sides)