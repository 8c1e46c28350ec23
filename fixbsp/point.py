"""Immutable points in the plane with fixed-point coordinates."""

from __future__ import annotations

from typing import Union

from fixbsp.fixed import Fixed

Coordinate = Union[int, float, Fixed]


def _as_fixed(value: Coordinate) -> Fixed:
    if isinstance(value, Fixed):
        return value.copy()
    if isinstance(value, (int, float)):
        return Fixed(float(value))
    raise TypeError(f"cannot use {type(value).__name__} as a coordinate")


class Point:
    """A point whose coordinates are fixed-point numbers and cannot change."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: Coordinate = 0, y: Coordinate = 0) -> None:
        object.__setattr__(self, "_x", _as_fixed(x))
        object.__setattr__(self, "_y", _as_fixed(y))

    @property
    def x(self) -> Fixed:
        """The horizontal coordinate, as an independent copy."""
        return self._x.copy()

    @property
    def y(self) -> Fixed:
        """The vertical coordinate, as an independent copy."""
        return self._y.copy()

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Point is immutable; cannot set {name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self) -> int:
        return hash((self._x.raw, self._y.raw))

    def __repr__(self) -> str:
        return f"Point({self._x}, {self._y})"