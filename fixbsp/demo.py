"""Demonstrations of fixed-point conversions, arithmetic and the triangle test."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from fixbsp.bsp import bsp
from fixbsp.fixed import Fixed, fixed_max
from fixbsp.point import Point


def conversions_demo() -> list[str]:
    """Raw bits of copied zeros, then int and float conversions."""
    zero = Fixed()
    copied = zero.copy()
    assigned = Fixed()
    assigned = copied.copy()
    lines = [str(value.raw) for value in (zero, copied, assigned)]

    a = Fixed()
    b = Fixed(10)
    c = Fixed(42.42)
    d = b.copy()
    a = Fixed(1234.4321)

    named = [("a", a), ("b", b), ("c", c), ("d", d)]
    lines.extend(f"{name} is {value}" for name, value in named)
    lines.extend(f"{name} is {value.to_int()} as integer" for name, value in named)
    return lines


def arithmetic_demo() -> list[str]:
    """Increments, a product and the maximum of two values."""
    a = Fixed()
    b = Fixed(5.05) * Fixed(2)
    return [
        str(a),
        str(a.increment()),
        str(a),
        str(a.post_increment()),
        str(a),
        str(b),
        str(fixed_max(a, b)),
    ]


_TRIANGLE_CASES = [
    ((2, 1), "Point à l'intérieur (2,1)"),
    ((5, 1), "Point à l'extérieur (5,1)"),
    ((0, 0), "Point sur sommet A(0,0)"),
    ((2, 0), "Point sur arête AB (2,0)"),
    ((1, 1.5), "Point sur arête AC (1,1.5)"),
    ((1, -1), "Point à l'extérieur (1,-1)"),
]


def triangle_demo() -> list[str]:
    """Check a series of points against the triangle A(0,0), B(4,0), C(2,3)."""
    a, b, c = Point(0, 0), Point(4, 0), Point(2, 3)
    lines = [
        "Triangle: A(0,0), B(4,0), C(2,3)",
        "=====================================",
    ]
    for (x, y), description in _TRIANGLE_CASES:
        lines.append(f"Test: {description}")
        if bsp(a, b, c, Point(x, y)):
            lines.append("✅ Le point est DANS le triangle")
        else:
            lines.append("❌ Le point est HORS du triangle")
        lines.append("---")
    return lines


_DEMOS = {
    "conversions": conversions_demo,
    "arithmetic": arithmetic_demo,
    "triangle": triangle_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print one demonstration, or all of them when none is named."""
    parser = argparse.ArgumentParser(prog="fixbsp", description=__doc__)
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), help="demonstration to run")
    args = parser.parse_args(argv)
    names = [args.demo] if args.demo else list(_DEMOS)
    for name in names:
        for line in _DEMOS[name]():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())