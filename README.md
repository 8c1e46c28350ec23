# fixbsp

A small fixed-point number type and a point-in-triangle test.

`Fixed` stores a number as a signed 32-bit integer with 8 fractional bits,
so its resolution is 1/256. Ints are scaled by 256; floats are first
rounded to single precision, then to the nearest step (halves away from
zero). Arithmetic and comparisons work on the raw integer, and every
result wraps silently into the signed 32-bit range. `Point` holds two
`Fixed` coordinates. `bsp` tells you whether a point lies strictly inside
a triangle.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Fixed-point numbers

```python
from fixbsp.fixed import Fixed, fixed_max, fixed_min

a = Fixed()
b = Fixed(5.05) * Fixed(2)
print(b)               # 10.1016
a.increment()          # raw value goes from 0 to 1
print(a)               # 0.00390625
print(a.post_increment(), a)   # 0.00390625 0.0078125
print(fixed_max(a, b)) # 10.1016

c = Fixed(42.42)
print(c.raw, c.to_int(), c.to_float())   # 10860 42 42.421875

d = Fixed.from_raw(256)                  # exactly 1.0
```

A `Fixed` can be created from an `int`, a `float` or another `Fixed`;
with no argument it is zero. A NaN or infinite float raises `ValueError`,
any other type raises `TypeError`.

- `raw` is the underlying integer; it can also be assigned.
- `to_float()` gives the value as a float, `to_int()` the integer part
  rounded toward negative infinity.
- `+`, `-`, `*`, `/` and all six comparisons accept another `Fixed`, an
  `int` or a `float`. Multiplication divides the raw product by 256,
  truncating toward zero.
- `/` divides the two raw values (truncating toward zero) and then divides
  that result by 256 again, so it does not give the ordinary quotient:
  `Fixed(10) / Fixed(2)` is `0`. Dividing by zero raises
  `ZeroDivisionError`.
- `increment()` and `decrement()` change the value by one raw step in place
  and return the object itself; `post_increment()` and `post_decrement()`
  do the same but return a copy of the old value.
- `copy()` returns an independent copy. `str()` prints the value with up
  to six significant digits; `repr()` shows `Fixed.from_raw(...)`.
- `fixed_min(a, b)` returns `a` if it is strictly smaller than `b`,
  otherwise `b`; `fixed_max(a, b)` returns `a` if it is strictly greater,
  otherwise `b`.

## Points and triangles

```python
from fixbsp.point import Point
from fixbsp.bsp import bsp

a, b, c = Point(0, 0), Point(4, 0), Point(2, 3)
bsp(a, b, c, Point(2, 1))   # True: inside
bsp(a, b, c, Point(5, 1))   # False: outside
bsp(a, b, c, Point(2, 0))   # False: on an edge
bsp(a, b, c, Point(0, 0))   # False: on a vertex
```

A `Point` takes coordinates as `int`, `float` or `Fixed` and defaults to
the origin. It cannot be changed after creation; `x` and `y` return
copies of the coordinates. Points compare equal and hash by their
coordinates.

`bsp` computes the three edge cross products in fixed-point arithmetic.
Points on an edge or a vertex count as outside.

## Demo

The package has a command that prints the conversion, arithmetic and
triangle demonstrations:

```
fixbsp-demo
```

Name one of them to print only that one:

```
fixbsp-demo conversions
fixbsp-demo arithmetic
fixbsp-demo triangle
```

The same functions are available as `conversions_demo()`,
`arithmetic_demo()` and `triangle_demo()` in `fixbsp.demo`; each returns
its lines as a list of strings.

## Limits

There is no overflow detection: values outside the signed 32-bit raw
range wrap around without warning.