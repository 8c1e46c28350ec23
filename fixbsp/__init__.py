"""Fixed-point numbers with 8 fractional bits, points and a point-in-triangle test."""

__version__ = "0.1.0"
__all__ = ["fixed", "point", "bsp", "demo"]