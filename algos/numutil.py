# -*- coding: utf-8 -*-
"""Low-level utilities for numerics."""

__all__ = ["truncrem", "absclose"]

from math import fmod, trunc
from numbers import Integral

def truncrem(a, b):
    """Remainder of ``a / b``, with the sign of the dividend ``a``.

    This is the remainder of truncating division, like C's ``fmod``::

        assert truncrem(7, 2) == 1
        assert truncrem(-7, 2) == -1
        assert truncrem(7, -2) == 1

    Compare Python's ``%``, whose result takes the sign of the divisor, and
    ``math.remainder``, which picks the residual closest to zero (so it may
    be negative even when both inputs are positive).

    Floats go through ``math.fmod``. Integers are handled exactly, no matter
    how large. Other numeric types (``fractions.Fraction``,
    ``decimal.Decimal``, ...) use ``a - b * trunc(a / b)``.
    """
    if b == 0:
        raise ZeroDivisionError("truncrem: division by zero")
    if isinstance(a, float) or isinstance(b, float):
        return fmod(a, b)
    if isinstance(a, Integral) and isinstance(b, Integral):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return a - b * trunc(a / b)

def absclose(a, b, tol=1e-9):
    """Return whether ``abs(a - b) < tol``.

    Absolute tolerance, no scaling. Good for comparing positions along a
    grid whose spacing is known to be much larger than ``tol``.
    """
    return abs(a - b) < tol
