# -*- coding: utf-8 -*-
"""Lazy numeric ranges, for any numeric type.

Like the builtin ``range``, but also for floats, ``fractions.Fraction`` and
``decimal.Decimal``::

    assert list(xrange(5)) == [0, 1, 2, 3, 4]
    assert list(xrange(5.0, 7.0, 0.5)) == [5.0, 5.5, 6.0, 6.5]
    assert list(xrange(10, 0, -2)) == [10, 8, 6, 4, 2]

An ``xrange`` is immutable, and can be traversed any number of times. Each
traversal computes its values on the fly; nothing is stored.

We avoid accumulating roundoff error when used with floating-point: the
k-th value is computed as ``start + k * step``, not by repeated addition.
"""

__all__ = ["xrange", "RangeCursor", "DEFAULT_TOL"]

from numbers import Complex, Integral, Number, Real

from .cursor import Cursor, traverse
from .numutil import absclose, truncrem

DEFAULT_TOL = 1e-9

class RangeCursor(Cursor):
    """Cursor into an ``xrange``.

    Points at the value ``origin + k * step``. Two cursors are equal when
    their values differ by less than ``tol``.
    """
    def __init__(self, origin, step, tol=DEFAULT_TOL, k=0):
        self.origin = origin
        self.step = step
        self.tol = tol
        self.k = k

    def get(self):
        if not self.k:
            return self.origin
        return self.origin + self.k * self.step
    def advance(self):
        return RangeCursor(self.origin, self.step, self.tol, self.k + 1)

    def __eq__(self, other):
        if not isinstance(other, RangeCursor):
            return NotImplemented
        return absclose(self.get(), other.get(), self.tol)
    __hash__ = None  # tolerance-based equality is not transitive

    def __repr__(self):  # pragma: no cover
        return f"<RangeCursor at {self.get()!r}>"

def _validate_number(name, x):
    if not isinstance(x, Number) or (isinstance(x, Complex) and not isinstance(x, Real)):
        raise TypeError(f"{name}: expected a real number, got {type(x)} with value {repr(x)}")

class xrange:
    """Lazy arithmetic progression from ``start`` up to (not including) ``end``.

    Call signatures::

        xrange(end)
        xrange(start, end)
        xrange(start, end, step)

    With just ``end``, ``start`` is the zero of ``end``'s type. The default
    ``step`` is ``1``. The step may be negative, for a descending range, but
    not zero.

    If ``end`` is not hit exactly by the progression, the range stops at the
    last value before ``end``::

        assert list(xrange(0, 7, 2)) == [0, 2, 4, 6]

    If the step goes away from ``end``, the range is empty (like the builtin
    ``range``).

    ``tol`` is the tolerance for comparing positions. Two positions closer
    than ``tol`` are the same position; this absorbs floating-point roundoff
    when detecting the end of the range. It must be much smaller than
    ``abs(step)``.

    The range can be iterated over directly, or traversed via the cursors
    returned by ``begin()`` and ``end()`` (also through ``algos.cursor.begin``
    and ``algos.cursor.end``).
    """
    def __init__(self, *args, tol=DEFAULT_TOL):
        if len(args) == 1:
            end, = args
            _validate_number("end", end)
            start = type(end)()
            step = 1
        elif len(args) in (2, 3):
            start, end, step = (args + (1,))[:3]
            for name, x in (("start", start), ("end", end), ("step", step)):
                _validate_number(name, x)
        else:
            raise TypeError(f"expected 1 to 3 positional arguments, got {len(args)}")
        if step == 0:
            raise ValueError("step must be nonzero")
        if tol < 0:
            raise ValueError(f"tol must be nonnegative, got {tol}")
        self.start = start
        self.stop = end
        self.step = step
        self.tol = tol

    def begin(self):
        """Return a cursor to the first value of the range."""
        return RangeCursor(self.start, self.step, self.tol)

    def end(self):
        """Return a past-the-end cursor.

        When ``end - start`` is not a whole multiple of ``step``, the
        past-the-end position is the first value of the progression beyond
        ``end``, so the traversal still terminates there.
        """
        span = self.stop - self.start
        if span == 0 or (span > 0) != (self.step > 0):  # empty range
            return self.begin()
        remainder = truncrem(span, self.step)
        if remainder == 0:
            return RangeCursor(self.stop, self.step, self.tol)
        return RangeCursor(self.stop - remainder + self.step, self.step, self.tol)

    def __iter__(self):
        return traverse(self.begin(), self.end())

    def __len__(self):
        n = self.end().get() - self.start
        if isinstance(n, Integral) and isinstance(self.step, Integral):
            return n // self.step
        return round(n / self.step)

    def __eq__(self, other):
        if not isinstance(other, xrange):
            return NotImplemented
        return (self.start, self.stop, self.step) == (other.start, other.stop, other.step)
    def __hash__(self):
        return hash((self.start, self.stop, self.step))

    def __repr__(self):
        return f"xrange({self.start!r}, {self.stop!r}, {self.step!r})"
