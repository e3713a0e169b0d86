# -*- coding: utf-8 -*-
"""Lockstep pairing of two sequences, without copying them."""

__all__ = ["zip", "ZipCursor"]

from collections.abc import Sized

from .cursor import Cursor, begin, end, traverse

class ZipCursor(Cursor):
    """Cursor into a ``zip``: one cursor into each underlying sequence.

    Dereferencing gives the pair of elements ``(a, b)``. Advancing advances
    both sub-cursors once.

    Two zip cursors are equal when **either** of their sub-cursor pairs is
    equal. Thus the zipped range ends as soon as one of the sequences does.
    """
    def __init__(self, first, second):
        self.first = first
        self.second = second

    def get(self):
        return (self.first.get(), self.second.get())
    def advance(self):
        return ZipCursor(self.first.advance(), self.second.advance())

    def __eq__(self, other):
        if not isinstance(other, ZipCursor):
            return NotImplemented
        return self.first == other.first or self.second == other.second
    __hash__ = None

    def __repr__(self):  # pragma: no cover
        return f"ZipCursor({self.first!r}, {self.second!r})"

class zip:
    """Pair up the elements of two sequences, position by position.

    Like the builtin ``zip`` for two inputs, but the result is a reusable
    lazy sequence with cursors, instead of a one-shot iterator::

        z = zip([1, 2, 3], [4, 5, 6])
        assert list(z) == [(1, 4), (2, 5), (3, 6)]
        assert list(z) == [(1, 4), (2, 5), (3, 6)]  # again

    The zipped length is that of the shorter input::

        assert list(zip([1, 2, 3], [4, 5])) == [(1, 4), (2, 5)]

    The inputs may be containers of different kinds, e.g. a ``list`` and a
    ``collections.deque``, or an ``xrange`` and a ``set``.

    The inputs are borrowed, not copied, and the pairs contain the very same
    element objects that are stored in the inputs. Do not change the length
    of an input while the zip, or a cursor obtained from it, is in use.
    """
    def __init__(self, seq1, seq2):
        self.seq1 = seq1
        self.seq2 = seq2

    def begin(self):
        return ZipCursor(begin(self.seq1), begin(self.seq2))
    def end(self):
        return ZipCursor(end(self.seq1), end(self.seq2))

    def __iter__(self):
        return traverse(self.begin(), self.end())

    def __len__(self):
        if not (isinstance(self.seq1, Sized) and isinstance(self.seq2, Sized)):
            raise TypeError("length of zip is known only when both inputs are sized")
        return min(len(self.seq1), len(self.seq2))

    def __repr__(self):  # pragma: no cover
        return f"zip({self.seq1!r}, {self.seq2!r})"
