# -*- coding: utf-8 -*-
"""Cursors: position markers over sequences.

A cursor is an immutable value that points at one position of a sequence.
It can be dereferenced with ``get()``, advanced with ``advance()`` (which
returns a **new** cursor; the old one stays where it was), and compared
for equality with another cursor over the same sequence.

A pair of cursors ``(first, last)`` describes the half-open range
``[first, last)``. This is the currency of ``algos.algorithms``.

To get cursors, use ``begin`` and ``end``, which work on any iterable::

    lst = [1, 2, 3]
    assert list(traverse(begin(lst), end(lst))) == [1, 2, 3]
    assert list(traverse(begin(lst).advance(), end(lst))) == [2, 3]

Sequences (and ``collections.deque``) get random-access cursors, which
also support stepping back, jumping by an offset, measuring distances and
ordering. Any other iterable gets forward-only cursors.
"""

__all__ = ["Cursor", "BidirectionalCursor",
           "SequenceCursor", "IterableCursor",
           "begin", "end", "cursors", "traverse"]

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Sequence
from copy import copy
from itertools import tee

class Cursor(ABC):
    """ABC: forward cursor.

    Concrete cursors must provide ``get``, ``advance`` and ``__eq__``.
    """
    @abstractmethod
    def get(self):
        """Return the element the cursor points at."""
        pass  # pragma: no cover
    @abstractmethod
    def advance(self):
        """Return a new cursor, one position further."""
        pass  # pragma: no cover
    @abstractmethod
    def __eq__(self, other):
        pass  # pragma: no cover

class BidirectionalCursor(Cursor):
    """ABC: cursor that can also step back."""
    @abstractmethod
    def retreat(self):
        """Return a new cursor, one position back."""
        pass  # pragma: no cover

# -----------------------------------------------------------------------------

class SequenceCursor(BidirectionalCursor):
    """Random-access cursor into a sequence.

    Works with anything that supports ``len`` and integer subscripting
    (``list``, ``tuple``, ``str``, ``range``, ``collections.deque``, ...).

    The underlying sequence is borrowed, not copied. As usual, the sequence
    must not change length while its cursors are in use.

    Besides the cursor protocol, supports::

        c + n, c - n    # jump (returns a new cursor)
        c2 - c1         # distance, as an int
        c1 < c2, ...    # ordering (same sequence only)
    """
    def __init__(self, seq, index=0):
        if not isinstance(index, int):
            raise TypeError(f"index: expected int, got {type(index)} with value {repr(index)}")
        self.seq = seq
        self.index = index

    def get(self):
        n = len(self.seq)
        if not 0 <= self.index < n:
            raise IndexError(f"cursor at index {self.index} cannot be dereferenced; sequence length is {n}")
        return self.seq[self.index]
    def advance(self):
        return SequenceCursor(self.seq, self.index + 1)
    def retreat(self):
        return SequenceCursor(self.seq, self.index - 1)

    def __add__(self, n):
        if not isinstance(n, int):
            return NotImplemented
        return SequenceCursor(self.seq, self.index + n)
    __radd__ = __add__
    def __sub__(self, other):
        if isinstance(other, SequenceCursor):
            self._check_same_seq(other)
            return self.index - other.index
        if isinstance(other, int):
            return SequenceCursor(self.seq, self.index - other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        return self.seq is other.seq and self.index == other.index
    def __hash__(self):
        return hash((id(self.seq), self.index))

    def _check_same_seq(self, other):
        if self.seq is not other.seq:
            raise ValueError("cursors into different sequences cannot be ordered or subtracted")
    def __lt__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        self._check_same_seq(other)
        return self.index < other.index
    def __le__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        self._check_same_seq(other)
        return self.index <= other.index
    def __gt__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        self._check_same_seq(other)
        return self.index > other.index
    def __ge__(self, other):
        if not isinstance(other, SequenceCursor):
            return NotImplemented
        self._check_same_seq(other)
        return self.index >= other.index

    def __repr__(self):  # pragma: no cover
        return f"<SequenceCursor at index {self.index} of {type(self.seq).__name__} object at 0x{id(self.seq):x}>"

# -----------------------------------------------------------------------------

_past_the_end = object()  # head value of an exhausted IterableCursor

class IterableCursor(Cursor):
    """Forward-only cursor into a general iterable.

    Use this for iterables that do not support subscripting, such as sets,
    dict views and generators. Usually you don't need to create these
    manually; ``begin`` and ``end`` do it for you.

    Cursors are values: advancing returns a new cursor, and any number of
    cursors may be alive at different positions. The underlying iterator
    is shared between them via ``itertools.tee``, so only the elements
    between the rearmost and the foremost live cursor are kept in memory.

    Two cursors are equal when both are past the end, or when they stem
    from the same traversal and sit at the same offset.

    **CAUTION**: Consumes consumable iterables. Calling ``begin`` twice on
    the same generator starts two *different* traversals, the second one
    from wherever the first one left the generator.
    """
    def __init__(self, iterable):
        it = iter(iterable)
        # A re-iterable container gives a fresh iterator each time, so all of its
        # begin cursors are at the same position. An iterator only has the one traversal.
        self._origin = iterable if it is not iterable else object()
        (self._it,) = tee(it, 1)
        self._head = next(self._it, _past_the_end)
        self.offset = 0

    @classmethod
    def past_the_end(cls):
        """Return a cursor that compares equal to any exhausted ``IterableCursor``."""
        c = cls.__new__(cls)
        c._origin = None
        c._it = iter(())
        c._head = _past_the_end
        c.offset = None
        return c

    @property
    def exhausted(self):
        return self._head is _past_the_end

    def get(self):
        if self.exhausted:
            raise IndexError("cannot dereference a past-the-end cursor")
        return self._head
    def advance(self):
        if self.exhausted:
            raise IndexError("cannot advance a past-the-end cursor")
        c = copy(self)
        c._it = copy(self._it)  # tee objects copy cheaply, sharing the buffer
        c._head = next(c._it, _past_the_end)
        c.offset = self.offset + 1
        return c

    def __eq__(self, other):
        if not isinstance(other, IterableCursor):
            return NotImplemented
        if self.exhausted or other.exhausted:
            return self.exhausted and other.exhausted
        return self._origin is other._origin and self.offset == other.offset
    __hash__ = None

    def __repr__(self):  # pragma: no cover
        where = "past the end" if self.exhausted else f"at offset {self.offset}"
        return f"<IterableCursor {where}>"

# -----------------------------------------------------------------------------

def _is_random_access(iterable):
    return isinstance(iterable, (Sequence, deque))

def _has_cursors(iterable):
    return all(callable(getattr(iterable, name, None)) for name in ("begin", "end"))

def begin(iterable):
    """Return a cursor to the first element of ``iterable``.

    Objects that provide their own ``begin()`` and ``end()`` methods (such as
    ``xrange`` and ``zip``) are asked for their cursor. Sequences get a
    ``SequenceCursor``, and anything else an ``IterableCursor``.
    """
    if _has_cursors(iterable):
        return iterable.begin()
    if _is_random_access(iterable):
        return SequenceCursor(iterable, 0)
    return IterableCursor(iterable)

def end(iterable):
    """Return a past-the-end cursor for ``iterable``.

    Dispatches like ``begin``. For sequences, the end position is taken
    from the length of the sequence at the time of the call.
    """
    if _has_cursors(iterable):
        return iterable.end()
    if _is_random_access(iterable):
        return SequenceCursor(iterable, len(iterable))
    return IterableCursor.past_the_end()

def cursors(iterable):
    """Return ``(begin(iterable), end(iterable))``.

    Convenience for calling the algorithms on a whole container::

        assert all_of(*cursors([2, 4, 6]), lambda x: x % 2 == 0)
    """
    return begin(iterable), end(iterable)

def traverse(first, last):
    """Iterate over the half-open range ``[first, last)``.

    This is the bridge from a pair of cursors to Python's iteration protocol::

        lst = [1, 2, 3, 4]
        assert tuple(traverse(begin(lst) + 1, end(lst) - 1)) == (2, 3)

    ``last`` must be reachable from ``first``; otherwise the traversal
    runs past the end of the data (and usually fails with ``IndexError``).
    """
    while first != last:
        yield first.get()
        first = first.advance()
