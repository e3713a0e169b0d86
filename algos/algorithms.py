# -*- coding: utf-8 -*-
"""Predicate and search algorithms over cursor ranges.

Each function takes a pair of cursors (see ``algos.cursor``) describing the
half-open range ``[first, last)``, unless noted otherwise. The ranges are
not validated; ``last`` must be reachable from ``first``.

To run an algorithm over a whole container, ``cursors`` is handy::

    from algos import all_of, cursors
    assert all_of(*cursors([2, 4, 6]), lambda x: x % 2 == 0)

Each algorithm makes a single pass and keeps O(1) state.
"""

__all__ = ["all_of", "any_of", "none_of", "one_of",
           "is_sorted", "is_partitioned",
           "find_not", "find_backward",
           "is_palindrome"]

from operator import lt, eq

from .cursor import BidirectionalCursor

def all_of(first, last, predicate):
    """Return whether every element in ``[first, last)`` satisfies ``predicate``.

    Vacuously true for an empty range (like the builtin ``all``).
    """
    while first != last:
        if not predicate(first.get()):
            return False
        first = first.advance()
    return True

def any_of(first, last, predicate):
    """Return whether some element in ``[first, last)`` satisfies ``predicate``.

    False for an empty range (like the builtin ``any``).
    """
    while first != last:
        if predicate(first.get()):
            return True
        first = first.advance()
    return False

def none_of(first, last, predicate):
    """Return ``not all_of(first, last, predicate)``.

    **CAUTION**: Despite the name, this is the negation of ``all_of``, not of
    ``any_of``. It answers "does *not every* element satisfy ``predicate``".
    The two readings differ when the range mixes matching and non-matching
    elements, and on an empty range, where this returns ``False`` because
    ``all_of`` is vacuously ``True``.

    Examples::

        is_even = lambda x: x % 2 == 0
        assert none_of(*cursors([1, 2, 3]), is_even)      # 1 and 3 are not even
        assert not none_of(*cursors([2, 4, 6]), is_even)  # all are even
    """
    return not all_of(first, last, predicate)

def one_of(first, last, predicate):
    """Return whether exactly one element in ``[first, last)`` satisfies ``predicate``.

    Stops scanning as soon as a second match is found.
    """
    found = False
    while first != last:
        if predicate(first.get()):
            if found:
                return False
            found = True
        first = first.advance()
    return found

def is_sorted(first, last, comparator=lt):
    """Return whether ``[first, last)`` is sorted with respect to ``comparator``.

    ``comparator(a, b)`` should return whether ``a`` strictly precedes ``b``.
    The range is sorted when no element precedes its predecessor, i.e.
    ``not comparator(next, current)`` holds for every adjacent pair. Hence
    runs of equal elements are fine.

    The default ``operator.lt`` checks for ascending order. For descending
    order, pass ``operator.gt``.

    Empty and single-element ranges are sorted.
    """
    if first == last:
        return True
    nxt = first.advance()
    while nxt != last:
        if comparator(nxt.get(), first.get()):
            return False
        first = nxt
        nxt = nxt.advance()
    return True

def is_partitioned(first, last, predicate):
    """Return whether ``[first, last)`` is partitioned by ``predicate``.

    That is, whether all elements that satisfy ``predicate`` come before
    all elements that don't. Either part may be empty.
    """
    while first != last and predicate(first.get()):
        first = first.advance()
    while first != last:
        if predicate(first.get()):
            return False
        first = first.advance()
    return True

def find_not(first, last, value):
    """Return a cursor to the first element in ``[first, last)`` that is ``!= value``.

    If there is no such element, return ``last``.
    """
    while first != last:
        if first.get() != value:
            return first
        first = first.advance()
    return last

def _require_bidirectional(cursor, name):
    if not isinstance(cursor, BidirectionalCursor):
        raise TypeError(f"{name}: expected a cursor that can step back, got {type(cursor)} with value {repr(cursor)}")

def find_backward(first, last, value):
    """Search ``(first, last]`` for ``value``, scanning backward from ``last``.

    Note the range: ``last`` is included, ``first`` is not. Return a cursor
    to the rearmost element ``== value``. If there is none, return ``first``.

    Since ``first`` is never searched, getting ``first`` back always means
    "not found", even when the element at ``first`` happens to be ``value``.
    To search a whole sequence backward, start one before its beginning::

        lst = [1, 2, 3, 2]
        c = find_backward(begin(lst) - 1, end(lst) - 1, 2)
        assert c.index == 3

    Needs cursors that can step back, such as ``SequenceCursor``.
    """
    _require_bidirectional(last, "find_backward")
    while last != first:
        if last.get() == value:
            return last
        last = last.retreat()
    return first

def is_palindrome(first, last, comparator=eq):
    """Return whether the closed range ``[first, last]`` reads the same both ways.

    Note the range: both ``first`` and ``last`` are included.

    ``comparator(a, b)`` decides whether the elements ``a`` and ``b``, at
    mirrored positions, count as the same. The default is ``==``. A custom
    comparator can express a looser equivalence::

        same_parity = lambda a, b: (a % 2) == (b % 2)
        lst = [1, 2, 4, 3]
        assert is_palindrome(begin(lst), end(lst) - 1, same_parity)

    The cursors move toward each other, and the answer is ``True`` once they
    meet or cross. Needs ordered cursors that can step back, such as
    ``SequenceCursor``.
    """
    _require_bidirectional(last, "is_palindrome")
    while last > first:
        if not comparator(first.get(), last.get()):
            return False
        first = first.advance()
        last = last.retreat()
    return True
