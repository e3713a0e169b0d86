# -*- coding: utf-8 -*-

from collections import deque

from ..cursor import (Cursor, BidirectionalCursor,
                      SequenceCursor, IterableCursor,
                      begin, end, cursors, traverse)
from ..ranges import xrange

def test_sequence_cursor():
    lst = [10, 20, 30]
    c = begin(lst)
    assert isinstance(c, SequenceCursor)
    assert isinstance(c, BidirectionalCursor)
    assert c.get() == 10

    # cursors are values; advancing does not move the original
    c2 = c.advance()
    assert c.get() == 10
    assert c2.get() == 20
    assert c2.retreat() == c

    # jumps, distances, ordering
    assert (c + 2).get() == 30
    assert (2 + c).get() == 30
    assert (end(lst) - 1).get() == 30
    assert end(lst) - begin(lst) == 3
    assert c < c2 <= c2 < end(lst)
    assert end(lst) > c and end(lst) >= end(lst)

    # elements are not copied
    obj = object()
    c3 = begin([obj])
    assert c3.get() is obj

    # past-the-end cursors cannot be dereferenced
    try:
        end(lst).get()
    except IndexError:
        pass
    else:
        assert False

    # cursors into different sequences are never equal, and cannot be ordered
    other = [10, 20, 30]
    assert begin(lst) != begin(other)
    try:
        begin(lst) < begin(other)
    except ValueError:
        pass
    else:
        assert False
    try:
        begin(lst) - begin(other)
    except ValueError:
        pass
    else:
        assert False

    try:
        SequenceCursor(lst, "not an index")
    except TypeError:
        pass
    else:
        assert False

    # as dict keys
    d = {begin(lst): "first"}
    assert d[SequenceCursor(lst, 0)] == "first"

def test_sequence_kinds():
    for seq in ([1, 2, 3], (1, 2, 3), range(1, 4), deque([1, 2, 3])):
        assert isinstance(begin(seq), SequenceCursor)
        assert tuple(traverse(*cursors(seq))) == (1, 2, 3)
    assert "".join(traverse(*cursors("abc"))) == "abc"

def test_iterable_cursor():
    s = {1, 2, 3}
    c = begin(s)
    assert isinstance(c, IterableCursor)
    assert not isinstance(c, BidirectionalCursor)
    assert sorted(traverse(c, end(s))) == [1, 2, 3]

    # the same container gives equal begin cursors
    assert begin(s) == begin(s)

    # independent cursors over a shared one-shot iterator
    g = (x**2 for x in range(4))
    c0 = begin(g)
    c1 = c0.advance()
    c2 = c1.advance()
    assert c0.get() == 0
    assert c2.get() == 4
    assert c1.get() == 1  # still there
    assert c0.advance() == c1
    assert c0 != c1
    assert tuple(traverse(c1, end(g))) == (1, 4, 9)
    assert tuple(traverse(c0, end(g))) == (0, 1, 4, 9)

    # two traversals of one generator are distinct
    def gen():
        yield from range(3)
    g2 = gen()
    assert begin(g2) != begin(g2)

    # past the end
    e = begin(iter(()))
    assert e.exhausted
    assert e == end(iter(()))
    assert e == IterableCursor.past_the_end()
    try:
        e.get()
    except IndexError:
        pass
    else:
        assert False
    try:
        e.advance()
    except IndexError:
        pass
    else:
        assert False

def test_delegation():
    r = xrange(3)
    assert begin(r) == r.begin()
    assert end(r) == r.end()
    assert list(traverse(*cursors(r))) == [0, 1, 2]

def test_abc():
    try:
        Cursor()
    except TypeError:
        pass  # abstract
    else:
        assert False

    class Count(Cursor):
        def __init__(self, n):
            self.n = n
        def get(self):
            return self.n
        def advance(self):
            return Count(self.n + 1)
        def __eq__(self, other):
            return self.n == other.n
    assert list(traverse(Count(3), Count(6))) == [3, 4, 5]

def runtests():
    test_sequence_cursor()
    test_sequence_kinds()
    test_iterable_cursor()
    test_delegation()
    test_abc()
    print("All tests PASSED")

if __name__ == '__main__':
    runtests()
