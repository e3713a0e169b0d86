# -*- coding: utf-8 -*-

from collections import deque

from ..zipper import zip, ZipCursor
from ..ranges import xrange
from ..cursor import begin, end, traverse
from ..algorithms import all_of, find_not

def test_basic():
    v1 = [1, 2, 3]
    v2 = [4, 5, 6]
    z = zip(v1, v2)
    assert z.begin().get() == (1, 4)
    assert z.begin().advance().get()[1] == 5
    assert list(z) == [(1, 4), (2, 5), (3, 6)]
    assert list(z) == [(1, 4), (2, 5), (3, 6)]  # reusable
    assert len(z) == 3

    # cursors are values
    c = z.begin()
    c2 = c.advance()
    assert c.get() == (1, 4)
    assert c2.get() == (2, 5)
    assert isinstance(c2, ZipCursor)

def test_different_containers():
    v1 = [1, 2, 3]
    v2 = deque([4, 5, 6])
    z = zip(v1, v2)
    assert z.begin().get()[0] == 1
    assert z.begin().advance().get()[1] == 5
    assert list(z) == [(1, 4), (2, 5), (3, 6)]

    assert list(zip((1, 2, 3), "abc")) == [(1, "a"), (2, "b"), (3, "c")]
    assert list(zip(xrange(3), [10, 20, 30])) == [(0, 10), (1, 20), (2, 30)]
    assert list(zip(xrange(0.0, 1.0, 0.5), range(100))) == [(0.0, 0), (0.5, 1)]
    assert list(zip([1, 2], (x for x in "xyz"))) == [(1, "x"), (2, "y")]
    assert list(zip(zip([1, 2], [3, 4]), [5, 6])) == [((1, 3), 5), ((2, 4), 6)]

def test_unequal_length():
    v1 = [1, 2, 3]
    v2 = [4, 5]
    z = zip(v1, v2)
    assert z.begin().advance().get()[0] == 2
    assert list(z) == [(1, 4), (2, 5)]
    assert list(zip(v2, v1)) == [(4, 1), (5, 2)]
    assert len(z) == 2

    # the end is reached when either side ends
    c = z.begin().advance().advance()
    assert c == z.end()
    assert c.first != end(v1)  # the longer side is not at its end

    assert list(zip([], [1, 2, 3])) == []
    assert list(zip([1, 2, 3], [])) == []

def test_borrowing():
    a, b = object(), object()
    v1 = [a]
    v2 = [b]
    pair = zip(v1, v2).begin().get()
    assert pair[0] is a and pair[1] is b

    # the inputs are referenced, not copied
    v1 = [1, 2]
    v2 = [3, 4]
    z = zip(v1, v2)
    v1[0] = 42
    assert list(z) == [(42, 3), (2, 4)]

def test_with_algorithms():
    z = zip([1, 2, 3], [1, 2, 4])
    c = find_not(begin(z), end(z), (1, 1))
    assert c.get() == (2, 2)
    assert all_of(begin(z), end(z), lambda p: p[0] <= p[1])
    assert list(traverse(c, end(z))) == [(2, 2), (3, 4)]

def test_len():
    try:
        len(zip([1, 2], (x for x in range(3))))
    except TypeError:
        pass
    else:
        assert False
    assert len(zip(xrange(10), [0] * 4)) == 4

def runtests():
    test_basic()
    test_different_containers()
    test_unequal_length()
    test_borrowing()
    test_with_algorithms()
    test_len()
    print("All tests PASSED")

if __name__ == '__main__':
    runtests()
