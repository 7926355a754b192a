# -*- coding: utf-8 -*-
"""Eager folds and scans over a single iterable.

The combine function is called as ``proc(acc, elt)``, like in
``functools.reduce`` (note this is the opposite order from Racket's
``foldl``).

For the lazy scan, see ``scanreduce.lazy``; the eager ``scan`` here is the
same cursor, drained into a list.
"""

__all__ = ["reduce1", "fold", "scan"]

from .lazy import ScanIterator, noinit, _check_callable

def reduce1(proc, iterable, default=None):
    """Left-fold ``iterable``, using its first element as the initial value.

    Return::

        proc(...proc(proc(x0, x1), x2)..., xn)

    Strictly left to right; ``proc`` is called once per element after the
    first, and is not assumed to be associative. A single-element input
    returns that element as-is.

    If ``iterable`` is empty, return ``default``. This is not an error.

    Example::

        from operator import add
        assert reduce1(add, (1, 2, 3)) == 6
        assert reduce1(add, ()) is None
    """
    _check_callable("proc", proc)
    it = iter(iterable)
    try:
        acc = next(it)
    except StopIteration:
        return default
    for x in it:
        acc = proc(acc, x)
    return acc

def fold(proc, init, iterable):
    """Left-fold ``iterable``, starting from ``init``.

    If ``iterable`` is empty, return ``init``.
    """
    _check_callable("proc", proc)
    acc = init
    for x in iterable:
        acc = proc(acc, x)
    return acc

def scan(proc, iterable, init=noinit):
    """Scan eagerly; return a list of the partial folds.

    The output always has as many elements as the input.

    If ``init`` is given, ``init`` itself is not included; the first output
    is ``proc(init, x0)``.

    If ``init`` is omitted, the first output is ``x0`` as-is, and each
    following one is ``proc(previous, xk)``.

    The input must be finite. To scan an infinite sequence, see ``lazy_scan``.

    Example::

        from operator import add
        assert scan(add, [1, 2, 3], 0) == [1, 3, 6]
        assert scan(add, [1, 2, 3]) == [1, 3, 6]
        assert scan(add, []) == []
    """
    return list(ScanIterator(iter(iterable), proc, init))
