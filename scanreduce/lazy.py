# -*- coding: utf-8 -*-
"""Lazy scans (partial folds), and a thin wrapper to chain lazy operations.

A scan is a fold that yields every intermediate accumulator value. The lazy
version does no work until a value is pulled; each pull advances the input
by one element and calls the combine function at most once. Hence it is
useful for partially folding infinite sequences (in the mathematical sense
of "sequence").

The adapters are restartable: each ``iter()`` call builds a fresh cursor
from a fresh iterator of the source. Whether the traversal actually starts
over depends on the source; a list does, a generator doesn't.

Example::

    from itertools import count, islice
    from operator import add

    tri = lazy_scan(add, count(1))
    assert tuple(islice(tri, 5)) == (1, 3, 6, 10, 15)

    assert list(lazy([1, 2, 3]).map(lambda x: 2 * x).scan(add, 0)) == [2, 6, 12]
"""

__all__ = ["noinit",
           "ScanIterator", "LazySequence", "LazyScan",
           "lazy", "lazy_scan"]

def _call(f):
    return f()

@_call  # make a singleton
class noinit:  # sentinel, could be any object but we want a nice __repr__.
    """Marker for "no initial value given"; selects the self-seeded variant."""
    def __repr__(self):
        return "noinit"

@_call
class _unseeded:
    def __repr__(self):
        return "<unseeded>"

def _check_callable(name, f):
    if not callable(f):
        raise TypeError("expected a callable {}, got {} with value {}".format(name, type(f), repr(f)))

class ScanIterator:
    """Cursor of a lazy scan.

    Wraps the iterator ``it`` and carries the running accumulator. On each
    ``next()``, advance ``it`` by one element and fold it into the
    accumulator as ``acc = proc(acc, elt)``; return the new accumulator.

    If ``init`` is given, the accumulator starts from it. The initial value
    itself is never yielded; the first output is ``proc(init, first)``.

    If ``init`` is omitted (or is ``noinit``), the accumulator starts
    unseeded. The first element is then yielded unmodified (without calling
    ``proc``), and becomes the accumulator.

    Once ``it`` runs out, the cursor is exhausted for good; further pulls
    raise ``StopIteration`` even if ``it`` would later produce more items.

    If ``proc`` raises, the exception propagates to the caller. The cursor
    must not be used after that. A ``StopIteration`` from ``proc`` is
    re-raised as ``RuntimeError`` (like PEP 479 does for generators), so that
    it cannot be mistaken for the end of the input.

    The ``_checked`` parameter is for internal use.
    """
    def __init__(self, it, proc, init=noinit, *, _checked=False):
        if not _checked:
            _check_callable("proc", proc)
        self._it = it
        self._proc = proc
        self._init = init
        self._acc = _unseeded if init is noinit else init
    def __repr__(self):
        if self._it is None:
            state = "exhausted"
        elif self._acc is _unseeded:
            state = "unseeded"
        else:
            state = "acc={}".format(repr(self._acc))
        return "<ScanIterator at 0x{:x}; {}>".format(id(self), state)
    @property
    def init(self):
        """The initial value given at creation time, or ``noinit``."""
        return self._init
    @property
    def seeded(self):
        """Whether the cursor holds an accumulator value."""
        return self._acc is not _unseeded
    @property
    def exhausted(self):
        """Whether the cursor has reached its terminal state."""
        return self._it is None
    def __iter__(self):
        return self
    def __next__(self):
        if self._it is None:
            raise StopIteration
        try:
            x = next(self._it)
        except StopIteration:
            self._it = None  # terminal; drop the reference to the source, too
            raise
        if self._acc is _unseeded:
            self._acc = x
        else:
            try:
                self._acc = self._proc(self._acc, x)
            except StopIteration as err:
                raise RuntimeError("scan function raised StopIteration") from err
        return self._acc

class LazySequence:
    """Endow any iterable with chainable lazy operations.

    The original iterable is saved to an attribute, and ``__iter__``
    redirects to it. No caching is performed; iterating over a lazy
    sequence built on a generator will still consume the generator.

    The operations return new lazy sequences. Nothing is computed until the
    result is iterated over::

        evens = lazy(range(10)).filter(lambda x: x % 2 == 0)
        psums = evens.scan(add)
        assert list(psums) == [0, 2, 6, 12, 20]
        assert list(psums) == [0, 2, 6, 12, 20]  # a range restarts, so this does too
    """
    def __init__(self, iterable):
        self._g = iterable
    def _describe(self):
        return "source {}".format(repr(self._g))
    def __repr__(self):
        return "<{} at 0x{:x}; {}>".format(self.__class__.__name__, id(self), self._describe())
    def __iter__(self):
        return iter(self._g)
    def scan(self, proc, init=noinit):
        """Lazily scan this sequence with ``proc(acc, elt)``. See ``lazy_scan``."""
        return LazyScan(self, proc, init)
    def map(self, f):
        """Lazily apply ``f`` to each element."""
        return _LazyMap(self, f)
    def filter(self, pred):
        """Lazily keep only the elements for which ``pred`` returns truthy."""
        return _LazyFilter(self, pred)

class LazyScan(LazySequence):
    """Lazy scan adapter. Each ``iter()`` produces a fresh ``ScanIterator``.

    Holds only the source iterable, ``proc`` and ``init``; no traversal
    state is kept between cursor creations.
    """
    def __init__(self, iterable, proc, init=noinit):
        _check_callable("proc", proc)
        super().__init__(iterable)
        self._proc = proc
        self._init = init
    @property
    def proc(self):
        return self._proc
    @property
    def init(self):
        """The initial value, or ``noinit`` for a self-seeded scan."""
        return self._init
    def _describe(self):
        return "proc {}, init {}, source {}".format(repr(self._proc), repr(self._init), repr(self._g))
    def __iter__(self):
        return ScanIterator(iter(self._g), self._proc, self._init, _checked=True)

# Generators: a StopIteration from `f` or `pred` surfaces as RuntimeError (PEP 479),
# never as the end of the output.
class _LazyMap(LazySequence):
    def __init__(self, iterable, f):
        _check_callable("f", f)
        super().__init__(iterable)
        self._f = f
    def _describe(self):
        return "f {}, source {}".format(repr(self._f), repr(self._g))
    def __iter__(self):
        f = self._f
        for x in self._g:
            yield f(x)

class _LazyFilter(LazySequence):
    def __init__(self, iterable, pred):
        _check_callable("pred", pred)
        super().__init__(iterable)
        self._pred = pred
    def _describe(self):
        return "pred {}, source {}".format(repr(self._pred), repr(self._g))
    def __iter__(self):
        pred = self._pred
        for x in self._g:
            if pred(x):
                yield x

def lazy(iterable):
    """Wrap ``iterable`` into a ``LazySequence``, unless it already is one."""
    if isinstance(iterable, LazySequence):
        return iterable
    return LazySequence(iterable)

def lazy_scan(proc, iterable, init=noinit):
    """Scan lazily. Return a restartable iterable of partial folds.

    ``proc`` is called as ``proc(acc, elt)``, like in ``functools.reduce``.

    If ``init`` is given, the output is::

        proc(init, x0), proc(proc(init, x0), x1), ...

    so there is one output per input element, and ``init`` itself is not
    included.

    If ``init`` is omitted, the first element seeds the accumulator and is
    yielded as-is::

        x0, proc(x0, x1), proc(proc(x0, x1), x2), ...

    Empty input produces an empty output in both cases.

    The result is a ``LazyScan``; iterating over it creates a new cursor
    (``ScanIterator``) each time. It can be chained further, e.g.
    ``lazy_scan(add, xs).map(f)``.

    Example - partial sums of an infinite sequence::

        from itertools import count, islice
        from operator import add
        psums = lazy_scan(add, count(1), 0)
        assert tuple(islice(psums, 4)) == (1, 3, 6, 10)
    """
    return LazyScan(iterable, proc, init)
