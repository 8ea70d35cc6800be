"""
Windows onto contiguous sequences which index into the original storage.
"""

from array import array
from collections.abc import MutableSequence, Sequence
import numpy as np


class SequenceView(Sequence):
    """
    A fixed-length, read-only window onto a sequence.

    The view holds a reference to the base sequence and the `range` of base
    indices it covers. Element access reads through to the base, so changes
    made to the base are visible in the view. Slicing a view returns another
    view on the same base; nothing is copied.
    """

    __hash__ = None

    def __init__(self, base: Sequence, indices: range = None):
        self._base = base
        self._indices = range(len(base)) if indices is None else indices

    @property
    def base(self):
        return self._base

    @property
    def indices(self) -> range:
        return self._indices

    def __len__(self):
        return len(self._indices)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return type(self)(self._base, self._indices[key])
        return self._base[self._indices[key]]

    def __iter__(self):
        base = self._base
        for i in self._indices:
            yield base[i]

    def __eq__(self, other):
        if not isinstance(other, Sequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"


class MutableSequenceView(SequenceView):
    """
    A fixed-length window onto a mutable sequence.

    Assignment through the view writes into the base. Slice assignment must
    supply exactly as many values as the slice selects, since a view can not
    grow or shrink the storage beneath it.
    """

    def __setitem__(self, key, value):
        if not isinstance(key, slice):
            self._base[self._indices[key]] = value
            return

        targets = self._indices[key]
        values = list(value)

        if len(values) != len(targets):
            raise ValueError(
                f"cannot assign {len(values)} values to a view slice of length {len(targets)}"
            )
        for i, x in zip(targets, values):
            self._base[i] = x


def make_view(source, writable=False):
    """
    Return a view of `source` suitable for dividing along its first axis.

    Numpy arrays are viewed with numpy's own slicing, and byte-like buffers
    with a one-dimensional `memoryview`; both alias the source's memory. Any
    other sequence is wrapped in a `SequenceView`, or a `MutableSequenceView`
    if `writable` is true. A `TypeError` is raised if the source can not be
    viewed in the requested mode.
    """
    if isinstance(source, np.ndarray):
        if source.ndim == 0:
            raise TypeError("cannot divide a zero-dimensional array")
        if writable and not source.flags.writeable:
            raise TypeError("cannot mutably divide a read-only array")
        view = source.view()
        view.flags.writeable = writable
        return view

    if isinstance(source, SequenceView):
        if writable and not isinstance(source, MutableSequenceView):
            raise TypeError("cannot mutably divide a read-only view")
        cls = MutableSequenceView if writable else SequenceView
        return cls(source.base, source.indices)

    if isinstance(source, (bytes, bytearray, memoryview, array)):
        view = memoryview(source)
        if view.ndim != 1:
            raise TypeError(f"cannot divide a {view.ndim}-dimensional buffer")
        if writable and view.readonly:
            raise TypeError(f"cannot mutably divide a read-only {type(source).__name__}")
        return view if writable else view.toreadonly()

    if writable and isinstance(source, MutableSequence):
        return MutableSequenceView(source)

    if writable and isinstance(source, Sequence):
        raise TypeError(f"cannot mutably divide an immutable {type(source).__name__}")

    if isinstance(source, Sequence):
        return SequenceView(source)

    raise TypeError(f"cannot divide object of type {type(source).__name__}")


def split_at(view, index):
    """
    Split a view into the two views `[0, index)` and `[index, len)`.

    Both halves refer to the storage of `view`. They are disjoint exactly
    when `0 <= index <= len(view)`, and every mutable portion handed out by
    this package depends on it: an index past the end would let the head and
    the tail claim the same elements. Out-of-range indices are therefore
    rejected rather than clamped.
    """
    if not 0 <= index <= len(view):
        raise IndexError(f"split index {index} outside view of length {len(view)}")

    return view[:index], view[index:]
