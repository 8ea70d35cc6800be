"""
Lazy iterators over a sequence in `n` non-overlapping portions.
"""

from logging import getLogger
from .subdivide import check_count, partition_size
from .view import make_view, split_at

logger = getLogger(__name__)


class Portion:
    """
    An iterator over a sequence in `n` read-only, non-overlapping portions.

    The portions are views of the source and are produced in order from the
    start of the sequence. If the length of the source is not evenly divided
    by `n`, the first portions have one more element than the others. If the
    source is shorter than `n`, the last portions are empty. The iterator is
    exhausted after exactly `n` portions and can not be restarted.

    Example:

    .. code-block:: python

        >>> [list(p) for p in Portion("abcde", 3)]
        [['a', 'b'], ['c', 'd'], ['e']]
    """

    writable = False

    def __init__(self, source, n):
        self._n = check_count(n)
        self._v = make_view(source, writable=self.writable)
        logger.debug(
            f"divide {type(source).__name__} of length {len(self._v)} into {n} portions"
        )

    def __iter__(self):
        return self

    def __next__(self):
        if self._n == 0:
            raise StopIteration

        size = partition_size(len(self._v), self._n)
        self._n -= 1
        head, self._v = split_at(self._v, size)

        if self._n == 0:
            logger.debug("portions exhausted")

        return head

    def __length_hint__(self):
        return self._n

    def __repr__(self):
        return f"<{type(self).__name__}: {self._n} left over {len(self._v)} elements>"


class PortionMut(Portion):
    """
    An iterator over a sequence in `n` mutable, non-overlapping portions.

    Each portion is a writable view into the source's storage, and all the
    portions may be held and written to at once, for example by separate
    worker threads. No two portions from one iterator share an element: the
    remainder is always split at `partition_size(len(remainder), n)`, which
    never exceeds the remainder's length, so the portion handed out and the
    remainder kept back cover disjoint index ranges.

    The caller must not modify the source through any other reference while
    the portions are alive.

    Example:

    .. code-block:: python

        >>> data = [1, 2, 3, 4, 5, 6]
        >>> for p in PortionMut(data, 3):
        ...     p[0] += 1
        >>> data
        [2, 2, 4, 4, 6, 6]
    """

    writable = True


def divide(source, n) -> Portion:
    """
    Divide a sequence into `n` read-only, non-overlapping portions.

    Elements are distributed as evenly as possible, with the first portions
    taking any surplus. Raises `InvalidPartitionCount` if `n` is less than
    one.
    """
    return Portion(source, n)


def divide_mut(source, n) -> PortionMut:
    """
    Divide a sequence into `n` mutable, non-overlapping portions.

    The source must be mutable: a list or other mutable sequence, a
    writable buffer, or a writable numpy array. Raises
    `InvalidPartitionCount` if `n` is less than one, and `TypeError` if the
    source can not be written to.
    """
    return PortionMut(source, n)


divide_readonly = divide
