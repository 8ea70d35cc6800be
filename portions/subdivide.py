"""
Utility functions for domain decomposition.
"""

from operator import index
import numpy as np


class InvalidPartitionCount(ValueError):
    """A sequence was divided into fewer than one portion"""


def check_count(n) -> int:
    """
    Return `n` as an integer portion count, or raise if it is unusable.

    Non-integers raise `TypeError`; counts below one raise
    `InvalidPartitionCount`.
    """
    n = index(n)
    if n < 1:
        raise InvalidPartitionCount(f"cannot divide into {n} portions")
    return n


def partition_size(remaining_length: int, remaining_count: int) -> int:
    """
    Return the size of the next portion of a shrinking sequence.

    The result is `ceil(remaining_length / remaining_count)`, which never
    exceeds `remaining_length` when `remaining_count >= 1`. Callers decrement
    `remaining_count` and subtract the result from `remaining_length` before
    asking again; recomputing the ceiling at every step hands the surplus
    elements to the earliest portions.
    """
    if remaining_count < 1:
        raise InvalidPartitionCount(
            f"cannot divide into {remaining_count} portions, need at least one"
        )
    if remaining_length < 0:
        raise ValueError(f"remaining length must be non-negative, got {remaining_length}")

    return min(-(-remaining_length // remaining_count), remaining_length)


def partition(elements, num_parts):
    """
    Equitably divide the given number of elements into `num_parts` partitions.

    The sum of the partitions is `elements`. The first `elements % num_parts`
    partitions are one larger than the rest. If there are fewer elements than
    partitions, the trailing partitions are zero.
    """
    num_parts = check_count(num_parts)
    partition_size(elements, num_parts)

    def sizes(remaining, count):
        while count > 0:
            n = partition_size(remaining, count)
            remaining -= n
            count -= 1
            yield n

    return sizes(elements, num_parts)


def subdivide(interval, num_parts):
    """
    Divide an interval into non-overlapping contiguous sub-intervals.
    """
    try:
        a, b = interval
    except TypeError:
        a, b = 0, interval

    if b < a:
        raise ValueError(f"interval ({a}, {b}) is reversed")

    return _subintervals(a, partition(b - a, num_parts))


def _subintervals(a, sizes):
    for n in sizes:
        yield a, a + n
        a += n


def concat(portions):
    """
    Concatenate a run of portions into a single object on the host.

    The result is always a copy. If every portion is a numpy array the
    arrays are joined on the first axis and an array is returned; otherwise
    the elements are gathered into a list, in order.
    """
    portions = list(portions)

    if portions and all(isinstance(p, np.ndarray) for p in portions):
        return np.concatenate(portions, axis=0)

    return [x for portion in portions for x in portion]
