"""
Divide a sequence into `n` non-overlapping portions.

:func:`divide` yields read-only views and :func:`divide_mut` yields mutable
views into disjoint ranges of the same storage, suitable for handing out to
separate workers.
"""

from .portion import Portion, PortionMut, divide, divide_mut, divide_readonly
from .subdivide import InvalidPartitionCount, concat, partition, partition_size, subdivide
from .system import init_logging
from .view import MutableSequenceView, SequenceView

__version__ = "0.1.0"

__all__ = [
    "InvalidPartitionCount",
    "MutableSequenceView",
    "Portion",
    "PortionMut",
    "SequenceView",
    "concat",
    "divide",
    "divide_mut",
    "divide_readonly",
    "init_logging",
    "partition",
    "partition_size",
    "subdivide",
]
