from array import array

import numpy as np
import pytest


SOURCE_KINDS = {
    "list": lambda n: list(range(n)),
    "tuple": lambda n: tuple(range(n)),
    "range": lambda n: range(n),
    "str": lambda n: "".join(chr(ord("a") + i % 26) for i in range(n)),
    "bytes": lambda n: bytes(i % 256 for i in range(n)),
    "bytearray": lambda n: bytearray(i % 256 for i in range(n)),
    "array": lambda n: array("i", range(n)),
    "ndarray": lambda n: np.arange(n, dtype=float),
    "ndarray-2d": lambda n: np.arange(3 * n).reshape(n, 3),
}

MUTABLE_KINDS = ["list", "bytearray", "array", "ndarray", "ndarray-2d"]


@pytest.fixture(params=list(SOURCE_KINDS))
def make_source(request):
    """Return a factory building a source of the given length"""
    return SOURCE_KINDS[request.param]


@pytest.fixture(params=MUTABLE_KINDS)
def make_mutable_source(request):
    return SOURCE_KINDS[request.param]
