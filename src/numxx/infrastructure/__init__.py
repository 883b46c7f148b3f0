"""
Infrastructure layer: NumPy-backed storage, arrays, kernels and I/O.
"""

from .buffer import Buffer
from .narray import NArray
from .matrix import Matrix
from .rng import RandomContext

__all__ = [
    Buffer.__name__,
    NArray.__name__,
    Matrix.__name__,
    RandomContext.__name__,
]
