"""
Seedable random-number context.

:class:`RandomContext` owns a :class:`numpy.random.Generator` (PCG64). There
is no process-wide generator: callers that need reproducible draws create a
context with a seed and pass it around.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._errors import ArrayValueError
from ...domain._shape import Shape
from ..narray import NArray


class RandomContext:
    """
    Random-number source producing scalars and arrays.

    Parameters
    ----------
    seed : int, optional
        Seed for the underlying generator. Two contexts created with the
        same seed produce the same sequence of draws.

    Notes
    -----
    Every method takes an optional ``shape``. Without it a Python scalar is
    returned; with it an :class:`NArray` of that shape.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Reset the generator state from ``seed``."""
        self._rng = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    @staticmethod
    def _size(shape: Any) -> Optional[tuple]:
        if shape is None:
            return None
        return Shape(shape).dimensions

    @staticmethod
    def _wrap(values: Any, size: Optional[tuple]) -> Any:
        if size is None:
            return values.item() if isinstance(values, np.generic) else values
        return NArray.from_numpy(np.ascontiguousarray(values), copy=False)

    def rand(self, shape: Any = None) -> Any:
        """Uniform ``float64`` draws from ``[0, 1)``."""
        size = self._size(shape)
        return self._wrap(self._rng.random(size), size)

    def randn(self, shape: Any = None) -> Any:
        """Standard normal ``float64`` draws."""
        size = self._size(shape)
        return self._wrap(self._rng.standard_normal(size), size)

    def randint(self, low: int, high: Optional[int] = None, shape: Any = None) -> Any:
        """
        Uniform ``int64`` draws from the closed interval ``[low, high]``.

        With ``high`` omitted the interval is ``[0, low]``. Reversed bounds
        are swapped.

        Raises
        ------
        ArrayValueError
            If ``high`` is omitted and ``low`` is not positive.
        """
        if high is None:
            if low <= 0:
                raise ArrayValueError(
                    f"randint() with a single bound requires low > 0, got {low}."
                )
            low, high = 0, low
        if low > high:
            low, high = high, low
        size = self._size(shape)
        values = self._rng.integers(low, high, size=size, dtype=np.int64, endpoint=True)
        return self._wrap(values, size)
