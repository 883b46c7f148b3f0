"""
Array creation helpers.

Helpers that take a ``dtype`` fall back to the configured default element
type (``NUMXX_DEFAULT_DTYPE``, ``float64`` unless overridden) when it is
omitted, except :func:`full` (type of the fill value) and :func:`arange`
(``int64`` for integer arguments, ``float64`` otherwise).
"""

from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Optional

import numpy as np

from ...domain._dtype import DType
from ...domain._errors import ArrayValueError
from ...domain._shape import Shape
from .._config import get_default_dtype
from .._numpy_types import as_dtype, to_numpy_dtype
from ..buffer import Buffer
from ..narray import NArray


def _resolve(dtype: Any) -> DType:
    return as_dtype(dtype) or get_default_dtype()


def empty(shape: Any, dtype: Any = None) -> NArray:
    """Array of ``shape`` with unspecified element values."""
    shape = Shape(shape)
    data = np.empty(shape.dimensions, dtype=to_numpy_dtype(_resolve(dtype)))
    return NArray.from_numpy(data, copy=False)


def zeros(shape: Any, dtype: Any = None) -> NArray:
    shape = Shape(shape)
    return NArray.from_buffer(Buffer.allocate(shape.total_size, _resolve(dtype)), shape)


def ones(shape: Any, dtype: Any = None) -> NArray:
    return NArray.full(shape, 1, dtype=_resolve(dtype))


def full(shape: Any, fill_value: Any, dtype: Any = None) -> NArray:
    return NArray.full(shape, fill_value, dtype=dtype)


def identity(n: int, dtype: Any = None) -> NArray:
    """``n x n`` array with ones on the diagonal."""
    return NArray.from_numpy(np.eye(int(n), dtype=to_numpy_dtype(_resolve(dtype))), copy=False)


def arange(start: Any, stop: Any = None, step: Any = 1, dtype: Any = None) -> NArray:
    """
    Evenly spaced values in the half-open interval ``[start, stop)``.

    ``arange(n)`` is ``arange(0, n)``.

    Raises
    ------
    ArrayValueError
        If ``step`` is zero.
    """
    if stop is None:
        start, stop = 0, start
    if step == 0:
        raise ArrayValueError("arange() step must not be zero.")

    integral = all(isinstance(v, Integral) for v in (start, stop, step))
    target = as_dtype(dtype) or (DType.INT64 if integral else DType.FLOAT64)
    count = max(0, math.ceil((stop - start) / step))
    values = start + step * np.arange(count, dtype=np.int64 if integral else np.float64)
    return NArray.from_numpy(values.astype(to_numpy_dtype(target)), copy=False)


def linspace(
    start: float,
    stop: float,
    num: int = 50,
    endpoint: bool = True,
    dtype: Optional[Any] = None,
) -> NArray:
    """
    ``num`` evenly spaced values starting at ``start``.

    The spacing is ``(stop - start) / (num - endpoint)``, so ``stop`` is the
    last value when ``endpoint`` is True and is excluded otherwise. A single
    sample is ``[start]``.

    Raises
    ------
    ArrayValueError
        If ``num`` is negative.
    """
    if num < 0:
        raise ArrayValueError(f"linspace() num must be non-negative, got {num}.")
    target = _resolve(dtype)
    if num == 1:
        values = [start]
    else:
        divisor = num - (1 if endpoint else 0)
        step = (stop - start) / divisor if divisor else 0.0
        values = [start + i * step for i in range(num)]
    return NArray.from_numpy(np.array(values, dtype=to_numpy_dtype(target)), copy=False)
