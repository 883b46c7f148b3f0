"""
Reduction mixin: sums, means, discrete differences and truth tests.

Whole-array reductions (``axis=None``) return Python scalars (``Complex`` for
complex arrays); reductions along an axis return arrays of reduced rank.

Accumulation types
------------------
- ``sum``: ``bool``/``int32``/``int64`` accumulate in ``int64``; floating
  and complex arrays accumulate in their own type.
- ``mean``: integral inputs produce ``float64``.
- ``diff``: ``bool`` inputs are differenced as ``int32``.
"""

from __future__ import annotations

import warnings
from abc import ABC
from typing import Any, Optional

import numpy as np

from .....domain._dtype import DType
from .....domain._errors import ArrayValueError, ShapeError
from .....domain._narray import INArray
from .....domain._shape import Shape
from ...._numpy_types import to_numpy_dtype, to_python


class NArrayMixinReduction(ABC):
    """Mixin providing reductions over arrays."""

    def _reduce_axis(self: INArray, axis: int) -> int:
        if self.ndim == 0:
            raise ShapeError("Cannot reduce along an axis of a rank-0 array.")
        shape = Shape(self.shape)
        return Shape._wrap(axis, shape.ndim)

    def sum(self: INArray, axis: Optional[int] = None) -> Any:
        """
        Sum of elements.

        Parameters
        ----------
        axis : int, optional
            Axis to reduce (negative values wrap). When omitted, all
            elements are summed and a Python scalar is returned.

        Returns
        -------
        scalar or INArray
            Python scalar for a full reduction, otherwise an array whose
            shape drops ``axis``.
        """
        acc = DType.INT64 if self.dtype.is_integral else self.dtype
        npdt = to_numpy_dtype(acc)
        if axis is None:
            return to_python(np.sum(self.get_data(), dtype=npdt))
        axis = self._reduce_axis(axis)
        out = np.sum(self.to_numpy(), axis=axis, dtype=npdt)
        return type(self).from_numpy(np.asarray(out), copy=False)

    def mean(self: INArray, axis: Optional[int] = None) -> Any:
        """
        Arithmetic mean of elements.

        The mean of an empty selection is ``nan``.
        """
        acc = DType.FLOAT64 if self.dtype.is_integral else self.dtype
        npdt = to_numpy_dtype(acc)
        with np.errstate(all="ignore"), warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            if axis is None:
                return to_python(np.mean(self.get_data(), dtype=npdt))
            axis = self._reduce_axis(axis)
            out = np.mean(self.to_numpy(), axis=axis, dtype=npdt)
        return type(self).from_numpy(np.asarray(out), copy=False)

    def diff(self: INArray, n: int = 1, axis: int = -1) -> INArray:
        """
        ``n``-th discrete difference along ``axis``.

        Parameters
        ----------
        n : int, optional
            Number of times values are differenced. ``0`` returns a shallow
            copy. Defaults to 1.
        axis : int, optional
            Axis along which to difference. Defaults to the last axis.

        Returns
        -------
        INArray
            Array whose extent along ``axis`` shrinks by ``n``. When ``n`` is
            not smaller than that extent, a ``RuntimeWarning`` is emitted and
            an array with a zero extent along ``axis`` is returned.

        Raises
        ------
        ArrayValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ArrayValueError(f"diff order must be non-negative, got {n}.")
        axis = self._reduce_axis(axis)
        if n == 0:
            return self.copy()

        data = self.to_numpy()
        if self.dtype.is_bool:
            data = data.astype(np.int32)
        length = self.shape[axis]
        if n >= length:
            warnings.warn(
                f"diff order {n} is not smaller than the axis length {length}; "
                "returning an empty array.",
                RuntimeWarning,
                stacklevel=2,
            )
            shape = list(self.shape)
            shape[axis] = 0
            return type(self).from_numpy(np.empty(shape, dtype=data.dtype), copy=False)
        return type(self).from_numpy(np.diff(data, n=n, axis=axis), copy=False)

    def all(self: INArray) -> bool:
        """True when every element is non-zero."""
        return bool(np.all(self.get_data()))

    def any(self: INArray) -> bool:
        """True when at least one element is non-zero."""
        return bool(np.any(self.get_data()))
