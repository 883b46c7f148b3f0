"""
Comparison mixin implementing elementwise NArray comparisons.

All six comparison operators are elementwise, require identical shapes (or a
scalar operand) and return a ``bool`` array of the receiver's shape.

When either operand holds complex values, the ordering operators
(``<``, ``<=``, ``>``, ``>=``) compare magnitudes, matching the ordering of
:class:`Complex`. Equality always compares values.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Union

import numpy as np

from .....domain._narray import INArray

Number = Union[int, float, complex]


class NArrayMixinComparison(ABC):
    """
    Mixin providing elementwise comparison operators for arrays.

    Notes
    -----
    Because ``==`` returns an array, arrays are unhashable.
    """

    __hash__ = None

    def _compare(
        self: INArray,
        other: Any,
        op: Callable[[np.ndarray, np.ndarray], np.ndarray],
        ordering: bool,
    ) -> Any:
        operand = self._coerce_operand(other)
        if operand is None:
            return NotImplemented
        values, dtype, is_scalar = operand
        if not is_scalar:
            self._binary_op_shape_check(self, values.shape, "compare")

        lhs = self.to_numpy()
        rhs = np.asarray(values)
        if ordering and (self.dtype.is_complex or dtype.is_complex):
            lhs, rhs = np.abs(lhs), np.abs(rhs)
        out = op(lhs, rhs)
        return self._new_from_numpy(
            np.asarray(out, dtype=np.bool_).reshape(self.shape)
        )

    def __eq__(self, other: Union[INArray, Number]) -> INArray:  # type: ignore[override]
        """Elementwise equality mask."""
        return self._compare(other, np.equal, ordering=False)

    def __ne__(self, other: Union[INArray, Number]) -> INArray:  # type: ignore[override]
        """Elementwise inequality mask."""
        return self._compare(other, np.not_equal, ordering=False)

    def __lt__(self, other: Union[INArray, Number]) -> INArray:
        """Elementwise ``self < other`` (magnitudes for complex operands)."""
        return self._compare(other, np.less, ordering=True)

    def __le__(self, other: Union[INArray, Number]) -> INArray:
        return self._compare(other, np.less_equal, ordering=True)

    def __gt__(self, other: Union[INArray, Number]) -> INArray:
        return self._compare(other, np.greater, ordering=True)

    def __ge__(self, other: Union[INArray, Number]) -> INArray:
        return self._compare(other, np.greater_equal, ordering=True)

    def array_equal(self: INArray, other: Any) -> bool:
        """
        Whether ``other`` has the same shape and the same element values.

        Unlike ``==`` this never raises on a shape mismatch.
        """
        operand = self._coerce_operand(other)
        if operand is None:
            return False
        values, _, is_scalar = operand
        if is_scalar or tuple(values.shape) != tuple(self.shape):
            return False
        return bool(np.array_equal(self.to_numpy(), values))

