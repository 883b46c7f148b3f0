"""
Arithmetic mixin implementing elementwise NArray operators.

This module declares :class:`NArrayMixinArithmetic`, the mixin providing
``+ - * / // **``, their reflected and in-place forms, and the unary
operators for arrays.

Semantics
---------
- Operands must have identical shapes (no broadcasting); scalars may appear
  on either side and apply to every element.
- The result element type is read from the promotion table; ``/`` turns
  integral results into ``float64``.
- Both operands are converted to the result type before the operation, so
  the arithmetic itself happens in the promoted type.
- Floating point exceptions (division by zero, overflow, invalid) follow
  IEEE semantics and are not reported.
- ``*`` is always elementwise, including when the right operand is a matrix.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Callable, Union

import numpy as np

from .....domain import _complex_math as cmath_
from .....domain._complex import Complex
from .....domain._dtype import promote_types, true_division_type
from .....domain._narray import INArray
from ...._numpy_types import to_numpy_dtype

Number = Union[int, float, complex, Complex]


class NArrayMixinArithmetic(ABC):
    """
    Mixin providing elementwise arithmetic for arrays.

    Notes
    -----
    Concrete arrays must provide ``_coerce_operand``,
    ``_binary_op_shape_check``, ``_new_from_numpy``, ``to_numpy`` and
    ``assign``.
    """

    # ----------------------------
    # Shared engine
    # ----------------------------
    def _elementwise(
        self: INArray,
        other: Any,
        op: Callable[[np.ndarray, np.ndarray], np.ndarray],
        operation: str,
        *,
        reflected: bool = False,
        true_division: bool = False,
    ) -> Any:
        operand = self._coerce_operand(other)
        if operand is None:
            return NotImplemented
        values, dtype, is_scalar = operand
        if not is_scalar:
            self._binary_op_shape_check(self, values.shape, operation)

        out_dtype = (
            true_division_type(self.dtype, dtype)
            if true_division
            else promote_types(self.dtype, dtype)
        )
        npdt = to_numpy_dtype(out_dtype)
        lhs = self.to_numpy().astype(npdt)
        rhs = np.asarray(values).astype(npdt)
        if reflected:
            lhs, rhs = rhs, lhs
        with np.errstate(all="ignore"):
            out = op(lhs, rhs)
        return self._new_from_numpy(np.asarray(out, dtype=npdt).reshape(self.shape))

    # ----------------------------
    # Addition / subtraction
    # ----------------------------
    def __add__(self, other: Union[INArray, Number]) -> INArray:
        """Elementwise ``self + other``."""
        return self._elementwise(other, np.add, "add")

    def __radd__(self, other: Number) -> INArray:
        return self._elementwise(other, np.add, "add", reflected=True)

    def __sub__(self, other: Union[INArray, Number]) -> INArray:
        """Elementwise ``self - other``."""
        return self._elementwise(other, np.subtract, "subtract")

    def __rsub__(self, other: Number) -> INArray:
        return self._elementwise(other, np.subtract, "subtract", reflected=True)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self, other: Union[INArray, Number]) -> INArray:
        """
        Elementwise (Hadamard) ``self * other``.

        Matrix operands are unwrapped and multiplied elementwise as well;
        use ``@`` or :func:`matmul` for matrix products.
        """
        return self._elementwise(other, np.multiply, "multiply")

    def __rmul__(self, other: Number) -> INArray:
        return self._elementwise(other, np.multiply, "multiply", reflected=True)

    # ----------------------------
    # Division
    # ----------------------------
    def __truediv__(self, other: Union[INArray, Number]) -> INArray:
        """
        Elementwise true division.

        Integral operands produce a ``float64`` result; division by zero
        yields ``inf``/``nan`` per IEEE arithmetic.
        """
        return self._elementwise(other, np.true_divide, "divide", true_division=True)

    def __rtruediv__(self, other: Number) -> INArray:
        return self._elementwise(
            other, np.true_divide, "divide", reflected=True, true_division=True
        )

    def __floordiv__(self, other: Union[INArray, Number]) -> INArray:
        """
        Elementwise floor division in the promoted type.

        Raises
        ------
        TypeError
            If the promoted type is complex.
        """
        return self._elementwise(other, _floor_divide, "divide")

    def __rfloordiv__(self, other: Number) -> INArray:
        return self._elementwise(other, _floor_divide, "divide", reflected=True)

    # ----------------------------
    # Exponentiation
    # ----------------------------
    def __pow__(self, other: Union[INArray, Number]) -> INArray:
        """
        Elementwise ``self ** other``.

        Complex results are computed element by element with the complex
        ``power`` closed forms, so they match scalar :class:`Complex` powers
        exactly.
        """
        return self._power(other, reflected=False)

    def __rpow__(self, other: Number) -> INArray:
        return self._power(other, reflected=True)

    def power(self, exponent: Union[INArray, Number]) -> INArray:
        return self._power(exponent, reflected=False)

    def _power(self: INArray, other: Any, reflected: bool) -> Any:
        operand = self._coerce_operand(other)
        if operand is None:
            return NotImplemented
        values, dtype, is_scalar = operand
        if not is_scalar:
            self._binary_op_shape_check(self, values.shape, "exponentiate")

        out_dtype = promote_types(self.dtype, dtype)
        if not out_dtype.is_complex:
            # Integral bases with negative exponents are evaluated in float64.
            exponents = self.to_numpy() if reflected else np.asarray(values)
            negative = out_dtype.is_integral and bool(np.any(exponents < 0))
            return self._elementwise(
                other,
                np.power,
                "exponentiate",
                reflected=reflected,
                true_division=negative,
            )

        base = self.get_data().tolist()
        exps = np.broadcast_to(np.asarray(values), self.shape).reshape(-1).tolist()
        if reflected:
            base, exps = exps, base
        out = [complex(cmath_.power(b, e)) for b, e in zip(base, exps)]
        npdt = to_numpy_dtype(out_dtype)
        return self._new_from_numpy(np.array(out, dtype=npdt).reshape(self.shape))

    # ----------------------------
    # In-place forms (write back into the existing buffer)
    # ----------------------------
    def __iadd__(self, other: Union[INArray, Number]) -> INArray:
        return self._write_back(self.__add__(other))

    def __isub__(self, other: Union[INArray, Number]) -> INArray:
        return self._write_back(self.__sub__(other))

    def __imul__(self, other: Union[INArray, Number]) -> INArray:
        return self._write_back(self.__mul__(other))

    def __itruediv__(self, other: Union[INArray, Number]) -> INArray:
        return self._write_back(self.__truediv__(other))

    def _write_back(self: INArray, result: Any) -> Any:
        if result is NotImplemented:
            return result
        self.assign(result)
        return self

    # ----------------------------
    # Unary operators
    # ----------------------------
    def __neg__(self: INArray) -> INArray:
        if self.dtype.is_bool:
            return self._new_from_numpy(-self.to_numpy().astype(np.int32))
        return self._new_from_numpy(np.negative(self.to_numpy()))

    def __pos__(self: INArray) -> INArray:
        return self.deepcopy()

    def __abs__(self: INArray) -> INArray:
        return self.absolute()

    # ----------------------------
    # Matrix product
    # ----------------------------
    def __matmul__(self, other: Any) -> INArray:
        from ....ops.vecops import matmul

        return matmul(self, other)

    def __rmatmul__(self, other: Any) -> INArray:
        from ....ops.vecops import matmul

        return matmul(other, self)


def _floor_divide(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    if np.iscomplexobj(lhs):
        raise TypeError("Floor division is not defined for complex arrays.")
    return np.floor_divide(lhs, rhs)
