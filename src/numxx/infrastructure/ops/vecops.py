"""
Vector and matrix product kernels.

All kernels accept :class:`NArray` and :class:`Matrix` operands (matrices are
unwrapped through ``as_narray``) and compute in the promoted element type of
their operands.

- ``matmul`` classifies the operand shapes with
  :meth:`Shape.get_matmul_type` and runs a triple loop over ``(m, k, n)``;
  the innermost loop over ``n`` is a vectorized row update.
- ``dot`` returns the sum of products of two equal-length vectors as a
  one-element array and delegates every other valid combination to
  ``matmul``.
- ``vdot`` is the conjugate-linear inner product of equally shaped arrays.
- ``hadamard`` is the explicit elementwise product.
- ``cross`` is the 3-component cross product of 2- or 3-vectors.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from ...domain._dtype import promote_types
from ...domain._errors import ShapeError
from ...domain._narray import SupportsNArray
from ...domain._shape import MatmulType, Shape
from .._numpy_types import is_scalar, to_numpy_dtype
from ..narray import NArray
from ._operands import as_array, rewrap


def _gemm_dims(
    kind: MatmulType, a: Tuple[int, ...], b: Tuple[int, ...]
) -> Tuple[int, int, int]:
    if kind is MatmulType.DOT:
        return 1, a[0], 1
    if kind is MatmulType.ROW_MAT:
        return 1, a[0], b[1]
    if kind is MatmulType.MAT_COL:
        return a[0], a[1], 1
    return a[0], a[1], b[1]


def matmul(a: Any, b: Any) -> Any:
    """
    Matrix product of two operands of rank at most 2.

    Parameters
    ----------
    a, b : NArray or Matrix or sequence
        Operands. Their shapes must be classified as ``DOT``, ``ROW_MAT``,
        ``MAT_COL`` or ``MAT_MAT``.

    Returns
    -------
    NArray or Matrix
        Array of shape ``Shape.get_product_shape(a, b)``; a matrix when both
        operands are matrices.

    Raises
    ------
    ShapeError
        If the shapes cannot be multiplied.
    """
    left, right = as_array(a), as_array(b)
    kind = Shape.get_matmul_type(left.shape, right.shape)
    if kind is MatmulType.INVALID:
        raise ShapeError.for_operation(left.shape, right.shape, "multiply")

    m, k, n = _gemm_dims(kind, left.shape, right.shape)
    npdt = to_numpy_dtype(promote_types(left.dtype, right.dtype))
    lhs = left.get_data().astype(npdt)
    rhs = right.get_data().astype(npdt)
    out = np.zeros(m * n, dtype=npdt)

    with np.errstate(all="ignore"):
        for i in range(m):
            row = out[i * n : (i + 1) * n]
            for t in range(k):
                row += lhs[i * k + t] * rhs[t * n : (t + 1) * n]

    shape = Shape.get_product_shape(left.shape, right.shape)
    result = NArray.from_numpy(out.reshape(shape.dimensions), copy=False)
    return rewrap(result, a, b)


def dot(a: Any, b: Any) -> Any:
    """
    Dot product.

    Two equal-length vectors give the sum of their elementwise products as
    a one-element array; row/matrix, matrix/column and matrix/matrix
    combinations delegate to :func:`matmul`. Two scalars are multiplied.

    Raises
    ------
    ShapeError
        If the operand shapes cannot be multiplied.
    """
    if is_scalar(a) and is_scalar(b):
        return a * b
    if is_scalar(a) or is_scalar(b):
        return as_array(a) * b if is_scalar(b) else a * as_array(b)
    left, right = as_array(a), as_array(b)
    if Shape.get_matmul_type(left.shape, right.shape) is MatmulType.INVALID:
        raise ShapeError.for_operation(left.shape, right.shape, "multiply")
    return matmul(a, b)


def vdot(a: Any, b: Any) -> NArray:
    """
    Conjugate-linear inner product ``sum(conj(a[i]) * b[i])``.

    The operands must have identical shapes and are read in row-major order.
    The result is a one-element array.

    Raises
    ------
    ShapeError
        If the shapes differ.
    """
    left, right = as_array(a), as_array(b)
    if left.shape != right.shape:
        raise ShapeError.for_operation(left.shape, right.shape, "multiply")
    npdt = to_numpy_dtype(promote_types(left.dtype, right.dtype))
    lhs = np.conj(left.get_data().astype(npdt))
    rhs = right.get_data().astype(npdt)
    with np.errstate(all="ignore"):
        total = np.sum(lhs * rhs, dtype=npdt)
    return NArray.from_numpy(np.asarray([total], dtype=npdt), copy=False)


def hadamard(a: Any, b: Any) -> Any:
    """
    Elementwise product of two equally shaped operands.

    Returns a matrix when ``a`` is a matrix, otherwise an array.

    Raises
    ------
    ShapeError
        If the shapes differ.
    """
    left, right = as_array(a), as_array(b)
    result = left * right
    if isinstance(a, SupportsNArray):
        return type(a).from_narray(result)
    return result


def cross(a: Any, b: Any) -> NArray:
    """
    Cross product of two vectors of length 2 or 3.

    A length-2 vector is treated as having a zero third component; the
    result always has three components.

    Raises
    ------
    ShapeError
        If either operand is not a rank-1 array of length 2 or 3.
    """
    left, right = as_array(a), as_array(b)
    for v in (left, right):
        if v.ndim != 1 or v.shape[0] not in (2, 3):
            raise ShapeError(
                "Cross product requires vectors of length 2 or 3, "
                f"got shapes {left.get_shape()} and {right.get_shape()}."
            )
    npdt = to_numpy_dtype(promote_types(left.dtype, right.dtype))
    x = np.zeros(3, dtype=npdt)
    y = np.zeros(3, dtype=npdt)
    x[: left.size] = left.get_data()
    y[: right.size] = right.get_data()
    with np.errstate(all="ignore"):
        out = np.array(
            [
                x[1] * y[2] - x[2] * y[1],
                x[2] * y[0] - x[0] * y[2],
                x[0] * y[1] - x[1] * y[0],
            ],
            dtype=npdt,
        )
    return NArray.from_numpy(out, copy=False)
