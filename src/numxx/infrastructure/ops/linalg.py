"""
Linear-algebra kernels: determinant and minor extraction.

The determinant is computed by textbook cofactor expansion along the first
row. Its cost grows as ``O(n!)`` and it is intended for small matrices only;
no pivoting or decomposition is attempted.
"""

from __future__ import annotations

from typing import Any, List

import numpy as np

from ...domain._errors import ArrayValueError, ShapeError
from ...domain._narray import SupportsNArray
from ..narray import NArray
from ._operands import as_array


def _minor_values(values: List[Any], n: int, row: int, col: int) -> List[Any]:
    return [
        values[r * n + c]
        for r in range(n)
        if r != row
        for c in range(n)
        if c != col
    ]


def _det(values: List[Any], n: int) -> Any:
    if n == 0:
        return 1
    if n == 1:
        return values[0]
    if n == 2:
        return values[0] * values[3] - values[1] * values[2]
    total: Any = 0
    sign = 1
    for i in range(n):
        total = total + sign * values[i] * _det(_minor_values(values, n, 0, i), n - 1)
        sign = -sign
    return total


def det(mat: Any) -> Any:
    """
    Determinant of a square matrix.

    Parameters
    ----------
    mat : NArray or Matrix
        Square rank-2 operand, or any operand holding a single element.

    Returns
    -------
    scalar
        Python scalar (``Complex`` for complex matrices).

    Raises
    ------
    ShapeError
        If ``mat`` is not square.

    Notes
    -----
    Cofactor expansion along row 0: for every column ``i`` the minor that
    drops row 0 and column ``i`` is expanded recursively and accumulated with
    alternating signs starting at ``+``. Runs in ``O(n!)`` time.
    """
    arr = as_array(mat)
    shape = arr.get_shape()
    if not shape.is_square():
        raise ShapeError(f"Determinant requires a square matrix, got shape {shape}.")
    values = arr.get_data_as_vector()
    if len(values) == 1:
        return values[0]
    return _det(values, shape[0])


def get_minor_matrix(mat: Any, i: int, j: int) -> Any:
    """
    Matrix obtained by deleting row ``i`` and column ``j``.

    Returns the same container type as ``mat`` (matrix or array).

    Raises
    ------
    ShapeError
        If ``mat`` is not rank 2.
    ArrayValueError
        If ``i`` or ``j`` is outside the matrix.
    """
    arr = as_array(mat)
    if arr.ndim != 2:
        raise ShapeError(
            f"Minor matrices require a rank-2 matrix, got shape {arr.get_shape()}."
        )
    rows, cols = arr.shape
    if not (0 <= i < rows and 0 <= j < cols):
        raise ArrayValueError(
            f"Minor index ({i}, {j}) is out of bounds for shape {arr.get_shape()}."
        )
    data = np.delete(np.delete(arr.to_numpy(), i, axis=0), j, axis=1)
    result = NArray.from_numpy(np.ascontiguousarray(data), copy=False)
    if isinstance(mat, SupportsNArray):
        return type(mat).from_narray(result)
    return result
