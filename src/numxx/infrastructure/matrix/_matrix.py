"""
Rank-2 matrix type whose ``*`` is matrix multiplication.

:class:`Matrix` wraps an :class:`NArray` rather than inheriting from it. The
wrapped array always has rank 2: rank-0 input becomes ``(1, 1)`` and rank-1
input becomes a ``(1, n)`` row.

Multiplication semantics
------------------------
- ``Matrix * Matrix`` is the matrix product.
- ``Matrix * NArray`` checks explicitly that the array has rank at most 2
  and that the shapes are multipliable (:meth:`Matrix.are_multipliable`),
  then computes the matrix product; otherwise a :class:`ShapeError` is
  raised.
- ``Matrix * scalar`` and ``scalar * Matrix`` scale every element.
- ``NArray * Matrix`` is elementwise: the left operand decides.

Addition, subtraction, division and comparisons are elementwise and return
matrices. Use :func:`hadamard` for an explicit elementwise product.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

import numpy as np

from ...domain._dtype import DType, NumericDomain
from ...domain._errors import ShapeError
from ...domain._shape import MatmulType, Shape
from .._numpy_types import as_dtype, is_scalar, to_numpy_dtype
from .._config import get_default_dtype
from ..narray import NArray


def _shape_of(value: Any) -> Shape:
    if isinstance(value, Shape):
        return value
    if hasattr(value, "shape"):
        return Shape(tuple(value.shape))
    return Shape(value)


class Matrix:
    """
    Two-dimensional array with matrix-product multiplication.

    Parameters
    ----------
    data : scalar, sequence, numpy.ndarray, NArray or Matrix
        Source values (copied), accepted like :class:`NArray` input.
    shape : ShapeLike, optional
        Reinterpret the source values with this shape before the rank
        adjustment.
    dtype : optional
        Element type, as for :class:`NArray`.

    Raises
    ------
    ShapeError
        If the data has rank greater than 2.
    """

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, data: Any, shape: Any = None, dtype: Any = None) -> None:
        self._array = self._as_rank2(NArray(data, shape=shape, dtype=dtype))

    @staticmethod
    def _as_rank2(arr: NArray) -> NArray:
        if arr.ndim == 0:
            return arr.reshape(1, 1)
        if arr.ndim == 1:
            return arr.reshape(1, arr.shape[0])
        if arr.ndim == 2:
            return arr
        raise ShapeError(
            f"Cannot build a matrix from an array of shape {arr.get_shape()} "
            f"(rank {arr.ndim})."
        )

    @classmethod
    def from_narray(cls, arr: NArray) -> "Matrix":
        """Matrix view of ``arr`` (shares its buffer)."""
        obj = cls.__new__(cls)
        obj._array = cls._as_rank2(arr)
        return obj

    @classmethod
    def identity(cls, n: int, dtype: Any = None) -> "Matrix":
        target = as_dtype(dtype) or get_default_dtype()
        eye = np.eye(int(n), dtype=to_numpy_dtype(target))
        return cls.from_narray(NArray.from_numpy(eye, copy=False))

    def as_narray(self) -> NArray:
        """The wrapped rank-2 array (shares the buffer)."""
        return self._array

    @staticmethod
    def are_multipliable(a: Any, b: Any) -> bool:
        """Whether ``a`` and ``b`` (arrays, matrices or shapes) can be multiplied."""
        return Shape.get_matmul_type(_shape_of(a), _shape_of(b)) != MatmulType.INVALID

    # ----------------------------
    # Metadata and element access
    # ----------------------------
    @property
    def shape(self) -> Tuple[int, ...]:
        return self._array.shape

    def get_shape(self) -> Shape:
        return self._array.get_shape()

    @property
    def ndim(self) -> int:
        return 2

    @property
    def size(self) -> int:
        return self._array.size

    @property
    def dtype(self) -> DType:
        return self._array.dtype

    @property
    def numeric_domain(self) -> NumericDomain:
        return self._array.numeric_domain

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    def get_data(self) -> np.ndarray:
        return self._array.get_data()

    def get_data_as_vector(self) -> list:
        return self._array.get_data_as_vector()

    def to_numpy(self) -> np.ndarray:
        return self._array.to_numpy()

    def tolist(self) -> list:
        return self._array.tolist()

    def item(self, index: Optional[int] = None) -> Any:
        return self._array.item(index)

    def __getitem__(self, index: Any) -> NArray:
        """Row view (or element view for ``m[i, j]``) sharing the buffer."""
        return self._array[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._array[index] = value

    def __len__(self) -> int:
        return self.shape[0]

    def __iter__(self) -> Iterator[NArray]:
        return iter(self._array)

    def assign(self, data: Any) -> "Matrix":
        self._array.assign(data)
        return self

    # ----------------------------
    # Structure
    # ----------------------------
    def transpose(self) -> "Matrix":
        return Matrix.from_narray(self._array.transpose())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def copy(self) -> "Matrix":
        return Matrix.from_narray(self._array.copy())

    def deepcopy(self) -> "Matrix":
        return Matrix.from_narray(self._array.deepcopy())

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo: Optional[dict] = None) -> "Matrix":
        return self.deepcopy()

    def astype(self, dtype: Any) -> "Matrix":
        return Matrix.from_narray(self._array.astype(dtype))

    def det(self) -> Any:
        """Determinant by cofactor expansion; see :func:`numxx.linalg.det`."""
        from ..ops.linalg import det

        return det(self)

    def hadamard(self, other: Any) -> "Matrix":
        from ..ops.vecops import hadamard

        return hadamard(self, other)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self, other: Any) -> Any:
        from ..ops.vecops import matmul

        if isinstance(other, Matrix):
            return matmul(self, other)
        if is_scalar(other):
            return Matrix.from_narray(self._array * other)
        if isinstance(other, (list, tuple, np.ndarray)):
            other = NArray(other)
        if isinstance(other, NArray):
            if other.ndim > 2 or not Matrix.are_multipliable(self, other):
                raise ShapeError.for_operation(self.shape, other.shape, "multiply")
            return Matrix.from_narray(matmul(self._array, other))
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if is_scalar(other):
            return Matrix.from_narray(other * self._array)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __rmatmul__(self, other: Any) -> Any:
        from ..ops.vecops import matmul

        return matmul(other, self)

    # ----------------------------
    # Elementwise operators
    # ----------------------------
    @staticmethod
    def _unwrap(other: Any) -> Any:
        return other._array if isinstance(other, Matrix) else other

    def _wrap(self, result: Any) -> Any:
        if result is NotImplemented:
            return result
        return Matrix.from_narray(result)

    def __add__(self, other: Any) -> Any:
        return self._wrap(self._array.__add__(self._unwrap(other)))

    def __radd__(self, other: Any) -> Any:
        return self._wrap(self._array.__radd__(other))

    def __sub__(self, other: Any) -> Any:
        return self._wrap(self._array.__sub__(self._unwrap(other)))

    def __rsub__(self, other: Any) -> Any:
        return self._wrap(self._array.__rsub__(other))

    def __truediv__(self, other: Any) -> Any:
        return self._wrap(self._array.__truediv__(self._unwrap(other)))

    def __rtruediv__(self, other: Any) -> Any:
        return self._wrap(self._array.__rtruediv__(other))

    def __iadd__(self, other: Any) -> "Matrix":
        self._array += self._unwrap(other)
        return self

    def __isub__(self, other: Any) -> "Matrix":
        self._array -= self._unwrap(other)
        return self

    def __neg__(self) -> "Matrix":
        return Matrix.from_narray(-self._array)

    def __pos__(self) -> "Matrix":
        return self.deepcopy()

    def __abs__(self) -> "Matrix":
        return Matrix.from_narray(abs(self._array))

    def __eq__(self, other: Any) -> Any:  # type: ignore[override]
        return self._wrap(self._array.__eq__(self._unwrap(other)))

    def __ne__(self, other: Any) -> Any:  # type: ignore[override]
        return self._wrap(self._array.__ne__(self._unwrap(other)))

    def __lt__(self, other: Any) -> Any:
        return self._wrap(self._array.__lt__(self._unwrap(other)))

    def __le__(self, other: Any) -> Any:
        return self._wrap(self._array.__le__(self._unwrap(other)))

    def __gt__(self, other: Any) -> Any:
        return self._wrap(self._array.__gt__(self._unwrap(other)))

    def __ge__(self, other: Any) -> Any:
        return self._wrap(self._array.__ge__(self._unwrap(other)))

    def array_equal(self, other: Any) -> bool:
        return self._array.array_equal(self._unwrap(other))

    # ----------------------------
    # Conversions and display
    # ----------------------------
    def __float__(self) -> float:
        return float(self._array)

    def __int__(self) -> int:
        return int(self._array)

    def __complex__(self) -> complex:
        return complex(self._array)

    def __bool__(self) -> bool:
        return bool(self._array)

    def __repr__(self) -> str:
        return (
            f"Matrix({np.array2string(self.to_numpy(), separator=', ')}, "
            f"shape={self.shape}, dtype={self.dtype})"
        )

    def __str__(self) -> str:
        return str(self._array)
