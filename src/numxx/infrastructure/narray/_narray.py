"""
Concrete N-dimensional array (NumPy-backed buffer handle).

This module provides :class:`NArray`, the concrete implementation of the
domain-level :class:`INArray` protocol. An array is the triple
``{Shape, Buffer, offset}``: it interprets ``shape.total_size`` consecutive
elements of a reference-counted :class:`Buffer`, starting at ``offset``.

Design notes
------------
- Element storage lives in the buffer; the array never copies on read.
  Indexing, ``ravel``, ``reshape`` and ``copy`` produce views: new handles on
  the same buffer whose writes are visible through every alias.
- Every handle increments the buffer's reference count when it is created
  and decrements it through a ``weakref.finalize`` callback when it is
  collected; the last handle releases the storage.
- The capacity invariant ``buffer.size - offset >= shape.total_size`` is
  checked when a handle is attached, not afterwards.
- Operators and methods are contributed by mixins (arithmetic, comparison,
  memory, shape, unary math, reductions); this module holds construction,
  element access and the helpers the mixins rely on.
"""

from __future__ import annotations

import weakref
from numbers import Integral
from typing import Any, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from ...domain._dtype import DType, NumericDomain, common_type
from ...domain._errors import (
    ArrayIndexError,
    ArrayValueError,
    ConversionError,
    ShapeError,
)
from ...domain._narray import INArray
from ...domain._shape import Shape
from .._numpy_types import (
    as_dtype,
    from_numpy_dtype,
    is_scalar,
    scalar_dtype,
    storage_value,
    to_numpy_dtype,
    to_python,
)
from ..buffer import Buffer
from ._nested_builder import NestedBuilder
from .mixins import (
    NArrayMixinArithmetic,
    NArrayMixinComparison,
    NArrayMixinMemory,
    NArrayMixinReduction,
    NArrayMixinShape,
    NArrayMixinUnary,
)

ShapeLike = Union[Shape, Sequence[int], int]


class NArray(
    NArrayMixinArithmetic,
    NArrayMixinComparison,
    NArrayMixinMemory,
    NArrayMixinShape,
    NArrayMixinUnary,
    NArrayMixinReduction,
    INArray,
):
    """
    Typed N-dimensional array over a shared buffer.

    Parameters
    ----------
    data : scalar, sequence, iterable, numpy.ndarray or INArray
        Source values. A scalar produces a rank-0 array. Nested sequences
        (any iterables, including iterators and other arrays) must have
        identical sub-shapes at every level. Arrays and matrices are copied.
    shape : ShapeLike, optional
        Reinterpret the flattened source values with this shape. The number
        of values must equal ``Shape(shape).total_size``.
    dtype : DType or str or type, optional
        Element type. Inferred from the data when omitted (Python ``int`` is
        ``int64``, ``float`` is ``float64``, ``complex`` is ``complex128``).

    Raises
    ------
    ArrayValueError
        If the input is empty or jagged, or if ``shape`` does not match the
        number of values.
    ConversionError
        If complex values are requested as a real element type.

    Notes
    -----
    - ``__array_ufunc__`` is disabled so that NumPy operands defer to the
      array's own operators.
    """

    __array_ufunc__ = None

    def __init__(
        self,
        data: Any,
        shape: Optional[ShapeLike] = None,
        dtype: Any = None,
    ) -> None:
        values, src_shape, src_dtype = self._read_source(data)
        target = as_dtype(dtype) or src_dtype

        if shape is not None:
            new_shape = shape if isinstance(shape, Shape) else Shape(shape)
            if new_shape.total_size != values.size:
                raise ArrayValueError(
                    f"Cannot build an array of shape {new_shape} from "
                    f"{values.size} values."
                )
            src_shape = new_shape.dimensions

        if src_dtype.is_complex and not target.is_complex:
            raise ConversionError(src_shape, target.value)
        storage = np.array(values, dtype=to_numpy_dtype(target), copy=True)
        self._init_handle(Buffer(storage.reshape(-1)), Shape(src_shape), 0)

    @staticmethod
    def _read_source(data: Any) -> Tuple[np.ndarray, Tuple[int, ...], DType]:
        if not isinstance(data, NArray) and hasattr(data, "as_narray"):
            data = data.as_narray()
        if isinstance(data, NArray):
            return data.get_data(), data.shape, data.dtype
        if isinstance(data, np.ndarray):
            return data.reshape(-1), tuple(data.shape), from_numpy_dtype(data.dtype)
        if is_scalar(data):
            dt = scalar_dtype(data)
            return np.asarray([storage_value(data, dt)]), (), dt
        result = NestedBuilder().build(data)
        return result.values, result.shape, result.dtype

    # ----------------------------
    # Handle management
    # ----------------------------
    def _init_handle(self, buffer: Buffer, shape: Shape, offset: int) -> None:
        if offset < 0 or buffer.size - offset < shape.total_size:
            raise ArrayValueError(
                f"Buffer of {buffer.size} elements cannot hold shape {shape} "
                f"at offset {offset}."
            )
        buffer.incref()
        self._buffer = buffer
        self._shape = shape
        self._offset = int(offset)
        self._finalizer = weakref.finalize(self, buffer.decref)

    @classmethod
    def _attach(cls, buffer: Buffer, shape: ShapeLike, offset: int = 0) -> "NArray":
        obj = cls.__new__(cls)
        obj._init_handle(buffer, shape if isinstance(shape, Shape) else Shape(shape), offset)
        return obj

    def _view(self, shape: ShapeLike, offset: int) -> "NArray":
        return type(self)._attach(self._buffer, shape, offset)

    # ----------------------------
    # Alternate constructors
    # ----------------------------
    @classmethod
    def full(cls, shape: ShapeLike, fill_value: Any, dtype: Any = None) -> "NArray":
        """
        Array of ``shape`` with every element set to ``fill_value``.

        The element type defaults to the type carried by ``fill_value``.
        """
        shape = shape if isinstance(shape, Shape) else Shape(shape)
        target = as_dtype(dtype) or scalar_dtype(fill_value)
        buffer = Buffer.allocate(shape.total_size, target, fill_value)
        return cls._attach(buffer, shape, 0)

    @classmethod
    def from_buffer(cls, buffer: Buffer, shape: ShapeLike, offset: int = 0) -> "NArray":
        """
        Array sharing an existing buffer.

        Raises
        ------
        ArrayValueError
            If the buffer cannot hold ``shape`` starting at ``offset``, or if
            it has already been released.
        """
        return cls._attach(buffer, shape, offset)

    @classmethod
    def from_numpy(cls, arr: np.ndarray, copy: bool = True) -> "NArray":
        """
        Array holding the elements of a NumPy array.

        Parameters
        ----------
        arr : numpy.ndarray
            Source array; its shape is kept.
        copy : bool, optional
            When False, a contiguous array of a supported dtype becomes the
            array's storage without copying (ownership transfer).
        """
        arr = np.asarray(arr)
        return cls._attach(Buffer.from_numpy(arr, copy=copy), tuple(arr.shape), 0)

    @classmethod
    def stack(cls, arrays: Sequence[Any]) -> "NArray":
        """
        Concatenate same-shaped arrays along a new leading dimension.

        Raises
        ------
        ArrayValueError
            If ``arrays`` is empty.
        ShapeError
            If the arrays do not all have the same shape.
        """
        items = [a if isinstance(a, NArray) else cls(a) for a in arrays]
        if not items:
            raise ArrayValueError("Cannot stack an empty sequence of arrays.")
        first = items[0].shape
        for item in items[1:]:
            if item.shape != first:
                raise ShapeError(
                    f"Cannot stack arrays of shapes {first} and {item.shape}."
                )
        npdt = to_numpy_dtype(common_type(*(a.dtype for a in items)))
        data = np.concatenate([a.get_data().astype(npdt) for a in items])
        return cls.from_numpy(data.reshape((len(items),) + tuple(first)), copy=False)

    # ----------------------------
    # Metadata
    # ----------------------------
    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape.dimensions

    def get_shape(self) -> Shape:
        return self._shape.copy()

    @property
    def ndim(self) -> int:
        return self._shape.ndim

    @property
    def size(self) -> int:
        return self._shape.total_size

    def get_total_size(self) -> int:
        return self._shape.total_size

    @property
    def dtype(self) -> DType:
        return self._buffer.dtype

    @property
    def numeric_domain(self) -> NumericDomain:
        return self._buffer.dtype.numeric_domain

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    @property
    def offset(self) -> int:
        return self._offset

    def shares_buffer(self, other: "NArray") -> bool:
        """Whether ``other`` is a handle on the same buffer."""
        return isinstance(other, NArray) and other._buffer is self._buffer

    # ----------------------------
    # Element access
    # ----------------------------
    def get_data(self) -> np.ndarray:
        """
        Flat, writable NumPy view of this array's elements.

        Writing into the returned view writes into the shared buffer.
        """
        return self._buffer.data[self._offset : self._offset + self.size]

    def to_numpy(self) -> np.ndarray:
        """Shaped, writable NumPy view of this array's elements."""
        return self.get_data().reshape(self.shape)

    def get_data_as_vector(self) -> list:
        """Elements in row-major order as Python scalars (``Complex`` for complex)."""
        return [to_python(v) for v in self.get_data().tolist()]

    def tolist(self) -> Any:
        """Nested lists of Python scalars; a scalar for rank-0 arrays."""
        if self.ndim == 0:
            return self.item()
        return [row.tolist() for row in self]

    def item(self, index: Optional[int] = None) -> Any:
        """
        One element as a Python scalar.

        Parameters
        ----------
        index : int, optional
            Flat (row-major) index, negative values wrap. May be omitted only
            for one-element arrays.

        Raises
        ------
        ConversionError
            If ``index`` is omitted and the array does not hold exactly one
            element.
        """
        if index is None:
            if self.size != 1:
                raise ConversionError(self.shape, "scalar")
            index = 0
        return to_python(self.get_data()[self._wrap_index(index, self.size)])

    @property
    def flat(self) -> Iterator[Any]:
        return iter(self.get_data_as_vector())

    @staticmethod
    def _wrap_index(index: Any, bound: int) -> int:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise ArrayIndexError(f"Array indices must be integers, got {index!r}.")
        if -bound <= index < 0:
            index += bound
        if not 0 <= index < bound:
            raise ArrayIndexError("Array index out of range.")
        return int(index)

    def __getitem__(self, index: Any) -> "NArray":
        """
        View at a leading index.

        A rank-1 array yields a rank-0 (one element) view; a rank-``n``
        array yields a rank-``n-1`` view. Tuples of integers index
        successive dimensions. Views share this array's buffer.

        Raises
        ------
        ArrayIndexError
            If the index is out of range, not an integer, or the array has
            rank 0.
        """
        if isinstance(index, tuple):
            out = self
            for i in index:
                out = out[i]
            return out if index else self.copy()
        if self.ndim == 0:
            raise ArrayIndexError("Cannot index a rank-0 array.")
        i = self._wrap_index(index, self.shape[0])
        sub_shape = self.shape[1:]
        stride = Shape(sub_shape).total_size
        return self._view(sub_shape, self._offset + i * stride)

    def __setitem__(self, index: Any, value: Any) -> None:
        self[index].assign(value)

    def __len__(self) -> int:
        if self.ndim == 0:
            raise TypeError("len() of a rank-0 array")
        return self.shape[0]

    def __iter__(self) -> Iterator["NArray"]:
        if self.ndim == 0:
            raise TypeError("iteration over a rank-0 array")
        for i in range(self.shape[0]):
            yield self[i]

    # ----------------------------
    # Scalar conversions
    # ----------------------------
    def _single(self, target: str) -> Any:
        if self.size != 1:
            raise ConversionError(self.shape, target)
        return self.item()

    def __int__(self) -> int:
        value = self._single("int")
        if self.dtype.is_complex:
            raise ConversionError(self.shape, "int")
        return int(value)

    def __float__(self) -> float:
        value = self._single("float")
        if self.dtype.is_complex:
            raise ConversionError(self.shape, "float")
        return float(value)

    def __complex__(self) -> complex:
        return complex(self._single("complex"))

    def __bool__(self) -> bool:
        return bool(self._single("bool"))

    # ----------------------------
    # Operand helpers (used by mixins)
    # ----------------------------
    def _new_from_numpy(self, arr: np.ndarray) -> "NArray":
        return type(self).from_numpy(arr, copy=False)

    def _coerce_operand(self, other: Any) -> Optional[Tuple[np.ndarray, DType, bool]]:
        """
        Normalize a binary-operation operand.

        Returns ``(values, dtype, is_scalar)`` or None for unsupported
        operands. Wrapped arrays (matrices) are unwrapped; lists, tuples and
        NumPy arrays are converted to arrays first.
        """
        if is_scalar(other):
            dt = scalar_dtype(other)
            return np.asarray(storage_value(other, dt)), dt, True
        if not isinstance(other, NArray) and hasattr(other, "as_narray"):
            other = other.as_narray()
        if isinstance(other, NArray):
            return other.to_numpy(), other.dtype, False
        if isinstance(other, (list, tuple, np.ndarray)):
            arr = NArray(other)
            return arr.to_numpy(), arr.dtype, False
        return None

    @staticmethod
    def _binary_op_shape_check(a: "NArray", other_shape: Sequence[int], operation: str) -> None:
        if tuple(a.shape) != tuple(other_shape):
            raise ShapeError.for_operation(a.shape, other_shape, operation)

    # ----------------------------
    # Display
    # ----------------------------
    def __repr__(self) -> str:
        return (
            f"NArray({np.array2string(self.to_numpy(), separator=', ')}, "
            f"shape={self.shape}, dtype={self.dtype})"
        )

    def __str__(self) -> str:
        return np.array2string(self.to_numpy(), separator=", ")
