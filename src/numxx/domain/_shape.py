"""
Shape metadata and matrix-multiplication classification.

A :class:`Shape` is an ordered sequence of non-negative extents. Rank 0 (no
extents) describes a scalar-like array and has ``total_size == 1``.

Besides index and size queries, this module hosts the classification logic
used by every multiplication kernel: :meth:`Shape.get_matmul_type` decides
which product two operand shapes support and :meth:`Shape.get_product_shape`
derives the output shape of that product.
"""

from __future__ import annotations

from enum import IntEnum
from numbers import Integral
from typing import Iterable, Iterator, Tuple, Union

from ._errors import ArrayIndexError, ArrayValueError, ShapeError


class MatmulType(IntEnum):
    """
    Product supported by a pair of operand shapes.

    ``INVALID`` is zero, so the truth value of a classification answers
    "can these operands be multiplied".
    """

    INVALID = 0
    DOT = 1
    ROW_MAT = 2
    MAT_COL = 3
    MAT_MAT = 4


ShapeLike = Union["Shape", Iterable[int], int]


def _normalize_dims(dims: tuple) -> list[int]:
    if len(dims) == 1 and hasattr(dims[0], "__iter__"):
        dims = tuple(dims[0])
    out: list[int] = []
    for d in dims:
        if isinstance(d, bool) or not isinstance(d, Integral):
            raise ArrayValueError(f"Shape extents must be integers, got {d!r}.")
        if d < 0:
            raise ArrayValueError(f"Shape extents must be non-negative, got {d}.")
        out.append(int(d))
    return out


class Shape:
    """
    Ordered sequence of non-negative dimension extents.

    Parameters
    ----------
    *dims : int or Iterable[int]
        Extents given either as separate integers (``Shape(2, 3)``) or as a
        single iterable (``Shape((2, 3))``, ``Shape(other_shape)``).
        ``Shape()`` is rank 0.

    Raises
    ------
    ArrayValueError
        If an extent is negative or not an integer.

    Notes
    -----
    Shapes compare equal to other shapes and to tuples/lists with the same
    extents. They are hashable; mutate them (``reshape``,
    ``insert_dimension``) only while they are not used as dictionary keys.
    """

    __slots__ = ("_dims",)

    def __init__(self, *dims: ShapeLike) -> None:
        self._dims: list[int] = _normalize_dims(dims)

    # ----------------------------
    # Queries
    # ----------------------------
    @property
    def ndim(self) -> int:
        """Rank (number of extents)."""
        return len(self._dims)

    @property
    def total_size(self) -> int:
        """Product of all extents; 1 for rank 0."""
        size = 1
        for d in self._dims:
            size *= d
        return size

    @property
    def dimensions(self) -> Tuple[int, ...]:
        return tuple(self._dims)

    def __len__(self) -> int:
        return len(self._dims)

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._dims))

    def __getitem__(self, index: int) -> int:
        """
        Extent at ``index``.

        Negative indices wrap once (``-ndim <= index < 0``); anything else
        outside ``[0, ndim)`` raises :class:`ArrayIndexError`.
        """
        return self._dims[self._wrap(index, self.ndim)]

    @staticmethod
    def _wrap(index: int, bound: int) -> int:
        if isinstance(index, bool) or not isinstance(index, Integral):
            raise ArrayIndexError(f"Shape indices must be integers, got {index!r}.")
        if -bound <= index < 0:
            index += bound
        if not 0 <= index < bound:
            raise ArrayIndexError("Shape index out of range.")
        return int(index)

    def same_shape(self, other: ShapeLike) -> bool:
        return self == other

    def is_square(self) -> bool:
        """
        Whether a matrix of this shape is square.

        Rank-2 shapes with equal extents are square, and so is any shape of
        rank at most 2 holding exactly one element (a 1x1 "matrix").
        """
        if self.ndim > 2:
            return False
        if self.ndim == 2 and self._dims[0] == self._dims[1]:
            return True
        return self.total_size == 1

    # ----------------------------
    # Geometry
    # ----------------------------
    def transpose(self) -> "Shape":
        """
        Transposed shape.

        Rank 1 ``(n,)`` becomes the row ``(1, n)``; rank 2 swaps its extents.

        Raises
        ------
        ShapeError
            For any other rank.
        """
        if self.ndim == 1:
            return Shape(1, self._dims[0])
        if self.ndim == 2:
            return Shape(self._dims[1], self._dims[0])
        raise ShapeError(f"Cannot transpose shape {self} of rank {self.ndim}.")

    def flatten(self) -> "Shape":
        return Shape(self.total_size)

    def reshape(self, *dims: ShapeLike) -> "Shape":
        """Replace the extents in place and return ``self``."""
        self._dims = _normalize_dims(dims)
        return self

    def insert_dimension(self, size: int, pos: int = 0) -> "Shape":
        """
        Insert an extent in place and return ``self``.

        Parameters
        ----------
        size : int
            Extent to insert.
        pos : int, optional
            Insertion position in ``[-ndim, ndim]``; negative positions count
            from the end like ``list.insert``. Defaults to 0 (leading).

        Raises
        ------
        ArrayIndexError
            If ``pos`` is outside ``[-ndim, ndim]``.
        """
        (size,) = _normalize_dims((size,))
        if not -self.ndim <= pos <= self.ndim:
            raise ArrayIndexError("Shape index out of range.")
        if pos < 0:
            pos += self.ndim
        self._dims.insert(pos, size)
        return self

    def compute_strides(self) -> Tuple[int, ...]:
        """Row-major strides, in elements."""
        strides = [1] * self.ndim
        for axis in range(self.ndim - 2, -1, -1):
            strides[axis] = strides[axis + 1] * self._dims[axis + 1]
        return tuple(strides)

    def copy(self) -> "Shape":
        return Shape(self._dims)

    # ----------------------------
    # Matmul classification
    # ----------------------------
    @staticmethod
    def get_matmul_type(a: ShapeLike, b: ShapeLike) -> MatmulType:
        """
        Classify which product the operand shapes support.

        ======  ======================  ===========
        ranks   condition               result
        ======  ======================  ===========
        (1, 1)  ``a[0] == b[0]``        ``DOT``
        (1, 2)  ``a[0] == b[0]``        ``ROW_MAT``
        (2, 1)  ``a[1] == b[0]``        ``MAT_COL``
        (2, 2)  ``a[1] == b[0]``        ``MAT_MAT``
        ======  ======================  ===========

        Every other combination, including any operand of rank greater than
        2, is ``INVALID``.
        """
        a = a if isinstance(a, Shape) else Shape(a)
        b = b if isinstance(b, Shape) else Shape(b)
        ranks = (a.ndim, b.ndim)
        if ranks == (1, 1):
            return MatmulType.DOT if a[0] == b[0] else MatmulType.INVALID
        if ranks == (1, 2):
            return MatmulType.ROW_MAT if a[0] == b[0] else MatmulType.INVALID
        if ranks == (2, 1):
            return MatmulType.MAT_COL if a[1] == b[0] else MatmulType.INVALID
        if ranks == (2, 2):
            return MatmulType.MAT_MAT if a[1] == b[0] else MatmulType.INVALID
        return MatmulType.INVALID

    @staticmethod
    def get_product_shape(a: ShapeLike, b: ShapeLike) -> "Shape":
        """
        Output shape of the product classified by :meth:`get_matmul_type`.

        ``DOT -> (1,)``, ``ROW_MAT -> (b.cols,)``, ``MAT_COL -> (a.rows,)``,
        ``MAT_MAT -> (a.rows, b.cols)``.

        Raises
        ------
        ShapeError
            If the shapes cannot be multiplied.
        """
        a = a if isinstance(a, Shape) else Shape(a)
        b = b if isinstance(b, Shape) else Shape(b)
        kind = Shape.get_matmul_type(a, b)
        if kind is MatmulType.DOT:
            return Shape(1)
        if kind is MatmulType.ROW_MAT:
            return Shape(b[1])
        if kind is MatmulType.MAT_COL:
            return Shape(a[0])
        if kind is MatmulType.MAT_MAT:
            return Shape(a[0], b[1])
        raise ShapeError.for_operation(a, b, "multiply")

    # ----------------------------
    # Dunder
    # ----------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shape):
            return self._dims == other._dims
        if isinstance(other, (tuple, list)):
            return tuple(self._dims) == tuple(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) -> int:
        return hash(tuple(self._dims))

    def __repr__(self) -> str:
        return f"Shape({', '.join(str(d) for d in self._dims)})"

    def __str__(self) -> str:
        return str(tuple(self._dims))
