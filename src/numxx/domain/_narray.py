"""
Array interface definitions.

This module defines the domain-level interfaces for array-like objects using
structural typing. Kernels type against these protocols so that plain arrays
and matrices (which wrap an array rather than inheriting from it) can be
passed interchangeably.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Union, runtime_checkable

from ._dtype import DType, NumericDomain
from ._shape import Shape

Number = Union[int, float, complex]


@runtime_checkable
class INArray(Protocol):
    """
    N-dimensional array interface.

    An `INArray` is a view of ``size`` elements of one element type inside a
    shared, reference-counted buffer, interpreted with a row-major shape.

    Notes
    -----
    - Views created by indexing or ``ravel`` share the buffer of their source;
      writes through any alias are visible through every other alias.
    - ``transpose``, ``flatten`` and ``deepcopy`` always return arrays backed
      by a new buffer.
    """

    # ---------------------------------------------------------------------
    # Geometry and element type
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the extents of the array.

        Returns
        -------
        tuple[int, ...]
            The array's shape.
        """
        ...

    @property
    def ndim(self) -> int:
        """Return the rank of the array."""
        ...

    @property
    def size(self) -> int:
        """Return the number of elements (``total_size`` of the shape)."""
        ...

    @property
    def dtype(self) -> DType:
        """Return the element type."""
        ...

    @property
    def numeric_domain(self) -> NumericDomain:
        """Return ``REAL`` or ``COMPLEX`` depending on the element type."""
        ...

    def get_shape(self) -> Shape:
        """Return a copy of the array's :class:`Shape`."""
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def get_data(self) -> Any:
        """Return a flat, writable view of the elements in row-major order."""
        ...

    def get_data_as_vector(self) -> list:
        """Return the elements as a flat list of Python scalars."""
        ...

    def item(self, index: int | None = None) -> Any:
        """Return one element as a Python scalar."""
        ...

    def __getitem__(self, index: Any) -> "INArray":
        """Return a lower-rank view at the given leading index."""
        ...

    def __iter__(self) -> Iterator["INArray"]:
        ...

    # ---------------------------------------------------------------------
    # Structure
    # ---------------------------------------------------------------------
    def transpose(self) -> "INArray":
        ...

    def flatten(self) -> "INArray":
        ...

    def ravel(self) -> "INArray":
        ...

    def copy(self) -> "INArray":
        ...

    def deepcopy(self) -> "INArray":
        ...


@runtime_checkable
class SupportsNArray(Protocol):
    """
    Objects that wrap an array and can expose it.

    Matrices implement this protocol; array operators use it to unwrap a
    wrapped operand before applying their own (elementwise) semantics.
    """

    def as_narray(self) -> INArray:
        """Return the wrapped array (sharing its buffer)."""
        ...
