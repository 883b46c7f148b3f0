"""
Array-engine exceptions for NumXX.

Every error raised by the engine derives from :class:`NumxxError` and from
the closest built-in exception, so callers may catch either the library
family or the familiar Python type (``ValueError``, ``IndexError``, ...).

Errors are raised at the offending call and never recovered internally.
"""

from __future__ import annotations

from typing import Sequence


def _format_shape(shape: Sequence[int]) -> str:
    return str(tuple(int(d) for d in shape))


class NumxxError(Exception):
    """Base class for all NumXX errors."""


class ShapeError(NumxxError, ValueError):
    """
    Raised when operand shapes are incompatible with an operation.

    Typical sources are elementwise binary operations on arrays of different
    shapes, invalid matmul/dot shape combinations, non-square determinant
    inputs and inconsistent row widths in delimited text files.
    """

    @classmethod
    def for_operation(
        cls, lshape: Sequence[int], rshape: Sequence[int], operation: str
    ) -> "ShapeError":
        """
        Build the standard binary-operation shape-mismatch error.

        Parameters
        ----------
        lshape : Sequence[int]
            Shape of the left operand.
        rshape : Sequence[int]
            Shape of the right operand.
        operation : str
            Verb naming the operation (e.g. ``"add"``, ``"multiply"``).

        Returns
        -------
        ShapeError
            Error whose message reads
            ``"Unable to add arrays. Cannot add shapes (3,) and (4,)."``.
        """
        err = cls(
            f"Unable to {operation} arrays. Cannot {operation} shapes "
            f"{_format_shape(lshape)} and {_format_shape(rshape)}."
        )
        err.lshape = tuple(lshape)
        err.rshape = tuple(rshape)
        err.operation = operation
        return err


class ArrayValueError(NumxxError, ValueError):
    """
    Raised for invalid values: jagged or empty nested input, data-size
    mismatches at construction or assignment, and out-of-range arguments.
    """


class ArrayIndexError(NumxxError, IndexError):
    """Raised when a shape or array index falls outside its wrap-around range."""


class ConversionError(NumxxError, TypeError):
    """
    Raised when an array cannot be converted to the requested scalar or
    element type.

    Attributes
    ----------
    shape : tuple[int, ...]
        Shape of the array that failed to convert.
    target : str
        Name of the requested type.
    """

    def __init__(self, shape: Sequence[int], target: str) -> None:
        """
        Initialize the ConversionError.

        Parameters
        ----------
        shape : Sequence[int]
            Shape of the source array.
        target : str
            Name of the conversion target (e.g. ``"float"``, ``"int64"``).
        """
        super().__init__(
            f"Unable to convert array of shape {_format_shape(shape)} to {target}."
        )
        self.shape = tuple(shape)
        self.target = target


class ArgumentError(NumxxError, OSError):
    """Raised when an external resource (file) cannot be opened or used."""
