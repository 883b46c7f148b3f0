"""Operand normalization shared by the kernels."""

from __future__ import annotations

from typing import Any

from ...domain._narray import SupportsNArray
from ..narray import NArray


def as_array(value: Any) -> NArray:
    """Unwrap matrices, pass arrays through and convert anything else."""
    if isinstance(value, SupportsNArray):
        return value.as_narray()
    if isinstance(value, NArray):
        return value
    return NArray(value)


def rewrap(result: NArray, *operands: Any) -> Any:
    """Return ``result`` as a matrix when every operand is a matrix."""
    if operands and all(isinstance(op, SupportsNArray) for op in operands):
        return type(operands[0]).from_narray(result)
    return result
