"""
Memory mixin: duplication, type conversion and in-place writes.

The array engine distinguishes three ways of duplicating an array:

- ``copy()`` returns a new handle on the *same* buffer (writes are shared);
- ``deepcopy()`` allocates an independent buffer;
- ``astype(dtype)`` allocates an independent buffer of another element type.

In-place writes (``assign``, ``fill``, ``put``) never rebind the array to a
new buffer, so every alias observes them.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, Optional

import numpy as np

from .....domain._errors import ArrayValueError, ConversionError
from .....domain._narray import INArray
from ...._numpy_types import as_dtype, is_scalar, scalar_dtype, storage_value, to_numpy_dtype


class NArrayMixinMemory(ABC):
    """Mixin providing copies, conversions and in-place writes for arrays."""

    # ----------------------------
    # Duplication
    # ----------------------------
    def copy(self: INArray) -> INArray:
        """
        Shallow duplicate sharing this array's buffer.

        Returns
        -------
        INArray
            A new handle with the same shape, offset and buffer; mutating
            either handle is visible through the other.
        """
        return self._view(self.shape, self._offset)

    def deepcopy(self: INArray) -> INArray:
        """Independent duplicate backed by a newly allocated buffer."""
        return type(self).from_numpy(self.to_numpy(), copy=True)

    def __copy__(self) -> INArray:
        return self.copy()

    def __deepcopy__(self, memo: Optional[dict] = None) -> INArray:
        return self.deepcopy()

    def astype(self: INArray, dtype: Any) -> INArray:
        """
        Copy converted to another element type.

        Raises
        ------
        ConversionError
            If complex elements would be converted to a real type.
        """
        target = as_dtype(dtype)
        if self.dtype.is_complex and not target.is_complex:
            raise ConversionError(self.shape, target.value)
        out = self.to_numpy().astype(to_numpy_dtype(target))
        return type(self).from_numpy(out, copy=False)

    # ----------------------------
    # In-place writes
    # ----------------------------
    def assign(self: INArray, data: Any) -> INArray:
        """
        Overwrite this array's elements in its existing buffer.

        Parameters
        ----------
        data : INArray or sequence or scalar
            Source values. Arrays and (nested) sequences are read in
            row-major order; a scalar is accepted only when this array holds
            exactly one element.

        Returns
        -------
        INArray
            ``self``.

        Raises
        ------
        ArrayValueError
            If the number of source elements differs from ``self.size``.
        ConversionError
            If complex values would be written into a real array.
        """
        if is_scalar(data):
            if self.size != 1:
                raise ArrayValueError(
                    f"Cannot assign a scalar to an array of {self.size} elements."
                )
            values = np.asarray([storage_value(data, scalar_dtype(data))])
            source_dtype = scalar_dtype(data)
        else:
            if hasattr(data, "as_narray"):
                data = data.as_narray()
            if not isinstance(data, type(self)):
                data = type(self)(data)
            values = data.get_data()
            source_dtype = data.dtype

        if values.size != self.size:
            raise ArrayValueError(
                f"Cannot assign {values.size} elements to an array of "
                f"{self.size} elements."
            )
        if source_dtype.is_complex and not self.dtype.is_complex:
            raise ConversionError(self.shape, self.dtype.value)
        # astype copies first, so overlapping aliases are read before writing
        self.get_data()[...] = values.astype(to_numpy_dtype(self.dtype))
        return self

    def fill(self: INArray, value: Any) -> INArray:
        """Write ``value`` into every element and return ``self``."""
        self.get_data()[...] = storage_value(value, self.dtype)
        return self

    def put(self: INArray, index: int, value: Any) -> None:
        """Write one element addressed by its flat (row-major) index."""
        self.get_data()[self._wrap_index(index, self.size)] = storage_value(
            value, self.dtype
        )
