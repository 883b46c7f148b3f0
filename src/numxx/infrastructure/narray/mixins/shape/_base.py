"""
Shape mixin: transpose, flatten, ravel and reshape.

``transpose`` and ``flatten`` physically rearrange or copy elements into a
new buffer. ``ravel`` and ``reshape`` only reinterpret the shape and return
views that share the receiver's buffer.
"""

from __future__ import annotations

from abc import ABC
from typing import Any

import numpy as np

from .....domain._errors import ArrayValueError
from .....domain._narray import INArray
from .....domain._shape import Shape


class NArrayMixinShape(ABC):
    """Mixin providing geometry transformations for arrays."""

    def transpose(self: INArray) -> INArray:
        """
        Transposed copy.

        A rank-1 array of length ``n`` becomes a ``(1, n)`` row; a rank-2
        array has its rows and columns swapped.

        Raises
        ------
        ShapeError
            If the array has rank 0 or rank greater than 2.
        """
        shape = self.get_shape().transpose()
        data = self.to_numpy()
        if self.ndim == 2:
            data = data.T
        out = np.ascontiguousarray(data).reshape(shape.dimensions)
        return type(self).from_numpy(out, copy=True)

    @property
    def T(self: INArray) -> INArray:
        return self.transpose()

    def flatten(self: INArray) -> INArray:
        """Rank-1 copy of all elements in row-major order."""
        return type(self).from_numpy(self.get_data(), copy=True)

    def ravel(self: INArray) -> INArray:
        """Rank-1 view of all elements, sharing this array's buffer."""
        return self._view((self.size,), self._offset)

    def reshape(self: INArray, *shape: Any) -> INArray:
        """
        View with the same elements interpreted with a new shape.

        Parameters
        ----------
        *shape : int or Iterable[int]
            New extents, given like the arguments of :class:`Shape`.

        Raises
        ------
        ArrayValueError
            If the new shape does not hold exactly ``self.size`` elements.
        """
        new_shape = Shape(*shape)
        if new_shape.total_size != self.size:
            raise ArrayValueError(
                f"Cannot reshape array of size {self.size} into shape {new_shape}."
            )
        return self._view(new_shape.dimensions, self._offset)
