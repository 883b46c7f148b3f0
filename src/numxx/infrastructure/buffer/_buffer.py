"""
Reference-counted element storage shared by arrays and views.

This module defines :class:`Buffer`, a contiguous one-dimensional run of
elements of a single type. Arrays never own elements directly: every array
handle (an owning array, a view produced by indexing or ``ravel``, a shallow
``copy``) attaches to a buffer and detaches when it is garbage-collected.

Core Concepts
-------------
- **Attach / detach**:
    Attaching a handle increments the buffer's reference count. Each handle
    registers a ``weakref.finalize`` callback that decrements it again when
    the handle is collected.

- **Release**:
    When the count drops back to zero the buffer drops its element storage
    and reports ``released``. Released buffers cannot be attached again.

- **Aliasing**:
    Writes through any handle are visible through every other handle on the
    same buffer. There is no copy-on-write.

Thread Safety
-------------
Reference count updates are protected by an internal lock. Element reads and
writes are not synchronized.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional
import threading

import numpy as np

from ...domain._dtype import DType
from ...domain._errors import ArrayValueError
from .._numpy_types import from_numpy_dtype, to_numpy_dtype, storage_value


@dataclass(eq=False)
class Buffer:
    """
    Reference-counted wrapper around a contiguous 1-D NumPy array.

    Parameters
    ----------
    data : numpy.ndarray
        One-dimensional, C-contiguous element storage whose dtype is one of
        the supported element types.

    Notes
    -----
    - A freshly created buffer has a reference count of zero; it is released
      only after at least one handle attached to it and all attached handles
      detached again.
    - This class intentionally avoids defining ``__del__``; handles detach
      through ``weakref.finalize`` callbacks instead.
    """

    data: Optional[np.ndarray]

    _refcnt: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        if self.data is None or self.data.ndim != 1:
            raise ArrayValueError("Buffer storage must be a 1-D array.")
        if not self.data.flags.c_contiguous:
            raise ArrayValueError("Buffer storage must be contiguous.")
        self._dtype = from_numpy_dtype(self.data.dtype)

    # ----------------------------
    # Factories
    # ----------------------------
    @classmethod
    def allocate(cls, size: int, dtype: DType, fill: Any = None) -> "Buffer":
        """
        Allocate storage for ``size`` elements.

        Parameters
        ----------
        size : int
            Number of elements.
        dtype : DType
            Element type.
        fill : scalar, optional
            Initial value of every element; zeros when omitted.

        Raises
        ------
        ConversionError
            If ``fill`` is complex and ``dtype`` is real.
        """
        npdt = to_numpy_dtype(dtype)
        if fill is None:
            return cls(np.zeros(int(size), dtype=npdt))
        return cls(np.full(int(size), storage_value(fill, dtype), dtype=npdt))

    @classmethod
    def from_numpy(cls, arr: np.ndarray, copy: bool = False) -> "Buffer":
        """
        Wrap the elements of a NumPy array.

        Parameters
        ----------
        arr : numpy.ndarray
            Source array of any shape; it is read in row-major order.
        copy : bool, optional
            When False (ownership transfer), a contiguous array of a
            supported dtype is wrapped without copying, so later writes to
            ``arr`` remain visible through the buffer. Defaults to False.

        Returns
        -------
        Buffer
            Buffer holding ``arr.size`` elements.
        """
        arr = np.asarray(arr)
        target = to_numpy_dtype(from_numpy_dtype(arr.dtype))
        if copy or arr.dtype != target or not arr.flags.c_contiguous:
            arr = np.array(arr, dtype=target, order="C", copy=True)
        return cls(arr.reshape(-1))

    # ----------------------------
    # Metadata
    # ----------------------------
    @property
    def size(self) -> int:
        return 0 if self.data is None else int(self.data.size)

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def refcount(self) -> int:
        return self._refcnt

    @property
    def released(self) -> bool:
        return self.data is None

    # ----------------------------
    # Reference counting
    # ----------------------------
    def incref(self) -> None:
        """
        Register one more handle on this buffer.

        Raises
        ------
        ArrayValueError
            If the buffer has already been released.
        """
        with self._lock:
            if self.data is None:
                raise ArrayValueError("Cannot attach to a released buffer.")
            self._refcnt += 1

    def decref(self) -> None:
        """
        Drop one handle; release the storage when none remain.

        Extra calls after release are ignored.
        """
        with self._lock:
            if self._refcnt <= 0:
                return
            self._refcnt -= 1
            if self._refcnt == 0:
                self.data = None
