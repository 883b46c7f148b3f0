"""
Runtime configuration for NumXX.

Configuration is read from environment variables and cached on first use.
Tests that patch the environment must call ``get_default_dtype.cache_clear()``.

Environment variables
---------------------
NUMXX_DEFAULT_DTYPE
    Element type used by creation helpers and text loaders when no ``dtype``
    is given. Defaults to ``float64``.
"""

from __future__ import annotations

import os
from functools import lru_cache

from ..domain._dtype import DType

ARRAY_FILE_MARKER = "NumXX::NArray"
"""First line of every file written by :func:`save_narray`."""

DEFAULT_DTYPE_ENV = "NUMXX_DEFAULT_DTYPE"


@lru_cache(maxsize=None)
def get_default_dtype() -> DType:
    """
    Return the configured default element type.

    Raises
    ------
    ArrayValueError
        If ``NUMXX_DEFAULT_DTYPE`` names an unsupported type.
    """
    return DType.from_name(os.environ.get(DEFAULT_DTYPE_ENV, DType.FLOAT64.value))
