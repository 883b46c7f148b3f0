"""
Arithmetic mixin for NArray operators.

Public API
----------
- ``NArrayMixinArithmetic``
"""

from ._base import NArrayMixinArithmetic

__all__ = [
    NArrayMixinArithmetic.__name__,
]
