"""
Unary mixins and numeric-domain implementations for NArray math methods.

Implementation modules are imported for their *side effects*: registering
real and complex control paths with the array control-path manager.

Public API
----------
- ``NArrayMixinUnary``
"""

from ._real import *
from ._complex import *
from ._base import NArrayMixinUnary

__all__ = [
    NArrayMixinUnary.__name__,
]
