"""Operator and method mixins composed into :class:`NArray`."""

from .arithmetic import NArrayMixinArithmetic
from .comparison import NArrayMixinComparison
from .memory import NArrayMixinMemory
from .reduction import NArrayMixinReduction
from .shape import NArrayMixinShape
from .unary import NArrayMixinUnary

__all__ = [
    NArrayMixinArithmetic.__name__,
    NArrayMixinComparison.__name__,
    NArrayMixinMemory.__name__,
    NArrayMixinReduction.__name__,
    NArrayMixinShape.__name__,
    NArrayMixinUnary.__name__,
]
