from ._base import NArrayMixinReduction

__all__ = [
    NArrayMixinReduction.__name__,
]
