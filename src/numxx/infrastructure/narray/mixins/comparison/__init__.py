from ._base import NArrayMixinComparison

__all__ = [
    NArrayMixinComparison.__name__,
]
