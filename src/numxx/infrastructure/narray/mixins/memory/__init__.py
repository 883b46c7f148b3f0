from ._base import NArrayMixinMemory

__all__ = [
    NArrayMixinMemory.__name__,
]
