from ._base import NArrayMixinShape

__all__ = [
    NArrayMixinShape.__name__,
]
