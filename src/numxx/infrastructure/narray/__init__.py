from ._narray import NArray
from ._nested_builder import NestedBuilder

__all__ = [
    NArray.__name__,
    NestedBuilder.__name__,
]
