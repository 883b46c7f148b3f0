from ._random import RandomContext

__all__ = ["RandomContext"]
