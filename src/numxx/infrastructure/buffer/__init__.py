from ._buffer import Buffer

__all__ = [Buffer.__name__]
