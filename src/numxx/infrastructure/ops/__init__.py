from .creation import arange, empty, full, identity, linspace, ones, zeros
from . import linalg
from .linalg import det, get_minor_matrix
from .vecops import cross, dot, hadamard, matmul, vdot
from . import functions

__all__ = [
    "arange",
    "empty",
    "full",
    "identity",
    "linspace",
    "ones",
    "zeros",
    "det",
    "get_minor_matrix",
    "cross",
    "dot",
    "hadamard",
    "matmul",
    "vdot",
    "functions",
    "linalg",
]
