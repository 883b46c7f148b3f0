"""
NumXX: N-dimensional arrays over shared, reference-counted buffers.

The public API is re-exported here::

    import numxx as nx

    a = nx.NArray([[1, 2], [3, 4]])
    b = a[0]            # view sharing a's buffer
    m = nx.Matrix(a)
    m * m               # matrix product
    a * a               # elementwise product
"""

from .domain import (
    ArgumentError,
    ArrayIndexError,
    ArrayValueError,
    Complex,
    ConversionError,
    DType,
    MatmulType,
    NumericDomain,
    NumxxError,
    Shape,
    ShapeError,
    j,
    promote_types,
    result_type,
)
from .domain._constants import e, inf, pi
from .infrastructure import Buffer, Matrix, NArray, RandomContext
from .infrastructure._config import get_default_dtype
from .infrastructure.io import (
    load_from_file,
    loadcsv,
    loadtxt,
    read_narray,
    save_narray,
    save_to_file,
    savecsv,
    savetxt,
)
from .infrastructure.ops import (
    arange,
    cross,
    det,
    dot,
    empty,
    full,
    get_minor_matrix,
    hadamard,
    identity,
    linalg,
    linspace,
    matmul,
    ones,
    vdot,
    zeros,
)
from .infrastructure.ops.functions import (
    abs,
    absolute,
    acos,
    acosh,
    angle,
    arg,
    asin,
    asinh,
    atan,
    atanh,
    conj,
    cos,
    cosh,
    diff,
    exp,
    imag,
    isinf,
    log,
    log10,
    mean,
    pow,
    power,
    real,
    sin,
    sinh,
    sqrt,
    sum,
    tan,
    tanh,
)
from .domain._complex_math import polar

__version__ = "0.1.0a0"
