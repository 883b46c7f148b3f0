"""
Elementwise math functions over arrays, matrices and scalars.

Every function accepts an :class:`NArray`, a :class:`Matrix` (the result is
a matrix again), a sequence (converted to an array) or a scalar. Scalars are
evaluated with the scalar functions of :mod:`numxx.domain._complex_math`,
so ``sqrt(Complex(-1))`` is ``Complex(0, 1)`` while ``sqrt(-1.0)`` raises
``ValueError`` like :func:`math.sqrt`.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

import numpy as np

from ...domain import _complex_math as cm
from ...domain._complex import Complex
from ...domain._narray import SupportsNArray
from .._numpy_types import is_scalar
from ..narray import NArray


def _elementwise_function(
    method_name: str, scalar_fn: Callable[[Any], Any], doc: str
) -> Callable[[Any], Any]:
    def function(x: Any) -> Any:
        if isinstance(x, SupportsNArray):
            return type(x).from_narray(getattr(x.as_narray(), method_name)())
        if isinstance(x, NArray):
            return getattr(x, method_name)()
        if is_scalar(x):
            return scalar_fn(x)
        return getattr(NArray(x), method_name)()

    function.__name__ = method_name
    function.__qualname__ = method_name
    function.__doc__ = doc
    return function


exp = _elementwise_function("exp", cm.exp, "Elementwise exponential.")
log = _elementwise_function("log", cm.log, "Elementwise natural logarithm.")
log10 = _elementwise_function("log10", cm.log10, "Elementwise base-10 logarithm.")
sqrt = _elementwise_function("sqrt", cm.sqrt, "Elementwise square root.")

sin = _elementwise_function("sin", cm.sin, "Elementwise sine.")
cos = _elementwise_function("cos", cm.cos, "Elementwise cosine.")
tan = _elementwise_function("tan", cm.tan, "Elementwise tangent.")
asin = _elementwise_function("asin", cm.asin, "Elementwise inverse sine.")
acos = _elementwise_function("acos", cm.acos, "Elementwise inverse cosine.")
atan = _elementwise_function("atan", cm.atan, "Elementwise inverse tangent.")

sinh = _elementwise_function("sinh", cm.sinh, "Elementwise hyperbolic sine.")
cosh = _elementwise_function("cosh", cm.cosh, "Elementwise hyperbolic cosine.")
tanh = _elementwise_function("tanh", cm.tanh, "Elementwise hyperbolic tangent.")
asinh = _elementwise_function("asinh", cm.asinh, "Elementwise inverse hyperbolic sine.")
acosh = _elementwise_function("acosh", cm.acosh, "Elementwise inverse hyperbolic cosine.")
atanh = _elementwise_function("atanh", cm.atanh, "Elementwise inverse hyperbolic tangent.")

absolute = _elementwise_function("absolute", cm.absolute, "Elementwise magnitude.")
angle = _elementwise_function("angle", cm.arg, "Elementwise phase angle.")
conj = _elementwise_function("conj", cm.conj, "Elementwise complex conjugate.")
real = _elementwise_function("real", cm.real, "Real components.")
imag = _elementwise_function("imag", cm.imag, "Imaginary components.")

arg = angle


def power(x: Any, n: Any) -> Any:
    """
    Elementwise ``x ** n``.

    Arrays and matrices raise every element (matrices elementwise, not as
    matrix powers); scalars use the complex-aware scalar ``power``.
    """
    if isinstance(x, SupportsNArray):
        return type(x).from_narray(x.as_narray().power(n))
    if isinstance(x, NArray):
        return x.power(n)
    if is_scalar(x) and is_scalar(n):
        return cm.power(x, n)
    if is_scalar(x):
        return NArray(n).__rpow__(x)
    return NArray(x).power(n)


def isinf(x: Any) -> Any:
    """
    Whether values are infinite.

    Complex values are infinite when either component is. Non-floating
    scalars are never infinite.
    """
    if isinstance(x, SupportsNArray):
        x = x.as_narray()
    if isinstance(x, NArray):
        return NArray.from_numpy(np.isinf(x.to_numpy()), copy=False)
    if isinstance(x, Complex):
        return math.isinf(x.real) or math.isinf(x.imag)
    if isinstance(x, (float, complex, np.floating, np.complexfloating)):
        return bool(np.isinf(x))
    return False


def sum(x: Any, axis: Optional[int] = None) -> Any:
    """Sum of elements; see :meth:`NArray.sum`."""
    if isinstance(x, SupportsNArray):
        x = x.as_narray()
    if not isinstance(x, NArray):
        x = NArray(x)
    return x.sum(axis=axis)


def mean(x: Any, axis: Optional[int] = None) -> Any:
    """Arithmetic mean; see :meth:`NArray.mean`."""
    if isinstance(x, SupportsNArray):
        x = x.as_narray()
    if not isinstance(x, NArray):
        x = NArray(x)
    return x.mean(axis=axis)


def diff(x: Any, n: int = 1, axis: int = -1) -> NArray:
    """Discrete difference; see :meth:`NArray.diff`."""
    if isinstance(x, SupportsNArray):
        x = x.as_narray()
    if not isinstance(x, NArray):
        x = NArray(x)
    return x.diff(n=n, axis=axis)


pow = power
abs = absolute

__all__ = [
    "exp", "log", "log10", "sqrt",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
    "absolute", "abs", "angle", "arg", "conj", "real", "imag",
    "power", "pow", "isinf", "sum", "mean", "diff",
]

