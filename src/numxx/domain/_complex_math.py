"""
Scalar math functions over real and complex numbers.

Every function accepts a :class:`Complex`, a built-in ``complex`` or a real
scalar. Complex inputs (including built-in ``complex``) are evaluated with
the closed-form identities below and return :class:`Complex`; real inputs are
evaluated with :mod:`math` and keep its domain rules (``sqrt(-1.0)`` raises
``ValueError``; pass ``Complex(-1)`` for a complex root).

Closed forms, with ``z = x + iy``::

    log z    = log|z| + i arg z
    exp z    = polar(e^x, y)
    sin z    = sin x cosh y + i cos x sinh y
    cos z    = cos x cosh y - i sin x sinh y
    sinh z   = sinh x cos y + i cosh x sin y
    cosh z   = cosh x cos y + i sinh x sin y
    asinh z  = log(sqrt(z^2 + 1) + z)
    acosh z  = 2 log(sqrt((z + 1) / 2) + sqrt((z - 1) / 2))
"""

from __future__ import annotations

import math
from numbers import Complex as _ComplexNumber
from numbers import Real
from typing import Any, Union

from ._complex import Complex

Scalar = Union[int, float, complex, Complex]

_HALF_PI = 1.5707963267948966


def _as_complex(value: Any) -> Complex | None:
    """Return ``value`` as :class:`Complex` when it is complex-valued, else None."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, Real):
        return None
    if isinstance(value, _ComplexNumber):
        return Complex(value.real, value.imag)
    raise TypeError(f"Expected a number, got {type(value).__name__}.")


def _ln(x: float) -> float:
    # log of a non-negative magnitude; log(0) is -inf
    return math.log(x) if x > 0 else -math.inf


# ----------------------------
# Components
# ----------------------------
def real(z: Scalar) -> Any:
    c = _as_complex(z)
    return z if c is None else c.real


def imag(z: Scalar) -> Any:
    c = _as_complex(z)
    return 0 if c is None else c.imag


def absolute(z: Scalar) -> Any:
    """Magnitude; the absolute value for reals."""
    c = _as_complex(z)
    return abs(z) if c is None else c.abs()


def arg(z: Scalar) -> float:
    """Phase angle; 0 for non-negative reals and pi for negative reals."""
    c = _as_complex(z)
    if c is None:
        return math.atan2(0.0, z)
    return c.arg()


angle = arg


def conj(z: Scalar) -> Any:
    c = _as_complex(z)
    return z if c is None else c.conj()


def polar(rho: float, theta: float) -> Complex:
    """Complex number with magnitude ``rho`` and phase ``theta``."""
    return Complex(rho * math.cos(theta), rho * math.sin(theta))


# ----------------------------
# Exponentials and logarithms
# ----------------------------
def exp(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.exp(z)
    return polar(math.exp(c.real), c.imag)


def log(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.log(z)
    return Complex(_ln(c.abs()), c.arg())


def log10(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.log10(z)
    return log(c) / math.log(10.0)


def power(z: Scalar, n: Scalar) -> Any:
    """
    ``z`` raised to ``n``.

    For a complex base and real exponent: a zero base gives 0, a positive
    real base uses real exponentiation, anything else is
    ``polar(exp(n * Re log z), n * Im log z)``. For a complex exponent
    ``w``: ``w == 0`` gives 1, a zero base gives 0, otherwise
    ``exp(w * log z)``.
    """
    zc = _as_complex(z)
    nc = _as_complex(n)
    if zc is None and nc is None:
        return math.pow(z, n)
    if zc is None:
        zc = Complex(z)
    if nc is None:
        if zc.real == 0 and zc.imag == 0:
            return Complex(0.0, 0.0)
        if zc.imag == 0 and zc.real > 0:
            return Complex(math.pow(zc.real, n))
        lz = log(zc)
        return polar(math.exp(n * lz.real), n * lz.imag)
    if nc == 0:
        return Complex(1.0, 0.0)
    if zc == 0:
        return Complex(0.0, 0.0)
    return exp(nc * log(zc))


pow = power


def sqrt(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.sqrt(z)
    x, y = c.real, c.imag
    if x == 0:
        t = math.sqrt(abs(y) / 2)
        return Complex(t, -t if y < 0 else t)
    t = math.sqrt(2 * (c.abs() + abs(x)))
    u = t / 2
    if x > 0:
        return Complex(u, y / t)
    return Complex(abs(y) / t, -u if y < 0 else u)


# ----------------------------
# Trigonometric
# ----------------------------
def sin(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.sin(z)
    x, y = c.real, c.imag
    return Complex(math.sin(x) * math.cosh(y), math.cos(x) * math.sinh(y))


def cos(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.cos(z)
    x, y = c.real, c.imag
    return Complex(math.cos(x) * math.cosh(y), -math.sin(x) * math.sinh(y))


def tan(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.tan(z)
    return sin(c) / cos(c)


def asin(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.asin(z)
    t = asinh(Complex(-c.imag, c.real))
    return Complex(t.imag, -t.real)


def acos(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.acos(z)
    t = asin(c)
    return Complex(_HALF_PI - t.real, -t.imag)


def atan(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.atan(z)
    r2 = c.real * c.real
    x = 1.0 - r2 - c.imag * c.imag
    num = c.imag + 1.0
    den = c.imag - 1.0
    num = r2 + num * num
    den = r2 + den * den
    ratio = num / den if den else math.inf
    return Complex(0.5 * math.atan2(2.0 * c.real, x), 0.25 * _ln(ratio))


# ----------------------------
# Hyperbolic
# ----------------------------
def sinh(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.sinh(z)
    x, y = c.real, c.imag
    return Complex(math.sinh(x) * math.cos(y), math.cosh(x) * math.sin(y))


def cosh(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.cosh(z)
    x, y = c.real, c.imag
    return Complex(math.cosh(x) * math.cos(y), math.sinh(x) * math.sin(y))


def tanh(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.tanh(z)
    return sinh(c) / cosh(c)


def asinh(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.asinh(z)
    x, y = c.real, c.imag
    t = sqrt(Complex((x - y) * (x + y) + 1.0, 2.0 * x * y))
    return log(t + c)


def acosh(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.acosh(z)
    return 2.0 * log(sqrt(0.5 * (c + 1.0)) + sqrt(0.5 * (c - 1.0)))


def atanh(z: Scalar) -> Any:
    c = _as_complex(z)
    if c is None:
        return math.atanh(z)
    i2 = c.imag * c.imag
    x = 1.0 - i2 - c.real * c.real
    num = 1.0 + c.real
    den = 1.0 - c.real
    num = i2 + num * num
    den = i2 + den * den
    return Complex(
        0.25 * (_ln(num) - _ln(den)),
        0.5 * math.atan2(2.0 * c.imag, x),
    )
