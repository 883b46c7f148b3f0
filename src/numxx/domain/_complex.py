"""
Immutable complex number type usable as an array element.

:class:`Complex` interoperates with built-in ``complex`` and real scalars on
either side of every arithmetic operator. Components keep Python's own
arithmetic promotion (``int`` components stay ``int`` under ``+``/``-``/``*``,
``/`` always produces ``float`` components).

Ordering operators compare magnitudes, not components:
``Complex(3, 4) < Complex(0, 6)`` evaluates ``5 < 6``.
"""

from __future__ import annotations

import math
from numbers import Complex as _ComplexNumber
from numbers import Real
from typing import Any, Tuple, Union

Number = Union[int, float, complex, "Complex"]


def _components(value: Any) -> Tuple[Any, Any] | None:
    """Return ``(real, imag)`` for any supported number, else ``None``."""
    if isinstance(value, Complex):
        return value._real, value._imag
    if isinstance(value, Real):
        return value, 0
    if isinstance(value, _ComplexNumber):
        return value.real, value.imag
    return None


def _magnitude(value: Any) -> float | None:
    if isinstance(value, Complex):
        return value.abs()
    if isinstance(value, (Real, _ComplexNumber)):
        return abs(value)
    return None


class Complex:
    """
    Complex number ``real + imag*j`` with real-valued components.

    Parameters
    ----------
    real : Real or complex or Complex, optional
        Real part, or a complex value to copy when ``imag`` is omitted.
        Defaults to 0.
    imag : Real, optional
        Imaginary part. Defaults to 0.

    Raises
    ------
    TypeError
        If a component is not a real number, or if a complex ``real`` is
        combined with an explicit ``imag``.
    """

    __slots__ = ("_real", "_imag")

    def __init__(self, real: Any = 0, imag: Any = 0) -> None:
        if isinstance(real, Real) and isinstance(imag, Real):
            self._real = real
            self._imag = imag
            return
        parts = _components(real)
        if parts is None or not (isinstance(imag, Real) and imag == 0):
            raise TypeError(
                f"Complex() components must be real numbers, "
                f"got {type(real).__name__} and {type(imag).__name__}."
            )
        self._real, self._imag = parts

    @property
    def real(self) -> Any:
        return self._real

    @property
    def imag(self) -> Any:
        return self._imag

    def abs(self) -> float:
        """Magnitude, ``hypot(real, imag)``."""
        return math.hypot(self._real, self._imag)

    def arg(self) -> float:
        """Phase angle, ``atan2(imag, real)``."""
        return math.atan2(self._imag, self._real)

    def conj(self) -> "Complex":
        return Complex(self._real, -self._imag)

    # ----------------------------
    # Arithmetic
    # ----------------------------
    def __add__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Complex(self._real + parts[0], self._imag + parts[1])

    def __radd__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Complex(parts[0] + self._real, parts[1] + self._imag)

    def __sub__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Complex(self._real - parts[0], self._imag - parts[1])

    def __rsub__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Complex(parts[0] - self._real, parts[1] - self._imag)

    def __mul__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        c, d = parts
        a, b = self._real, self._imag
        return Complex(a * c - b * d, a * d + b * c)

    def __rmul__(self, other: Any) -> "Complex":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Complex._divide(self._real, self._imag, *parts)

    def __rtruediv__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Complex._divide(parts[0], parts[1], self._real, self._imag)

    @staticmethod
    def _divide(a: Any, b: Any, c: Any, d: Any) -> "Complex":
        # (a + bi)(c - di) / (c^2 + d^2)
        den = c * c + d * d
        if den == 0:
            raise ZeroDivisionError("complex division by zero")
        return Complex((a * c + b * d) / den, (b * c - a * d) / den)

    def __pow__(self, other: Any) -> "Complex":
        if _components(other) is None:
            return NotImplemented
        from ._complex_math import power

        return power(self, other)

    def __rpow__(self, other: Any) -> "Complex":
        parts = _components(other)
        if parts is None:
            return NotImplemented
        from ._complex_math import power

        return power(Complex(*parts), self)

    def __neg__(self) -> "Complex":
        return Complex(-self._real, -self._imag)

    def __pos__(self) -> "Complex":
        return Complex(self._real, self._imag)

    def __abs__(self) -> float:
        return self.abs()

    # ----------------------------
    # Comparison
    # ----------------------------
    def __eq__(self, other: object) -> bool:
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return self._real == parts[0] and self._imag == parts[1]

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __lt__(self, other: Any) -> bool:
        mag = _magnitude(other)
        return NotImplemented if mag is None else self.abs() < mag

    def __le__(self, other: Any) -> bool:
        mag = _magnitude(other)
        return NotImplemented if mag is None else self.abs() <= mag

    def __gt__(self, other: Any) -> bool:
        mag = _magnitude(other)
        return NotImplemented if mag is None else self.abs() > mag

    def __ge__(self, other: Any) -> bool:
        mag = _magnitude(other)
        return NotImplemented if mag is None else self.abs() >= mag

    def __hash__(self) -> int:
        # Equal to hash() of the equivalent built-in complex (and real).
        return hash(complex(self._real, self._imag))

    # ----------------------------
    # Conversion
    # ----------------------------
    def __complex__(self) -> complex:
        return complex(self._real, self._imag)

    def __bool__(self) -> bool:
        return bool(self._real) or bool(self._imag)

    def __repr__(self) -> str:
        return f"Complex({self._real!r}, {self._imag!r})"

    def __str__(self) -> str:
        if self._imag < 0:
            return f"{self._real} - {-self._imag}j"
        return f"{self._real} + {self._imag}j"


j = Complex(0.0, 1.0)
"""Imaginary unit."""
