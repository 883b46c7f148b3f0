"""
Unary mixin defining elementwise math functions on arrays.

This module declares :class:`NArrayMixinUnary`, which specifies the public
API of the elementwise math methods (``exp``, ``log``, trigonometric and
hyperbolic functions, component accessors).

The mixin itself does not implement numerical kernels. Implementations for
real and complex element types are registered through the
numeric-domain control-path manager in sibling modules:

- real arrays evaluate NumPy ufuncs (integral inputs produce ``float64``);
- complex arrays evaluate the :class:`Complex` closed forms element by
  element, so array results match the scalar functions exactly.
"""

from abc import ABC

from .....domain._narray import INArray


class NArrayMixinUnary(ABC):
    """
    Abstract mixin declaring elementwise unary math methods.

    Notes
    -----
    - Every method returns a new array backed by a new buffer.
    - Domain errors on real arrays (``sqrt(-1.0)``, ``log(0.0)``) produce
      ``nan``/``-inf`` rather than raising.
    """

    # ----------------------------
    # Exponentials and logarithms
    # ----------------------------
    def exp(self: INArray) -> INArray:
        """Elementwise exponential."""
        ...

    def log(self: INArray) -> INArray:
        """Elementwise natural logarithm (principal branch for complex)."""
        ...

    def log10(self: INArray) -> INArray:
        """Elementwise base-10 logarithm."""
        ...

    def sqrt(self: INArray) -> INArray:
        """Elementwise square root (principal branch for complex)."""
        ...

    # ----------------------------
    # Trigonometric
    # ----------------------------
    def sin(self: INArray) -> INArray:
        ...

    def cos(self: INArray) -> INArray:
        ...

    def tan(self: INArray) -> INArray:
        ...

    def asin(self: INArray) -> INArray:
        ...

    def acos(self: INArray) -> INArray:
        ...

    def atan(self: INArray) -> INArray:
        ...

    # ----------------------------
    # Hyperbolic
    # ----------------------------
    def sinh(self: INArray) -> INArray:
        ...

    def cosh(self: INArray) -> INArray:
        ...

    def tanh(self: INArray) -> INArray:
        ...

    def asinh(self: INArray) -> INArray:
        ...

    def acosh(self: INArray) -> INArray:
        ...

    def atanh(self: INArray) -> INArray:
        ...

    # ----------------------------
    # Components
    # ----------------------------
    def absolute(self: INArray) -> INArray:
        """
        Elementwise magnitude.

        Real arrays keep their element type; complex arrays return their
        component type (``complex128 -> float64``).
        """
        ...

    def angle(self: INArray) -> INArray:
        """Elementwise phase angle ``atan2(imag, real)``."""
        ...

    def conj(self: INArray) -> INArray:
        """Elementwise complex conjugate (a copy for real arrays)."""
        ...

    def real(self: INArray) -> INArray:
        """Real components, in the component type."""
        ...

    def imag(self: INArray) -> INArray:
        """Imaginary components, in the component type (zeros for real arrays)."""
        ...
