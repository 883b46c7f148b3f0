"""
Real-domain implementations of the elementwise unary methods.

Registers NumPy-ufunc control paths for ``NumericDomain.REAL`` arrays.
Integral and boolean inputs are evaluated in ``float64``; floating inputs
keep their type. Floating point exceptions are silenced so that domain
errors produce ``nan`` or ``inf``.
"""

from typing import Callable, Dict

import numpy as np

from ..._narray_control import narray_control_path_manager

from .....domain._dtype import NumericDomain
from .....domain._narray import INArray

from ._base import NArrayMixinUnary as NMU


def _apply_ufunc(self: INArray, ufunc: Callable[[np.ndarray], np.ndarray]) -> INArray:
    data = self.to_numpy()
    if self.dtype.is_integral:
        data = data.astype(np.float64)
    with np.errstate(all="ignore"):
        out = ufunc(data)
    return self._new_from_numpy(np.asarray(out).reshape(self.shape))


_FLOATING_UFUNCS: Dict[Callable, Callable[[np.ndarray], np.ndarray]] = {
    NMU.exp: np.exp,
    NMU.log: np.log,
    NMU.log10: np.log10,
    NMU.sqrt: np.sqrt,
    NMU.sin: np.sin,
    NMU.cos: np.cos,
    NMU.tan: np.tan,
    NMU.asin: np.arcsin,
    NMU.acos: np.arccos,
    NMU.atan: np.arctan,
    NMU.sinh: np.sinh,
    NMU.cosh: np.cosh,
    NMU.tanh: np.tanh,
    NMU.asinh: np.arcsinh,
    NMU.acosh: np.arccosh,
    NMU.atanh: np.arctanh,
    NMU.angle: np.angle,
}


def _register_floating(method: Callable, ufunc: Callable[[np.ndarray], np.ndarray]) -> None:
    @narray_control_path_manager(NMU, method, NumericDomain.REAL)
    def narray_unary_real(self: INArray) -> INArray:
        return _apply_ufunc(self, ufunc)

    narray_unary_real.__name__ = f"narray_{method.__name__}_real"


for _method, _ufunc in _FLOATING_UFUNCS.items():
    _register_floating(_method, _ufunc)


@narray_control_path_manager(NMU, NMU.absolute, NumericDomain.REAL)
def narray_absolute_real(self: INArray) -> INArray:
    """Magnitude of real elements; the element type is kept."""
    return self._new_from_numpy(np.absolute(self.to_numpy()))


@narray_control_path_manager(NMU, NMU.conj, NumericDomain.REAL)
def narray_conj_real(self: INArray) -> INArray:
    return self.deepcopy()


@narray_control_path_manager(NMU, NMU.real, NumericDomain.REAL)
def narray_real_real(self: INArray) -> INArray:
    return self.deepcopy()


@narray_control_path_manager(NMU, NMU.imag, NumericDomain.REAL)
def narray_imag_real(self: INArray) -> INArray:
    return self._new_from_numpy(np.zeros_like(self.to_numpy()))
