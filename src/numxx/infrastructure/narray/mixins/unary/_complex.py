"""
Complex-domain implementations of the elementwise unary methods.

Registers control paths for ``NumericDomain.COMPLEX`` arrays. Each element
is evaluated with the scalar closed forms of ``numxx.domain._complex_math``
(the same code :class:`Complex` uses), then stored back in the array's
element type, or in its component type for magnitude, phase and component
accessors.
"""

from typing import Any, Callable, Dict

import numpy as np

from ..._narray_control import narray_control_path_manager
from ...._numpy_types import to_numpy_dtype

from .....domain import _complex_math as cm
from .....domain._dtype import NumericDomain
from .....domain._narray import INArray

from ._base import NArrayMixinUnary as NMU


def _map_elements(self: INArray, fn: Callable[[complex], Any], *, to_component: bool) -> INArray:
    out_dtype = self.dtype.component if to_component else self.dtype
    convert = float if to_component else complex
    values = [convert(fn(z)) for z in self.get_data().tolist()]
    out = np.array(values, dtype=to_numpy_dtype(out_dtype))
    return self._new_from_numpy(out.reshape(self.shape))


_COMPLEX_VALUED: Dict[Callable, Callable[[Any], Any]] = {
    NMU.exp: cm.exp,
    NMU.log: cm.log,
    NMU.log10: cm.log10,
    NMU.sqrt: cm.sqrt,
    NMU.sin: cm.sin,
    NMU.cos: cm.cos,
    NMU.tan: cm.tan,
    NMU.asin: cm.asin,
    NMU.acos: cm.acos,
    NMU.atan: cm.atan,
    NMU.sinh: cm.sinh,
    NMU.cosh: cm.cosh,
    NMU.tanh: cm.tanh,
    NMU.asinh: cm.asinh,
    NMU.acosh: cm.acosh,
    NMU.atanh: cm.atanh,
    NMU.conj: cm.conj,
}

_REAL_VALUED: Dict[Callable, Callable[[Any], Any]] = {
    NMU.absolute: cm.absolute,
    NMU.angle: cm.arg,
    NMU.real: cm.real,
    NMU.imag: cm.imag,
}


def _register(method: Callable, fn: Callable[[Any], Any], to_component: bool) -> None:
    @narray_control_path_manager(NMU, method, NumericDomain.COMPLEX)
    def narray_unary_complex(self: INArray) -> INArray:
        return _map_elements(self, fn, to_component=to_component)

    narray_unary_complex.__name__ = f"narray_{method.__name__}_complex"


for _method, _fn in _COMPLEX_VALUED.items():
    _register(_method, _fn, to_component=False)

for _method, _fn in _REAL_VALUED.items():
    _register(_method, _fn, to_component=True)
