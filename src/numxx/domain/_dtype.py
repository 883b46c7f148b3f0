"""
Element types and the pairwise type-promotion table.

NumXX arrays hold elements of one of seven element types. The result type of
any binary operation between two element types is read from an explicit,
enumerated table rather than inferred from a backend, so promotion behaves
identically on every platform and can be tested entry by entry.

The table follows the usual arithmetic conversions of C-family languages
(the type of ``T() + U()``):

- ``bool + bool`` widens to ``int32``; ``bool`` otherwise yields to the other
  operand.
- integers meeting a floating type become that floating type (including
  ``int64 + float32 -> float32``).
- a real operand meeting ``complex64`` stays ``complex64`` unless the real
  operand is ``float64``, which needs ``complex128``.

Python scalars carry types of their own: ``bool -> bool``, ``int -> int64``,
``float -> float64`` and ``complex -> complex128``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable

from ._errors import ArrayValueError


class NumericDomain(Enum):
    """Numeric domain of an element type; used to pick real or complex kernels."""

    REAL = "real"
    COMPLEX = "complex"


class DType(Enum):
    """
    Supported element types.

    Member values are the canonical type names, which coincide with NumPy's
    dtype names so that storage backends can map them one to one.
    """

    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    COMPLEX64 = "complex64"
    COMPLEX128 = "complex128"

    # ----------------------------
    # Classification
    # ----------------------------
    @property
    def kind(self) -> str:
        """One-letter kind code: ``b``, ``i``, ``f`` or ``c``."""
        return _KINDS[self]

    @property
    def is_bool(self) -> bool:
        return self is DType.BOOL

    @property
    def is_integral(self) -> bool:
        """True for ``bool``, ``int32`` and ``int64``."""
        return self.kind in ("b", "i")

    @property
    def is_floating(self) -> bool:
        return self.kind == "f"

    @property
    def is_complex(self) -> bool:
        return self.kind == "c"

    @property
    def numeric_domain(self) -> NumericDomain:
        return NumericDomain.COMPLEX if self.is_complex else NumericDomain.REAL

    @property
    def component(self) -> "DType":
        """
        Real component type.

        ``complex64`` has ``float32`` components and ``complex128`` has
        ``float64`` components; real types are their own component.
        """
        if self is DType.COMPLEX64:
            return DType.FLOAT32
        if self is DType.COMPLEX128:
            return DType.FLOAT64
        return self

    @property
    def python_type(self) -> type:
        """Python type used when elements are extracted as scalars."""
        return {"b": bool, "i": int, "f": float, "c": complex}[self.kind]

    # ----------------------------
    # Parsing
    # ----------------------------
    @classmethod
    def from_name(cls, name: str) -> "DType":
        """
        Resolve a type name, accepting aliases of unsupported widths.

        Parameters
        ----------
        name : str
            Canonical name (``"float64"``), Python alias (``"float"``) or the
            name of a neighbouring width (``"int16"``, ``"float16"``,
            ``"longdouble"``), which is normalized to the closest supported
            element type.

        Returns
        -------
        DType
            Resolved element type.

        Raises
        ------
        ArrayValueError
            If the name is not recognized.
        """
        key = str(name).strip().lower()
        try:
            return cls(_NAME_ALIASES.get(key, key))
        except ValueError:
            raise ArrayValueError(f"Unsupported element type {name!r}.") from None

    @classmethod
    def of_python_scalar(cls, value: Any) -> "DType":
        """
        Element type carried by a built-in Python scalar.

        Raises
        ------
        ArrayValueError
            If ``value`` is not a ``bool``, ``int``, ``float`` or ``complex``.
        """
        # bool is a subclass of int; test it first.
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT64
        if isinstance(value, float):
            return cls.FLOAT64
        if isinstance(value, complex):
            return cls.COMPLEX128
        raise ArrayValueError(
            f"Unsupported scalar type {type(value).__name__!r}."
        )

    def __str__(self) -> str:
        return self.value


_KINDS: Dict[DType, str] = {
    DType.BOOL: "b",
    DType.INT32: "i",
    DType.INT64: "i",
    DType.FLOAT32: "f",
    DType.FLOAT64: "f",
    DType.COMPLEX64: "c",
    DType.COMPLEX128: "c",
}

_NAME_ALIASES: Dict[str, str] = {
    "bool_": "bool",
    "int": "int64",
    "int8": "int32",
    "int16": "int32",
    "uint8": "int32",
    "uint16": "int32",
    "intc": "int32",
    "uint32": "int64",
    "uint64": "int64",
    "long": "int64",
    "longlong": "int64",
    "intp": "int64",
    "float": "float64",
    "double": "float64",
    "half": "float32",
    "float16": "float32",
    "single": "float32",
    "longdouble": "float64",
    "float96": "float64",
    "float128": "float64",
    "complex": "complex128",
    "csingle": "complex64",
    "cdouble": "complex128",
    "clongdouble": "complex128",
    "complex192": "complex128",
    "complex256": "complex128",
}


def _pair(a: DType, b: DType) -> FrozenSet[DType]:
    return frozenset((a, b))


_B, _I32, _I64 = DType.BOOL, DType.INT32, DType.INT64
_F32, _F64 = DType.FLOAT32, DType.FLOAT64
_C64, _C128 = DType.COMPLEX64, DType.COMPLEX128

_PROMOTION_TABLE: Dict[FrozenSet[DType], DType] = {
    _pair(_B, _B): _I32,
    _pair(_B, _I32): _I32,
    _pair(_B, _I64): _I64,
    _pair(_B, _F32): _F32,
    _pair(_B, _F64): _F64,
    _pair(_B, _C64): _C64,
    _pair(_B, _C128): _C128,
    _pair(_I32, _I32): _I32,
    _pair(_I32, _I64): _I64,
    _pair(_I32, _F32): _F32,
    _pair(_I32, _F64): _F64,
    _pair(_I32, _C64): _C64,
    _pair(_I32, _C128): _C128,
    _pair(_I64, _I64): _I64,
    _pair(_I64, _F32): _F32,
    _pair(_I64, _F64): _F64,
    _pair(_I64, _C64): _C64,
    _pair(_I64, _C128): _C128,
    _pair(_F32, _F32): _F32,
    _pair(_F32, _F64): _F64,
    _pair(_F32, _C64): _C64,
    _pair(_F32, _C128): _C128,
    _pair(_F64, _F64): _F64,
    _pair(_F64, _C64): _C128,
    _pair(_F64, _C128): _C128,
    _pair(_C64, _C64): _C64,
    _pair(_C64, _C128): _C128,
    _pair(_C128, _C128): _C128,
}


def promote_types(a: DType, b: DType) -> DType:
    """
    Result element type of a binary arithmetic operation between ``a`` and ``b``.

    The relation is symmetric: ``promote_types(a, b) == promote_types(b, a)``.
    """
    return _PROMOTION_TABLE[_pair(a, b)]


def result_type(*dtypes: DType) -> DType:
    """
    Fold :func:`promote_types` over one or more element types.

    A single argument is returned unchanged (no ``bool`` widening).

    Raises
    ------
    ArrayValueError
        If called without arguments.
    """
    if not dtypes:
        raise ArrayValueError("result_type() requires at least one element type.")
    out = dtypes[0]
    for dt in dtypes[1:]:
        out = promote_types(out, dt)
    return out


def common_type(*dtypes: DType) -> DType:
    """
    Element type able to hold values of every given type.

    Used when inferring the type of constructed data: unlike
    :func:`result_type`, identical types are kept as they are
    (``bool`` values stay ``bool``).
    """
    if not dtypes:
        raise ArrayValueError("common_type() requires at least one element type.")
    out = dtypes[0]
    for dt in dtypes[1:]:
        if dt is not out:
            out = promote_types(out, dt)
    return out


def true_division_type(a: DType, b: DType) -> DType:
    """
    Result element type of ``a / b``.

    Integral results of the promotion table become ``float64`` so that ``/``
    keeps Python's true-division meaning.
    """
    out = promote_types(a, b)
    return DType.FLOAT64 if out.is_integral else out


def promotion_table() -> Iterable[tuple[DType, DType, DType]]:
    """Yield ``(a, b, result)`` for every unordered pair of the table."""
    for key, value in _PROMOTION_TABLE.items():
        members = sorted(key, key=lambda d: list(DType).index(d))
        a = members[0]
        b = members[-1]
        yield a, b, value
