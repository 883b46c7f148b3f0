"""
Plain-text persistence for arrays.

Two formats are supported:

Array format
    Written by :func:`save_narray`. The first line is the marker
    ``ARRAY_FILE_MARKER``, the second line holds the whitespace-separated
    extents and the third line the whitespace-separated elements in
    row-major order. Complex elements are written as ``re+imj``.

Delimited text
    One row per line, elements separated by a delimiter. Loaders produce a
    rank-1 array for a single row and a rank-2 array otherwise; writers
    accept arrays of rank at most 2.

Every failure to open a file is reported as :class:`ArgumentError` chained
from the underlying ``OSError``.
"""

from __future__ import annotations

import os
import warnings
from typing import Any, Iterable, List, Optional

import numpy as np

from ...domain._complex import Complex
from ...domain._dtype import DType
from ...domain._errors import ArgumentError, ArrayValueError, ShapeError
from ...domain._shape import Shape
from .._config import ARRAY_FILE_MARKER, get_default_dtype
from .._numpy_types import as_dtype, to_numpy_dtype
from ..narray import NArray


def _read_lines(path: str) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except OSError as err:
        raise ArgumentError(f'Error opening file "{path}".') from err


def _write_lines(path: str, lines: Iterable[str]) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as err:
        raise ArgumentError(f'Error opening file "{path}".') from err


def _parse_token(token: str, dtype: DType) -> Any:
    try:
        if dtype.is_complex:
            return complex(token)
        if dtype.is_bool:
            if token in ("True", "False"):
                return token == "True"
            return bool(float(token))
        if dtype.is_integral:
            try:
                return int(token)
            except ValueError:
                return int(float(token))
        return float(token)
    except ValueError:
        raise ArrayValueError(
            f"Cannot parse {token!r} as a {dtype} element."
        ) from None


def _format_value(value: Any) -> str:
    if isinstance(value, Complex):
        return f"{value.real!r}{value.imag:+}j"
    return str(value)


# ----------------------------
# Array format
# ----------------------------
def save_narray(path: str, arr: Any) -> None:
    """
    Save ``arr`` in the array format.

    Parameters
    ----------
    path : str
        Destination file; overwritten if it exists.
    arr : NArray or Matrix
        Array to save; its shape is stored alongside the data.

    Raises
    ------
    ArgumentError
        If the file cannot be opened for writing.
    """
    arr = arr if isinstance(arr, NArray) else NArray(arr)
    _write_lines(
        path,
        [
            ARRAY_FILE_MARKER,
            " ".join(str(d) for d in arr.shape),
            " ".join(_format_value(v) for v in arr.get_data_as_vector()),
        ],
    )


def read_narray(path: str, dtype: Any = None) -> NArray:
    """
    Read a file written by :func:`save_narray`.

    Elements missing from the data line are left at zero and reported with a
    ``RuntimeWarning``; extra elements are ignored.

    Raises
    ------
    ArgumentError
        If the file cannot be opened.
    ArrayValueError
        If the marker line is missing or an element cannot be parsed.
    """
    lines = _read_lines(path)
    if not lines or lines[0].strip() != ARRAY_FILE_MARKER:
        raise ArrayValueError(f'"{path}" is not an array file (missing marker line).')

    target = as_dtype(dtype) or get_default_dtype()
    dims = [int(tok) for tok in lines[1].split()] if len(lines) > 1 else []
    shape = Shape(dims)

    tokens = lines[2].split() if len(lines) > 2 else []
    values = [_parse_token(tok, target) for tok in tokens[: shape.total_size]]

    data = np.zeros(shape.total_size, dtype=to_numpy_dtype(target))
    data[: len(values)] = values
    if len(values) != shape.total_size:
        warnings.warn(
            f"Expected {shape.total_size} elements, but found {len(values)} "
            f'in "{path}".',
            RuntimeWarning,
            stacklevel=2,
        )
    return NArray.from_numpy(data.reshape(shape.dimensions), copy=False)


# ----------------------------
# Delimited text
# ----------------------------
def _load_delimited(
    path: str, delimiter: str, skip: bool, dtype: Any
) -> NArray:
    target = as_dtype(dtype) or get_default_dtype()
    rows: List[List[Any]] = []
    width: Optional[int] = None

    for lineno, line in enumerate(_read_lines(path), start=1):
        tokens = [tok for tok in line.split(delimiter) if tok.strip()]
        if width is not None and len(tokens) != width:
            if not skip:
                raise ShapeError(
                    "The input data is inconsistent. "
                    f'Please check line {lineno} in "{path}".'
                )
            warnings.warn(f"Skipping line {lineno}.", RuntimeWarning, stacklevel=3)
            continue
        width = len(tokens)
        rows.append([_parse_token(tok.strip(), target) for tok in tokens])

    npdt = to_numpy_dtype(target)
    if len(rows) == 1:
        return NArray.from_numpy(np.array(rows[0], dtype=npdt), copy=False)
    data = np.array(rows, dtype=npdt).reshape(len(rows), width or 0)
    return NArray.from_numpy(data, copy=False)


def loadtxt(
    path: str, delimiter: str = " ", skip: bool = False, dtype: Any = None
) -> NArray:
    """
    Load a delimited text file.

    Empty tokens are ignored. Every line must hold as many elements as the
    first one.

    Parameters
    ----------
    path : str
        Source file.
    delimiter : str, optional
        Element separator.
    skip : bool, optional
        Drop inconsistent lines (with a ``RuntimeWarning``) instead of
        raising.
    dtype : optional
        Element type; defaults to the configured default type.

    Raises
    ------
    ArgumentError
        If the file cannot be opened.
    ShapeError
        If a line has a different number of elements and ``skip`` is False.
    ArrayValueError
        If an element cannot be parsed.
    """
    return _load_delimited(path, delimiter, skip, dtype)


def loadcsv(
    path: str, delimiter: str = ",", skip: bool = False, dtype: Any = None
) -> NArray:
    """Load a comma-separated file; see :func:`loadtxt`."""
    return _load_delimited(path, delimiter, skip, dtype)


def _has_marker(path: str) -> bool:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.readline().rstrip("\r\n") == ARRAY_FILE_MARKER
    except OSError as err:
        raise ArgumentError(f'Error opening file "{path}".') from err


def load_from_file(
    path: str, delimiter: str = " ", skip: bool = False, dtype: Any = None
) -> NArray:
    """
    Load an array, choosing the format from the file.

    Files starting with the array marker use the array format. Otherwise a
    ``.csv`` extension selects :func:`loadcsv` and ``.txt`` (or no
    extension) selects :func:`loadtxt` with ``delimiter``.

    Raises
    ------
    ArgumentError
        If the file cannot be opened, or if a file with any other extension
        cannot be parsed as delimited text.
    """
    if _has_marker(path):
        return read_narray(path, dtype=dtype)

    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        return loadcsv(path, skip=skip, dtype=dtype)
    if ext in ("", ".txt"):
        return loadtxt(path, delimiter=delimiter, skip=skip, dtype=dtype)
    try:
        return _load_delimited(path, delimiter, skip, dtype)
    except (ShapeError, ArrayValueError) as err:
        raise ArgumentError(f'Please check formatting of "{path}".') from err


def save_to_file(path: str, arr: Any, delimiter: str = " ") -> None:
    """
    Save an array of rank at most 2 as delimited text, one row per line.

    Raises
    ------
    ShapeError
        If ``arr`` has more than two dimensions.
    ArgumentError
        If the file cannot be opened for writing.
    """
    arr = arr.as_narray() if hasattr(arr, "as_narray") else arr
    arr = arr if isinstance(arr, NArray) else NArray(arr)
    if arr.ndim > 2:
        raise ShapeError(
            f"Cannot write an array of shape {arr.get_shape()} to a text file; "
            "arrays must have at most 2 dimensions. Use save_narray() or "
            "reshape the array first."
        )
    if arr.ndim == 2:
        lines = [
            delimiter.join(_format_value(v) for v in row.get_data_as_vector())
            for row in arr
        ]
    else:
        lines = [delimiter.join(_format_value(v) for v in arr.get_data_as_vector())]
    _write_lines(path, lines)


def savetxt(path: str, arr: Any, delimiter: str = " ") -> None:
    save_to_file(path, arr, delimiter)


def savecsv(path: str, arr: Any, delimiter: str = ",") -> None:
    save_to_file(path, arr, delimiter)
