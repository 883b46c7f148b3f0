"""
Rank-tagged builder for nested array input.

:class:`NestedBuilder` turns arbitrarily nested sequences (lists, tuples,
iterators, NumPy arrays, other arrays) into a flat value list plus a shape
and an inferred element type. The whole input is validated before anything
is allocated:

1. every iterable node is materialized (so iterators are consumed once),
2. every node is tagged with its rank and sub-shape,
3. sibling nodes must carry identical sub-shapes, otherwise the input is
   jagged and construction fails with :class:`ArrayValueError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

import numpy as np

from ...domain._dtype import DType, common_type
from ...domain._errors import ArrayValueError
from .._numpy_types import from_numpy_dtype, is_scalar, scalar_dtype


@dataclass
class _Node:
    """A materialized input node tagged with its shape."""

    shape: Tuple[int, ...]
    value: Any
    children: List["_Node"]
    leaf_kind: str  # "scalar", "array" or "" for sequences


@dataclass(frozen=True)
class BuildResult:
    """Validated nested input, ready to be copied into a buffer."""

    shape: Tuple[int, ...]
    values: np.ndarray
    dtype: DType


class NestedBuilder:
    """
    Validate and flatten nested array input.

    Examples
    --------
    >>> NestedBuilder().build([[1, 2], [3, 4]]).shape
    (2, 2)
    """

    def build(self, data: Any) -> BuildResult:
        """
        Validate ``data`` and return its shape, flat values and element type.

        Raises
        ------
        ArrayValueError
            If the input is empty, jagged, or contains non-numeric leaves.
        """
        root = self._tag(data, depth=0)
        dtypes: List[DType] = []
        chunks: List[np.ndarray] = []
        scalars: List[Any] = []
        self._collect(root, dtypes, chunks, scalars)

        dtype = common_type(*dtypes)
        npdt = np.dtype(dtype.value)
        if scalars:
            chunks.append(np.array(scalars, dtype=npdt))
        if len(chunks) == 1:
            values = chunks[0].astype(npdt, copy=False)
        else:
            values = np.concatenate([c.astype(npdt, copy=False) for c in chunks])
        return BuildResult(root.shape, values, dtype)

    # ----------------------------
    # Tagging
    # ----------------------------
    def _tag(self, node: Any, depth: int) -> _Node:
        if is_scalar(node):
            return _Node((), node, [], "scalar")
        if hasattr(node, "as_narray"):
            node = node.as_narray()
        if hasattr(node, "get_data") and hasattr(node, "numeric_domain"):
            return _Node(tuple(node.shape), node.get_data(), [], "array")
        if isinstance(node, np.ndarray):
            return _Node(tuple(node.shape), node.reshape(-1), [], "array")
        if isinstance(node, (str, bytes)):
            raise ArrayValueError(
                f"Cannot build an array from text input {node!r}."
            )
        try:
            items = list(node)
        except TypeError:
            raise ArrayValueError(
                f"Unsupported array element of type {type(node).__name__!r}."
            ) from None
        if not items:
            raise ArrayValueError("Cannot build an array from an empty sequence.")

        children = [self._tag(item, depth + 1) for item in items]
        sub_shape = children[0].shape
        for child in children[1:]:
            if child.shape != sub_shape:
                raise ArrayValueError(
                    f"Jagged nested input at depth {depth}: sub-shapes "
                    f"{sub_shape} and {child.shape} differ."
                )
        return _Node((len(children),) + sub_shape, None, children, "")

    # ----------------------------
    # Flattening
    # ----------------------------
    def _collect(
        self,
        node: _Node,
        dtypes: List[DType],
        chunks: List[np.ndarray],
        scalars: List[Any],
    ) -> None:
        if node.leaf_kind == "scalar":
            dtypes.append(scalar_dtype(node.value))
            value = node.value
            scalars.append(complex(value) if dtypes[-1].is_complex else value)
            return
        if node.leaf_kind == "array":
            if scalars:
                chunks.append(np.array(scalars, dtype=object))
                scalars.clear()
            dtypes.append(from_numpy_dtype(node.value.dtype))
            chunks.append(np.asarray(node.value))
            return
        for child in node.children:
            self._collect(child, dtypes, chunks, scalars)
