"""
Edge weight types.

Graphs are generic over their weight type: any NumPy integer or floating
dtype. Unreachable distances are represented by a finite sentinel,
``max / 10`` of the dtype, so that adding one edge weight (or one more
sentinel) to it can never overflow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from .exceptions import WeightTypeError

DTypeLike = Union[np.dtype, type, str]

DEFAULT_DTYPE = np.dtype(np.int64)


@dataclass(frozen=True)
class WeightType:
    """
    Numeric weight type backed by a NumPy dtype.

    Attributes:
        dtype: The NumPy dtype of weights and distances.

    Example:
        >>> wt = WeightType.of(np.int32)
        >>> int(wt.infinity)
        214748364
    """

    dtype: np.dtype

    @classmethod
    def of(cls, dtype: DTypeLike = DEFAULT_DTYPE) -> "WeightType":
        """
        Resolve a dtype-like value into a WeightType.

        Python ``int`` maps to ``int64`` and ``float`` to ``float64``.

        Raises:
            WeightTypeError: If the dtype is not an integer or floating type.
        """
        if isinstance(dtype, WeightType):
            return dtype
        try:
            resolved = np.dtype(dtype)
        except TypeError as exc:
            raise WeightTypeError(f"Cannot interpret {dtype!r} as a weight dtype") from exc
        if resolved.kind not in "iuf":
            raise WeightTypeError(
                f"Weights must be integer or floating point, got dtype {resolved}"
            )
        return cls(resolved)

    @property
    def is_integer(self) -> bool:
        return self.dtype.kind in "iu"

    @property
    def max(self) -> Any:
        if self.is_integer:
            return np.iinfo(self.dtype).max
        return np.finfo(self.dtype).max

    @property
    def infinity(self) -> Any:
        """Sentinel standing for "no path"."""
        if self.is_integer:
            return self.dtype.type(self.max // 10)
        return self.dtype.type(self.max / 10)

    @property
    def zero(self) -> Any:
        return self.dtype.type(0)

    @property
    def one(self) -> Any:
        return self.dtype.type(1)

    def cast(self, value: Any) -> Any:
        """
        Convert a Python or NumPy number to this weight type.

        Raises:
            WeightTypeError: If an integer weight type would drop a
                fractional part of ``value``.
        """
        converted = self.dtype.type(value)
        if self.is_integer and converted != value:
            raise WeightTypeError(
                f"weight {value!r} is not representable as {self.dtype} without truncation"
            )
        return converted

    def full(self, shape, fill: Any = None) -> np.ndarray:
        """Array of ``shape`` filled with ``fill`` (the sentinel by default)."""
        return np.full(shape, self.infinity if fill is None else fill, dtype=self.dtype)


def infinity_for(dtype: DTypeLike = DEFAULT_DTYPE) -> Any:
    """Return the unreachable-distance sentinel for ``dtype``."""
    return WeightType.of(dtype).infinity


def is_unreachable(distance: Any, dtype: DTypeLike = DEFAULT_DTYPE) -> Any:
    """
    Test distances against the sentinel.

    Works element-wise on arrays. Values at or above the sentinel count as
    unreachable.
    """
    return np.asarray(distance) >= WeightType.of(dtype).infinity
