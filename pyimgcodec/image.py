"""Canonical in-memory image representation.

Every decoder produces an :class:`RGBAImage` and every encoder consumes one:

- 8-bit samples
- interleaved ``R, G, B, A`` per pixel
- row-major, no padding between rows
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any

import numpy as np

CHANNELS = 4
INT32_MAX = 2**31 - 1


def _check_dimension(value: Any, *, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {value!r}")
    try:
        out = operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{name} must be an int, got {value!r}") from exc
    if out < 0 or out > INT32_MAX:
        raise ValueError(f"{name} must be in [0, {INT32_MAX}], got {out}")
    return out


@dataclass(frozen=True)
class RGBAImage:
    """Width, height and ``width * height * 4`` bytes of RGBA samples."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        width = _check_dimension(self.width, name="width")
        height = _check_dimension(self.height, name="height")
        try:
            data = memoryview(self.data).tobytes()
        except TypeError as exc:
            raise TypeError(
                f"data must be bytes-like, got {type(self.data).__name__}"
            ) from exc
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise ValueError(
                f"RGBA buffer for {width}x{height} must hold {expected} bytes, got {len(data)}"
            )
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "data", data)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def from_array(cls, array: Any) -> "RGBAImage":
        """Build an image from an ``(H, W, 4)`` uint8 array."""

        arr = np.asarray(array)
        if arr.dtype != np.uint8:
            raise ValueError(f"Expected dtype=uint8, got {arr.dtype}")
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:
            raise ValueError(f"Expected shape (H,W,4), got {arr.shape}")
        height, width = int(arr.shape[0]), int(arr.shape[1])
        return cls(width=width, height=height, data=np.ascontiguousarray(arr).tobytes())

    def to_array(self) -> np.ndarray:
        """Return a read-only ``(H, W, 4)`` uint8 view over :attr:`data`."""

        return np.frombuffer(self.data, dtype=np.uint8).reshape(self.height, self.width, CHANNELS)
