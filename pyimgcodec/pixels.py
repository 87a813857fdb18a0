"""Pixel-layout fixups from native decoder layouts into interleaved RGBA.

Each helper does a single forward pass: the output buffer is allocated once
at its final size and the source samples are scattered into it.
"""

from __future__ import annotations

import numpy as np

OPAQUE = 255


def _as_pixels(data: bytes, *, width: int, height: int, channels: int) -> np.ndarray:
    expected = int(width) * int(height) * channels
    if len(data) != expected:
        raise ValueError(
            f"Expected {expected} bytes for {width}x{height} with {channels} channel(s), "
            f"got {len(data)}"
        )
    return np.frombuffer(data, dtype=np.uint8).reshape(-1, channels)


def rgb_to_rgba(data: bytes, *, width: int, height: int) -> bytes:
    """Insert an opaque alpha byte after every ``R, G, B`` triplet."""

    rgb = _as_pixels(data, width=width, height=height, channels=3)
    out = np.full((rgb.shape[0], 4), OPAQUE, dtype=np.uint8)
    out[:, :3] = rgb
    return out.tobytes()


def gray_to_rgba(data: bytes, *, width: int, height: int) -> bytes:
    """Replicate each luminance sample into R, G and B; alpha is opaque."""

    gray = _as_pixels(data, width=width, height=height, channels=1)
    out = np.full((gray.shape[0], 4), OPAQUE, dtype=np.uint8)
    out[:, :3] = gray
    return out.tobytes()


def gray_alpha_to_rgba(data: bytes, *, width: int, height: int) -> bytes:
    """Expand ``L, A`` pairs into ``L, L, L, A``."""

    la = _as_pixels(data, width=width, height=height, channels=2)
    out = np.empty((la.shape[0], 4), dtype=np.uint8)
    out[:, :3] = la[:, :1]
    out[:, 3] = la[:, 1]
    return out.tobytes()
