"""JPEG decoder backed by OpenCV.

There is no JPEG encoder: output is limited to GIF and PNG.
"""

from __future__ import annotations

import logging

import numpy as np

from pyimgcodec.errors import DecodeError
from pyimgcodec.formats import ImageFormat
from pyimgcodec.image import RGBAImage

from ._io import Source, check_dimensions, describe_source, read_all

logger = logging.getLogger(__name__)

SOI_MARKER = b"\xff\xd8"
EOI_MARKER = b"\xff\xd9"


def _to_rgba(cv2, decoded: np.ndarray) -> np.ndarray:
    if decoded.ndim == 2:
        return cv2.cvtColor(decoded, cv2.COLOR_GRAY2RGBA)
    channels = int(decoded.shape[2])
    if channels == 1:
        return cv2.cvtColor(decoded, cv2.COLOR_GRAY2RGBA)
    if channels == 3:
        return cv2.cvtColor(decoded, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGBA)
    raise DecodeError(ImageFormat.JPEG, f"unsupported channel count: {channels}")


def decode_jpeg(source: Source, *, max_pixels: int | None = None) -> RGBAImage:
    """Decode a JPEG into RGBA.

    JPEG carries no alpha channel; every pixel gets alpha 255. EXIF
    orientation is not applied so the result keeps the header dimensions.
    """

    import cv2

    payload = read_all(source)
    name = describe_source(source)
    if not payload:
        raise DecodeError(ImageFormat.JPEG, f"{name} is empty")
    if not payload.startswith(SOI_MARKER):
        raise DecodeError(ImageFormat.JPEG, f"{name} does not start with a JPEG SOI marker")
    # libjpeg pads truncated scans with gray instead of failing. Only zero
    # padding may follow the EOI marker; an FF D9 pair inside a COM segment or
    # an EXIF thumbnail does not count.
    if not payload.rstrip(b"\x00").endswith(EOI_MARKER):
        raise DecodeError(ImageFormat.JPEG, f"{name} is truncated (no EOI marker)")

    try:
        decoded = cv2.imdecode(np.frombuffer(payload, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    except cv2.error as exc:
        raise DecodeError(ImageFormat.JPEG, f"unable to decode {name}: {exc}") from exc
    if decoded is None:
        raise DecodeError(ImageFormat.JPEG, f"unable to decode {name}")
    if decoded.dtype != np.uint8:
        raise DecodeError(ImageFormat.JPEG, f"unsupported sample type {decoded.dtype} in {name}")

    height, width = int(decoded.shape[0]), int(decoded.shape[1])
    check_dimensions(ImageFormat.JPEG, width, height, max_pixels=max_pixels)

    rgba = _to_rgba(cv2, decoded)
    out = RGBAImage(width=width, height=height, data=np.ascontiguousarray(rgba).tobytes())
    logger.debug("decoded jpeg %dx%d from %s", width, height, name)
    return out
