"""PNG codec backed by Pillow.

Decoding normalises every 8-bit colour type to RGBA:

- RGB: alpha 255 inserted after each pixel
- L / LA: luminance replicated into R, G and B
- P / PA / 1: palette (and ``tRNS``) expanded by Pillow
- RGBA: passed through

Samples wider than 8 bits (Pillow modes ``I``, ``I;16*``, ``F``) are rejected.
"""

from __future__ import annotations

import logging
import os

from PIL import Image

from pyimgcodec.errors import CodecIOError, DecodeError
from pyimgcodec.formats import ImageFormat
from pyimgcodec.image import RGBAImage
from pyimgcodec.pixels import gray_alpha_to_rgba, gray_to_rgba, rgb_to_rgba

from ._io import (
    PILLOW_DECODE_ERRORS,
    PILLOW_ENCODE_ERRORS,
    Source,
    atomic_output,
    check_dimensions,
    describe_source,
    open_source,
)

logger = logging.getLogger(__name__)

DEFAULT_COMPRESS_LEVEL = 6

_FIXUPS = {
    "RGB": rgb_to_rgba,
    "L": gray_to_rgba,
    "LA": gray_alpha_to_rgba,
}
_PALETTE_MODES = ("P", "PA", "1")


def decode_png(source: Source, *, max_pixels: int | None = None) -> RGBAImage:
    """Decode a PNG into RGBA, expanding whatever 8-bit colour type it declares."""

    with open_source(source) as fp:
        try:
            with Image.open(fp, formats=["PNG"]) as im:
                width, height = im.size
                check_dimensions(ImageFormat.PNG, width, height, max_pixels=max_pixels)
                mode = im.mode
                if mode in _PALETTE_MODES:
                    raw = im.convert("RGBA").tobytes()
                    mode = "RGBA"
                elif mode == "RGBA" or mode in _FIXUPS:
                    if mode in ("RGB", "L") and "transparency" in im.info:
                        logger.warning(
                            "ignoring PNG transparency key in %s; %s pixels are decoded opaque",
                            describe_source(source),
                            mode,
                        )
                    raw = im.tobytes()
                else:
                    raise DecodeError(
                        ImageFormat.PNG, f"unsupported PNG mode {mode!r} (only 8-bit samples)"
                    )
        except PILLOW_DECODE_ERRORS as exc:
            raise DecodeError(
                ImageFormat.PNG,
                f"unable to read {describe_source(source)}: {str(exc) or type(exc).__name__}",
            ) from exc

    fixup = _FIXUPS.get(mode)
    data = raw if fixup is None else fixup(raw, width=width, height=height)
    out = RGBAImage(width=width, height=height, data=data)
    logger.debug("decoded png %dx%d (%s) from %s", width, height, mode, describe_source(source))
    return out


def encode_png(
    image: RGBAImage,
    destination: str | os.PathLike,
    *,
    compress_level: int = DEFAULT_COMPRESS_LEVEL,
) -> None:
    """Write ``image`` as an 8-bit RGBA PNG."""

    level = int(compress_level)
    if not 0 <= level <= 9:
        raise ValueError(f"compress_level must be in [0, 9], got {compress_level!r}")
    if image.width == 0 or image.height == 0:
        raise CodecIOError(f"Cannot write an empty {image.width}x{image.height} PNG", path=destination)

    canvas = Image.frombytes("RGBA", image.size, image.data)
    try:
        with atomic_output(destination) as fp:
            canvas.save(fp, format="PNG", compress_level=level)
    except PILLOW_ENCODE_ERRORS as exc:
        raise CodecIOError(
            f"Failed to write PNG to {os.fspath(destination)}: {exc}", path=destination
        ) from exc
    logger.debug("encoded png %dx%d to %s", image.width, image.height, os.fspath(destination))
