"""GIF codec (single frame) backed by Pillow."""

from __future__ import annotations

import logging
import os

from PIL import Image

from pyimgcodec.errors import CodecIOError, DecodeError
from pyimgcodec.formats import ImageFormat
from pyimgcodec.image import RGBAImage

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

# Logical screen and frame sizes are stored as unsigned 16-bit fields.
GIF_MAX_DIMENSION = 0xFFFF


def decode_gif(source: Source, *, max_pixels: int | None = None) -> RGBAImage:
    """Decode the first frame of a GIF into RGBA.

    Later frames of an animation are never read: only frame 0 is loaded and
    nothing that would scan ahead (``n_frames``, ``is_animated``) is touched.
    """

    with open_source(source) as fp:
        try:
            with Image.open(fp, formats=["GIF"]) as im:
                width, height = im.size
                check_dimensions(ImageFormat.GIF, width, height, max_pixels=max_pixels)
                # Palette lookup and transparency are applied by the conversion.
                frame = im.convert("RGBA")
        except PILLOW_DECODE_ERRORS as exc:
            raise DecodeError(
                ImageFormat.GIF,
                f"unable to read first frame of {describe_source(source)}: "
                f"{str(exc) or type(exc).__name__}",
            ) from exc

    out = RGBAImage(width=frame.width, height=frame.height, data=frame.tobytes())
    logger.debug("decoded gif %dx%d from %s", out.width, out.height, describe_source(source))
    return out


def encode_gif(image: RGBAImage, destination: str | os.PathLike) -> None:
    """Write ``image`` as a single-frame GIF89a.

    The palette is chosen by Pillow from the RGBA samples. Images wider or
    taller than 65535 pixels cannot be represented and are refused before the
    destination is touched.
    """

    if not (0 < image.width <= GIF_MAX_DIMENSION and 0 < image.height <= GIF_MAX_DIMENSION):
        raise CodecIOError(
            f"GIF dimensions must be in [1, {GIF_MAX_DIMENSION}], got {image.width}x{image.height}",
            path=destination,
        )

    canvas = Image.frombytes("RGBA", image.size, image.data)
    try:
        with atomic_output(destination) as fp:
            canvas.save(fp, format="GIF")
    except PILLOW_ENCODE_ERRORS as exc:
        raise CodecIOError(
            f"Failed to write GIF to {os.fspath(destination)}: {exc}", path=destination
        ) from exc
    logger.debug("encoded gif %dx%d to %s", image.width, image.height, os.fspath(destination))
