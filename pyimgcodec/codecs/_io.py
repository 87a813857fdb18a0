"""File handling shared by the format codecs."""

from __future__ import annotations

import contextlib
import logging
import os
import struct
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from PIL import Image

from pyimgcodec.errors import CodecIOError, DecodeError
from pyimgcodec.formats import ImageFormat

logger = logging.getLogger(__name__)

Source = Union[str, os.PathLike, BinaryIO]

# Everything Pillow raises for unreadable, truncated or oversized streams.
PILLOW_DECODE_ERRORS = (
    OSError,
    SyntaxError,
    EOFError,
    ValueError,
    IndexError,
    TypeError,
    struct.error,
    Image.DecompressionBombError,
)

PILLOW_ENCODE_ERRORS = (OSError, ValueError, struct.error)


def describe_source(source: Source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return str(getattr(source, "name", "<stream>"))


@contextlib.contextmanager
def open_source(source: Source) -> Iterator[BinaryIO]:
    """Yield a readable binary handle for ``source``.

    Paths are opened here and closed on every exit path; handles passed in by
    the caller are used as-is and left open.
    """

    if not isinstance(source, (str, os.PathLike)):
        yield source
        return

    try:
        fp = open(source, "rb")
    except OSError as exc:
        raise CodecIOError(f"Unable to open image: {os.fspath(source)}: {exc}", path=source) from exc
    with fp:
        yield fp


def read_all(source: Source) -> bytes:
    with open_source(source) as fp:
        try:
            return fp.read()
        except OSError as exc:
            raise CodecIOError(
                f"Unable to read image: {describe_source(source)}: {exc}",
                path=source if isinstance(source, (str, os.PathLike)) else None,
            ) from exc


def check_dimensions(
    image_format: ImageFormat,
    width: int,
    height: int,
    *,
    max_pixels: int | None,
) -> None:
    if width <= 0 or height <= 0:
        raise DecodeError(image_format, f"image has no pixel data ({width}x{height})")
    if max_pixels is not None and width * height > int(max_pixels):
        raise DecodeError(
            image_format,
            f"image of {width}x{height} exceeds max_pixels={int(max_pixels)}",
        )


@contextlib.contextmanager
def atomic_output(destination: str | os.PathLike) -> Iterator[BinaryIO]:
    """Open a temporary sibling of ``destination`` and move it into place on success.

    On failure the temporary file is removed and ``destination`` keeps its
    previous content (or stays absent).
    """

    out_path = Path(destination)
    tmp_path = out_path.with_name(out_path.name + ".tmp")
    try:
        with tmp_path.open("wb") as f:
            yield f
        os.replace(tmp_path, out_path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise
    logger.debug("wrote %s", out_path)
