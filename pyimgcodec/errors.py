"""Error taxonomy shared by every decoder and encoder.

Library-specific exceptions (Pillow, OpenCV, ``struct``) never leave this
package: codecs wrap them into one of the types below and chain the original
via ``raise ... from``.
"""

from __future__ import annotations

import os

from .formats import ImageFormat


class CodecError(Exception):
    """Base class for all codec failures."""


class DecodeError(CodecError):
    """The format parser rejected the byte stream, or no frame was found.

    Attributes:
        image_format: Format tag the stream was decoded as.
        message: Human-readable error description.
    """

    def __init__(self, image_format: ImageFormat, message: str):
        super().__init__(f"{ImageFormat(image_format).value}: {message}")
        self.image_format = ImageFormat(image_format)
        self.message = message


class CodecIOError(CodecError):
    """A file could not be opened, created, read or written.

    Writer-side rejections (bad header parameters, unsupported dimensions) are
    reported through this type as well.
    """

    def __init__(self, message: str, path: str | os.PathLike | None = None):
        super().__init__(message)
        self.path = None if path is None else os.fspath(path)
