"""pyimgcodec - GIF / PNG / JPEG codec adapter around one canonical RGBA buffer.

Keep top-level imports lightweight: the codec backends (Pillow, OpenCV) are
only imported when a decoder or encoder is first used.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    # Modules
    "codecs",
    "config",
    "pixels",
    # Data model
    "ImageFormat",
    "RGBAImage",
    "parse_image_format",
    # Errors
    "CodecError",
    "CodecIOError",
    "DecodeError",
    # Operations
    "decode",
    "decode_gif",
    "decode_jpeg",
    "decode_png",
    "encode_gif",
    "encode_png",
]


_LAZY_SUBMODULES = {
    "codecs",
    "config",
    "pixels",
}

_LAZY_EXPORTS = {
    "ImageFormat": ("formats", "ImageFormat"),
    "parse_image_format": ("formats", "parse_image_format"),
    "RGBAImage": ("image", "RGBAImage"),
    "CodecError": ("errors", "CodecError"),
    "CodecIOError": ("errors", "CodecIOError"),
    "DecodeError": ("errors", "DecodeError"),
    "decode": ("dispatch", "decode"),
    "decode_gif": ("codecs", "decode_gif"),
    "decode_jpeg": ("codecs", "decode_jpeg"),
    "decode_png": ("codecs", "decode_png"),
    "encode_gif": ("codecs", "encode_gif"),
    "encode_png": ("codecs", "encode_png"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin delegation
    if name in _LAZY_SUBMODULES:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    target = _LAZY_EXPORTS.get(name)
    if target is not None:
        module_name, attr = target
        module = import_module(f"{__name__}.{module_name}")
        value = getattr(module, attr)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
