"""Per-format decoders and encoders.

Every decoder accepts a path or an open binary handle and returns an
:class:`~pyimgcodec.image.RGBAImage`. Encoders exist for GIF and PNG only.
"""

from __future__ import annotations

from .gif import decode_gif, encode_gif
from .jpeg import decode_jpeg
from .png import decode_png, encode_png

__all__ = [
    "decode_gif",
    "decode_jpeg",
    "decode_png",
    "encode_gif",
    "encode_png",
]
