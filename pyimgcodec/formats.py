from __future__ import annotations

from enum import Enum


class ImageFormat(str, Enum):
    """On-disk encodings understood by the codec layer."""

    GIF = "gif"
    PNG = "png"
    JPEG = "jpeg"


_ALIASES = {
    "jpg": ImageFormat.JPEG,
}


def parse_image_format(raw: str | ImageFormat) -> ImageFormat:
    """Resolve a user-supplied tag. Never guesses from file names or content."""

    if isinstance(raw, ImageFormat):
        return raw
    key = str(raw).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return ImageFormat(key)
    except Exception as exc:  # noqa: BLE001 - value validation helper
        choices = ", ".join(f.value for f in ImageFormat)
        raise ValueError(f"Unknown image format: {raw!r}. Choose from: {choices}.") from exc
