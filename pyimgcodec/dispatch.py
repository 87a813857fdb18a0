from __future__ import annotations

from .codecs import decode_gif, decode_jpeg, decode_png
from .codecs._io import Source
from .formats import ImageFormat, parse_image_format
from .image import RGBAImage


def decode(
    source: Source,
    image_format: str | ImageFormat,
    *,
    max_pixels: int | None = None,
) -> RGBAImage:
    """Decode ``source`` with the codec selected by ``image_format``.

    The tag is trusted as given: file contents and extensions are not
    inspected, so a mismatched tag surfaces as the chosen decoder's
    :class:`~pyimgcodec.errors.DecodeError`.

    There is intentionally no ``encode`` counterpart; call
    :func:`~pyimgcodec.codecs.encode_gif` or
    :func:`~pyimgcodec.codecs.encode_png` directly.
    """

    fmt = parse_image_format(image_format)

    if fmt is ImageFormat.GIF:
        return decode_gif(source, max_pixels=max_pixels)
    if fmt is ImageFormat.PNG:
        return decode_png(source, max_pixels=max_pixels)
    if fmt is ImageFormat.JPEG:
        return decode_jpeg(source, max_pixels=max_pixels)

    raise RuntimeError(f"Unhandled image format: {fmt}")
