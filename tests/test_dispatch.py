from __future__ import annotations

import io

import pytest
from PIL import Image

from pyimgcodec.dispatch import decode
from pyimgcodec.errors import CodecIOError, DecodeError
from pyimgcodec.formats import ImageFormat


def _write_samples(tmp_path):
    paths = {
        ImageFormat.GIF: tmp_path / "a.gif",
        ImageFormat.PNG: tmp_path / "a.png",
        ImageFormat.JPEG: tmp_path / "a.jpg",
    }
    Image.new("P", (7, 2)).save(paths[ImageFormat.GIF], format="GIF")
    Image.new("RGB", (7, 2), (1, 2, 3)).save(paths[ImageFormat.PNG], format="PNG")
    Image.new("RGB", (7, 2), (1, 2, 3)).save(paths[ImageFormat.JPEG], format="JPEG")
    return paths


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_decode_routes_by_tag_and_keeps_invariant(tmp_path, fmt) -> None:
    paths = _write_samples(tmp_path)

    img = decode(paths[fmt], fmt)
    assert (img.width, img.height) == (7, 2)
    assert len(img.data) == img.width * img.height * 4


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_decode_accepts_open_handles(tmp_path, fmt) -> None:
    paths = _write_samples(tmp_path)

    with paths[fmt].open("rb") as fp:
        img = decode(fp, fmt)
        assert not fp.closed
    assert img.size == (7, 2)


def test_decode_accepts_string_tags(tmp_path) -> None:
    paths = _write_samples(tmp_path)
    assert decode(str(paths[ImageFormat.JPEG]), "jpg").size == (7, 2)


@pytest.mark.parametrize(
    "actual,claimed",
    [
        (ImageFormat.GIF, ImageFormat.PNG),
        (ImageFormat.PNG, ImageFormat.JPEG),
        (ImageFormat.JPEG, ImageFormat.GIF),
    ],
)
def test_decode_does_not_sniff_content(tmp_path, actual, claimed) -> None:
    paths = _write_samples(tmp_path)

    with pytest.raises(DecodeError) as exc:
        decode(paths[actual], claimed)
    assert exc.value.image_format is claimed


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_decode_zero_length_input_fails(tmp_path, fmt) -> None:
    path = tmp_path / "empty"
    path.write_bytes(b"")

    with pytest.raises(DecodeError):
        decode(path, fmt)
    with pytest.raises(DecodeError):
        decode(io.BytesIO(b""), fmt)


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_decode_missing_path_fails_with_io_error(tmp_path, fmt) -> None:
    with pytest.raises(CodecIOError):
        decode(tmp_path / "missing", fmt)


def test_decode_rejects_unknown_tag(tmp_path) -> None:
    paths = _write_samples(tmp_path)
    with pytest.raises(ValueError):
        decode(paths[ImageFormat.PNG], "bmp")
