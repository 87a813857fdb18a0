import pytest

from pyimgcodec.formats import ImageFormat, parse_image_format


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("gif", ImageFormat.GIF),
        ("png", ImageFormat.PNG),
        ("jpeg", ImageFormat.JPEG),
        ("JPG", ImageFormat.JPEG),
        (" Png ", ImageFormat.PNG),
        (ImageFormat.GIF, ImageFormat.GIF),
    ],
)
def test_parse_image_format(raw, expected):
    assert parse_image_format(raw) is expected


@pytest.mark.parametrize("raw", ["auto", "bmp", "", "image/png"])
def test_parse_image_format_rejects_unknown(raw):
    with pytest.raises(ValueError) as exc:
        parse_image_format(raw)
    assert "gif, png, jpeg" in str(exc.value)


def test_image_format_is_a_closed_set():
    assert [f.value for f in ImageFormat] == ["gif", "png", "jpeg"]
