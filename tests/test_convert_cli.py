from __future__ import annotations

import json
from pathlib import Path

from PIL import Image


def _write_png(path: Path, *, size=(3, 2), color=(10, 20, 30, 255)) -> None:
    Image.new("RGBA", size, color).save(path, format="PNG")


def test_convert_cli_png_to_gif(tmp_path: Path, capsys) -> None:
    from pyimgcodec.convert_cli import main

    src = tmp_path / "in.png"
    dst = tmp_path / "out.gif"
    _write_png(src)

    rc = main([str(src), str(dst), "--from", "png", "--to", "gif"])
    assert rc == 0
    assert "ok: 3x2 png -> gif" in capsys.readouterr().out
    with Image.open(dst) as im:
        assert im.format == "GIF"
        assert im.size == (3, 2)


def test_convert_cli_jpeg_to_png_json(tmp_path: Path, capsys) -> None:
    from pyimgcodec.convert_cli import main

    src = tmp_path / "in.jpeg"
    dst = tmp_path / "out.png"
    Image.new("RGB", (4, 5), (200, 10, 10)).save(src, format="JPEG")

    rc = main([str(src), str(dst), "--from", "JPG", "--to", "png", "--json"])
    assert rc == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["input_format"] == "jpeg"
    assert payload["output_format"] == "png"
    assert (payload["width"], payload["height"]) == (4, 5)
    with Image.open(dst) as im:
        assert im.mode == "RGBA"


def test_convert_cli_rejects_jpeg_output(tmp_path: Path, capsys) -> None:
    from pyimgcodec.convert_cli import main

    src = tmp_path / "in.png"
    dst = tmp_path / "out.jpg"
    _write_png(src)

    rc = main([str(src), str(dst), "--from", "png", "--to", "jpeg"])
    assert rc == 1
    assert "jpeg" in capsys.readouterr().err.lower()
    assert not dst.exists()


def test_convert_cli_missing_input(tmp_path: Path, capsys) -> None:
    from pyimgcodec.convert_cli import main

    rc = main([str(tmp_path / "missing.png"), str(tmp_path / "out.png"), "--from", "png", "--to", "png"])
    assert rc == 1
    assert "unable to open" in capsys.readouterr().err.lower()


def test_convert_cli_applies_config(tmp_path: Path, capsys) -> None:
    from pyimgcodec.convert_cli import main

    src = tmp_path / "in.png"
    _write_png(src, size=(10, 10))
    cfg = tmp_path / "codec.json"
    cfg.write_text(json.dumps({"max_pixels": 50, "log_level": "error"}), encoding="utf-8")

    rc = main([str(src), str(tmp_path / "out.png"), "--from", "png", "--to", "png", "--config", str(cfg)])
    assert rc == 1
    assert "max_pixels" in capsys.readouterr().err


def test_convert_cli_rejects_bad_config(tmp_path: Path, capsys) -> None:
    from pyimgcodec.convert_cli import main

    src = tmp_path / "in.png"
    _write_png(src)
    cfg = tmp_path / "codec.json"
    cfg.write_text(json.dumps({"png_compress_level": 42}), encoding="utf-8")

    rc = main([str(src), str(tmp_path / "out.png"), "--from", "png", "--to", "png", "--config", str(cfg)])
    assert rc == 1
    assert "png_compress_level" in capsys.readouterr().err
