from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from pyimgcodec.codecs.png import DEFAULT_COMPRESS_LEVEL

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,  # alias
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


@dataclass(frozen=True)
class CodecConfig:
    """Tunables for the conversion entry points."""

    png_compress_level: int = DEFAULT_COMPRESS_LEVEL
    max_pixels: int | None = None
    log_level: str = "warning"


def _parse_int(value: Any, *, name: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be int, got {value!r}")
    try:
        return int(value)
    except Exception as exc:  # noqa: BLE001 - validation boundary
        raise ValueError(f"{name} must be int, got {value!r}") from exc


def parse_codec_config(raw: Mapping[str, Any] | None) -> CodecConfig:
    if raw is None:
        return CodecConfig()
    if not isinstance(raw, Mapping):
        raise ValueError(f"config must be a dict/object, got {type(raw).__name__}")

    known = {f.name for f in fields(CodecConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}. Allowed keys: {', '.join(sorted(known))}")

    level = _parse_int(raw.get("png_compress_level", DEFAULT_COMPRESS_LEVEL), name="png_compress_level")
    if not 0 <= level <= 9:
        raise ValueError(f"png_compress_level must be in [0, 9], got {level}")

    max_pixels = raw.get("max_pixels", None)
    if max_pixels is not None:
        max_pixels = _parse_int(max_pixels, name="max_pixels")
        if max_pixels <= 0:
            raise ValueError(f"max_pixels must be positive or null, got {max_pixels}")

    log_level = str(raw.get("log_level", "warning")).strip().lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

    return CodecConfig(png_compress_level=level, max_pixels=max_pixels, log_level=log_level)


def _read_codec_file(config_path: Path) -> Any:
    suffix = config_path.suffix.lower()
    if suffix == ".json":
        with config_path.open("r", encoding="utf-8") as f:
            return json.load(f)
    if suffix in (".yml", ".yaml"):
        try:
            import yaml  # type: ignore[import-not-found]
        except Exception as exc:  # noqa: BLE001 - dependency boundary
            raise ImportError(
                "YAML codec configs require PyYAML.\n"
                "Install it via:\n"
                "  pip install 'pyimgcodec[yaml]'"
            ) from exc
        with config_path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    raise ValueError(
        f"Unsupported codec config extension {suffix!r} for {str(config_path)!r}; "
        "use .json, .yml or .yaml."
    )


def load_codec_config(path: str | Path) -> CodecConfig:
    """Read a JSON/YAML codec config file. A null document yields the defaults."""

    return parse_codec_config(_read_codec_file(Path(path)))
