from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pyimgcodec.formats import ImageFormat, parse_image_format

logger = logging.getLogger(__name__)

_OUTPUT_FORMATS = ("gif", "png")


def setup_logging(level_name: str) -> None:
    from pyimgcodec.config.codec_config import LOG_LEVELS

    logging.basicConfig(
        level=LOG_LEVELS.get(level_name.lower(), logging.WARNING),
        format="[%(levelname)s] [%(name)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyimgcodec-convert",
        description="Convert an image between GIF, PNG and JPEG through the canonical RGBA buffer.",
    )
    parser.add_argument("source", help="Input image path")
    parser.add_argument("destination", help="Output image path (created or replaced)")
    parser.add_argument(
        "--from",
        dest="input_format",
        required=True,
        choices=["gif", "png", "jpeg", "jpg"],
        type=str.lower,
        help="Encoding of the input file (never guessed from the extension)",
    )
    parser.add_argument(
        "--to",
        dest="output_format",
        required=True,
        type=str.lower,
        help="Encoding of the output file: gif or png",
    )
    parser.add_argument("--config", default=None, help="Optional JSON/YAML codec config")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "warn", "error", "critical"],
        type=str.lower,
        help="Set logging level (overrides config file)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary of the conversion to stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        from pyimgcodec.codecs import encode_gif, encode_png
        from pyimgcodec.config.codec_config import CodecConfig, load_codec_config
        from pyimgcodec.dispatch import decode

        config = load_codec_config(args.config) if args.config is not None else CodecConfig()
        setup_logging(args.log_level or config.log_level)

        input_format = parse_image_format(args.input_format)
        output_format = parse_image_format(args.output_format)
        if output_format.value not in _OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format {output_format.value!r}; "
                f"choose from: {', '.join(_OUTPUT_FORMATS)}."
            )

        image = decode(Path(args.source), input_format, max_pixels=config.max_pixels)
        if output_format is ImageFormat.PNG:
            encode_png(image, Path(args.destination), compress_level=config.png_compress_level)
        else:
            encode_gif(image, Path(args.destination))
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        logger.debug("conversion failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1

    if bool(args.json):
        payload = {
            "source": str(args.source),
            "destination": str(args.destination),
            "input_format": input_format.value,
            "output_format": output_format.value,
            "width": image.width,
            "height": image.height,
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0

    print(f"ok: {image.width}x{image.height} {input_format.value} -> {output_format.value}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
