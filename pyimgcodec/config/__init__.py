from .codec_config import CodecConfig, load_codec_config, parse_codec_config

__all__ = [
    "CodecConfig",
    "load_codec_config",
    "parse_codec_config",
]
