"""SkinPack — builds the Minecraft launcher custom skin file from skin PNGs."""

from skinpack.classifier import is_slim
from skinpack.config import ConverterConfig, load_config
from skinpack.errors import (
    ConfigError,
    DecodeError,
    HashError,
    NoSkinsFoundError,
    RenderContextError,
    SkinPackError,
    SkinReadError,
)
from skinpack.generator import (
    format_timestamp,
    generate_from_paths,
    generate_skin_document,
    sort_paths,
    sort_sources,
)
from skinpack.hashing import hex_encode, read_source, texture_id
from skinpack.image_io import alpha_at, decode_skin, image_to_data_url
from skinpack.logging import get_logger, setup_logging
from skinpack.models import SkinDocument, SkinRecord, SkinSource
from skinpack.output import DEFAULT_OUTPUT_NAME, serialize_document, write_document
from skinpack.preview import head_preview_data_url, render_head_preview
from skinpack.sources import collect_skin_paths

__all__ = [
    "ConfigError",
    "ConverterConfig",
    "DEFAULT_OUTPUT_NAME",
    "DecodeError",
    "HashError",
    "NoSkinsFoundError",
    "RenderContextError",
    "SkinDocument",
    "SkinPackError",
    "SkinReadError",
    "SkinRecord",
    "SkinSource",
    "alpha_at",
    "collect_skin_paths",
    "decode_skin",
    "format_timestamp",
    "generate_from_paths",
    "generate_skin_document",
    "get_logger",
    "head_preview_data_url",
    "hex_encode",
    "image_to_data_url",
    "is_slim",
    "load_config",
    "read_source",
    "render_head_preview",
    "serialize_document",
    "setup_logging",
    "sort_paths",
    "sort_sources",
    "texture_id",
    "write_document",
]
