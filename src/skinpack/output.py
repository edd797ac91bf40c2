"""Writing the launcher skin document to disk."""

from __future__ import annotations

from pathlib import Path

from skinpack.constants import DEFAULT_OUTPUT_NAME
from skinpack.logging import get_logger
from skinpack.models import SkinDocument

logger = get_logger("output")

__all__ = ["DEFAULT_OUTPUT_NAME", "serialize_document", "write_document"]


def serialize_document(document: SkinDocument, indent: int | None = 2) -> str:
    """Serialize *document* to JSON text with a trailing newline."""
    return document.to_json(indent=indent) + "\n"


def write_document(
    document: SkinDocument,
    path: str | Path = DEFAULT_OUTPUT_NAME,
    indent: int | None = 2,
) -> Path:
    """Write *document* as UTF-8 JSON, creating parent directories.

    Returns:
        The path written to.
    """
    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(serialize_document(document, indent=indent), encoding="utf-8")
    logger.info("Wrote %d skin(s) to %s", len(document), dest)
    return dest
