"""Texture identifiers and raw file access.

The launcher identifies a skin by ``sha256(hex(bytes))``: the digest is
taken over the lowercase hex *text* of the file, two characters per byte,
not over the file bytes.
"""

from __future__ import annotations

import asyncio
import hashlib
from pathlib import Path

from skinpack.errors import HashError, SkinReadError
from skinpack.logging import get_logger
from skinpack.models import SkinSource

logger = get_logger("hashing")


def hex_encode(data: bytes) -> str:
    """Expand every byte to two zero-padded lowercase hex characters."""
    return data.hex()


def texture_id(data: bytes) -> str:
    """Return the launcher texture id for *data*.

    Args:
        data: Raw file bytes.

    Returns:
        64-character lowercase hex SHA-256 of ``hex_encode(data)``.
    """
    return hashlib.sha256(hex_encode(data).encode("ascii")).hexdigest()


async def hash_source(source: SkinSource) -> str:
    """Compute the texture id of *source* in a worker thread.

    Raises:
        HashError: If the digest cannot be computed.
    """
    try:
        digest = await asyncio.to_thread(texture_id, source.data)
    except (TypeError, ValueError, MemoryError) as exc:
        raise HashError(f"Cannot hash {source.name}: {exc}") from exc
    logger.debug("Texture id for %s: %s", source.name, digest)
    return digest


def read_source(path: str | Path) -> SkinSource:
    """Read a skin file from disk.

    Raises:
        SkinReadError: If the file cannot be opened or read.
    """
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as exc:
        raise SkinReadError(f"Cannot read {p}: {exc}") from exc
    return SkinSource(name=p.name, data=data)


async def read_source_async(path: str | Path) -> SkinSource:
    """Read a skin file in a worker thread; see :func:`read_source`."""
    return await asyncio.to_thread(read_source, path)
