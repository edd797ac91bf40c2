"""Shared fixtures for skinpack tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from skin_factory import FIXED_NOW, make_skin_png
from skinpack.models import SkinSource


@pytest.fixture()
def fixed_clock():
    """A clock that always returns :data:`FIXED_NOW`."""
    return lambda: FIXED_NOW


@pytest.fixture()
def classic_png() -> bytes:
    """PNG bytes of an opaque 64x64 classic skin."""
    return make_skin_png()


@pytest.fixture()
def slim_png() -> bytes:
    """PNG bytes of a 64x64 skin with both slim sample points transparent."""
    return make_skin_png(slim=True)


@pytest.fixture()
def steve_and_alex(classic_png: bytes, slim_png: bytes) -> list[SkinSource]:
    """Two sources in non-sorted order."""
    return [
        SkinSource(name="steve.png", data=classic_png),
        SkinSource(name="alex_slim.png", data=slim_png),
    ]


@pytest.fixture()
def skin_dir(tmp_path: Path, classic_png: bytes, slim_png: bytes) -> Path:
    """Directory with two skins, one non-PNG file, and a nested skin."""
    (tmp_path / "steve.png").write_bytes(classic_png)
    (tmp_path / "alex_slim.png").write_bytes(slim_png)
    (tmp_path / "notes.txt").write_text("not a skin")
    nested = tmp_path / "more"
    nested.mkdir()
    (nested / "zombie.png").write_bytes(classic_png)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_skinpack_logger():
    """Remove handlers added by setup_logging between tests."""
    yield
    logger = logging.getLogger("skinpack")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
