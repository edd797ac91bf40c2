"""Input collection: expand paths and keep PNG skins only."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from skinpack.errors import NoSkinsFoundError, SkinReadError
from skinpack.logging import get_logger

logger = get_logger("sources")

SKIN_SUFFIX = ".png"


def is_skin_file(name: str) -> bool:
    """Return True if *name* looks like a PNG skin (case-sensitive ``.png``)."""
    return name.endswith(SKIN_SUFFIX)


def partition_png(paths: Iterable[Path]) -> tuple[list[Path], list[Path]]:
    """Split *paths* into ``(png_files, ignored)`` preserving order."""
    kept: list[Path] = []
    ignored: list[Path] = []
    for p in paths:
        (kept if is_skin_file(p.name) else ignored).append(p)
    return kept, ignored


def _expand(path: Path, recursive: bool) -> list[Path]:
    if path.is_dir():
        pattern = "**/*" if recursive else "*"
        return sorted(p for p in path.glob(pattern) if p.is_file())
    if path.is_file():
        return [path]
    raise SkinReadError(f"Input not found: {path}")


def collect_skin_paths(
    paths: Iterable[str | Path], recursive: bool = False
) -> list[Path]:
    """Expand files and directories into the list of PNG skins to convert.

    Non-PNG files are dropped with a warning.

    Args:
        paths: Files and/or directories.
        recursive: Descend into subdirectories of directory inputs.

    Returns:
        PNG file paths, in discovery order.

    Raises:
        SkinReadError: If an input path does not exist.
        NoSkinsFoundError: If no PNG file remains.
    """
    candidates: list[Path] = []
    for raw in paths:
        candidates.extend(_expand(Path(raw), recursive))

    kept, ignored = partition_png(candidates)
    if ignored:
        logger.warning(
            "Ignoring %d non-PNG file(s): %s",
            len(ignored),
            ", ".join(p.name for p in ignored),
        )
    if not kept:
        raise NoSkinsFoundError("No skins found: no .png files among the inputs")
    return kept
