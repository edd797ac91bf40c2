"""Skin document generation — the per-file conversion pipeline.

Files are sorted by upper-cased name, then processed strictly one at a
time: read → hash → decode → classify → preview.  Each blocking step
runs in a worker thread and is awaited before the next one starts, so no
two files are ever in flight together.

The first failure of any step aborts the whole batch; no partial
document is returned.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Sequence
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import TypeVar

from skinpack.classifier import is_slim
from skinpack.constants import DEFAULT_TIMESTAMP_STEP_MS, SKIN_ID_PREFIX
from skinpack.hashing import hash_source, read_source_async
from skinpack.image_io import decode_skin_async, image_to_data_url, media_type_of
from skinpack.logging import get_logger
from skinpack.models import SkinDocument, SkinRecord, SkinSource
from skinpack.preview import head_preview_data_url

logger = get_logger("generator")

ProgressCallback = Callable[[str, int, int], None]
T = TypeVar("T")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format *moment* as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC already.

    >>> format_timestamp(datetime(2024, 1, 31, 12, 0, tzinfo=timezone.utc))
    '2024-01-31T12:00:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def sort_sources(sources: Iterable[SkinSource]) -> list[SkinSource]:
    """Order *sources* by upper-cased file name.

    The sort is stable: names equal after upper-casing keep their input order.
    """
    return sorted(sources, key=lambda s: s.name.upper())


def sort_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Order *paths* by upper-cased file name, like :func:`sort_sources`."""
    return sorted((Path(p) for p in paths), key=lambda p: p.name.upper())


def skin_id(index: int) -> str:
    """Return the record id for the 1-based processing *index*."""
    return f"{SKIN_ID_PREFIX}{index}"


async def build_record(source: SkinSource, index: int, timestamp: str) -> SkinRecord:
    """Run the pipeline for one file and return its record.

    Args:
        source: The input file.
        index: 1-based processing position.
        timestamp: ISO-8601 value for both ``created`` and ``updated``.

    Raises:
        HashError: If the texture id cannot be computed.
        DecodeError: If the bytes are not an image.
        RenderContextError: If the preview surface cannot be allocated.
    """
    record_id = skin_id(index)
    log_extra = {"skin_id": record_id, "skin_name": source.name}

    logger.debug("Hashing %s", source.name, extra={**log_extra, "stage": "hash"})
    digest = await hash_source(source)

    logger.debug("Decoding %s", source.name, extra={**log_extra, "stage": "decode"})
    image = await decode_skin_async(source.data, source.name)

    slim = is_slim(image)
    model_image = head_preview_data_url(image)

    return SkinRecord(
        created=timestamp,
        updated=timestamp,
        id=record_id,
        name=source.base_name,
        skin_image=image_to_data_url(source.data, media_type_of(source.data)),
        model_image=model_image,
        slim=slim,
        texture_id=digest,
    )


async def _as_source(source: SkinSource) -> SkinSource:
    return source


async def _run_pipeline(
    items: Sequence[T],
    load: Callable[[T], Awaitable[SkinSource]],
    *,
    timestamp_step_ms: int,
    now: Callable[[], datetime] | None,
    progress_callback: ProgressCallback | None,
    report_reads: bool = False,
) -> SkinDocument:
    """Load and convert *items* one at a time, in the order given."""
    if not items:
        raise ValueError("At least one skin file is required")
    if timestamp_step_ms <= 0:
        raise ValueError(f"timestamp_step_ms must be > 0, got {timestamp_step_ms}")

    total = len(items)
    step = timedelta(milliseconds=timestamp_step_ms)
    anchor = (now or _utc_now)()

    document = SkinDocument()
    for index, item in enumerate(items, start=1):
        source = await load(item)
        if report_reads and progress_callback:
            progress_callback("read", index, total)

        record = await build_record(source, index, format_timestamp(anchor))
        document.add(record)
        anchor -= step

        logger.info(
            "%s: %s (%s)",
            record.id,
            record.name,
            "slim" if record.slim else "classic",
            extra={"skin_id": record.id, "skin_name": source.name},
        )
        if progress_callback:
            progress_callback("skin", index, total)

    return document


async def generate_skin_document(
    sources: Sequence[SkinSource],
    *,
    timestamp_step_ms: int = DEFAULT_TIMESTAMP_STEP_MS,
    now: Callable[[], datetime] | None = None,
    progress_callback: ProgressCallback | None = None,
) -> SkinDocument:
    """Convert *sources* into a launcher skin document.

    Timestamps start at *now* for the first processed file and move back
    by *timestamp_step_ms* after each record, so later files always carry
    strictly earlier timestamps.

    Args:
        sources: Input files in any order. Must not be empty.
        timestamp_step_ms: Positive gap between consecutive records.
        now: Clock returning the anchor time (defaults to current UTC).
        progress_callback: Called as ``(stage, current, total)`` after
            each record.

    Returns:
        A ``SkinDocument`` with one record per source, in sorted order.

    Raises:
        ValueError: If *sources* is empty or the step is not positive.
        SkinPackError: Any pipeline failure, which aborts the whole batch.
    """
    return await _run_pipeline(
        sort_sources(sources),
        _as_source,
        timestamp_step_ms=timestamp_step_ms,
        now=now,
        progress_callback=progress_callback,
    )


async def generate_from_paths(
    paths: Sequence[str | Path],
    *,
    timestamp_step_ms: int = DEFAULT_TIMESTAMP_STEP_MS,
    now: Callable[[], datetime] | None = None,
    progress_callback: ProgressCallback | None = None,
) -> SkinDocument:
    """Convert the skin files at *paths*.

    Paths are sorted by upper-cased file name and each file is read only
    when its turn comes, so at most one file's bytes are held at a time
    and a failure stops the batch before later files are opened.
    *progress_callback* sees a ``"read"`` call before each ``"skin"`` call.

    Raises:
        SkinReadError: If any file cannot be read.
    """
    return await _run_pipeline(
        sort_paths(paths),
        lambda path: read_source_async(path),
        timestamp_step_ms=timestamp_step_ms,
        now=now,
        progress_callback=progress_callback,
        report_reads=True,
    )
