from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from note_aggregator.core.errors import (
    AggregationError,
    ClipboardWriteFailure,
    EmptyResult,
    NoActiveNote,
)
from note_aggregator.core.filters import IgnoreConfig
from note_aggregator.core.models import Note
from note_aggregator.core.report import render_report
from note_aggregator.core.traversal import Collection, collect_references
from note_aggregator.host import NoteHost
from note_aggregator.logging_setup import log

DONE_MESSAGE = "Linked notes aggregated to clipboard!"


@dataclass(frozen=True)
class AggregationResult:
    text: str
    collection: Collection


async def aggregate_note(
    host: NoteHost,
    active_note: Optional[Note],
    config: IgnoreConfig,
) -> AggregationResult:
    """
    Collect and render the report for `active_note` without touching the clipboard.

    Raises NoActiveNote before any work and EmptyResult when nothing is left to export.
    """
    if active_note is None:
        raise NoActiveNote()

    collection = collect_references(active_note, host, config)
    if collection.root_ignored:
        host.notify_user(
            f'Active file "{active_note.basename}" matches ignore settings; included anyway.'
        )

    text = await render_report(collection, host)
    if not text:
        raise EmptyResult()

    return AggregationResult(text=text, collection=collection)


async def aggregate_to_clipboard(
    host: NoteHost,
    active_note: Optional[Note],
    config: IgnoreConfig,
) -> AggregationResult:
    """
    The "aggregate linked notes to clipboard" command.

    Every AggregationError is reported through host.notify_user and re-raised.
    """
    try:
        result = await aggregate_note(host, active_note, config)
        try:
            await host.write_to_clipboard(result.text)
        except ClipboardWriteFailure:
            raise
        except Exception as exc:
            raise ClipboardWriteFailure(str(exc)) from exc
    except AggregationError as exc:
        log.warning("Aggregation stopped: %s: %s", type(exc).__name__, exc)
        host.notify_user(str(exc))
        raise

    log.info(
        "Aggregated %s: referenced=%d chars=%d",
        result.collection.root.path, len(result.collection.referenced), len(result.text),
    )
    host.notify_user(DONE_MESSAGE)
    return result
