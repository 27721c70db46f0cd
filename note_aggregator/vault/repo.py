from __future__ import annotations

import asyncio
import posixpath
import sys
from pathlib import Path
from typing import Awaitable, Callable, Optional

from note_aggregator.core.errors import ClipboardWriteFailure
from note_aggregator.core.models import Note, NoteMetadata
from note_aggregator.host import NoteHost
from note_aggregator.logging_setup import log

from .note_io import MetadataError, parse_note_metadata, read_note_text
from .wikilinks import split_suffix

ClipboardWriter = Callable[[str], Awaitable[None]]


def _default_notify(message: str) -> None:
    print(message, file=sys.stderr)


def _link_key(path: str) -> str:
    path = path.strip().lstrip("/")
    if path.lower().endswith(".md"):
        path = path[:-3]
    return path.casefold()


class VaultRepository(NoteHost):
    """
    A directory of Markdown notes acting as the aggregation host.

    The corpus is scanned once, on first use, and cached together with
    per-note metadata; both are treated as frozen afterwards.
    """

    def __init__(
        self,
        vault_dir: Path,
        *,
        clipboard_writer: ClipboardWriter | None = None,
        notify: Callable[[str], None] | None = None,
    ):
        self.vault_dir = Path(vault_dir)
        self._clipboard_writer = clipboard_writer
        self._notify = notify or _default_notify

        self._notes: list[Note] | None = None
        self._by_key: dict[str, Note] = {}
        self._by_basename: dict[str, list[Note]] = {}
        self._metadata: dict[str, Optional[NoteMetadata]] = {}

    # ───────────────────────── corpus ─────────────────────────

    def note_file(self, note: Note) -> Path:
        return self.vault_dir.joinpath(*note.path.split("/"))

    def enumerate_all_notes(self) -> list[Note]:
        if self._notes is None:
            self._scan()
        return list(self._notes or [])

    def refresh(self) -> None:
        self._notes = None
        self._by_key.clear()
        self._by_basename.clear()
        self._metadata.clear()

    def _scan(self) -> None:
        notes: list[Note] = []
        for p in self.vault_dir.rglob("*.md"):
            rel = p.relative_to(self.vault_dir)
            # .obsidian, .trash, ...
            if any(part.startswith(".") for part in rel.parts):
                continue
            if not p.is_file():
                continue
            notes.append(Note(rel.as_posix()))

        notes.sort(key=lambda n: n.path)
        for note in notes:
            self._by_key.setdefault(_link_key(note.path), note)
            self._by_basename.setdefault(note.basename.casefold(), []).append(note)

        self._notes = notes
        log.debug("Vault scanned: %s notes=%d", self.vault_dir, len(notes))

    def find_note(self, ref: str) -> Optional[Note]:
        """
        Look up a note by vault-relative path (with or without '.md')
        or by basename.
        """
        ref = (ref or "").strip()
        if not ref:
            return None

        candidate = Path(ref)
        if candidate.is_absolute():
            try:
                ref = candidate.resolve().relative_to(self.vault_dir.resolve()).as_posix()
            except ValueError:
                return None

        self.enumerate_all_notes()
        return self._by_key.get(_link_key(ref)) or self.resolve_link(ref, "")

    # ───────────────────────── NoteHost ─────────────────────────

    def get_metadata(self, note: Note) -> Optional[NoteMetadata]:
        if note.path in self._metadata:
            return self._metadata[note.path]

        try:
            meta = parse_note_metadata(read_note_text(self.note_file(note)))
        except (OSError, UnicodeDecodeError, MetadataError) as exc:
            log.warning("Metadata unavailable for %s: %s", note.path, exc)
            meta = None

        self._metadata[note.path] = meta
        return meta

    def resolve_link(self, link_text: str, source_path: str) -> Optional[Note]:
        """
        Map a link to a note:
          1. path relative to the linking note's folder
          2. exact vault-relative path
          3. basename (or trailing path) match, nearest to the linking note
        """
        base, _ = split_suffix(link_text or "")
        if not base:
            return None

        self.enumerate_all_notes()
        key = _link_key(base)

        source_dir = posixpath.dirname(source_path or "")
        if source_dir:
            rel = posixpath.normpath(posixpath.join(source_dir, base.strip()))
            hit = self._by_key.get(_link_key(rel))
            if hit is not None:
                return hit

        exact = self._by_key.get(key)
        if exact is not None:
            return exact

        name = key.rsplit("/", 1)[-1]
        candidates = self._by_basename.get(name, [])
        if "/" in key:
            candidates = [n for n in candidates if _link_key(n.path).endswith("/" + key)]
        if not candidates:
            return None

        def nearness(note: Note) -> tuple[int, int]:
            same_folder = 0 if note.folder == source_dir else 1
            return same_folder, note.path.count("/")

        # min() keeps the first of equals, i.e. enumeration order
        return min(candidates, key=nearness)

    async def read_note_content(self, note: Note) -> str:
        return await asyncio.to_thread(read_note_text, self.note_file(note))

    async def write_to_clipboard(self, text: str) -> None:
        if self._clipboard_writer is None:
            raise ClipboardWriteFailure("No clipboard available.")
        await self._clipboard_writer(text)

    def notify_user(self, message: str) -> None:
        log.info("Notice: %s", message)
        try:
            self._notify(message)
        except Exception:
            log.exception("Failed to show notice")
