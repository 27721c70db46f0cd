from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from note_aggregator.host import NoteHost
from note_aggregator.logging_setup import log

from .filters import IgnoreConfig, should_ignore
from .models import Note
from .tag_index import TagIndex


class VisitState(Enum):
    QUEUED = "queued"
    PROCESSED = "processed"


@dataclass(frozen=True)
class Collection:
    root: Note
    # insertion order == discovery order
    referenced: dict[str, Note]
    tag_groups: dict[str, list[Note]]
    root_ignored: bool = False
    stats: dict = field(default_factory=dict)

    def surviving_tag_groups(self) -> dict[str, list[Note]]:
        """Tag groups limited to notes that were actually collected."""
        out: dict[str, list[Note]] = {}
        for tag, notes in self.tag_groups.items():
            kept = [n for n in notes if n.path in self.referenced]
            if kept:
                out[tag] = kept
        return out


class _Traversal:
    def __init__(self, root: Note, host: NoteHost, config: IgnoreConfig):
        self.root = root
        self.host = host
        self.config = config

        self.state: dict[str, VisitState] = {root.path: VisitState.PROCESSED}
        # filtered-out notes; decided once, never re-checked
        self.rejected: set[str] = set()
        # found through a link; never listed in a tag group
        self.linked: set[str] = set()
        self.frontier: deque[Note] = deque([root])
        self.referenced: dict[str, Note] = {}
        self.tag_groups: dict[str, list[Note]] = {}
        self.tag_index = TagIndex(
            enumerate_notes=host.enumerate_all_notes,
            get_metadata=host.get_metadata,
        )
        self.processed_count = 0

    def is_filtered(self, note: Note) -> bool:
        if note.path in self.rejected:
            return True
        if should_ignore(note, self.host.get_metadata(note), self.config):
            self.rejected.add(note.path)
            log.debug("Ignored by settings: %s", note.path)
            return True
        return False

    def enqueue(self, note: Note) -> None:
        self.state[note.path] = VisitState.QUEUED
        self.frontier.append(note)
        self.referenced[note.path] = note

    def run(self) -> None:
        while self.frontier:
            note = self.frontier.popleft()
            self.state[note.path] = VisitState.PROCESSED
            self.processed_count += 1

            if note.path != self.root.path and self.is_filtered(note):
                continue

            meta = self.host.get_metadata(note)
            if meta is None:
                log.debug("No metadata, treating as leaf: %s", note.path)
                continue

            self.expand_links(note, meta.links)
            self.expand_tags(note, meta.tags)

    def expand_links(self, note: Note, links) -> None:
        for link in links:
            target = self.host.resolve_link(link, note.path)
            if target is None:
                log.debug("Unresolved link %r in %s", link, note.path)
                continue
            if target.path in self.state or target.path in self.rejected:
                continue
            if self.is_filtered(target):
                continue
            self.linked.add(target.path)
            self.enqueue(target)

    def expand_tags(self, note: Note, tags) -> None:
        for tag in tags:
            if self.config.is_tag_ignored(tag):
                continue
            for match in self.tag_index.notes_with_tag(tag, exclude_path=note.path):
                if match.path == self.root.path or match.path in self.linked:
                    continue
                if self.state.get(match.path) is VisitState.PROCESSED:
                    continue
                if self.is_filtered(match):
                    continue

                group = self.tag_groups.setdefault(tag, [])
                if all(n.path != match.path for n in group):
                    group.append(match)

                if match.path not in self.state:
                    self.enqueue(match)


def collect_references(root: Note, host: NoteHost, config: IgnoreConfig) -> Collection:
    """
    Breadth-first walk from `root` over links and shared tags.

    Every note is enqueued at most once; filtered notes are never enqueued.
    The root is always expanded, even when it matches the ignore settings.
    """
    t0 = time.perf_counter()

    root_ignored = should_ignore(root, host.get_metadata(root), config)

    walk = _Traversal(root, host, config)
    walk.run()

    # a cycle back to the root never lists it as a reference
    walk.referenced.pop(root.path, None)

    dt_ms = (time.perf_counter() - t0) * 1000.0
    stats = {
        "processed": walk.processed_count,
        "referenced": len(walk.referenced),
        "tags": len(walk.tag_groups),
        "tags_scanned": len(walk.tag_index.scanned_tags),
        "ignored": len(walk.rejected),
        "time_ms": dt_ms,
    }
    log.info(
        "Collected references for %s: referenced=%d tags=%d ignored=%d time_ms=%.1f",
        root.path, stats["referenced"], stats["tags"], stats["ignored"], dt_ms,
    )
    return Collection(
        root=root,
        referenced=walk.referenced,
        tag_groups=walk.tag_groups,
        root_ignored=root_ignored,
        stats=stats,
    )
