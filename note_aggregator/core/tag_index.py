from __future__ import annotations

from typing import Callable, Optional, Sequence

from .models import Note, NoteMetadata

MetadataGetter = Callable[[Note], Optional[NoteMetadata]]


def find_notes_by_tag(
    tag: str,
    corpus: Sequence[Note],
    exclude_path: str,
    get_metadata: MetadataGetter,
) -> list[Note]:
    """
    All notes carrying `tag` (exact match against the full tag set),
    in corpus order, without the note at `exclude_path`.
    """
    found: list[Note] = []
    for note in corpus:
        if note.path == exclude_path:
            continue
        meta = get_metadata(note)
        if meta is not None and tag in meta.tags:
            found.append(note)
    return found


class TagIndex:
    """
    Per-run tag lookup. Each distinct tag scans the corpus once;
    the corpus is enumerated lazily on the first query.
    """

    def __init__(self, *, enumerate_notes: Callable[[], Sequence[Note]], get_metadata: MetadataGetter):
        self._enumerate_notes = enumerate_notes
        self._get_metadata = get_metadata
        self._corpus: list[Note] | None = None
        self._by_tag: dict[str, list[Note]] = {}

    @property
    def corpus(self) -> list[Note]:
        if self._corpus is None:
            self._corpus = list(self._enumerate_notes())
        return self._corpus

    @property
    def scanned_tags(self) -> list[str]:
        return list(self._by_tag)

    def notes_with_tag(self, tag: str, *, exclude_path: str) -> list[Note]:
        hits = self._by_tag.get(tag)
        if hits is None:
            hits = find_notes_by_tag(tag, self.corpus, "", self._get_metadata)
            self._by_tag[tag] = hits
        return [n for n in hits if n.path != exclude_path]
