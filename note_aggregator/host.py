from __future__ import annotations

from typing import Optional

from note_aggregator.core.models import Note, NoteMetadata


class NoteHost:
    """
    Everything the aggregation core needs from the environment.

    The corpus and its metadata are treated as frozen for one run.
    """

    def resolve_link(self, link_text: str, source_path: str) -> Optional[Note]:
        raise NotImplementedError

    async def read_note_content(self, note: Note) -> str:
        raise NotImplementedError

    def enumerate_all_notes(self) -> list[Note]:
        raise NotImplementedError

    def get_metadata(self, note: Note) -> Optional[NoteMetadata]:
        raise NotImplementedError

    async def write_to_clipboard(self, text: str) -> None:
        raise NotImplementedError

    def notify_user(self, message: str) -> None:
        raise NotImplementedError
