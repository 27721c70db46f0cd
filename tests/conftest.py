import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from note_aggregator.core.errors import ClipboardWriteFailure
from note_aggregator.core.models import Note, NoteMetadata
from note_aggregator.host import NoteHost


class FakeHost(NoteHost):
    """In-memory corpus: path -> (content, metadata or None)."""

    def __init__(self):
        self.contents = {}
        self.metadata = {}
        self.order = []
        self.clipboard = None
        self.clipboard_error = None
        self.notices = []
        self.reads = []
        self.enumerations = 0

    def add(self, path, content="", *, links=(), tags=(), frontmatter_tags=(), metadata=True):
        self.order.append(path)
        self.contents[path] = content
        self.metadata[path] = (
            NoteMetadata.build(links=links, tags=tags, frontmatter_tags=frontmatter_tags)
            if metadata else None
        )
        return Note(path)

    def resolve_link(self, link_text, source_path):
        for path in self.order:
            note = Note(path)
            if link_text in (path, note.basename):
                return note
        return None

    async def read_note_content(self, note):
        self.reads.append(note.path)
        return self.contents[note.path]

    def enumerate_all_notes(self):
        self.enumerations += 1
        return [Note(p) for p in self.order]

    def get_metadata(self, note):
        return self.metadata.get(note.path)

    async def write_to_clipboard(self, text):
        if self.clipboard_error is not None:
            raise self.clipboard_error
        self.clipboard = text

    def notify_user(self, message):
        self.notices.append(message)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def clipboard_failure():
    return ClipboardWriteFailure("clipboard is locked")
