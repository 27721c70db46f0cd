from .errors import AggregationError, ClipboardWriteFailure, EmptyResult, NoActiveNote
from .filters import IgnoreConfig, should_ignore
from .models import Note, NoteMetadata, display_tag, normalize_tag
from .tag_index import TagIndex, find_notes_by_tag
from .traversal import Collection, collect_references
from .report import render_report

__all__ = ["AggregationError",
           "ClipboardWriteFailure",
           "EmptyResult",
           "NoActiveNote",
           "IgnoreConfig",
           "should_ignore",
           "Note",
           "NoteMetadata",
           "display_tag",
           "normalize_tag",
           "TagIndex",
           "find_notes_by_tag",
           "Collection",
           "collect_references",
           "render_report"
           ]
