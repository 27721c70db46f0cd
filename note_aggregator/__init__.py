from .core import Collection, IgnoreConfig, Note, NoteMetadata, collect_references, render_report
from .host import NoteHost
from .services import aggregate_note, aggregate_to_clipboard
from .vault import VaultRepository

__version__ = "0.1.0"

__all__ = ['Collection',
           'IgnoreConfig',
           'Note',
           'NoteMetadata',
           'collect_references',
           'render_report',
           'NoteHost',
           'aggregate_note',
           'aggregate_to_clipboard',
           'VaultRepository'
           ]
