from .note_io import MetadataError, parse_note_metadata, read_note_text
from .repo import VaultRepository
from .wikilinks import extract_link_targets

__all__ = ["MetadataError",
           "parse_note_metadata",
           "read_note_text",
           "VaultRepository",
           "extract_link_targets"
           ]
