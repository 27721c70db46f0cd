from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import Note, NoteMetadata, normalize_tag


def _split_lines(text: str | None) -> list[str]:
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def _dedupe(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(i for i in items if i))


@dataclass(frozen=True)
class IgnoreConfig:
    """
    Ignore lists for one aggregation run.

    ignored_tags: tag names without the leading '#'
    ignored_directories: raw path prefixes, matched with str.startswith
    """

    ignored_tags: tuple[str, ...] = ()
    ignored_directories: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        *,
        tags: Iterable[str] = (),
        directories: Iterable[str] = (),
    ) -> "IgnoreConfig":
        return cls(
            ignored_tags=_dedupe(normalize_tag(t) for t in tags),
            ignored_directories=_dedupe((d or "").strip() for d in directories),
        )

    @classmethod
    def from_text(cls, tags_text: str | None = "", directories_text: str | None = "") -> "IgnoreConfig":
        """Build from the persisted newline-delimited form."""
        return cls.create(tags=_split_lines(tags_text), directories=_split_lines(directories_text))

    def with_tags_text(self, text: str | None) -> "IgnoreConfig":
        return IgnoreConfig.create(tags=_split_lines(text), directories=self.ignored_directories)

    def with_directories_text(self, text: str | None) -> "IgnoreConfig":
        return IgnoreConfig.create(tags=self.ignored_tags, directories=_split_lines(text))

    def merged(self, *, tags: Iterable[str] = (), directories: Iterable[str] = ()) -> "IgnoreConfig":
        return IgnoreConfig.create(
            tags=(*self.ignored_tags, *tags),
            directories=(*self.ignored_directories, *directories),
        )

    @property
    def tags_text(self) -> str:
        return "\n".join(self.ignored_tags)

    @property
    def directories_text(self) -> str:
        return "\n".join(self.ignored_directories)

    def is_tag_ignored(self, tag: str) -> bool:
        return normalize_tag(tag) in self.ignored_tags

    def is_path_ignored(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self.ignored_directories)


def should_ignore(note: Note, metadata: NoteMetadata | None, config: IgnoreConfig) -> bool:
    """
    True when the note sits under an ignored directory prefix or carries an
    ignored frontmatter tag. Inline tags never exclude a note.
    """
    if config.is_path_ignored(note.path):
        return True
    if metadata is None:
        return False
    return any(config.is_tag_ignored(tag) for tag in metadata.frontmatter_tags)
