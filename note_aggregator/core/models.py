from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath


def normalize_tag(tag: str) -> str:
    """'#project' -> 'project'. Surrounding whitespace is dropped too."""
    tag = (tag or "").strip()
    return tag[1:] if tag.startswith("#") else tag


def display_tag(tag: str) -> str:
    """'project' -> '#project' (the form tag groups are keyed and rendered by)."""
    tag = normalize_tag(tag)
    return f"#{tag}" if tag else ""


@dataclass(frozen=True)
class Note:
    """
    A note in the corpus.

    `path` is the identity: vault-relative, '/'-separated, e.g. "Projects/Alpha.md".
    """

    path: str

    @property
    def name(self) -> str:
        return PurePosixPath(self.path).name

    @property
    def basename(self) -> str:
        name = self.name
        return name[:-3] if name.lower().endswith(".md") else name

    @property
    def folder(self) -> str:
        parent = str(PurePosixPath(self.path).parent)
        return "" if parent == "." else parent


@dataclass(frozen=True)
class NoteMetadata:
    links: tuple[str, ...] = ()
    # full tag set in '#tag' form: inline + frontmatter
    tags: tuple[str, ...] = ()
    frontmatter_tags: tuple[str, ...] = ()

    @classmethod
    def build(cls, *, links=(), tags=(), frontmatter_tags=()) -> "NoteMetadata":
        fm = tuple(t for t in (normalize_tag(x) for x in frontmatter_tags) if t)
        full = [display_tag(t) for t in tags]
        full.extend(display_tag(t) for t in fm)
        return cls(
            links=tuple(dict.fromkeys(link for link in links if link)),
            tags=tuple(dict.fromkeys(t for t in full if t)),
            frontmatter_tags=tuple(dict.fromkeys(fm)),
        )
