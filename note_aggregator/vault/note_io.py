from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from note_aggregator.core.models import NoteMetadata

from .wikilinks import extract_link_targets, strip_code

# '#tag', '#nested/tag', '#kebab-tag'; not '# Heading', not '#123'
INLINE_TAG_RE = re.compile(r"(?:^|(?<=[\s(,]))#(\w[\w/-]*)", re.MULTILINE)


class MetadataError(ValueError):
    """The note's frontmatter could not be parsed."""


def read_note_text(path: Path) -> str:
    """Single point for reading a note from disk."""
    return Path(path).read_text(encoding="utf-8")


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """
    (frontmatter dict, body). Empty dict when there is no frontmatter block.
    Raises MetadataError when the block is not valid YAML.
    """
    if not text:
        return {}, ""
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as exc:
        raise MetadataError(f"Frontmatter contains invalid YAML: {exc}") from exc

    meta = post.metadata if isinstance(post.metadata, dict) else {}
    return dict(meta), post.content or ""


def frontmatter_tags(meta: dict[str, Any]) -> list[str]:
    """
    Tags from the 'tags' / 'tag' keys. Accepts a YAML list or a
    comma/space separated string, the way Obsidian does.
    """
    out: list[str] = []
    for key in ("tags", "tag"):
        value = meta.get(key)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            items = [str(v) for v in value if v is not None]
        else:
            items = re.split(r"[,\s]+", str(value))
        out.extend(i.strip() for i in items if i and i.strip())
    return out


def inline_tags(body: str) -> list[str]:
    tags: list[str] = []
    for match in INLINE_TAG_RE.finditer(strip_code(body)):
        tag = match.group(1).rstrip("/")
        # '#2024' is not a tag
        if not tag or tag.isdigit():
            continue
        tags.append(f"#{tag}")
    return tags


def parse_note_metadata(text: str) -> NoteMetadata:
    """
    Links, inline tags and frontmatter tags of one note.
    Raises MetadataError for unparseable frontmatter.
    """
    meta, body = split_frontmatter(text)
    return NoteMetadata.build(
        links=extract_link_targets(body),
        tags=inline_tags(body),
        frontmatter_tags=frontmatter_tags(meta),
    )
