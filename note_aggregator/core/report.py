from __future__ import annotations

from note_aggregator.host import NoteHost

from .traversal import Collection

TAGS_HEADER = "--- tags ---"


def file_delimiter(name: str) -> str:
    return f"--- file: {name} ---"


def render_tags_section(tag_groups: dict) -> str:
    """
    --- tags ---
    - #tag
      - [[Note]]
    <blank line>
    """
    if not tag_groups:
        return ""
    lines = [TAGS_HEADER]
    for tag, notes in tag_groups.items():
        lines.append(f"- {tag}")
        lines.extend(f"  - [[{note.basename}]]" for note in notes)
    return "\n".join(lines) + "\n\n"


async def render_report(collection: Collection, host: NoteHost) -> str:
    """
    Root content, then the tags section, then one block per referenced note.
    Contents are read one note at a time, in output order.
    The result is stripped of leading/trailing whitespace.
    """
    parts: list[str] = []

    root_text = await host.read_note_content(collection.root)
    parts.append(root_text + "\n\n")

    parts.append(render_tags_section(collection.surviving_tag_groups()))

    for path, note in collection.referenced.items():
        if path == collection.root.path:
            continue
        content = await host.read_note_content(note)
        parts.append(f"{file_delimiter(note.name)}\n{content}\n\n")

    return "".join(parts).strip()
