from __future__ import annotations

import re
from urllib.parse import unquote

# [[target]]
# [[target|alias]]
# ![[embed]]
WIKILINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
# [label](relative/path.md)
MD_LINK_RE = re.compile(r"\[[^\]]*\]\(([^)\s]+\.md)(?:#[^)\s]*)?\)", re.IGNORECASE)

FENCED_CODE_RE = re.compile(r"(?ms)^(```|~~~).*?^\1[^\n]*$")
INLINE_CODE_RE = re.compile(r"`[^`\n]*`")


def strip_code(markdown_text: str) -> str:
    """Blank out fenced and inline code so links/tags inside it are not picked up."""
    text = FENCED_CODE_RE.sub("", markdown_text or "")
    return INLINE_CODE_RE.sub("", text)


def extract_link_targets(markdown_text: str) -> list[str]:
    """
    Link targets in order of first appearance, without aliases and suffixes.

    Supported:
      [[Note]]
      [[Note|Alias]]
      [[Note#Heading]]
      [[Note^block]]
      [[Folder/Note]]
      [label](Folder/Note.md)
    """
    if not markdown_text:
        return []

    text = strip_code(markdown_text)
    found: list[tuple[int, str]] = []

    for match in WIKILINK_RE.finditer(text):
        inner = (match.group(1) or "").strip()
        if not inner:
            continue
        base = extract_base_target(inner)
        if base:
            found.append((match.start(), base))

    for match in MD_LINK_RE.finditer(text):
        target = unquote(match.group(1) or "").strip()
        if "://" in target:
            continue
        if target:
            found.append((match.start(), target))

    found.sort(key=lambda item: item[0])
    return list(dict.fromkeys(target for _, target in found))


# ───────────────────────── helpers ─────────────────────────


def split_alias(raw: str) -> tuple[str, str | None]:
    """
    Split 'target|alias' → (target, alias)
    """
    if "|" in raw:
        target, alias = raw.split("|", 1)
        return target.strip(), alias.strip()
    return raw.strip(), None


def split_suffix(target: str) -> tuple[str, str]:
    """
    Split Obsidian-style suffixes:
      Note#Heading
      Note^block
    """
    for sep in ("#", "^"):
        if sep in target:
            base, rest = target.split(sep, 1)
            return base.strip(), sep + rest
    return target.strip(), ""


def extract_base_target(raw: str) -> str:
    """
    Extract base note name from full wikilink inner content.
    """
    target, _ = split_alias(raw)
    base, _ = split_suffix(target)
    return base
