import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from note_aggregator.core.filters import IgnoreConfig, should_ignore
from note_aggregator.core.models import Note, NoteMetadata


def test_from_text_trims_and_drops_blank_lines():
    cfg = IgnoreConfig.from_text("#private\n\n  todo  \n#private\n", " Archive/ \n\nTemp/")
    assert cfg.ignored_tags == ("private", "todo")
    assert cfg.ignored_directories == ("Archive/", "Temp/")


def test_text_roundtrip_through_setters():
    cfg = IgnoreConfig().with_tags_text("a\nb").with_directories_text("X/")
    assert cfg.tags_text == "a\nb"
    assert cfg.directories_text == "X/"


def test_merged_keeps_order_and_dedupes():
    cfg = IgnoreConfig.create(tags=["a"], directories=["X/"])
    cfg2 = cfg.merged(tags=["#b", "a"], directories=["Y/"])
    assert cfg2.ignored_tags == ("a", "b")
    assert cfg2.ignored_directories == ("X/", "Y/")


def test_directory_prefix():
    cfg = IgnoreConfig.create(directories=["Archive/"])
    assert should_ignore(Note("Archive/D.md"), None, cfg)
    assert should_ignore(Note("Archive/old/E.md"), None, cfg)
    assert not should_ignore(Note("Notes/Archive/D.md"), None, cfg)


def test_directory_prefix_is_raw_string_match():
    cfg = IgnoreConfig.create(directories=["Arch"])
    assert should_ignore(Note("Archive/D.md"), None, cfg)
    cfg = IgnoreConfig.create(directories=["archive/"])
    assert not should_ignore(Note("Archive/D.md"), None, cfg)


def test_frontmatter_tag_with_or_without_hash():
    meta = NoteMetadata.build(frontmatter_tags=["#private"])
    assert should_ignore(Note("A.md"), meta, IgnoreConfig.from_text("private"))
    assert should_ignore(Note("A.md"), meta, IgnoreConfig.from_text("#private"))


def test_inline_tag_does_not_exclude():
    meta = NoteMetadata.build(tags=["#private"])
    assert not should_ignore(Note("A.md"), meta, IgnoreConfig.from_text("private"))


def test_tag_match_is_exact():
    meta = NoteMetadata.build(frontmatter_tags=["private/work"])
    assert not should_ignore(Note("A.md"), meta, IgnoreConfig.from_text("private"))


def test_empty_config_ignores_nothing():
    meta = NoteMetadata.build(frontmatter_tags=["x"])
    assert not should_ignore(Note("Archive/A.md"), meta, IgnoreConfig())
