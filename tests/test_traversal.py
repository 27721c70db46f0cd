import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from note_aggregator.core.filters import IgnoreConfig
from note_aggregator.core.traversal import collect_references


def paths(collection):
    return list(collection.referenced)


def test_links_breadth_first(host):
    root = host.add("A", links=["B", "C"])
    host.add("B", links=["D"])
    host.add("C", links=["E"])
    host.add("D")
    host.add("E")

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["B", "C", "D", "E"]


def test_cycle_terminates_and_lists_each_once(host):
    root = host.add("A", links=["B"])
    host.add("B", links=["A", "B"])

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["B"]
    assert col.stats["processed"] == 2


def test_unresolved_link_is_dropped(host):
    root = host.add("A", links=["Missing", "B"])
    host.add("B")
    assert paths(collect_references(root, host, IgnoreConfig())) == ["B"]


def test_missing_metadata_is_leaf(host):
    root = host.add("A", links=["B"])
    host.add("B", metadata=False)
    host.add("C")
    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["B"]


def test_root_without_metadata(host):
    root = host.add("A", metadata=False)
    col = collect_references(root, host, IgnoreConfig())
    assert col.referenced == {}
    assert col.tag_groups == {}


def test_shared_tag_pulls_in_notes(host):
    root = host.add("A", tags=["#project"])
    host.add("B")
    host.add("C", tags=["#project"])

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["C"]
    assert {t: [n.path for n in ns] for t, ns in col.tag_groups.items()} == {"#project": ["C"]}


def test_note_listed_under_every_shared_tag(host):
    root = host.add("A", tags=["#x", "#y"])
    host.add("C", tags=["#x", "#y"])

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["C"]
    assert [n.path for n in col.tag_groups["#x"]] == ["C"]
    assert [n.path for n in col.tag_groups["#y"]] == ["C"]


def test_tags_chain_through_discovered_notes(host):
    root = host.add("A", tags=["#x"])
    host.add("B", tags=["#x", "#y"])
    host.add("C", tags=["#y"])

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["B", "C"]
    assert list(col.tag_groups) == ["#x", "#y"]
    assert [n.path for n in col.tag_groups["#y"]] == ["C"]


def test_ignored_tag_is_not_expanded(host):
    root = host.add("A", tags=["#daily"])
    host.add("B", tags=["#daily"])

    col = collect_references(root, host, IgnoreConfig.from_text("daily"))
    assert col.referenced == {}
    assert col.tag_groups == {}


def test_ignored_directory_blocks_links_and_tags(host):
    root = host.add("A", links=["Archive/D.md"], tags=["#p"])
    host.add("Archive/D.md", links=["E"], tags=["#p"])
    host.add("Archive/F.md", tags=["#p"])
    host.add("E")

    col = collect_references(root, host, IgnoreConfig.from_text("", "Archive/"))
    assert col.referenced == {}
    assert col.tag_groups == {}
    assert col.stats["ignored"] == 2


def test_frontmatter_ignored_note_is_not_followed(host):
    root = host.add("A", links=["B"])
    host.add("B", links=["C"], frontmatter_tags=["private"])
    host.add("C")

    col = collect_references(root, host, IgnoreConfig.from_text("private"))
    assert col.referenced == {}


def test_root_is_expanded_even_when_ignored(host):
    root = host.add("Archive/A.md", links=["B"])
    host.add("B")

    col = collect_references(root, host, IgnoreConfig.from_text("", "Archive/"))
    assert col.root_ignored
    assert paths(col) == ["B"]


def test_root_never_in_tag_groups(host):
    root = host.add("A", tags=["#p"])
    host.add("B", tags=["#p"], links=["A"])

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["B"]
    assert [n.path for n in col.tag_groups["#p"]] == ["B"]


def test_linked_note_is_not_listed_under_shared_tag(host):
    root = host.add("A", links=["B"], tags=["#p"])
    host.add("B", tags=["#p"])

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["B"]
    assert "#p" not in col.tag_groups


def test_linked_note_skipped_but_tag_peers_listed(host):
    root = host.add("A", links=["B"], tags=["#p"])
    host.add("B", tags=["#p"])
    host.add("C", tags=["#p"])

    col = collect_references(root, host, IgnoreConfig())
    assert paths(col) == ["B", "C"]
    assert [n.path for n in col.tag_groups["#p"]] == ["C"]


def test_deterministic(host):
    root = host.add("A", links=["C", "B"], tags=["#t"])
    host.add("B", tags=["#t"], links=["D"])
    host.add("C", links=["A"])
    host.add("D", tags=["#u"])
    host.add("E", tags=["#u", "#t"])

    first = collect_references(root, host, IgnoreConfig())
    second = collect_references(root, host, IgnoreConfig())
    assert paths(first) == paths(second) == ["C", "B", "E", "D"]
    assert list(first.tag_groups) == list(second.tag_groups)
