from __future__ import annotations

"""
Unit tests for Tree Persistence.

Verifies:
1. Listing line format (indentation, markers, extensions).
2. Pre-order emission and abort-on-failure of the hierarchy dump.
3. Best-effort content flush with per-file failure reporting.
"""

import pytest

from conftest import MemoryContentSink, MemoryHierarchySink
from vexplorer.core import persistence
from vexplorer.core.seed import build_sample_tree
from vexplorer.core.tree import VirtualTree, add_item, make_directory
from vexplorer.domain.tree_models import DirectoryNode, FileNode

SAMPLE_LISTING = [
    "[D] root",
    "  [D] Desktop",
    "    [F] name.txt",
    "  [D] Documents",
    "    [F] hello.cpp",
    "  [D] Downloads",
    "    [F] numbers.txt",
    "  [D] Pictures",
    "    [F] vacation.txt",
]


def test_format_entry_markers_and_indent() -> None:
    assert persistence.format_entry(DirectoryNode(name="docs"), 0) == "[D] docs"
    assert persistence.format_entry(FileNode(name="a", extension=".md"), 2) == "    [F] a.md"


def test_render_hierarchy_of_sample_tree() -> None:
    assert persistence.render_hierarchy(build_sample_tree().root) == SAMPLE_LISTING


def test_save_hierarchy_streams_every_line() -> None:
    sink = MemoryHierarchySink()
    written = persistence.save_hierarchy(build_sample_tree().root, sink)
    assert written == len(SAMPLE_LISTING)
    assert sink.lines == SAMPLE_LISTING


def test_save_hierarchy_propagates_sink_failure() -> None:
    sink = MemoryHierarchySink(fail_after=3)
    with pytest.raises(OSError):
        persistence.save_hierarchy(build_sample_tree().root, sink)
    assert sink.lines == SAMPLE_LISTING[:3]


def test_save_hierarchy_of_subtree_starts_at_depth_zero() -> None:
    tree = build_sample_tree()
    desktop = tree.resolve("root/Desktop")
    sink = MemoryHierarchySink()
    persistence.save_hierarchy(desktop, sink)
    assert sink.lines == ["[D] Desktop", "  [F] name.txt"]


def test_content_target_appends_extension() -> None:
    tree = build_sample_tree()
    hello = tree.resolve("root/Documents/hello.cpp")
    assert persistence.content_target(hello) == "root/Documents/hello.cpp"


def test_save_all_files_writes_every_payload() -> None:
    sink = MemoryContentSink()
    report = persistence.save_all_files(build_sample_tree().root, sink)

    assert report.ok
    assert sorted(sink.files) == [
        "root/Desktop/name.txt",
        "root/Documents/hello.cpp",
        "root/Downloads/numbers.txt",
        "root/Pictures/vacation.txt",
    ]
    assert sink.files["root/Pictures/vacation.txt"] == "Beach photos from summer vacation"


def test_save_all_files_continues_after_rejection() -> None:
    sink = MemoryContentSink(reject=["root/Desktop/name.txt"])
    report = persistence.save_all_files(build_sample_tree().root, sink)

    assert not report.ok
    assert report.failed == ["root/Desktop/name.txt"]
    assert len(report.written) == 3


def test_save_all_files_skips_empty_directories() -> None:
    tree = VirtualTree()
    add_item(tree.root, make_directory("empty"))
    sink = MemoryContentSink()
    report = persistence.save_all_files(tree.root, sink)
    assert report.ok
    assert sink.files == {}
