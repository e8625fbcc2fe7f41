from __future__ import annotations

"""
Unit tests for the Virtual Tree primitives.

Verifies:
1. Lookup rules (exact match, extension-stripped fallback for files only).
2. Insertion path derivation and order-preserving removal.
3. Deep cloning without aliasing and with re-derived paths.
4. Pre-order traversal, counting and absolute resolution.
"""

from vexplorer.core.tree import (
    VirtualTree,
    add_item,
    clone_node,
    count_nodes,
    find_directory,
    find_file,
    find_item,
    has_unique_names,
    iter_preorder,
    make_directory,
    make_file,
    remove_item,
)
from vexplorer.domain.tree_models import DirectoryNode, FileNode


def _dir_with(*children) -> DirectoryNode:
    tree = VirtualTree()
    for child in children:
        add_item(tree.root, child)
    return tree.root

# -----------------------------------------------------------------------------
# FACTORIES
# -----------------------------------------------------------------------------

def test_make_file_infers_extension() -> None:
    node = make_file("hello.cpp")
    assert (node.name, node.extension) == ("hello", ".cpp")


def test_make_file_defaults_extension_when_missing() -> None:
    node = make_file("notes")
    assert (node.name, node.extension) == ("notes", ".txt")


def test_make_file_with_recognized_list_keeps_unknown_suffix_in_name() -> None:
    node = make_file("script.py", recognized_extensions=[".txt", ".cpp"])
    assert (node.name, node.extension) == ("script.py", ".txt")

# -----------------------------------------------------------------------------
# LOOKUP
# -----------------------------------------------------------------------------

def test_find_item_exact_match_wins() -> None:
    report_dir = DirectoryNode(name="report.txt")
    root = _dir_with(report_dir, FileNode(name="report", extension=".txt"))
    assert find_item(root, "report.txt") is report_dir


def test_find_item_stripped_token_matches_file_with_any_extension() -> None:
    report = FileNode(name="report", extension=".cpp")
    root = _dir_with(report)
    assert find_item(root, "report") is report
    assert find_item(root, "report.txt") is report


def test_find_item_stripped_token_never_matches_directory() -> None:
    root = _dir_with(DirectoryNode(name="report"))
    assert find_item(root, "report.txt") is None
    assert find_item(root, "report") is not None


def test_find_item_does_not_descend() -> None:
    inner = DirectoryNode(name="inner")
    root = _dir_with(inner)
    add_item(inner, FileNode(name="deep", extension=".txt"))
    assert find_item(root, "deep") is None


def test_find_directory_and_find_file_are_type_restricted() -> None:
    docs = DirectoryNode(name="docs")
    note = FileNode(name="note", extension=".txt")
    root = _dir_with(docs, note)
    assert find_directory(root, "docs") is docs
    assert find_directory(root, "note") is None
    assert find_file(root, "note.txt") is note
    assert find_file(root, "docs") is None

# -----------------------------------------------------------------------------
# MUTATION
# -----------------------------------------------------------------------------

def test_add_item_sets_path_from_parent() -> None:
    tree = VirtualTree()
    docs = add_item(tree.root, make_directory("docs"))
    note = add_item(docs, FileNode(name="note", extension=".txt"))
    assert docs.path == "root"
    assert note.path == "root/docs"
    assert note.full_path == "root/docs/note"


def test_add_item_relocates_whole_subtree() -> None:
    detached = DirectoryNode(name="pack", path="elsewhere")
    add_item(detached, FileNode(name="a", extension=".txt"))
    tree = VirtualTree()
    add_item(tree.root, detached)
    assert detached.children[0].path == "root/pack"


def test_remove_item_preserves_sibling_order() -> None:
    root = _dir_with(
        FileNode(name="a"), FileNode(name="b"), FileNode(name="c"),
    )
    assert remove_item(root, "b") is True
    assert [c.name for c in root.children] == ["a", "c"]


def test_remove_item_missing_returns_false() -> None:
    root = _dir_with(FileNode(name="a"))
    assert remove_item(root, "zzz") is False
    assert len(root.children) == 1

# -----------------------------------------------------------------------------
# CLONING
# -----------------------------------------------------------------------------

def test_clone_directory_has_no_shared_instances() -> None:
    tree = VirtualTree()
    src = add_item(tree.root, make_directory("src"))
    add_item(src, FileNode(name="a", extension=".txt", content="hi"))
    sub = add_item(src, make_directory("sub"))
    add_item(sub, FileNode(name="b", extension=".cpp", content="int x;"))

    copy = clone_node(src)

    original_ids = {id(n) for _, n in iter_preorder(src)}
    copy_ids = {id(n) for _, n in iter_preorder(copy)}
    assert original_ids.isdisjoint(copy_ids)

    def pairs(node):
        return sorted(
            (n.full_path, getattr(n, "content", None)) for _, n in iter_preorder(node)
        )

    assert pairs(copy) == pairs(src)

    copy.children[0].content = "changed"
    assert src.children[0].content == "hi"


def test_clone_rederives_child_paths_on_reattachment() -> None:
    tree = VirtualTree()
    src = add_item(tree.root, make_directory("src"))
    add_item(src, FileNode(name="a"))

    copy = clone_node(src)
    dest = add_item(tree.root, make_directory("dest"))
    copy.name = "moved"
    add_item(dest, copy)

    assert copy.children[0].path == "root/dest/moved"

# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def test_iter_preorder_visits_parent_before_children() -> None:
    tree = VirtualTree()
    a = add_item(tree.root, make_directory("a"))
    add_item(a, FileNode(name="x"))
    add_item(tree.root, FileNode(name="y"))

    visited = [(depth, node.name) for depth, node in iter_preorder(tree.root)]
    assert visited == [(0, "root"), (1, "a"), (2, "x"), (1, "y")]
    assert count_nodes(tree.root) == 4


def test_resolve_absolute_locations() -> None:
    tree = VirtualTree()
    a = add_item(tree.root, make_directory("a"))
    x = add_item(a, FileNode(name="x", extension=".txt"))

    assert tree.resolve("root") is tree.root
    assert tree.resolve("root/a/x.txt") is x
    assert tree.resolve(["root", "a"]) is a
    assert tree.resolve("root/missing") is None
    assert tree.resolve("other/a") is None
    assert tree.resolve("root/a/x/deeper") is None


def test_has_unique_names_detects_duplicates() -> None:
    root = _dir_with(FileNode(name="a"), DirectoryNode(name="b"))
    assert has_unique_names(root) is True
    root.children.append(DirectoryNode(name="a"))
    assert has_unique_names(root) is False
