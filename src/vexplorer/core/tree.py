from __future__ import annotations

"""
Virtual Tree Primitives.

Implements lookup, insertion, removal, deep cloning and traversal over
the node model. These primitives do not enforce naming policy on their
own: collision rules belong to the explorer operations that call them,
so that "create" and "paste with overwrite" can differ.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from vexplorer.core.path_utils import base_name, has_extension, split_name, split_path
from vexplorer.domain.constants import DEFAULT_EXTENSION, ROOT_NAME
from vexplorer.domain.tree_models import DirectoryNode, FileNode, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FACTORIES
# -----------------------------------------------------------------------------

def make_file(
        full_name: str,
        path: str = "",
        content: str = "",
        default_extension: str = DEFAULT_EXTENSION,
        recognized_extensions: Optional[Iterable[str]] = None,
) -> FileNode:
    """
    Build a file node from a dotted name, inferring its extension.

    The extension after the last dot is split off (``notes`` gets the
    default extension). When ``recognized_extensions`` is given, an
    extension outside that list is not split: the whole name becomes the
    base name and the default extension is applied.

    Args:
        full_name: Name as typed, e.g. ``main.cpp``.
        path: Full path of the future parent directory.
        content: Initial payload.
        default_extension: Fallback extension.
        recognized_extensions: Accepted extensions; empty or None accepts any.

    Returns:
        FileNode: The new detached file.
    """
    name, ext = split_name(full_name, default_extension)
    allowed = set(recognized_extensions or ())
    if allowed and ext not in allowed:
        name, ext = full_name, default_extension
    return FileNode(name=name, path=path, extension=ext, content=content)


def make_directory(name: str, path: str = "") -> DirectoryNode:
    return DirectoryNode(name=name, path=path)


# -----------------------------------------------------------------------------
# LOOKUP
# -----------------------------------------------------------------------------

def find_item(directory: DirectoryNode, token: str) -> Optional[Node]:
    """
    Locate a direct child of ``directory`` by name.

    Resolution order:
    1. Exact match against every child name.
    2. If the token carries an extension, match its base name against
       file children only. Directories never match a stripped token.

    Args:
        directory: Directory whose children are searched (no recursion).
        token: Name as typed, with or without extension.

    Returns:
        Optional[Node]: First match in insertion order, or None.
    """
    for child in directory.children:
        if child.name == token:
            return child

    if not has_extension(token):
        return None

    stripped = base_name(token)
    for child in directory.children:
        if isinstance(child, FileNode) and child.name == stripped:
            return child
    return None


def find_directory(directory: DirectoryNode, name: str) -> Optional[DirectoryNode]:
    """Locate a child directory by exact name."""
    for child in directory.children:
        if isinstance(child, DirectoryNode) and child.name == name:
            return child
    return None


def find_file(directory: DirectoryNode, token: str) -> Optional[FileNode]:
    """Locate a child file using the same rules as find_item."""
    item = find_item(directory, token)
    return item if isinstance(item, FileNode) else None


# -----------------------------------------------------------------------------
# MUTATION
# -----------------------------------------------------------------------------

def add_item(directory: DirectoryNode, node: Node) -> Node:
    """
    Attach ``node`` as the last child of ``directory``.

    Re-derives the node's path from the directory. Descendant paths of a
    directory node are refreshed as well so the subtree stays consistent
    with its new location. No collision check is performed here.

    Returns:
        Node: The attached node.
    """
    _relocate(node, directory.full_path)
    directory.children.append(node)
    return node


def remove_item(directory: DirectoryNode, name: str) -> bool:
    """
    Detach and drop the child whose name matches exactly.

    Sibling order is preserved. A directory takes its subtree with it.

    Returns:
        bool: True if a child was removed.
    """
    for i, child in enumerate(directory.children):
        if child.name == name:
            del directory.children[i]
            logger.debug(f"Removed '{child.full_path}'")
            return True
    return False


def clone_node(node: Node) -> Node:
    """
    Produce an independent deep copy of ``node``.

    File clones copy every field. Directory clones recursively clone each
    child and attach it through add_item, so every path in the copy is
    derived from the copy's own location.
    """
    if isinstance(node, FileNode):
        return FileNode(
            name=node.name,
            path=node.path,
            extension=node.extension,
            content=node.content,
        )

    copy = DirectoryNode(name=node.name, path=node.path)
    for child in node.children:
        add_item(copy, clone_node(child))
    return copy


def _relocate(node: Node, new_path: str) -> None:
    node.path = new_path
    if isinstance(node, DirectoryNode):
        own = node.full_path
        for child in node.children:
            _relocate(child, own)


# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

def iter_preorder(node: Node, depth: int = 0) -> Iterator[Tuple[int, Node]]:
    """Yield (depth, node) pairs visiting each node before its children."""
    yield depth, node
    if isinstance(node, DirectoryNode):
        for child in node.children:
            yield from iter_preorder(child, depth + 1)


def count_nodes(node: Node) -> int:
    return sum(1 for _ in iter_preorder(node))


def has_unique_names(directory: DirectoryNode) -> bool:
    """Check recursively that no directory holds two children with one name."""
    for _, node in iter_preorder(directory):
        if isinstance(node, DirectoryNode):
            names = [c.name for c in node.children]
            if len(names) != len(set(names)):
                return False
    return True


# -----------------------------------------------------------------------------
# TREE OWNER
# -----------------------------------------------------------------------------

class VirtualTree:
    """
    Owner of the root directory of a virtual file system.

    The root is created with an empty path, is never removable and has no
    parent.
    """

    def __init__(self, root: Optional[DirectoryNode] = None):
        self.root: DirectoryNode = root if root is not None else DirectoryNode(name=ROOT_NAME)
        _relocate(self.root, "")

    def resolve(self, location: Union[str, Sequence[str]]) -> Optional[Node]:
        """
        Find a node from an absolute location.

        Args:
            location: Full path string (``root/Desktop``) or its components.
                The first component must be the root name.

        Returns:
            Optional[Node]: The node or None if any component is missing.
        """
        parts: List[str] = split_path(location) if isinstance(location, str) else list(location)
        if not parts or parts[0] != self.root.name:
            return None

        node: Node = self.root
        for part in parts[1:]:
            if not isinstance(node, DirectoryNode):
                return None
            found = find_item(node, part)
            if found is None:
                return None
            node = found
        return node

    def count(self) -> int:
        return count_nodes(self.root)
