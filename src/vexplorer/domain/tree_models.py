from __future__ import annotations

"""
Virtual Tree Data Models.

Provides the node types that make up the in-memory file system: a shared
header (name, path) specialised into files carrying a payload and
directories owning an ordered list of children.
"""

from dataclasses import dataclass, field
from typing import List, Union

from vexplorer.domain.constants import PATH_SEPARATOR

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class FileNode:
    """
    Leaf entry of the virtual tree.

    Attributes:
        name: Base name, without extension. Unique among siblings.
        path: Full path of the owning directory ("" when detached).
        extension: Dotted extension, e.g. ".txt".
        content: Opaque text payload.
    """
    name: str
    path: str = ""
    extension: str = ""
    content: str = ""

    @property
    def full_path(self) -> str:
        return join_full_path(self.path, self.name)

    @property
    def display_name(self) -> str:
        return f"{self.name}{self.extension}"


@dataclass
class DirectoryNode:
    """
    Container entry of the virtual tree.

    A directory exclusively owns its children; dropping the directory drops
    the whole subtree. Parents are not referenced from children.

    Attributes:
        name: Directory name. Unique among siblings.
        path: Full path of the owning directory ("" for the root).
        children: Owned entries in insertion order.
    """
    name: str
    path: str = ""
    children: List["Node"] = field(default_factory=list)

    @property
    def full_path(self) -> str:
        return join_full_path(self.path, self.name)

    @property
    def display_name(self) -> str:
        return self.name


Node = Union[FileNode, DirectoryNode]


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def join_full_path(path: str, name: str) -> str:
    """
    Compute the full location of an entry from its parent path and name.

    An empty (or bare separator) parent path yields the name alone.
    """
    if not path or path == PATH_SEPARATOR:
        return name
    return f"{path}{PATH_SEPARATOR}{name}"


def is_directory(node: Node) -> bool:
    return isinstance(node, DirectoryNode)
