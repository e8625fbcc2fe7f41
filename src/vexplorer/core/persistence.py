from __future__ import annotations

"""
Tree Persistence.

Serializes the virtual tree to an indented, human-readable listing and
flushes file payloads to a content sink. Listing failures abort the dump;
content failures are reported per file while the traversal continues.
"""

import logging
from typing import List

from vexplorer.core.tree import iter_preorder
from vexplorer.domain.constants import DIRECTORY_MARKER, FILE_MARKER, INDENT_UNIT
from vexplorer.domain.interaction_models import ContentSink, HierarchySink
from vexplorer.domain.results import SaveReport
from vexplorer.domain.tree_models import DirectoryNode, FileNode, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# HIERARCHY LISTING
# -----------------------------------------------------------------------------

def format_entry(node: Node, depth: int) -> str:
    """
    Render one listing line: ``<indent><marker> <name>[<extension>]``.

    Args:
        node: Entry to render.
        depth: Distance from the dumped root (root is 0).
    """
    indent = INDENT_UNIT * depth
    if isinstance(node, DirectoryNode):
        return f"{indent}{DIRECTORY_MARKER} {node.name}"
    return f"{indent}{FILE_MARKER} {node.name}{node.extension}"


def render_hierarchy(root: Node) -> List[str]:
    """Return the pre-order listing of ``root`` and all its descendants."""
    return [format_entry(node, depth) for depth, node in iter_preorder(root)]


def save_hierarchy(root: Node, sink: HierarchySink) -> int:
    """
    Stream the hierarchy listing into ``sink``.

    Args:
        root: Top of the dumped subtree.
        sink: Line consumer.

    Returns:
        int: Number of lines written.

    Raises:
        OSError: If the sink rejects a line. The dump stops there.
    """
    written = 0
    for line in render_hierarchy(root):
        sink.write_line(line)
        written += 1
    logger.debug(f"Hierarchy dump completed ({written} entries)")
    return written


# -----------------------------------------------------------------------------
# CONTENT FLUSH
# -----------------------------------------------------------------------------

def content_target(node: FileNode) -> str:
    """Storage key of a file: its full path followed by its extension."""
    return f"{node.full_path}{node.extension}"


def save_all_files(root: Node, sink: ContentSink) -> SaveReport:
    """
    Write the payload of every file under ``root`` into ``sink``.

    Directories carry no payload; saving one means saving its children.
    A rejected write is recorded and the traversal goes on.

    Returns:
        SaveReport: Written and failed targets.
    """
    report = SaveReport()
    for _, node in iter_preorder(root):
        if not isinstance(node, FileNode):
            continue
        target = content_target(node)
        if sink.write_file(target, node.content):
            report.written.append(target)
        else:
            logger.error(f"Could not save file {target}")
            report.failed.append(target)
    return report
