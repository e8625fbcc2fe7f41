from __future__ import annotations

"""
Single-Slot Clipboard.

Holds a detached clone of one node together with the mode it was staged
with. The clipboard never touches the live tree: removing the source of a
cut is a separate step owned by the caller, and pasting reads the slot
without consuming it.
"""

import logging
from enum import Enum
from typing import Optional

from vexplorer.core.tree import clone_node
from vexplorer.domain.tree_models import FileNode, Node

logger = logging.getLogger(__name__)


class ClipboardMode(str, Enum):
    COPY = "copy"
    CUT = "cut"


class Clipboard:
    """
    Process-wide holder for the next paste.

    The stored node is always a private clone; callers receive further
    clones so repeated pastes never alias one another or the slot.
    """

    def __init__(self) -> None:
        self._node: Optional[Node] = None
        self._mode: Optional[ClipboardMode] = None

    @property
    def is_empty(self) -> bool:
        return self._node is None

    @property
    def mode(self) -> Optional[ClipboardMode]:
        return self._mode

    @property
    def name(self) -> str:
        return self._node.name if self._node is not None else ""

    def stage(self, node: Node, mode: ClipboardMode) -> None:
        """
        Replace the slot content with a fresh clone of ``node``.

        Args:
            node: Live node to copy. It is not modified.
            mode: Whether the caller intends to remove the source afterwards.
        """
        self._node = clone_node(node)
        self._mode = mode
        logger.debug(f"Clipboard staged '{node.full_path}' ({mode.value})")

    def peek(self) -> Optional[Node]:
        """Return the stored clone for inspection. Do not attach it to a tree."""
        return self._node

    def materialize(self, name: Optional[str] = None, extension: Optional[str] = None) -> Optional[Node]:
        """
        Produce an independent copy of the slot content.

        Args:
            name: Optional replacement name for the copy. The slot keeps
                its original name.
            extension: Optional replacement extension, applied to files only.

        Returns:
            Optional[Node]: A new detached node, or None if the slot is empty.
        """
        if self._node is None:
            return None
        copy = clone_node(self._node)
        if name:
            copy.name = name
        if extension and isinstance(copy, FileNode):
            copy.extension = extension
        return copy

    def clear(self) -> None:
        self._node = None
        self._mode = None
