from __future__ import annotations

"""
Directory Scanner.

Imports a real directory into a VirtualTree so that a session can start
from an existing project instead of the sample layout. Walks the
filesystem in sorted order, skips hidden entries and loads file payloads
as UTF-8 text.
"""

import logging
import os
from typing import Dict, Optional

from vexplorer.core.path_utils import split_name
from vexplorer.core.tree import VirtualTree, add_item, make_directory
from vexplorer.domain.constants import ROOT_NAME
from vexplorer.domain.tree_models import DirectoryNode, FileNode

logger = logging.getLogger(__name__)

# Upper bound for imported payloads; larger files are imported empty
MAX_IMPORT_BYTES = 1024 * 1024

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan_directory(
        input_path: str,
        root_name: str = ROOT_NAME,
        default_extension: str = "",
) -> VirtualTree:
    """
    Build a virtual tree mirroring ``input_path``.

    Files are split with the last-dot rule (``main.py`` -> ``main`` +
    ``.py``). When two files share a base name (``a.txt``, ``a.md``) only
    the first in sorted order is imported, keeping sibling names unique.

    Args:
        input_path: Directory to import.
        root_name: Name given to the virtual root.
        default_extension: Extension assigned to files without one.

    Returns:
        VirtualTree: The imported tree.

    Raises:
        NotADirectoryError: If input_path is not an existing directory.
    """
    base = os.path.abspath(input_path)
    if not os.path.isdir(base):
        raise NotADirectoryError(base)

    logger.info(f"Importing directory tree from: {base}")
    tree = VirtualTree(DirectoryNode(name=root_name))
    levels: Dict[str, DirectoryNode] = {"": tree.root}

    for current, dirs, files in os.walk(base):
        dirs[:] = sorted(d for d in dirs if not _is_hidden(d))
        files.sort()

        rel_root = os.path.relpath(current, base)
        if rel_root == ".":
            rel_root = ""
        parent = levels.get(rel_root)
        if parent is None:
            dirs[:] = []
            continue

        taken = {child.name for child in parent.children}

        for dir_name in dirs:
            if dir_name in taken:
                logger.warning(f"Skipping directory '{dir_name}': name already used in {parent.full_path}")
                continue
            node = add_item(parent, make_directory(dir_name))
            taken.add(dir_name)
            levels[os.path.join(rel_root, dir_name) if rel_root else dir_name] = node

        for file_name in files:
            if _is_hidden(file_name):
                continue
            name, ext = split_name(file_name, default_extension)
            if name in taken:
                logger.warning(f"Skipping file '{file_name}': name already used in {parent.full_path}")
                continue
            content = _read_text(os.path.join(current, file_name))
            add_item(parent, FileNode(name=name, extension=ext, content=content or ""))
            taken.add(name)

    logger.info(f"Imported {tree.count()} entries.")
    return tree

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _read_text(file_path: str) -> Optional[str]:
    """Read a file as UTF-8 text; None for binary, oversized or unreadable files."""
    try:
        if os.path.getsize(file_path) > MAX_IMPORT_BYTES:
            logger.warning(f"Skipping payload of oversized file: {file_path}")
            return None
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError:
        logger.debug(f"Binary or non UTF-8 file imported empty: {file_path}")
        return None
    except OSError as e:
        logger.error(f"Failed to read '{file_path}': {e}")
        return None
