from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation, the application data directory
and the concrete sinks the explorer persists through: a line-oriented
hierarchy file and a directory-backed store for file payloads. Acts as an
abstraction over the 'os' module to ensure uniform behavior across Windows
and Unix-like systems.
"""

import logging
import os
from typing import IO, Optional, Tuple

from vexplorer.domain.constants import PATH_SEPARATOR

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

DEFAULT_STORAGE_SUBDIR = "vexplorer_files"
APP_DIR_NAME = "VExplorer"
UNIX_APP_DIR_NAME = ".vexplorer"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/VExplorer
    - Linux/Mac: ~/.vexplorer

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    # Windows specific resolution
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    # Idempotent directory creation
    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        logger.debug(f"Could not create data directory: {path}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def virtual_to_os_path(base_dir: str, virtual_path: str) -> str:
    """
    Map a virtual path (``root/Docs/a.txt``) below a real base directory.

    Empty and relative components (``.``, ``..``) are dropped so the
    result can never escape ``base_dir``.
    """
    parts = [p for p in virtual_path.split(PATH_SEPARATOR) if p and p not in (".", "..")]
    return os.path.join(base_dir, *parts)

# -----------------------------------------------------------------------------
# PERSISTENCE SINKS
# -----------------------------------------------------------------------------

class DiskContentSink:
    """
    Content sink writing each virtual file below a real directory.

    Parent directories are created on demand. Failures are logged and
    reported through the return value, never raised.
    """

    def __init__(self, base_dir: str):
        self.base_dir = os.path.abspath(base_dir)

    def write_file(self, target: str, content: str) -> bool:
        dest = virtual_to_os_path(self.base_dir, target)
        ok, err = safe_mkdir(os.path.dirname(dest))
        if not ok:
            logger.error(f"Could not create directory for '{dest}': {err}")
            return False
        try:
            with open(dest, "w", encoding="utf-8") as f:
                f.write(content)
            return True
        except OSError as e:
            logger.error(f"Could not save file '{dest}': {e}")
            return False


class FileHierarchySink:
    """
    Hierarchy sink streaming listing lines into a text file.

    The file is opened (truncated) on the first line so that an unwritable
    location surfaces as an OSError from write_line. Use as a context
    manager, or call close() explicitly.
    """

    def __init__(self, file_path: str):
        self.file_path = os.path.abspath(file_path)
        self._handle: Optional[IO[str]] = None

    def write_line(self, line: str) -> None:
        if self._handle is None:
            parent = os.path.dirname(self.file_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._handle = open(self.file_path, "w", encoding="utf-8")
        self._handle.write(line + "\n")

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def __enter__(self) -> "FileHierarchySink":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
