from __future__ import annotations

"""
Explorer Session.

Stateful facade over a virtual tree: keeps the current-directory cursor,
owns the clipboard and exposes the navigate/create/delete/copy/cut/paste/
save operations consumed by the interface layers. Every operation returns
an OperationResult; expected failures (unknown names, collisions, moves
past the root) are reported, never raised.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from vexplorer.core import persistence
from vexplorer.core.clipboard import Clipboard, ClipboardMode
from vexplorer.core.path_utils import trim
from vexplorer.core.tree import (
    VirtualTree,
    add_item,
    find_directory,
    find_file,
    find_item,
    make_directory,
    make_file,
    remove_item,
)
from vexplorer.domain.constants import (
    DEFAULT_EXTENSION,
    MAX_RENAME_ATTEMPTS,
    PARENT_TOKEN,
    PATH_SEPARATOR,
)
from vexplorer.domain.interaction_models import (
    AutoPrompter,
    ContentEditor,
    ContentSink,
    HierarchySink,
    PasteAction,
    Prompter,
)
from vexplorer.domain.results import (
    OperationResult,
    OperationStatus,
    create_cancelled_result,
    create_error_result,
    create_success_result,
)
from vexplorer.domain.tree_models import DirectoryNode, FileNode, Node

logger = logging.getLogger(__name__)


class Explorer:
    """
    Interactive session over a VirtualTree.

    The cursor is modelled as the stack of directories visited from the
    root, so moving up never relies on a stored parent reference.

    Attributes:
        tree: The owned virtual tree.
        clipboard: Single-slot clipboard shared by copy/cut/paste.
        prompter: Injected confirmation and collision-choice capability.
    """

    def __init__(
            self,
            tree: Optional[VirtualTree] = None,
            prompter: Optional[Prompter] = None,
            clipboard: Optional[Clipboard] = None,
            default_extension: str = DEFAULT_EXTENSION,
            recognized_extensions: Optional[Iterable[str]] = None,
    ):
        self.tree = tree or VirtualTree()
        self.prompter: Prompter = prompter or AutoPrompter()
        self.clipboard = clipboard or Clipboard()
        self.default_extension = default_extension
        self.recognized_extensions = list(recognized_extensions or [])
        self._stack: List[DirectoryNode] = [self.tree.root]

    # -------------------------------------------------------------------------
    # CURSOR
    # -------------------------------------------------------------------------

    @property
    def current_directory(self) -> DirectoryNode:
        if not self._stack:
            self._stack = [self.tree.root]
        return self._stack[-1]

    @property
    def current_path(self) -> str:
        return self.current_directory.full_path

    @property
    def at_root(self) -> bool:
        return self.current_directory is self.tree.root

    def list_current(self) -> List[Node]:
        """Return the cursor's children in insertion order."""
        return list(self.current_directory.children)

    def navigate(self, target: str) -> OperationResult:
        """
        Move the cursor.

        ``..`` moves to the parent directory and fails at the root. Any
        other token must name a child directory exactly.
        """
        target = trim(target)

        if target == PARENT_TOKEN:
            if len(self._stack) > 1:
                self._stack.pop()
                return create_success_result(payload=self.current_directory)
            if not self.at_root:
                # Cursor detached from any known chain: fall back to the root
                logger.warning("Cursor lost its parent chain; resetting to root.")
                self.go_root()
                return create_success_result(payload=self.current_directory)
            return create_error_result(
                OperationStatus.INVALID_OPERATION,
                "Already at the root directory.",
            )

        directory = find_directory(self.current_directory, target)
        if directory is None:
            return create_error_result(
                OperationStatus.NOT_FOUND,
                f"'{target}' is not a directory.",
            )
        self._stack.append(directory)
        return create_success_result(payload=directory)

    def go_root(self) -> None:
        self._stack = [self.tree.root]

    # -------------------------------------------------------------------------
    # FILE CONTENT
    # -------------------------------------------------------------------------

    def view_file(self, token: str) -> OperationResult:
        """Resolve a file in the cursor directory; the payload is the FileNode."""
        file_node = find_file(self.current_directory, trim(token))
        if file_node is None:
            return create_error_result(OperationStatus.NOT_FOUND, f"File '{token}' not found.")
        return create_success_result(payload=file_node)

    def set_file_content(self, token: str, content: str) -> OperationResult:
        file_node = find_file(self.current_directory, trim(token))
        if file_node is None:
            return create_error_result(OperationStatus.NOT_FOUND, f"File '{token}' not found.")
        file_node.content = content
        logger.info(f"Updated content of '{file_node.full_path}{file_node.extension}'")
        return create_success_result(f"Saved {file_node.display_name}", payload=file_node)

    def edit_file(self, token: str, editor: ContentEditor) -> OperationResult:
        """
        Hand a file's content to ``editor`` and store what it returns.

        An editor returning None leaves the file untouched (cancellation).
        """
        file_node = find_file(self.current_directory, trim(token))
        if file_node is None:
            return create_error_result(OperationStatus.NOT_FOUND, f"File '{token}' not found.")

        new_content = editor.edit(file_node.display_name, file_node.content)
        if new_content is None:
            return create_cancelled_result("Changes discarded.")
        return self.set_file_content(token, new_content)

    # -------------------------------------------------------------------------
    # CREATION / DELETION
    # -------------------------------------------------------------------------

    def create_directory(self, name: str) -> OperationResult:
        name = trim(name)
        invalid = self._validate_name(name)
        if invalid is not None:
            return invalid
        if self._child_named(name) is not None:
            return create_error_result(
                OperationStatus.ALREADY_EXISTS,
                f"An item named '{name}' already exists.",
            )

        node = add_item(self.current_directory, make_directory(name))
        logger.info(f"Directory created: {node.full_path}")
        return create_success_result(f"Directory created: {name}", payload=node)

    def create_file(self, name: str) -> OperationResult:
        """
        Create an empty file under the cursor.

        The token is split with the last-dot rule; a token without
        extension gets the default one. The base name must be free.
        """
        name = trim(name)
        invalid = self._validate_name(name)
        if invalid is not None:
            return invalid

        node = make_file(
            name,
            default_extension=self.default_extension,
            recognized_extensions=self.recognized_extensions,
        )
        if self._child_named(node.name) is not None:
            return create_error_result(
                OperationStatus.ALREADY_EXISTS,
                f"An item named '{node.name}' already exists.",
            )

        add_item(self.current_directory, node)
        logger.info(f"File created: {node.full_path}{node.extension}")
        return create_success_result(f"File created: {node.display_name}", payload=node)

    def delete_item(self, name: str) -> OperationResult:
        """
        Remove an entry of the cursor directory after confirmation.

        Declining the confirmation is a cancellation, not a failure.
        """
        name = trim(name)
        item = find_item(self.current_directory, name)
        if item is None:
            return create_error_result(OperationStatus.NOT_FOUND, f"Item '{name}' not found.")

        if not self.prompter.confirm(f"Are you sure you want to delete '{name}'?"):
            return create_cancelled_result(f"Kept '{name}'.")

        remove_item(self.current_directory, item.name)
        logger.info(f"Deleted: {item.full_path}")
        return create_success_result(f"Deleted: {name}", payload=item)

    # -------------------------------------------------------------------------
    # CLIPBOARD
    # -------------------------------------------------------------------------

    def copy_item(self, name: str) -> OperationResult:
        return self._stage(name, ClipboardMode.COPY)

    def cut_item(self, name: str) -> OperationResult:
        """
        Stage a clone of ``name`` in cut mode.

        The source stays in place; removing it is a separate delete_item
        call so that a failed or declined removal keeps the clipboard valid.
        """
        return self._stage(name, ClipboardMode.CUT)

    def paste_item(self) -> OperationResult:
        """
        Insert a fresh clone of the clipboard content under the cursor.

        On a name collision the prompter chooses between overwriting the
        existing entry, pasting under a new name or cancelling. The
        clipboard is left intact in every case.
        """
        if self.clipboard.is_empty:
            return create_error_result(OperationStatus.INVALID_OPERATION, "Nothing to paste.")

        target_name = self.clipboard.name
        target_extension: Optional[str] = None
        if self._child_named(target_name) is not None:
            resolved = self._resolve_collision(target_name)
            if isinstance(resolved, OperationResult):
                return resolved
            target_name, target_extension = resolved

        node = self.clipboard.materialize(name=target_name, extension=target_extension)
        add_item(self.current_directory, node)
        logger.info(f"Pasted '{node.full_path}' ({self.clipboard.mode.value})")
        return create_success_result(f"Pasted: {node.display_name}", payload=node)

    # -------------------------------------------------------------------------
    # PERSISTENCE
    # -------------------------------------------------------------------------

    def render_tree(self) -> List[str]:
        return persistence.render_hierarchy(self.tree.root)

    def save_hierarchy(self, sink: HierarchySink) -> OperationResult:
        try:
            count = persistence.save_hierarchy(self.tree.root, sink)
        except OSError as e:
            logger.error(f"Could not save hierarchy: {e}")
            return create_error_result(OperationStatus.IO_FAILURE, f"Could not save hierarchy: {e}")
        return create_success_result("Hierarchy saved.", payload=count)

    def save_all_files(self, sink: ContentSink) -> OperationResult:
        report = persistence.save_all_files(self.tree.root, sink)
        if not report.ok:
            return create_error_result(
                OperationStatus.IO_FAILURE,
                f"Could not save {len(report.failed)} file(s): {', '.join(report.failed)}",
                payload=report,
            )
        return create_success_result("All files saved.", payload=report)

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _stage(self, name: str, mode: ClipboardMode) -> OperationResult:
        name = trim(name)
        item = find_item(self.current_directory, name)
        if item is None:
            return create_error_result(OperationStatus.NOT_FOUND, f"Item '{name}' not found.")
        self.clipboard.stage(item, mode)
        verb = "Copied" if mode is ClipboardMode.COPY else "Cut"
        return create_success_result(f"{verb}: {name}", payload=item)

    def _resolve_collision(self, name: str) -> Union[Tuple[str, Optional[str]], OperationResult]:
        """
        Ask the prompter how to paste over an existing ``name``.

        Returns:
            The (name, extension) to paste under, where extension is None
            to keep the clipboard's own, or the result ending the paste.
        """
        prompt = f"'{name}' already exists. Overwrite, rename or cancel?"
        for _ in range(MAX_RENAME_ATTEMPTS):
            choice = self.prompter.choose_collision(prompt)

            if choice.action is PasteAction.OVERWRITE:
                remove_item(self.current_directory, name)
                logger.info(f"Overwriting '{name}' in {self.current_path}")
                return name, None

            if choice.action is PasteAction.RENAME:
                token = trim(choice.new_name)
                if self._validate_name(token) is not None:
                    prompt = f"'{token}' is not a valid name. Overwrite, rename or cancel?"
                    continue
                new_name, extension = self._split_paste_name(token)
                if self._child_named(new_name) is not None:
                    prompt = f"'{token}' already exists. Overwrite, rename or cancel?"
                    continue
                return new_name, extension

            return create_cancelled_result("Paste cancelled.")

        return create_error_result(
            OperationStatus.ALREADY_EXISTS,
            f"An item named '{name}' already exists.",
        )

    def _split_paste_name(self, token: str) -> Tuple[str, Optional[str]]:
        # Files follow the same naming rules as create_file; the staged
        # extension stands in when the token has none or an unrecognized one
        staged = self.clipboard.peek()
        if not isinstance(staged, FileNode):
            return token, None
        node = make_file(
            token,
            default_extension=staged.extension,
            recognized_extensions=self.recognized_extensions,
        )
        return node.name, node.extension

    def _child_named(self, name: str) -> Optional[Node]:
        for child in self.current_directory.children:
            if child.name == name:
                return child
        return None

    @staticmethod
    def _validate_name(name: str) -> Optional[OperationResult]:
        if not name or name in (PARENT_TOKEN, ".") or PATH_SEPARATOR in name:
            return create_error_result(OperationStatus.INVALID_OPERATION, f"Invalid name '{name}'.")
        return None
