from __future__ import annotations

"""
Interactive Command Shell.

Turns raw command lines into explorer operations and renders their
results. Owns every console interaction: the command loop, yes/no and
collision prompts, the line editor and the listing shown after each
command. The explorer core itself never reads or prints anything.
"""

import cmd
import logging
import sys
from typing import IO, Callable, Iterable, Optional, Tuple

from vexplorer.core.explorer import Explorer
from vexplorer.core.path_utils import split_command
from vexplorer.domain.constants import DIRECTORY_MARKER, FILE_MARKER
from vexplorer.domain.interaction_models import PasteChoice
from vexplorer.domain.results import OperationResult
from vexplorer.domain.tree_models import DirectoryNode, FileNode
from vexplorer.infra.fs import DiskContentSink, FileHierarchySink
from vexplorer.interface.shell.editor import ConsoleEditor
from vexplorer.utils.i18n import i18n

logger = logging.getLogger(__name__)

YES_ANSWERS = ("y", "yes")
RENAME_ANSWER = "rename"

# Commands listed by 'help', in display order
COMMANDS = (
    "cd", "view", "edit", "delete", "copy", "cut", "paste",
    "mkdir", "touch", "ls", "pwd", "tree", "save", "exit", "help",
)

# -----------------------------------------------------------------------------
# CONSOLE I/O ADAPTERS
# -----------------------------------------------------------------------------

def make_line_reader(stdin: Optional[IO[str]], stdout: IO[str]) -> Callable[[str], str]:
    """
    Build a prompt-and-read callable over the given streams.

    With no explicit stdin the builtin input() is used so that readline
    editing stays available in a real terminal.
    """
    if stdin is None:
        return input

    def read_line(prompt: str) -> str:
        if prompt:
            stdout.write(prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    return read_line


class ConsolePrompter:
    """Prompter asking the user through the console."""

    def __init__(self, read_line: Callable[[str], str]):
        self._read_line = read_line

    def confirm(self, prompt: str) -> bool:
        try:
            answer = self._read_line(i18n.t("shell.prompts.yes_no", default="{prompt} (y/n): ", prompt=prompt))
        except EOFError:
            return False
        return answer.strip().lower() in YES_ANSWERS

    def choose_collision(self, prompt: str) -> PasteChoice:
        try:
            answer = self._read_line(
                i18n.t("shell.prompts.collision", default="{prompt} (y/n/rename): ", prompt=prompt)
            ).strip().lower()
            if answer in YES_ANSWERS:
                return PasteChoice.overwrite()
            if answer == RENAME_ANSWER:
                new_name = self._read_line(i18n.t("shell.prompts.new_name", default="Enter new name: "))
                return PasteChoice.rename(new_name.strip())
        except EOFError:
            pass
        return PasteChoice.cancel()

# -----------------------------------------------------------------------------
# COMMAND DISPATCHER
# -----------------------------------------------------------------------------

class ExplorerShell(cmd.Cmd):
    """
    Command loop driving an Explorer session.

    Args:
        explorer: Session to drive. Its prompter should read from the same
            streams as the shell.
        storage_dir: Directory receiving file payloads on save.
        hierarchy_path: File receiving the hierarchy listing on save.
        save_on_exit: Whether 'exit' persists the session first.
        stdin: Optional input stream (defaults to the terminal).
        stdout: Optional output stream (defaults to sys.stdout).
    """

    def __init__(
            self,
            explorer: Explorer,
            storage_dir: str,
            hierarchy_path: str,
            save_on_exit: bool = True,
            stdin: Optional[IO[str]] = None,
            stdout: Optional[IO[str]] = None,
    ):
        super().__init__(stdin=stdin, stdout=stdout or sys.stdout)
        self.use_rawinput = stdin is None
        self.explorer = explorer
        self.storage_dir = storage_dir
        self.hierarchy_path = hierarchy_path
        self.save_on_exit = save_on_exit
        self.save_ok = True

        self.read_line = make_line_reader(stdin, self.stdout)
        self.editor = ConsoleEditor(self.read_line, self._write, ConsolePrompter(self.read_line).confirm)
        self._refresh_prompt()

    # -------------------------------------------------------------------------
    # LOOP HOOKS
    # -------------------------------------------------------------------------

    def parseline(self, line: str) -> Tuple[Optional[str], Optional[str], str]:
        # Only the first argument is significant; names cannot contain spaces
        tokens = split_command(line)
        if not tokens:
            return None, None, ""
        arg = tokens[1] if len(tokens) > 1 else ""
        return tokens[0], arg, " ".join(tokens)

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> bool:
        command = split_command(line)[0] if split_command(line) else line
        self._write(i18n.t("shell.unknown_command", default="Unknown command: {command}", command=command))
        return False

    def preloop(self) -> None:
        self._write(i18n.t("app.banner", default="===== Virtual File Explorer ====="))
        self.display_current_directory()

    def postcmd(self, stop: bool, line: str) -> bool:
        if not stop and line.strip():
            self.display_current_directory()
        self._refresh_prompt()
        return stop

    def run_script(self, commands: Iterable[str]) -> None:
        """Execute commands one by one, exactly as if typed, until one exits."""
        for line in commands:
            logger.debug(f"Scripted command: {line}")
            stop = self.onecmd(line)
            if self.postcmd(stop, line):
                break

    # -------------------------------------------------------------------------
    # NAVIGATION / VIEWING
    # -------------------------------------------------------------------------

    def do_cd(self, arg: str) -> bool:
        if not self._require(arg, "cd", "a directory name"):
            return False
        if self.explorer.navigate(arg).ok:
            return False
        # Not a directory: treat the target as a file to display
        viewed = self.explorer.view_file(arg)
        if viewed.ok:
            self._show_file(viewed.payload)
        else:
            self._write(i18n.t("shell.errors.not_dir_or_file", target=arg))
        return False

    def do_view(self, arg: str) -> bool:
        if not self._require(arg, "view", "a file name"):
            return False
        viewed = self.explorer.view_file(arg)
        if viewed.ok:
            self._show_file(viewed.payload)
        else:
            self._write(i18n.t("shell.errors.cannot_view", name=arg))
        return False

    def do_ls(self, arg: str) -> bool:
        # The listing itself is printed by postcmd
        return False

    def do_pwd(self, arg: str) -> bool:
        self._write(self.explorer.current_path)
        return False

    def do_tree(self, arg: str) -> bool:
        for line in self.explorer.render_tree():
            self._write(line)
        return False

    # -------------------------------------------------------------------------
    # MUTATIONS
    # -------------------------------------------------------------------------

    def do_edit(self, arg: str) -> bool:
        if not self._require(arg, "edit", "a file name"):
            return False
        result = self.explorer.edit_file(arg, self.editor)
        if not result.ok:
            self._write(i18n.t("shell.errors.cannot_edit", name=arg))
        elif result.message:
            self._write(result.message)
        return False

    def do_delete(self, arg: str) -> bool:
        if not self._require(arg, "delete", "an item name"):
            return False
        result = self.explorer.delete_item(arg)
        if not result.ok:
            self._write(i18n.t("shell.errors.generic", message=result.message))
            self._write(i18n.t("shell.errors.cannot_delete", name=arg))
        return False

    def do_copy(self, arg: str) -> bool:
        if not self._require(arg, "copy", "an item name"):
            return False
        result = self.explorer.copy_item(arg)
        self._write(result.message if result.ok else i18n.t("shell.errors.cannot_copy", name=arg))
        return False

    def do_cut(self, arg: str) -> bool:
        if not self._require(arg, "cut", "an item name"):
            return False
        staged = self.explorer.cut_item(arg)
        if not staged.ok:
            self._write(i18n.t("shell.errors.cannot_cut", name=arg))
            return False
        self._write(staged.message)

        # The clone stays on the clipboard whatever happens to the source
        removed = self.explorer.delete_item(arg)
        if not removed.ok or removed.cancelled:
            self._write(i18n.t("shell.errors.cannot_delete", name=arg))
        return False

    def do_paste(self, arg: str) -> bool:
        result = self.explorer.paste_item()
        if result.ok and not result.cancelled:
            self._write(result.message)
        elif not result.cancelled:
            self._write(i18n.t("shell.errors.generic", message=result.message))
            self._write(i18n.t("shell.errors.paste_failed"))
        return False

    def do_mkdir(self, arg: str) -> bool:
        if not self._require(arg, "mkdir", "a directory name"):
            return False
        self._report(self.explorer.create_directory(arg))
        return False

    def do_touch(self, arg: str) -> bool:
        if not self._require(arg, "touch", "a file name"):
            return False
        self._report(self.explorer.create_file(arg))
        return False

    # -------------------------------------------------------------------------
    # PERSISTENCE / LIFECYCLE
    # -------------------------------------------------------------------------

    def do_save(self, arg: str) -> bool:
        self.save_session()
        return False

    def do_exit(self, arg: str) -> bool:
        if self.save_on_exit:
            self.save_session()
        self._write(i18n.t("app.goodbye", default="Exiting file explorer..."))
        return True

    def do_quit(self, arg: str) -> bool:
        return self.do_exit(arg)

    def do_EOF(self, arg: str) -> bool:
        self._write("")
        return self.do_exit(arg)

    def save_session(self) -> bool:
        """Write the hierarchy listing and every file payload; report both outcomes."""
        with FileHierarchySink(self.hierarchy_path) as sink:
            hierarchy = self.explorer.save_hierarchy(sink)
        if hierarchy.ok:
            self._write(i18n.t("shell.hierarchy_saved", path=self.hierarchy_path))
        else:
            self._write(i18n.t("shell.errors.generic", message=hierarchy.message))

        files = self.explorer.save_all_files(DiskContentSink(self.storage_dir))
        if files.ok:
            self._write(i18n.t("shell.files_saved", path=self.storage_dir))
        else:
            self._write(i18n.t("shell.errors.generic", message=files.message))

        self.save_ok = hierarchy.ok and files.ok
        return self.save_ok

    def do_help(self, arg: str) -> bool:
        if arg:
            key = f"shell.help.{arg}"
            text = i18n.t(key)
            # Unresolved keys come back verbatim
            self._write(text if text != key else i18n.t("shell.help.unknown", command=arg))
            return False

        self._write("")
        self._write(i18n.t("shell.help.header", default="Available commands:"))
        for name in COMMANDS:
            usage = i18n.t(f"shell.help.{name}", default=name).splitlines()[0]
            self._write(f"  {usage}")
        self._write("")
        self._write(i18n.t("shell.help.footer"))
        return False

    # -------------------------------------------------------------------------
    # RENDERING HELPERS
    # -------------------------------------------------------------------------

    def display_current_directory(self) -> None:
        self._write("")
        self._write(i18n.t("shell.current_path", path=self.explorer.current_path))
        self._write("")
        self._write(i18n.t("shell.listing_header"))
        children = self.explorer.list_current()
        if not children:
            self._write(i18n.t("shell.empty_directory"))
        for index, node in enumerate(children, start=1):
            marker = DIRECTORY_MARKER if isinstance(node, DirectoryNode) else FILE_MARKER
            self._write(f"{index}. {marker} {node.display_name}")
        self._write("")

    def _show_file(self, node: FileNode) -> None:
        self._write("")
        self._write(i18n.t("shell.view_header", name=node.display_name))
        self._write(node.content)
        self._write(i18n.t("shell.view_footer"))

    def _report(self, result: OperationResult) -> None:
        if result.ok:
            self._write(result.message)
        else:
            self._write(i18n.t("shell.errors.generic", message=result.message))

    def _require(self, arg: str, command: str, what: str) -> bool:
        if arg:
            return True
        self._write(i18n.t("shell.errors.missing_argument", command=command, what=what))
        return False

    def _refresh_prompt(self) -> None:
        self.prompt = f"{self.explorer.current_path}> "

    def _write(self, text: str) -> None:
        self.stdout.write(f"{text}\n")
