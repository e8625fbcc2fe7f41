from __future__ import annotations

"""
Console Line Editor.

Minimal modal editor used by the ``edit`` command. Collects lines until a
colon command closes the session:

- ``:w`` / ``:save``   keep the typed text
- ``:q`` / ``:quit``   ask whether to keep the typed text
- ``:q!`` / ``:quit!`` discard the typed text
"""

from typing import Callable, List, Optional

from vexplorer.utils.i18n import i18n

SAVE_COMMANDS = (":w", ":save")
QUIT_COMMANDS = (":q", ":quit")
DISCARD_COMMANDS = (":q!", ":quit!")

LineReader = Callable[[str], str]
Writer = Callable[[str], None]


class ConsoleEditor:
    """
    Content editor reading from an injected line source.

    Args:
        read_line: Callable returning one line of input (raises EOFError at end).
        write: Callable printing one line of output.
        confirm: Yes/no question used by ``:q``.
    """

    def __init__(self, read_line: LineReader, write: Writer, confirm: Callable[[str], bool]):
        self._read_line = read_line
        self._write = write
        self._confirm = confirm

    def edit(self, title: str, current_content: str) -> Optional[str]:
        self._write(i18n.t("editor.title", default="===== Editing {name} =====", name=title))
        self._write(i18n.t("editor.current", default="Current content:"))
        self._write(current_content)
        self._write(i18n.t("editor.instructions", default="Enter file content:"))

        lines: List[str] = []
        while True:
            try:
                raw = self._read_line("")
            except EOFError:
                return None

            command = raw.rstrip("\r\n")
            if command.strip() in SAVE_COMMANDS:
                return _join(lines)
            if command.strip() in DISCARD_COMMANDS:
                return None
            if command.strip() in QUIT_COMMANDS:
                if self._confirm(i18n.t("editor.save_changes", default="Save changes?")):
                    return _join(lines)
                return None
            lines.append(command)


def _join(lines: List[str]) -> str:
    # Every typed line keeps its terminating newline
    return "".join(f"{line}\n" for line in lines)
