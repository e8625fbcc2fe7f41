from __future__ import annotations

"""
Unit tests for the Console Line Editor.

Feeds scripted lines into the editor and checks which content (if any)
is returned for each closing command.
"""

from typing import Callable, List

import pytest

from vexplorer.interface.shell.editor import ConsoleEditor


def _reader(lines: List[str]) -> Callable[[str], str]:
    queue = list(lines)

    def read_line(prompt: str) -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return read_line


def _editor(lines: List[str], confirm_answer: bool = True):
    output: List[str] = []
    asked: List[str] = []

    def confirm(prompt: str) -> bool:
        asked.append(prompt)
        return confirm_answer

    return ConsoleEditor(_reader(lines), output.append, confirm), output, asked


@pytest.mark.parametrize("command", [":w", ":save"])
def test_save_commands_return_typed_lines(command: str) -> None:
    editor, _, asked = _editor(["first", "second", command])
    assert editor.edit("a.txt", "old") == "first\nsecond\n"
    assert asked == []


@pytest.mark.parametrize("command", [":q!", ":quit!"])
def test_discard_commands_return_none(command: str) -> None:
    editor, _, _ = _editor(["typed", command])
    assert editor.edit("a.txt", "old") is None


def test_quit_asks_and_keeps_on_yes() -> None:
    editor, _, asked = _editor(["typed", ":q"], confirm_answer=True)
    assert editor.edit("a.txt", "old") == "typed\n"
    assert asked == ["Save changes?"]


def test_quit_asks_and_discards_on_no() -> None:
    editor, _, _ = _editor(["typed", ":quit"], confirm_answer=False)
    assert editor.edit("a.txt", "old") is None


def test_end_of_input_discards() -> None:
    editor, _, _ = _editor(["typed"])
    assert editor.edit("a.txt", "old") is None


def test_immediate_save_yields_empty_content() -> None:
    editor, _, _ = _editor([":w"])
    assert editor.edit("a.txt", "old") == ""


def test_header_shows_title_and_current_content() -> None:
    editor, output, _ = _editor([":q!"])
    editor.edit("notes.txt", "current text")
    assert output[0] == "===== Editing notes.txt ====="
    assert "current text" in output
