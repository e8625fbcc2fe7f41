from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies node identity helpers, result factories and the interaction
value objects used between the core and the interface layers.
"""

import pytest

from vexplorer.domain.interaction_models import AutoPrompter, PasteAction, PasteChoice
from vexplorer.domain.results import (
    OperationStatus,
    SaveReport,
    create_cancelled_result,
    create_error_result,
    create_success_result,
)
from vexplorer.domain.tree_models import DirectoryNode, FileNode, is_directory, join_full_path


# -----------------------------------------------------------------------------
# Node Models
# -----------------------------------------------------------------------------
def test_join_full_path_rules() -> None:
    assert join_full_path("", "root") == "root"
    assert join_full_path("/", "root") == "root"
    assert join_full_path("root/a", "b") == "root/a/b"


def test_file_node_identity() -> None:
    node = FileNode(name="hello", path="root/Documents", extension=".cpp")
    assert node.full_path == "root/Documents/hello"
    assert node.display_name == "hello.cpp"
    assert not is_directory(node)


def test_directory_children_are_not_shared() -> None:
    a = DirectoryNode(name="a")
    b = DirectoryNode(name="b")
    a.children.append(FileNode(name="x"))
    assert b.children == []
    assert is_directory(a)
    assert a.display_name == "a"


# -----------------------------------------------------------------------------
# Result Factories
# -----------------------------------------------------------------------------
def test_success_result() -> None:
    result = create_success_result("done", payload=3)
    assert result.ok
    assert result.status is OperationStatus.OK
    assert result.payload == 3
    assert not result.cancelled


def test_error_result() -> None:
    result = create_error_result(OperationStatus.NOT_FOUND, "missing")
    assert not result.ok
    assert result.message == "missing"


@pytest.mark.parametrize("status", [OperationStatus.OK, OperationStatus.CANCELLED])
def test_error_result_rejects_non_error_status(status: OperationStatus) -> None:
    with pytest.raises(ValueError):
        create_error_result(status, "nope")


def test_cancelled_result_is_not_a_failure() -> None:
    result = create_cancelled_result("kept")
    assert result.ok
    assert result.cancelled


def test_result_is_immutable() -> None:
    result = create_success_result()
    with pytest.raises(AttributeError):
        result.ok = False  # type: ignore[misc]


def test_save_report_ok_flag() -> None:
    report = SaveReport()
    assert report.ok
    report.failed.append("root/a.txt")
    assert not report.ok


# -----------------------------------------------------------------------------
# Interaction Models
# -----------------------------------------------------------------------------
def test_paste_choice_constructors() -> None:
    assert PasteChoice.overwrite().action is PasteAction.OVERWRITE
    assert PasteChoice.cancel().action is PasteAction.CANCEL
    renamed = PasteChoice.rename("copy")
    assert (renamed.action, renamed.new_name) == (PasteAction.RENAME, "copy")


def test_auto_prompter_defaults() -> None:
    prompter = AutoPrompter()
    assert prompter.confirm("delete?") is True
    assert prompter.choose_collision("clash").action is PasteAction.CANCEL


def test_auto_prompter_custom_answers() -> None:
    prompter = AutoPrompter(confirm_answer=False, collision_choice=PasteChoice.overwrite())
    assert prompter.confirm("delete?") is False
    assert prompter.choose_collision("clash").action is PasteAction.OVERWRITE
