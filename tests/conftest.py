from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: scripted prompters and ready-made explorer sessions.
"""

import os
import sys
from typing import List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from vexplorer.core.explorer import Explorer  # noqa: E402
from vexplorer.core.seed import build_sample_tree  # noqa: E402
from vexplorer.domain.interaction_models import PasteChoice  # noqa: E402


# -----------------------------------------------------------------------------
# Test Doubles
# -----------------------------------------------------------------------------
class ScriptedPrompter:
    """
    Prompter replaying queued answers and recording every question asked.

    Unqueued confirmations answer False; unqueued collisions cancel.
    """

    def __init__(
            self,
            confirms: Optional[List[bool]] = None,
            choices: Optional[List[PasteChoice]] = None,
    ):
        self.confirms = list(confirms or [])
        self.choices = list(choices or [])
        self.asked: List[str] = []

    def confirm(self, prompt: str) -> bool:
        self.asked.append(prompt)
        return self.confirms.pop(0) if self.confirms else False

    def choose_collision(self, prompt: str) -> PasteChoice:
        self.asked.append(prompt)
        return self.choices.pop(0) if self.choices else PasteChoice.cancel()


class MemoryContentSink:
    """Content sink storing payloads in a dict; optionally rejecting some targets."""

    def __init__(self, reject: Optional[List[str]] = None):
        self.files = {}
        self.reject = set(reject or [])

    def write_file(self, target: str, content: str) -> bool:
        if target in self.reject:
            return False
        self.files[target] = content
        return True


class MemoryHierarchySink:
    """Hierarchy sink collecting lines; optionally failing after N lines."""

    def __init__(self, fail_after: Optional[int] = None):
        self.lines: List[str] = []
        self.fail_after = fail_after

    def write_line(self, line: str) -> None:
        if self.fail_after is not None and len(self.lines) >= self.fail_after:
            raise OSError("disk full")
        self.lines.append(line)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def prompter() -> ScriptedPrompter:
    return ScriptedPrompter()


@pytest.fixture
def explorer(prompter: ScriptedPrompter) -> Explorer:
    """Explorer over an empty root, driven by a scripted prompter."""
    return Explorer(prompter=prompter)


@pytest.fixture
def sample_explorer(prompter: ScriptedPrompter) -> Explorer:
    """Explorer over the default sample layout."""
    return Explorer(tree=build_sample_tree(), prompter=prompter)
