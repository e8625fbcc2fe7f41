from __future__ import annotations

"""
User Interaction Contracts.

Describes the capabilities the core borrows from the interface layer:
yes/no confirmation, collision resolution on paste, content editing and
the sinks used for persistence. The core never reads input or writes
files itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class PasteAction(str, Enum):
    OVERWRITE = "overwrite"
    RENAME = "rename"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PasteChoice:
    """
    Decision taken when a pasted entry collides with an existing one.

    Attributes:
        action: Selected resolution.
        new_name: Replacement name, required when action is RENAME.
    """
    action: PasteAction
    new_name: str = ""

    @classmethod
    def overwrite(cls) -> "PasteChoice":
        return cls(PasteAction.OVERWRITE)

    @classmethod
    def rename(cls, new_name: str) -> "PasteChoice":
        return cls(PasteAction.RENAME, new_name)

    @classmethod
    def cancel(cls) -> "PasteChoice":
        return cls(PasteAction.CANCEL)


class Prompter(Protocol):
    def confirm(self, prompt: str) -> bool:
        ...

    def choose_collision(self, prompt: str) -> PasteChoice:
        ...


class ContentEditor(Protocol):
    def edit(self, title: str, current_content: str) -> Optional[str]:
        """Return the new content, or None to keep the current one."""
        ...


class ContentSink(Protocol):
    def write_file(self, target: str, content: str) -> bool:
        ...


class HierarchySink(Protocol):
    def write_line(self, line: str) -> None:
        """Append one listing line. Raises OSError on failure."""
        ...


class AutoPrompter:
    """
    Non-interactive prompter answering every question with fixed values.

    Used for scripted sessions (``--command``) and tests.
    """

    def __init__(self, confirm_answer: bool = True, collision_choice: Optional[PasteChoice] = None):
        self.confirm_answer = confirm_answer
        self.collision_choice = collision_choice or PasteChoice.cancel()

    def confirm(self, prompt: str) -> bool:
        return self.confirm_answer

    def choose_collision(self, prompt: str) -> PasteChoice:
        return self.collision_choice
