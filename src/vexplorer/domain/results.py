from __future__ import annotations

"""
Operation Result Models.

Defines the data structures and factory functions used to communicate
the outcome of explorer operations to the interface layers (shell/CLI).
Expected, user-correctable failures travel as values, never as exceptions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

class OperationStatus(str, Enum):
    """Detailed outcome classification of an explorer operation."""
    OK = "ok"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_OPERATION = "invalid_operation"
    IO_FAILURE = "io_failure"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OperationResult:
    """
    Unified result object of a single explorer operation.

    Attributes:
        ok: True when the operation completed (a cancellation is not a failure).
        status: Detailed outcome classification.
        message: Human readable description, suitable for direct display.
        payload: Optional operation-specific data (node, report, lines).
    """
    ok: bool
    status: OperationStatus
    message: str = ""
    payload: Any = None

    @property
    def cancelled(self) -> bool:
        return self.status is OperationStatus.CANCELLED


@dataclass
class SaveReport:
    """
    Outcome of a best-effort content flush.

    Attributes:
        written: Target paths written successfully.
        failed: Target paths the sink rejected.
    """
    written: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(message: str = "", payload: Any = None) -> OperationResult:
    """
    Create a successful operation result.

    Args:
        message: Confirmation text for the user.
        payload: Optional data produced by the operation.

    Returns:
        OperationResult: An immutable success result.
    """
    return OperationResult(ok=True, status=OperationStatus.OK, message=message, payload=payload)


def create_error_result(
        status: OperationStatus,
        message: str,
        payload: Any = None,
) -> OperationResult:
    """
    Create a failed operation result.

    Args:
        status: Failure classification (must not be OK or CANCELLED).
        message: Description of the failure.
        payload: Optional diagnostic data.

    Returns:
        OperationResult: An immutable error result.
    """
    if status in (OperationStatus.OK, OperationStatus.CANCELLED):
        raise ValueError(f"'{status.value}' is not an error status")
    return OperationResult(ok=False, status=status, message=message, payload=payload)


def create_cancelled_result(message: str = "") -> OperationResult:
    """Create the result of an operation the user chose not to carry out."""
    return OperationResult(ok=True, status=OperationStatus.CANCELLED, message=message)
