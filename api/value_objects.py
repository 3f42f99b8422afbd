"""
Value objects for the collection services.

Principles:
- Immutable data structures
- Named instead of primitive types (no Primitive Obsession)
- Small, focused classes with single responsibility
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RemovalOutcome(Enum):
    """Outcome of deleting a remote object"""
    REMOVED = "removed"
    ALREADY_ABSENT = "already_absent"
    FAILED = "failed"


@dataclass(frozen=True)
class RemovalResult:
    """Result of a remote delete call.

    Replaces inspecting exception types at every call site: a 404 from the
    upstream becomes ALREADY_ABSENT, anything else that went wrong becomes
    FAILED with the upstream message attached.
    """
    outcome: RemovalOutcome
    error_message: Optional[str] = None

    @classmethod
    def removed(cls) -> 'RemovalResult':
        """Create a result for a successful delete."""
        return cls(outcome=RemovalOutcome.REMOVED)

    @classmethod
    def already_absent(cls) -> 'RemovalResult':
        """Create a result for an object that no longer exists."""
        return cls(outcome=RemovalOutcome.ALREADY_ABSENT)

    @classmethod
    def failed(cls, error: str) -> 'RemovalResult':
        """Create a result for a delete that failed."""
        return cls(outcome=RemovalOutcome.FAILED, error_message=error)

    @property
    def is_gone(self) -> bool:
        """True when the object is not there anymore, whoever removed it."""
        return self.outcome is not RemovalOutcome.FAILED

    @property
    def is_failed(self) -> bool:
        return self.outcome is RemovalOutcome.FAILED

    def __str__(self) -> str:
        if self.error_message:
            return f"{self.outcome.value}: {self.error_message}"
        return self.outcome.value
