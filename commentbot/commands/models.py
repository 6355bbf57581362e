"""Data models for the command parser module."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ActionType(Enum):
    """Types of commands that can be parsed from a comment."""

    CLOSE = "close"
    REOPEN = "reopen"
    LOCK = "Lock"
    UNLOCK = "Unlock"
    ADD_LABEL = "AddLabel"
    REMOVE_LABEL = "RemoveLabel"
    ASSIGN = "assign"
    UNASSIGN = "unassign"
    SET_TITLE = "SetTitle"
    SET_MILESTONE = "SetMilestone"
    REMOVE_MILESTONE = "RemoveMilestone"


class IssueState(Enum):
    """Open/closed state of an issue or pull request."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Action:
    """A command parsed from a comment body.

    An action without a type means the comment held no command and must
    never be acted upon.

    Attributes:
        type: The command type, or None when nothing was recognized.
        value: The operand after the command keyword, if any.
    """

    type: Optional[ActionType] = None
    value: str = ""

    @property
    def is_command(self) -> bool:
        """Check if a command was recognized."""
        return self.type is not None

    @property
    def type_name(self) -> str:
        """Command type as its string identifier ("" for no command)."""
        return self.type.value if self.type else ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "type": self.type_name,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Action":
        """Deserialize from dictionary."""
        type_name = data.get("type", "")
        return cls(
            type=ActionType(type_name) if type_name else None,
            value=data.get("value", ""),
        )


EMPTY_ACTION = Action()


@dataclass(frozen=True)
class IssueLabel:
    """A label attached to an issue.

    Attributes:
        name: The label name as shown by the issue tracker.
    """

    name: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> "IssueLabel":
        """Create from a GitHub label object."""
        return cls(name=data.get("name", ""))
