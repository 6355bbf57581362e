"""Comment command parsing and validation.

This module finds commands in issue and pull request comments and decides
whether they are legal against the current issue state. Nothing here
performs I/O.

Public API:
    parse: Parse a comment body into an Action.
    resolve_trigger: Pick the trigger prefix for a trigger style.
    get_command_trigger: Pick the trigger prefix from the environment.
    find_label: Case-insensitive label lookup.
    is_dco_label: Recognize the missing sign-off label.
    check_transition: Validate an open/close request.
    valid_action: Validate a lock/unlock request.
    Action: A parsed command.
    ActionType: Enum of supported command types.
    IssueLabel: A label attached to an issue.
    IssueState: Enum of open/closed states.
    Transition: Result of check_transition.
"""

from .labels import DCO_LABEL, find_label, is_dco_label
from .models import EMPTY_ACTION, Action, ActionType, IssueLabel, IssueState
from .parser import COMMAND_FAMILIES, CommandFamily, normalise_value, parse, strip_leading_space
from .transitions import Transition, check_transition, valid_action
from .triggers import (
    COMMAND_TRIGGER_DEFAULT,
    COMMAND_TRIGGER_SLASH,
    get_command_trigger,
    resolve_trigger,
)

__all__ = [
    "parse",
    "resolve_trigger",
    "get_command_trigger",
    "find_label",
    "is_dco_label",
    "check_transition",
    "valid_action",
    "normalise_value",
    "strip_leading_space",
    "Action",
    "ActionType",
    "IssueLabel",
    "IssueState",
    "Transition",
    "CommandFamily",
    "COMMAND_FAMILIES",
    "COMMAND_TRIGGER_DEFAULT",
    "COMMAND_TRIGGER_SLASH",
    "DCO_LABEL",
    "EMPTY_ACTION",
]
