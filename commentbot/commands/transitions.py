"""Checks deciding whether a requested state change is currently legal."""

from typing import NamedTuple, Union

from .models import ActionType, IssueState


class Transition(NamedTuple):
    """Outcome of an open/close request.

    Attributes:
        new_state: The resulting state, or "" when the request is rejected.
        ok: Whether the transition is legal.
    """

    new_state: str
    ok: bool


REJECTED = Transition("", False)

_TRANSITIONS: dict[tuple[str, str], IssueState] = {
    (ActionType.REOPEN.value, IssueState.CLOSED.value): IssueState.OPEN,
    (ActionType.CLOSE.value, IssueState.OPEN.value): IssueState.CLOSED,
}


def _name(value: Union[ActionType, IssueState, str]) -> str:
    if isinstance(value, (ActionType, IssueState)):
        return value.value
    return value


def check_transition(
    requested_action: Union[ActionType, str],
    current_state: Union[IssueState, str],
) -> Transition:
    """Decide whether an open/close request applies to the current state.

    Closing a closed issue and reopening an open one are rejected, as is
    any action other than close or reopen.

    Args:
        requested_action: The requested action type or its string value.
        current_state: The issue state or its string value.

    Returns:
        Transition with the new state and True, or ("", False).
    """
    new_state = _TRANSITIONS.get((_name(requested_action), _name(current_state)))
    if new_state is None:
        return REJECTED
    return Transition(new_state.value, True)


def valid_action(
    currently_locked: bool,
    requested_action: Union[ActionType, str],
    lock_action: Union[ActionType, str],
    unlock_action: Union[ActionType, str],
) -> bool:
    """Check whether a lock-like request applies to the current lock state.

    The lock and unlock identifiers are supplied by the caller so the same
    check serves any resource with an on/off state.
    """
    requested = _name(requested_action)
    return (requested == _name(lock_action) and not currently_locked) or (
        requested == _name(unlock_action) and currently_locked
    )
