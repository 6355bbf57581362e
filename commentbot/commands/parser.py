"""Parser turning comment text into a structured Action.

A comment is only considered when it starts with the trigger prefix. The
rest of the comment is matched against an ordered table of command
families; the first family with a matching keyword decides the result,
including when it rejects the value.
"""

from dataclasses import dataclass
from typing import Callable

from .models import EMPTY_ACTION, Action, ActionType

ValueBuilder = Callable[[ActionType, str], Action]


def strip_leading_space(text: str) -> str:
    """Remove exactly one leading space, if present."""
    if text.startswith(" "):
        return text[1:]
    return text


def normalise_value(text: str) -> str:
    """Turn the text after a keyword colon into a command value."""
    return strip_leading_space(text).strip()


def _keyword_only(action_type: ActionType, rest: str) -> Action:
    return Action(type=action_type)


def _optional_value(action_type: ActionType, rest: str) -> Action:
    return Action(type=action_type, value=normalise_value(rest))


def _required_value(action_type: ActionType, rest: str) -> Action:
    value = normalise_value(rest)
    if not value:
        return EMPTY_ACTION
    return Action(type=action_type, value=value)


def _title_value(action_type: ActionType, rest: str) -> Action:
    # "set title: " is rejected while "set title:  " yields an empty title.
    if not strip_leading_space(rest):
        return EMPTY_ACTION
    return Action(type=action_type, value=rest.strip())


@dataclass(frozen=True)
class CommandFamily:
    """A group of keywords sharing one grammar.

    Attributes:
        name: Family name, used in logs and tests.
        keywords: Ordered (keyword, action type) pairs.
        build: Turns the text after the keyword colon into an Action.
        bare: Whether the keyword alone, without a colon, is a command.
    """

    name: str
    keywords: tuple[tuple[str, ActionType], ...]
    build: ValueBuilder
    bare: bool = False

    def match(self, command: str) -> Action | None:
        """Return the Action for this family, or None if no keyword matches."""
        for keyword, action_type in self.keywords:
            if self.bare and command == keyword:
                return self.build(action_type, "")
            prefix = f"{keyword}:"
            if command.startswith(prefix):
                return self.build(action_type, command[len(prefix):])
        return None


COMMAND_FAMILIES: tuple[CommandFamily, ...] = (
    CommandFamily(
        name="state",
        keywords=(("reopen", ActionType.REOPEN), ("close", ActionType.CLOSE)),
        build=_keyword_only,
        bare=True,
    ),
    CommandFamily(
        name="lock",
        keywords=(("lock", ActionType.LOCK), ("unlock", ActionType.UNLOCK)),
        build=_keyword_only,
        bare=True,
    ),
    CommandFamily(
        name="label",
        keywords=(
            ("add label", ActionType.ADD_LABEL),
            ("remove label", ActionType.REMOVE_LABEL),
        ),
        build=_optional_value,
    ),
    CommandFamily(
        name="assignment",
        keywords=(("assign", ActionType.ASSIGN), ("unassign", ActionType.UNASSIGN)),
        build=_required_value,
    ),
    CommandFamily(
        name="title",
        keywords=(
            ("set title", ActionType.SET_TITLE),
            ("edit title", ActionType.SET_TITLE),
        ),
        build=_title_value,
    ),
    CommandFamily(
        name="milestone",
        keywords=(
            ("set milestone", ActionType.SET_MILESTONE),
            ("remove milestone", ActionType.REMOVE_MILESTONE),
        ),
        build=_optional_value,
    ),
)


def parse(comment_body: str, trigger: str) -> Action:
    """Parse a comment body into an Action.

    Args:
        comment_body: Raw comment text.
        trigger: Prefix the comment must start with (case-sensitive).

    Returns:
        The parsed Action, or the empty Action when the comment holds no
        valid command.
    """
    if not comment_body.startswith(trigger):
        return EMPTY_ACTION

    command = comment_body[len(trigger):]
    for family in COMMAND_FAMILIES:
        action = family.match(command)
        if action is not None:
            return action

    return EMPTY_ACTION
