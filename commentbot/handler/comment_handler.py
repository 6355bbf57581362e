"""CommentHandler for applying comment commands to an issue."""

import logging
from typing import Any, Optional

from commentbot.commands.labels import find_label, is_dco_label
from commentbot.commands.models import Action, ActionType, IssueState
from commentbot.commands.parser import parse
from commentbot.commands.transitions import check_transition, valid_action
from commentbot.config import BotConfig

from .client import IssueClient
from .exceptions import IssueClientError
from .models import CommentEvent, HandlerResult, IssueSnapshot

logger = logging.getLogger(__name__)

# Assignment value that stands for the commenter
SELF_ASSIGNEE = "me"


class CommentHandler:
    """Parses comment commands and applies the legal ones via an IssueClient.

    Users write commands at the start of a comment, after the trigger
    prefix. The handler parses the command, checks it against the current
    issue snapshot and calls the matching client operation. Commands that
    would not change anything are skipped without calling the client.
    """

    def __init__(
        self,
        client: IssueClient,
        trigger: Optional[str] = None,
        config: Optional[BotConfig] = None,
    ):
        """Initialize the CommentHandler.

        Args:
            client: IssueClient used to apply commands.
            trigger: Trigger prefix. Takes precedence over config.
            config: Bot configuration. Read from the environment if not
                provided and no trigger is given.
        """
        self._client = client
        if trigger is None:
            trigger = (config or BotConfig.from_env()).trigger
        self._trigger = trigger

    @property
    def trigger(self) -> str:
        """The trigger prefix commands must start with."""
        return self._trigger

    def parse(self, comment_body: str) -> Action:
        """Parse a comment body with the configured trigger."""
        return parse(comment_body, self._trigger)

    # -------------------- Results --------------------

    @staticmethod
    def _skip(action: Action, reason: str) -> HandlerResult:
        logger.info("Skipping %s: %s", action.type_name or "comment", reason)
        return HandlerResult(action=action, skipped=True, detail=reason)

    @staticmethod
    def _applied(action: Action, operation: str, detail: str) -> HandlerResult:
        logger.info("Applied %s: %s", action.type_name, detail)
        return HandlerResult(action=action, operation=operation, detail=detail)

    # -------------------- Command Execution --------------------

    def _execute_state(
        self, event: CommentEvent, snapshot: IssueSnapshot, action: Action
    ) -> HandlerResult:
        """Close or reopen the issue if it is not already in that state."""
        new_state, ok = check_transition(action.type, snapshot.state)
        if not ok:
            return self._skip(action, f"issue is already {snapshot.state.value}")

        self._client.set_state(event.issue_number, IssueState(new_state))
        return self._applied(action, "set_state", f"issue {new_state}")

    def _execute_lock(
        self, event: CommentEvent, snapshot: IssueSnapshot, action: Action
    ) -> HandlerResult:
        """Lock or unlock the conversation if that changes anything."""
        if not valid_action(
            snapshot.locked, action.type, ActionType.LOCK, ActionType.UNLOCK
        ):
            current = "locked" if snapshot.locked else "unlocked"
            return self._skip(action, f"issue is already {current}")

        locked = action.type == ActionType.LOCK
        self._client.set_locked(event.issue_number, locked)
        return self._applied(
            action, "set_locked", "issue locked" if locked else "issue unlocked"
        )

    def _execute_label(
        self, event: CommentEvent, snapshot: IssueSnapshot, action: Action
    ) -> HandlerResult:
        """Add or remove a label, leaving the sign-off label alone."""
        label = action.value
        if not label:
            return self._skip(action, "no label given")
        if is_dco_label(label):
            return self._skip(action, f"label '{label}' is managed automatically")

        exists = find_label(snapshot.labels, label)
        if action.type == ActionType.ADD_LABEL:
            if exists:
                return self._skip(action, f"label '{label}' already present")
            self._client.add_label(event.issue_number, label)
            return self._applied(action, "add_label", f"label '{label}' added")

        if not exists:
            return self._skip(action, f"label '{label}' not present")
        self._client.remove_label(event.issue_number, label)
        return self._applied(action, "remove_label", f"label '{label}' removed")

    def _execute_assignment(
        self, event: CommentEvent, snapshot: IssueSnapshot, action: Action
    ) -> HandlerResult:
        """Assign or unassign a user, resolving "me" to the commenter."""
        login = event.author if action.value == SELF_ASSIGNEE else action.value
        # Logins are case-insensitive on GitHub
        assigned = login.casefold() in {a.casefold() for a in snapshot.assignees}

        if action.type == ActionType.ASSIGN:
            if assigned:
                return self._skip(action, f"user '{login}' already assigned")
            self._client.add_assignee(event.issue_number, login)
            return self._applied(action, "add_assignee", f"assigned {login}")

        if not assigned:
            return self._skip(action, f"user '{login}' not assigned")
        self._client.remove_assignee(event.issue_number, login)
        return self._applied(action, "remove_assignee", f"unassigned {login}")

    def _execute_title(
        self, event: CommentEvent, snapshot: IssueSnapshot, action: Action
    ) -> HandlerResult:
        """Change the issue title."""
        title = action.value
        if not title:
            return self._skip(action, "no title given")
        if title == snapshot.title:
            return self._skip(action, "title unchanged")

        self._client.set_title(event.issue_number, title)
        return self._applied(action, "set_title", f"title set to '{title}'")

    def _execute_milestone(
        self, event: CommentEvent, snapshot: IssueSnapshot, action: Action
    ) -> HandlerResult:
        """Set or remove the issue milestone."""
        if action.type == ActionType.REMOVE_MILESTONE:
            if snapshot.milestone is None:
                return self._skip(action, "issue has no milestone")
            self._client.remove_milestone(event.issue_number)
            return self._applied(action, "remove_milestone", "milestone removed")

        milestone = action.value
        if not milestone:
            return self._skip(action, "no milestone given")
        self._client.set_milestone(event.issue_number, milestone)
        return self._applied(
            action, "set_milestone", f"milestone set to '{milestone}'"
        )

    _HANDLERS = {
        ActionType.CLOSE: _execute_state,
        ActionType.REOPEN: _execute_state,
        ActionType.LOCK: _execute_lock,
        ActionType.UNLOCK: _execute_lock,
        ActionType.ADD_LABEL: _execute_label,
        ActionType.REMOVE_LABEL: _execute_label,
        ActionType.ASSIGN: _execute_assignment,
        ActionType.UNASSIGN: _execute_assignment,
        ActionType.SET_TITLE: _execute_title,
        ActionType.SET_MILESTONE: _execute_milestone,
        ActionType.REMOVE_MILESTONE: _execute_milestone,
    }

    # -------------------- Main Entry Points --------------------

    def handle(self, event: CommentEvent, snapshot: IssueSnapshot) -> HandlerResult:
        """Handle a single comment against the current issue state.

        Args:
            event: The comment that was posted.
            snapshot: Current state of the commented issue.

        Returns:
            HandlerResult describing the operation issued, if any.
        """
        action = self.parse(event.comment_body)
        if not action.is_command:
            logger.debug(
                "No command in comment by %s on #%d", event.author, event.issue_number
            )
            return HandlerResult(action=action, skipped=True, detail="no command")

        logger.info(
            "%s requested %s on %s#%d",
            event.author,
            action.type_name,
            event.repository,
            event.issue_number,
        )

        handler = self._HANDLERS[action.type]
        try:
            return handler(self, event, snapshot, action)
        except IssueClientError as e:
            logger.error("Command %s failed: %s", action.type_name, e)
            return HandlerResult(action=action, success=False, error=str(e))

    def handle_payload(self, payload: dict[str, Any]) -> HandlerResult:
        """Handle a GitHub issue_comment webhook payload.

        Raises:
            PayloadError: If the payload lacks issue or comment data.
        """
        event = CommentEvent.from_webhook_payload(payload)
        snapshot = IssueSnapshot.from_webhook_payload(payload)
        return self.handle(event, snapshot)
