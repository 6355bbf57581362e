"""Interface to the issue tracker that applies parsed commands."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from commentbot.commands.models import IssueState

logger = logging.getLogger(__name__)


class IssueClient(ABC):
    """Abstract base class for issue tracker clients.

    Implementations should handle:
    - API authentication
    - Request formatting for the specific tracker
    - Error handling and translation to IssueClientError

    The comment handler only calls an operation after it has decided the
    command is legal for the current issue state.
    """

    @abstractmethod
    def set_state(self, issue_number: int, state: IssueState) -> None:
        """Open or close an issue.

        Raises:
            IssueClientError: The tracker rejected the change.
        """
        pass

    @abstractmethod
    def set_locked(self, issue_number: int, locked: bool) -> None:
        """Lock or unlock the conversation on an issue."""
        pass

    @abstractmethod
    def add_label(self, issue_number: int, label: str) -> None:
        """Attach a label to an issue."""
        pass

    @abstractmethod
    def remove_label(self, issue_number: int, label: str) -> None:
        """Detach a label from an issue."""
        pass

    @abstractmethod
    def add_assignee(self, issue_number: int, login: str) -> None:
        """Assign a user to an issue."""
        pass

    @abstractmethod
    def remove_assignee(self, issue_number: int, login: str) -> None:
        """Unassign a user from an issue."""
        pass

    @abstractmethod
    def set_title(self, issue_number: int, title: str) -> None:
        """Change the title of an issue."""
        pass

    @abstractmethod
    def set_milestone(self, issue_number: int, milestone: str) -> None:
        """Attach an issue to the milestone with the given title."""
        pass

    @abstractmethod
    def remove_milestone(self, issue_number: int) -> None:
        """Detach an issue from its milestone."""
        pass


class RecordingIssueClient(IssueClient):
    """Client that records operations instead of performing them.

    Used for dry runs and in tests. Each call is appended to ``calls`` as
    an (operation, arguments) pair.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, operation: str, *args: Any) -> None:
        logger.debug("Recorded %s%r", operation, args)
        self.calls.append((operation, args))

    def set_state(self, issue_number: int, state: IssueState) -> None:
        self._record("set_state", issue_number, state.value)

    def set_locked(self, issue_number: int, locked: bool) -> None:
        self._record("set_locked", issue_number, locked)

    def add_label(self, issue_number: int, label: str) -> None:
        self._record("add_label", issue_number, label)

    def remove_label(self, issue_number: int, label: str) -> None:
        self._record("remove_label", issue_number, label)

    def add_assignee(self, issue_number: int, login: str) -> None:
        self._record("add_assignee", issue_number, login)

    def remove_assignee(self, issue_number: int, login: str) -> None:
        self._record("remove_assignee", issue_number, login)

    def set_title(self, issue_number: int, title: str) -> None:
        self._record("set_title", issue_number, title)

    def set_milestone(self, issue_number: int, milestone: str) -> None:
        self._record("set_milestone", issue_number, milestone)

    def remove_milestone(self, issue_number: int) -> None:
        self._record("remove_milestone", issue_number)
