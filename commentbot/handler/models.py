"""Data models for the comment handler module."""

from dataclasses import dataclass, field
from typing import Any, Optional

from commentbot.commands.models import Action, IssueLabel, IssueState

from .exceptions import PayloadError


def _check_object(value: Any, context: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise PayloadError(f"{context} is not an object")
    return value


def _require(data: dict[str, Any], key: str, context: str) -> Any:
    value = data.get(key)
    if value is None:
        raise PayloadError(f"missing '{key}' in {context}")
    return value


def _require_object(data: dict[str, Any], key: str, context: str) -> dict[str, Any]:
    return _check_object(_require(data, key, context), f"'{key}' in {context}")


def _optional_object(data: dict[str, Any], key: str, context: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    return _check_object(value, f"'{key}' in {context}")


def _object_list(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise PayloadError(f"'{key}' in issue is not a list")
    return [_check_object(item, f"entry of '{key}' in issue") for item in items]


@dataclass
class CommentEvent:
    """A comment posted on an issue or pull request.

    Attributes:
        repository: Full repository name (owner/name).
        issue_number: Number of the issue or pull request.
        comment_body: Raw comment text.
        author: Login of the commenter.
        is_pull_request: Whether the comment was made on a pull request.
    """

    repository: str
    issue_number: int
    comment_body: str
    author: str
    is_pull_request: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "repository": self.repository,
            "issue_number": self.issue_number,
            "comment_body": self.comment_body,
            "author": self.author,
            "is_pull_request": self.is_pull_request,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommentEvent":
        """Deserialize from dictionary."""
        return cls(
            repository=data["repository"],
            issue_number=data["issue_number"],
            comment_body=data["comment_body"],
            author=data["author"],
            is_pull_request=data.get("is_pull_request", False),
        )

    @classmethod
    def from_webhook_payload(cls, payload: dict[str, Any]) -> "CommentEvent":
        """Create from a GitHub issue_comment webhook payload.

        Raises:
            PayloadError: If the payload lacks issue or comment data.
        """
        payload = _check_object(payload, "payload")
        issue = _require_object(payload, "issue", "payload")
        comment = _require_object(payload, "comment", "payload")
        user = _require_object(comment, "user", "comment")
        repository = _optional_object(payload, "repository", "payload")
        return cls(
            repository=repository.get("full_name", ""),
            issue_number=_require(issue, "number", "issue"),
            comment_body=comment.get("body") or "",
            author=_require(user, "login", "comment user"),
            is_pull_request="pull_request" in issue,
        )


@dataclass
class IssueSnapshot:
    """Current state of an issue as reported by the issue tracker.

    Attributes:
        number: Issue number.
        title: Issue title.
        state: Open or closed.
        locked: Whether the conversation is locked.
        labels: Labels currently attached.
        assignees: Logins of current assignees.
        milestone: Title of the current milestone, if any.
    """

    number: int
    title: str = ""
    state: IssueState = IssueState.OPEN
    locked: bool = False
    labels: list[IssueLabel] = field(default_factory=list)
    assignees: list[str] = field(default_factory=list)
    milestone: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "number": self.number,
            "title": self.title,
            "state": self.state.value,
            "locked": self.locked,
            "labels": [label.name for label in self.labels],
            "assignees": self.assignees,
            "milestone": self.milestone,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IssueSnapshot":
        """Deserialize from dictionary."""
        return cls(
            number=data["number"],
            title=data.get("title", ""),
            state=IssueState(data.get("state", "open")),
            locked=data.get("locked", False),
            labels=[IssueLabel(name) for name in data.get("labels", [])],
            assignees=data.get("assignees", []),
            milestone=data.get("milestone"),
        )

    @classmethod
    def from_webhook_payload(cls, payload: dict[str, Any]) -> "IssueSnapshot":
        """Create from the issue object of a GitHub webhook payload.

        Raises:
            PayloadError: If the issue is missing or its state is unknown.
        """
        payload = _check_object(payload, "payload")
        issue = _require_object(payload, "issue", "payload")
        state = issue.get("state", "open")
        try:
            issue_state = IssueState(state)
        except (ValueError, TypeError):
            raise PayloadError(f"unknown issue state '{state}'")

        milestone = _optional_object(issue, "milestone", "issue")
        return cls(
            number=_require(issue, "number", "issue"),
            title=issue.get("title") or "",
            state=issue_state,
            locked=bool(issue.get("locked", False)),
            labels=[
                IssueLabel.from_api_response(label)
                for label in _object_list(issue, "labels")
            ],
            assignees=[
                assignee["login"]
                for assignee in _object_list(issue, "assignees")
                if assignee.get("login")
            ],
            milestone=milestone.get("title"),
        )


@dataclass
class HandlerResult:
    """Outcome of handling one comment.

    Attributes:
        action: The Action parsed from the comment.
        success: False only when the issue tracker operation failed.
        skipped: True when no operation was issued.
        operation: Name of the client operation issued, if any.
        detail: Description of what was done or why it was skipped.
        error: Error message if the operation failed.
    """

    action: Action
    success: bool = True
    skipped: bool = False
    operation: str = ""
    detail: str = ""
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "action": self.action.to_dict(),
            "success": self.success,
            "skipped": self.skipped,
            "operation": self.operation,
            "detail": self.detail,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HandlerResult":
        """Deserialize from dictionary."""
        return cls(
            action=Action.from_dict(data["action"]),
            success=data.get("success", True),
            skipped=data.get("skipped", False),
            operation=data.get("operation", ""),
            detail=data.get("detail", ""),
            error=data.get("error", ""),
        )
