"""Comment handler module for applying parsed commands to issues.

This module connects the command parser and state checks to an issue
tracker client.

Public API:
    CommentHandler: Parses comments and applies legal commands.
    IssueClient: Abstract interface to the issue tracker.
    RecordingIssueClient: Client that records operations (dry run).
    CommentEvent: A comment posted on an issue.
    IssueSnapshot: Current state of an issue.
    HandlerResult: Outcome of handling one comment.
    CommandError: Base exception for module errors.
    IssueClientError: Raised when a tracker operation fails.
    PayloadError: Raised on malformed webhook payloads.
"""

from .client import IssueClient, RecordingIssueClient
from .comment_handler import CommentHandler
from .exceptions import CommandError, IssueClientError, PayloadError
from .models import CommentEvent, HandlerResult, IssueSnapshot

__all__ = [
    "CommentHandler",
    "IssueClient",
    "RecordingIssueClient",
    "CommentEvent",
    "IssueSnapshot",
    "HandlerResult",
    "CommandError",
    "IssueClientError",
    "PayloadError",
]
