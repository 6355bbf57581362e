"""Label helpers used when validating label commands."""

from typing import Iterable, Optional

from .models import IssueLabel

DCO_LABEL = "no-dco"


def find_label(labels: Optional[Iterable[IssueLabel]], name: str) -> bool:
    """Check whether a label with the given name exists, ignoring case."""
    if not labels:
        return False
    wanted = name.casefold()
    return any(label.name.casefold() == wanted for label in labels)


def is_dco_label(name: str) -> bool:
    """Check whether a label marks a contribution missing its sign-off."""
    return name.casefold() == DCO_LABEL
