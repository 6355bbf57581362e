"""Resolution of the prefix that marks a comment as a command."""

import os

COMMAND_TRIGGER_DEFAULT = "Derek "
COMMAND_TRIGGER_SLASH = "/"

USE_SLASH_TRIGGER_ENV = "use_slash_trigger"


def resolve_trigger(use_slash_trigger: bool) -> str:
    """Return the trigger prefix for the selected style."""
    if use_slash_trigger:
        return COMMAND_TRIGGER_SLASH
    return COMMAND_TRIGGER_DEFAULT


def get_command_trigger() -> str:
    """Return the trigger prefix selected by the use_slash_trigger env var."""
    return resolve_trigger(os.getenv(USE_SLASH_TRIGGER_ENV, "").lower() == "true")
