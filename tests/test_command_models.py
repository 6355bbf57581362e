"""Tests for command models, trigger resolution and configuration."""

import os
from unittest.mock import patch

from commentbot.commands import (
    COMMAND_TRIGGER_DEFAULT,
    COMMAND_TRIGGER_SLASH,
    EMPTY_ACTION,
    Action,
    ActionType,
    IssueLabel,
    IssueState,
    get_command_trigger,
    resolve_trigger,
)
from commentbot.config import BotConfig


class TestActionType:
    """Tests for ActionType enum."""

    def test_action_type_values(self):
        """Verify the string identifiers."""
        assert ActionType.CLOSE.value == "close"
        assert ActionType.REOPEN.value == "reopen"
        assert ActionType.ADD_LABEL.value == "AddLabel"
        assert ActionType.REMOVE_LABEL.value == "RemoveLabel"
        assert ActionType.ASSIGN.value == "assign"
        assert ActionType.UNASSIGN.value == "unassign"
        assert ActionType.SET_TITLE.value == "SetTitle"
        assert ActionType.SET_MILESTONE.value == "SetMilestone"
        assert ActionType.REMOVE_MILESTONE.value == "RemoveMilestone"
        assert ActionType.LOCK.value == "Lock"
        assert ActionType.UNLOCK.value == "Unlock"

    def test_action_type_count(self):
        assert len(ActionType) == 11


class TestAction:
    """Tests for Action dataclass."""

    def test_empty_action(self):
        assert EMPTY_ACTION.type is None
        assert EMPTY_ACTION.type_name == ""
        assert EMPTY_ACTION.value == ""
        assert EMPTY_ACTION.is_command is False

    def test_command_action(self):
        action = Action(ActionType.ADD_LABEL, "demo")
        assert action.is_command is True
        assert action.type_name == "AddLabel"

    def test_equality(self):
        assert Action(ActionType.CLOSE) == Action(ActionType.CLOSE, "")
        assert Action() == EMPTY_ACTION

    def test_to_dict(self):
        data = Action(ActionType.SET_TITLE, "New title").to_dict()
        assert data == {"type": "SetTitle", "value": "New title"}

    def test_empty_to_dict(self):
        assert EMPTY_ACTION.to_dict() == {"type": "", "value": ""}

    def test_from_dict(self):
        action = Action.from_dict({"type": "assign", "value": "burt"})
        assert action.type == ActionType.ASSIGN
        assert action.value == "burt"

    def test_from_dict_empty(self):
        assert Action.from_dict({"type": ""}) == EMPTY_ACTION


class TestIssueModels:
    """Tests for IssueLabel and IssueState."""

    def test_issue_state_values(self):
        assert IssueState("open") is IssueState.OPEN
        assert IssueState("closed") is IssueState.CLOSED

    def test_label_from_api_response(self):
        label = IssueLabel.from_api_response({"id": 1, "name": "bug", "color": "f00"})
        assert label.name == "bug"


class TestTriggers:
    """Tests for trigger resolution."""

    def test_resolve_default(self):
        assert resolve_trigger(False) == COMMAND_TRIGGER_DEFAULT

    def test_resolve_slash(self):
        assert resolve_trigger(True) == COMMAND_TRIGGER_SLASH

    def test_env_unset_uses_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert get_command_trigger() == COMMAND_TRIGGER_DEFAULT

    def test_env_true_uses_slash(self):
        with patch.dict(os.environ, {"use_slash_trigger": "true"}, clear=True):
            assert get_command_trigger() == COMMAND_TRIGGER_SLASH

    def test_env_other_value_uses_default(self):
        with patch.dict(os.environ, {"use_slash_trigger": "yes"}, clear=True):
            assert get_command_trigger() == COMMAND_TRIGGER_DEFAULT


class TestBotConfig:
    """Tests for BotConfig."""

    def test_defaults(self):
        config = BotConfig()
        assert config.use_slash_trigger is False
        assert config.trigger == COMMAND_TRIGGER_DEFAULT

    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = BotConfig.from_env()
        assert config.use_slash_trigger is False
        assert config.log_level == "INFO"
        assert config.log_format == "text"

    def test_from_env(self):
        env = {"use_slash_trigger": "TRUE", "LOG_LEVEL": "debug", "LOG_FORMAT": "JSON"}
        with patch.dict(os.environ, env, clear=True):
            config = BotConfig.from_env()
        assert config.use_slash_trigger is True
        assert config.trigger == COMMAND_TRIGGER_SLASH
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_to_dict(self):
        data = BotConfig(use_slash_trigger=True).to_dict()
        assert data["use_slash_trigger"] is True
        assert data["log_level"] == "INFO"
