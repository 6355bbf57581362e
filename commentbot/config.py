"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass
from typing import Any

from commentbot.commands.triggers import USE_SLASH_TRIGGER_ENV, resolve_trigger


@dataclass
class BotConfig:
    """Settings for the comment bot.

    Attributes:
        use_slash_trigger: Use the slash trigger instead of the default one.
        log_level: Logging level name.
        log_format: "json" for JSON lines, anything else for text.
    """

    use_slash_trigger: bool = False
    log_level: str = "INFO"
    log_format: str = "text"

    @property
    def trigger(self) -> str:
        """The trigger prefix selected by this configuration."""
        return resolve_trigger(self.use_slash_trigger)

    @classmethod
    def from_env(cls) -> "BotConfig":
        """Build configuration from environment variables.

        Call load_dotenv() first if settings live in a .env file.
        """
        return cls(
            use_slash_trigger=os.getenv(USE_SLASH_TRIGGER_ENV, "").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("LOG_FORMAT", "text").lower(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "use_slash_trigger": self.use_slash_trigger,
            "log_level": self.log_level,
            "log_format": self.log_format,
        }
