"""Configuration management for portalcheck."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from portalcheck.utils.exceptions import ConfigurationError

BROWSERS = ("chromium", "firefox", "webkit")
LOAD_STATES = ("load", "domcontentloaded", "networkidle")
TARGETS = ("live", "mock")


@dataclass
class AppConfig:
    """Application configuration."""

    base_url: str = "https://www.usa.gov"
    browser: str = "chromium"
    headless: bool = True
    action_timeout: int = 5000  # ms
    probe_timeout: int = 2000  # ms
    navigation_timeout: int = 30000  # ms
    readiness: str = "domcontentloaded"
    settle: str = "networkidle"
    max_retries: int = 2
    output_dir: Path | None = None
    stealth: bool = False
    target: str = "live"


class ConfigLoader:
    """Loads configuration from environment variables."""

    @staticmethod
    def load() -> AppConfig:
        """Load configuration from environment.

        Raises:
            ConfigurationError: If a value is present but invalid.
        """
        load_dotenv()  # Load .env file if present

        output = os.environ.get("PORTALCHECK_OUTPUT")

        return AppConfig(
            base_url=os.environ.get("PORTALCHECK_BASE_URL", "https://www.usa.gov"),
            browser=ConfigLoader._get_choice_env(
                "PORTALCHECK_BROWSER", BROWSERS, "chromium"
            ),
            headless=ConfigLoader._get_bool_env("PORTALCHECK_HEADLESS", True),
            action_timeout=ConfigLoader._get_int_env(
                "PORTALCHECK_ACTION_TIMEOUT", 5000
            ),
            probe_timeout=ConfigLoader._get_int_env("PORTALCHECK_PROBE_TIMEOUT", 2000),
            navigation_timeout=ConfigLoader._get_int_env(
                "PORTALCHECK_NAVIGATION_TIMEOUT", 30000
            ),
            readiness=ConfigLoader._get_choice_env(
                "PORTALCHECK_READINESS", LOAD_STATES, "domcontentloaded"
            ),
            settle=ConfigLoader._get_choice_env(
                "PORTALCHECK_SETTLE", LOAD_STATES, "networkidle"
            ),
            max_retries=ConfigLoader._get_int_env("PORTALCHECK_MAX_RETRIES", 2),
            output_dir=Path(output) if output else None,
            stealth=ConfigLoader._get_bool_env("PORTALCHECK_STEALTH", False),
            target=ConfigLoader._get_choice_env("PORTALCHECK_TARGET", TARGETS, "live"),
        )

    @staticmethod
    def _get_int_env(name: str, default: int) -> int:
        """Get an integer environment variable.

        Args:
            name: The environment variable name.
            default: The default value if not set.

        Returns:
            The integer value.

        Raises:
            ConfigurationError: If the value is not a valid integer.
        """
        value = os.environ.get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid value for {name}: '{value}' is not a valid integer"
            ) from e

    @staticmethod
    def _get_bool_env(name: str, default: bool) -> bool:
        """Get a boolean environment variable (1/0, true/false, yes/no, on/off)."""
        value = os.environ.get(name)
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
        raise ConfigurationError(
            f"Invalid value for {name}: '{value}' is not a valid boolean"
        )

    @staticmethod
    def _get_choice_env(name: str, choices: tuple[str, ...], default: str) -> str:
        """Get an environment variable restricted to a fixed set of values."""
        value = os.environ.get(name)
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered not in choices:
            raise ConfigurationError(
                f"Invalid value for {name}: '{value}' "
                f"(expected one of: {', '.join(choices)})"
            )
        return lowered
