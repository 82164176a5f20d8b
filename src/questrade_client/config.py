"""Configuration management for Questrade client."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

API_VERSION = "v1"
"""Version segment shared by every API endpoint."""

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _get_config_dir() -> Path:
    """Get XDG-compliant config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "questrade-client"
    return Path.home() / ".config" / "questrade-client"


@dataclass(frozen=True, slots=True)
class QuestradeConfig:
    """Questrade API configuration.

    Refresh tokens are not part of the configuration: they rotate on every
    exchange and are handed to ``QuestradeClient.authenticate`` directly.
    """

    is_demo: bool = False
    timeout: float = 30.0

    # Token exchange URLs
    _practice_token_url: str = field(
        default="https://practicelogin.questrade.com/oauth2/token", repr=False
    )
    _live_token_url: str = field(default="https://login.questrade.com/oauth2/token", repr=False)

    @property
    def token_url(self) -> str:
        """Get the token exchange URL for the selected environment."""
        return self.token_url_for(self.is_demo)

    def token_url_for(self, is_demo: bool) -> str:
        """Get the token exchange URL for an explicit environment flag."""
        return self._practice_token_url if is_demo else self._live_token_url

    def for_environment(self, is_demo: bool) -> QuestradeConfig:
        """Return a copy of this config targeting the given environment."""
        return replace(self, is_demo=is_demo)

    @classmethod
    def from_env(cls) -> QuestradeConfig:
        """Create config from environment variables.

        Optional env vars:
        - QUESTRADE_DEMO: "1", "true", "yes" or "on" selects the practice environment
        - QUESTRADE_TIMEOUT: HTTP timeout in seconds
        """
        is_demo = os.environ.get("QUESTRADE_DEMO", "").strip().lower() in _TRUTHY

        timeout_value = os.environ.get("QUESTRADE_TIMEOUT")
        if timeout_value is None:
            return cls(is_demo=is_demo)

        try:
            timeout = float(timeout_value)
        except ValueError:
            msg = f"Invalid QUESTRADE_TIMEOUT value: {timeout_value!r}"
            raise ValueError(msg) from None

        return cls(is_demo=is_demo, timeout=timeout)

    @classmethod
    def from_file(cls, path: Path | None = None) -> QuestradeConfig:
        """Load config from JSON file.

        Default path: ~/.config/questrade-client/config.json

        Expected format:
        {
            "is_demo": true,
            "timeout": 30.0
        }
        """
        if path is None:
            path = _get_config_dir() / "config.json"

        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with path.open() as f:
            data = json.load(f)

        return cls(
            is_demo=bool(data.get("is_demo", False)),
            timeout=float(data.get("timeout", 30.0)),
        )

    @classmethod
    def load(cls) -> QuestradeConfig:
        """Load config from environment, file, or defaults (in that order)."""
        if "QUESTRADE_DEMO" in os.environ:
            return cls.from_env()
        try:
            return cls.from_file()
        except FileNotFoundError:
            return cls()


def refresh_token_from_env(var_name: str = "QUESTRADE_REFRESH_TOKEN") -> str:
    """Read a refresh token from the environment.

    Raises:
        ValueError: If the variable is unset or empty
    """
    token = os.environ.get(var_name)
    if not token:
        msg = f"Missing required environment variable: {var_name}"
        raise ValueError(msg)
    return token
