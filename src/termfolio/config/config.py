"""
Configuration management for termfolio.

Provides a configuration file at ~/.termfolio/config.json for default settings.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


# Default values - single source of truth
DEFAULTS = {
    "github_username": "shritej-koneru",
    "cache_ttl_hours": 24.0,
    "fetch_timeout": 10.0,
    "offline": False,
    "simple": False,
    "prompt_user": "guest",
    "prompt_host": "portfolio",
    "log_level": "INFO",
}


class Config(BaseModel):
    """Configuration settings for termfolio.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Data provider settings
    github_username: Optional[str] = Field(
        default=None,
        description="GitHub user whose repositories become projects"
    )
    github_token: Optional[str] = Field(
        default=None,
        description="GitHub API token (raises the rate limit)"
    )
    cache_ttl_hours: Optional[float] = Field(
        default=None,
        description="Hours before cached provider data is re-fetched"
    )
    fetch_timeout: Optional[float] = Field(
        default=None,
        description="HTTP timeout in seconds for GitHub requests"
    )
    offline: Optional[bool] = Field(
        default=None,
        description="Never hit the network; use cache or built-in data"
    )
    content_file: Optional[str] = Field(
        default=None,
        description="YAML file overriding personal info, timeline, certifications"
    )

    # Terminal settings
    simple: Optional[bool] = Field(
        default=None,
        description="Use simple REPL (no prompt_toolkit)"
    )
    prompt_user: Optional[str] = Field(
        default=None,
        description="User shown in the prompt"
    )
    prompt_host: Optional[str] = Field(
        default=None,
        description="Host shown in the prompt"
    )
    transcript_limit: Optional[int] = Field(
        default=None,
        description="Keep only the newest N transcript entries (unset = unbounded)"
    )
    site_url: Optional[str] = Field(
        default=None,
        description="GUI site opened by the 'gui' command"
    )

    # Logging
    log_level: Optional[str] = Field(
        default=None,
        description="Log file level (DEBUG, INFO, WARNING, ERROR)"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = Path.home() / ".termfolio"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        self._config: Optional[Config] = None

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self, create_if_missing: bool = True) -> Config:
        """Load configuration from file.

        Args:
            create_if_missing: If True, create default config file if it doesn't exist.

        Returns:
            Config object with loaded settings, or defaults if file doesn't exist.
        """
        if not self.CONFIG_FILE.exists():
            if create_if_missing:
                self._create_default_config()
            return Config()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            print(f"Warning: Invalid config file ({e}), using defaults", file=sys.stderr)
            return Config()

    def _create_default_config(self) -> None:
        """Create default config file with actual default values."""
        self._ensure_dir()

        default_config = {"_comment": "termfolio configuration file"}
        for key in Config.model_fields:
            default_config[key] = DEFAULTS.get(key)
        self.CONFIG_FILE.write_text(json.dumps(default_config, indent=2) + "\n")

    def _read_raw(self) -> dict[str, Any]:
        if not self.CONFIG_FILE.exists():
            return {}
        try:
            return json.loads(self.CONFIG_FILE.read_text())
        except json.JSONDecodeError:
            return {}

    def save(self, config: Optional[Config] = None) -> Path:
        """Save configuration to file, preserving existing structure.

        Args:
            config: Config to save. If None, saves current config.

        Returns:
            Path to saved config file.
        """
        self._ensure_dir()
        if config is not None:
            self._config = config

        if self._config is None:
            self._config = Config()

        # Update only non-None config values, preserving everything else
        existing_data = self._read_raw()
        for key, value in self._config.model_dump().items():
            if value is not None:
                existing_data[key] = value

        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")
        return self.CONFIG_FILE

    def set(self, key: str, value: Any) -> None:
        """Set a config value and save.

        String values (as given on the command line) are coerced through
        the Config model.
        """
        self._config = self.load(create_if_missing=True)

        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        data = self._config.model_dump()
        data[key] = value
        self._config = Config.model_validate(data)
        self.save()

    def unset(self, key: str) -> None:
        """Remove a config value (reset to default)."""
        self._config = self.load(create_if_missing=True)

        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        setattr(self._config, key, None)

        existing_data = self._read_raw()
        if key in existing_data:
            existing_data[key] = None
        self.CONFIG_FILE.write_text(json.dumps(existing_data, indent=2) + "\n")

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def list_settings(self) -> dict[str, Any]:
        """List user-customized settings (values that differ from defaults)."""
        result = {}
        for k, v in self.config.model_dump().items():
            if v is None:
                continue
            if k not in DEFAULTS or v != DEFAULTS[k]:
                result[k] = v
        return result

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = Config()
        if self.CONFIG_FILE.exists():
            self.CONFIG_FILE.unlink()


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
