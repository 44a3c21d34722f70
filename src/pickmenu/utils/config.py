"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from pickmenu.utils.constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    DEFAULT_MIN_WIDTH,
    DEFAULT_NESTED_INDICATOR,
    DEFAULT_NESTED_PREFIX,
    DEFAULT_TITLE,
)
from pickmenu.utils.exceptions import ConfigurationError


def get_pickmenu_dir() -> Path:
    """Get the pickmenu config directory (XDG-compliant)."""
    if env_dir := os.environ.get("PICKMENU_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "pickmenu"


class Config:
    """Application configuration."""

    # Toggleable settings with descriptions (attr_name -> description)
    TOGGLES: dict[str, str] = {
        "debug": "Log to ~/.config/pickmenu/debug.log",
        "clear_on_exit": "Clear the screen when the menu closes",
        "vim_keys": "Bind j/k/g/G/q in addition to arrow keys",
    }

    # Persisted settings and their defaults
    DEFAULTS: dict[str, Any] = {
        "debug": False,
        "clear_on_exit": True,
        "vim_keys": True,
        "min_width": DEFAULT_MIN_WIDTH,
        "nested_prefix": DEFAULT_NESTED_PREFIX,
        "nested_indicator": DEFAULT_NESTED_INDICATOR,
        "default_title": DEFAULT_TITLE,
        "foreground": DEFAULT_FOREGROUND,
        "background": DEFAULT_BACKGROUND,
        "shell": None,
    }

    def __init__(self, pickmenu_dir: Optional[Path] = None):
        """Load config from directory."""
        self.pickmenu_dir = pickmenu_dir or get_pickmenu_dir()
        self._config_file = self.pickmenu_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        for attr, default in self.DEFAULTS.items():
            setattr(self, attr, default)
        # Env var overrides persisted in config.json
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
            except (json.JSONDecodeError, IOError):
                data = {}
            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"{self._config_file} must contain a JSON object"
                )
            for attr, default in self.DEFAULTS.items():
                if attr in data:
                    setattr(self, attr, self._check_type(attr, data[attr]))
            self.env = data.get("env", {})

        self._file_values = {attr: getattr(self, attr) for attr in self.DEFAULTS}
        self._apply_env_overrides()

    def _check_type(self, attr: str, value: Any) -> Any:
        """Reject values whose type does not match the default's type."""
        default = self.DEFAULTS[attr]
        if default is None:
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{attr} must be a string or null")
            return value
        # bool is a subclass of int, so check it first
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise ConfigurationError(f"{attr} must be true or false")
        elif isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{attr} must be an integer")
        elif not isinstance(value, type(default)):
            raise ConfigurationError(f"{attr} must be a string")
        return value

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell PICKMENU_* vars."""
        prefix = "PICKMENU_"
        # attr -> value taken from an override, so save() can skip it
        self._env_values: dict[str, Any] = {}

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both PICKMENU_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name not in self.DEFAULTS:
                    continue
                # Convert value based on current attribute type
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    converted = value.lower() in ("true", "1", "yes")
                elif isinstance(current, int):
                    try:
                        converted = int(value)
                    except ValueError:
                        raise ConfigurationError(
                            f"{key} must be an integer, got {value!r}"
                        ) from None
                else:
                    converted = value
                setattr(self, attr_name, converted)
                self._env_values[attr_name] = converted

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def save(self):
        """Save config to file."""
        self.pickmenu_dir.mkdir(parents=True, exist_ok=True)
        data = {}
        for attr in self.DEFAULTS:
            value = getattr(self, attr)
            # Overridden values stay in env, not in the settings themselves
            if attr in self._env_values and value == self._env_values[attr]:
                value = self._file_values[attr]
            data[attr] = value
        self._file_values = dict(data)
        data["env"] = self.env
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_env(self, key: str, value: str):
        """Set an env var override in config."""
        self.env[key] = value
        try:
            self._apply_env_overrides()
        except ConfigurationError:
            # Nothing was saved yet, reload drops the bad value
            self._load()
            raise
        self.save()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self.save()
            # Drop the override from the live attributes too
            self._load()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    def get_toggles(self) -> list[tuple[str, str, bool]]:
        """Get all toggleable settings with current values.

        Returns list of (attr_name, description, is_enabled).
        """
        result = []
        for attr, desc in self.TOGGLES.items():
            value = getattr(self, attr, False)
            result.append((attr, desc, bool(value)))
        return result

    def set_toggle(self, attr: str, enabled: bool):
        """Set a toggle value and persist it."""
        if attr not in self.TOGGLES:
            return
        setattr(self, attr, enabled)
        self.save()

    @property
    def log_path(self) -> Path:
        """Path to debug log file."""
        return self.pickmenu_dir / "debug.log"
