"""Configuration Management Package

Looks for a ``.genierc`` JSON file in the current directory, then in the home
directory, and falls back to built-in defaults.

Example ``.genierc``::

    {
        "model": "gemini-2.5-flash",
        "copy": true,
        "tips": false
    }
"""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_URL = "https://generativelanguage.googleapis.com/v1beta"

FALSY_ENV_VALUES = {"", "0", "false", "no", "off"}


@dataclass
class Config:
    """User configuration with sensible defaults."""
    model: str = DEFAULT_MODEL
    api_url: str = DEFAULT_API_URL
    copy: bool = True  # Copy the generated message to the clipboard
    tips: bool = True  # Suggest 'git add' when analyzing unstaged/untracked changes
    verbose: bool = False

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.model, str) or not self.model.strip():
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            self.model = defaults.model

        if not isinstance(self.api_url, str) or not self.api_url.startswith(("http://", "https://")):
            warnings.append(f"Invalid api_url '{self.api_url}', using '{defaults.api_url}'")
            self.api_url = defaults.api_url

        for name in ("copy", "tips", "verbose"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                default = getattr(defaults, name)
                warnings.append(f"Invalid {name} '{value}', using {str(default).lower()}")
                setattr(self, name, default)

        return warnings

    def apply_env(self, environ) -> None:
        """Apply GENIE_* environment overrides on top of file settings."""
        model = environ.get('GENIE_MODEL', '').strip()
        if model:
            self.model = model
        verbose = environ.get('GENIE_VERBOSE')
        if verbose is not None:
            self.verbose = verbose.strip().lower() not in FALSY_ENV_VALUES

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Manages loading configuration."""

    CONFIG_FILENAME = ".genierc"

    def __init__(self, cwd: Optional[Path] = None, home: Optional[Path] = None):
        self._cwd = cwd
        self._home = home
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        local_path = (self._cwd or Path.cwd()) / self.CONFIG_FILENAME
        if local_path.exists():
            self._config = self._load_from_file(local_path)
            self._config_path = local_path
            return self._config

        home_path = (self._home or Path.home()) / self.CONFIG_FILENAME
        if home_path.exists():
            self._config = self._load_from_file(home_path)
            self._config_path = home_path
            return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


def load_config(cwd: Optional[Path] = None, home: Optional[Path] = None) -> Config:
    return ConfigManager(cwd=cwd, home=home).load()


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "DEFAULT_MODEL",
    "DEFAULT_API_URL",
]
