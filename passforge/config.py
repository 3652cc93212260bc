"""
passforge persistent configuration.

Loads/saves settings from ~/.passforge/config.json.
"""

import copy
import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Sequence

from passforge.core.log import get_logger
from passforge.core.settings import PasswordSettings
from passforge.core.wordlist import DEFAULT_WORDLIST, load_wordlist

logger = get_logger('config')

DEFAULTS = {
    "generator": PasswordSettings().to_dict(),
    "wordlist": {
        "path": None,
    },
    "output": {
        "count": 5,
        "show_report": True,
    },
}

CONFIG_DIR = Path.home() / ".passforge"
CONFIG_FILE = CONFIG_DIR / "config.json"

_SETTINGS_KEYS = frozenset(f.name for f in fields(PasswordSettings))


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge override into base, returning a new dict."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Persistent configuration with deep-merge defaults."""

    def __init__(self, config_file: Optional[Path] = None):
        self._file = Path(config_file) if config_file else CONFIG_FILE
        self._data = self._load()

    @property
    def path(self) -> Path:
        return self._file

    def _load(self) -> dict:
        """Load config from file, deep-merged with defaults."""
        if self._file.exists():
            try:
                with open(self._file, 'r') as f:
                    user_data = json.load(f)
                if isinstance(user_data, dict):
                    return _deep_merge(DEFAULTS, user_data)
                logger.warning("Ignoring %s: top level is not an object", self._file)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self._file, e)
        return copy.deepcopy(DEFAULTS)

    def get(self, section: str, key: str) -> Any:
        """Get a config value."""
        return self._data.get(section, {}).get(key)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a config value."""
        if section not in self._data:
            self._data[section] = {}
        self._data[section][key] = value

    def settings(self) -> PasswordSettings:
        """PasswordSettings from the generator section (unknown keys ignored)."""
        section = self._data.get("generator", {})
        return PasswordSettings.from_dict(
            {k: v for k, v in section.items() if k in _SETTINGS_KEYS}
        )

    def update_settings(self, settings: PasswordSettings) -> None:
        """Store settings in the generator section."""
        self._data["generator"] = settings.to_dict()

    def wordlist(self) -> Sequence[str]:
        """The configured wordlist, or the bundled one when no path is set."""
        path = self.get("wordlist", "path")
        if not path:
            return DEFAULT_WORDLIST
        return load_wordlist(Path(path).expanduser())

    def save(self) -> None:
        """Save config to file."""
        self._file.parent.mkdir(parents=True, exist_ok=True)
        with open(self._file, 'w') as f:
            json.dump(self._data, f, indent=2)
        logger.debug("Saved config to %s", self._file)
