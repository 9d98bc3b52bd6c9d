"""
Settings for pkgwrap.

Values come from DEFAULT_CONFIG, overridden by a TOML file:
1. $PKGWRAP_CONFIG, when set
2. /etc/pkgwrap/config.toml

A missing or broken file is not an error: the defaults are used. Invalid
values inside an otherwise valid file are reset to their defaults.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_CONFIG_PATH = Path("/etc/pkgwrap/config.toml")

# Default configuration values (used as ultimate fallback)
DEFAULT_CONFIG = {
    "network": {
        "timeout": 600,  # seconds, overridden by --timeout
        "retries": 3,
        "retry_delay": 3,
        "xfer_client": "/usr/bin/curl",  # used by pacman's XferCommand
    },
    "files": {
        "keep_temp_config": True,
        "temp_dir": "",  # Empty = system default temp dir
    },
    "ui": {
        "verbosity": 1,
        "show_command": False,
        "force_colors": False,
    },
}


def _non_negative_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _positive_int(value) -> bool:
    return _non_negative_int(value) and value > 0


class Config:
    def __init__(self, path: Optional[Path] = None):
        if path is None:
            env_path = os.environ.get("PKGWRAP_CONFIG")
            path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        self.config_path = Path(path)
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        self.loaded = self._try_load_config(self.config_path)

    def _try_load_config(self, config_path: Path) -> bool:
        """Try to load a config file. Returns True if successful."""
        if not config_path.is_file():
            return False

        try:
            import tomllib
        except ImportError:
            import tomli as tomllib

        try:
            with open(config_path, "rb") as f:
                loaded_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            return False

        self._validate_config(loaded_config)
        self._deep_merge(self.data, loaded_config)
        return True

    def _validate_config(self, config: Dict):
        """Reset invalid values to their defaults, in place."""
        for section, defaults in DEFAULT_CONFIG.items():
            values = config.get(section)
            if values is None:
                continue
            if not isinstance(values, dict):
                config[section] = copy.deepcopy(defaults)
                continue

            for key in ("retries", "retry_delay", "verbosity"):
                if key in values and key in defaults and not _non_negative_int(values[key]):
                    values[key] = defaults[key]

            # Same rule as --timeout: a positive number of seconds
            if "timeout" in values and "timeout" in defaults and not _positive_int(values["timeout"]):
                values["timeout"] = defaults["timeout"]

            for key in ("keep_temp_config", "show_command", "force_colors"):
                if key in values and key in defaults and not isinstance(values[key], bool):
                    values[key] = defaults[key]

            for key in ("xfer_client", "temp_dir"):
                if key in values and key in defaults and not isinstance(values[key], str):
                    values[key] = defaults[key]

    def _deep_merge(self, base: Dict, update: Dict):
        """Deep merge update dict into base dict."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.data.get(section, {}).get(key, default)

    def get_temp_dir(self) -> Optional[str]:
        """Directory for temporary files, or None for the system default."""
        temp_dir = self.get("files", "temp_dir", "")
        return temp_dir or None


# Global config instance
_config = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
