"""Settings of the command line tool.

Settings live in a YAML file (``configs/default.yaml`` unless
``RESPROVER_CONFIG`` names another one). String values may reference
environment variables as ``${VAR}`` or ``${VAR:default}``, also in the
middle of a string.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_ENV_VAR = "RESPROVER_CONFIG"

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}")


def expand_env(value: Any) -> Any:
    """Substitute environment references in all strings of a YAML value."""
    if isinstance(value, str):
        return _ENV_PATTERN.sub(
            lambda m: os.environ.get(m.group(1), m.group(2) or ""), value)
    if isinstance(value, dict):
        return {k: expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env(v) for v in value]
    return value


class Config:
    """Tool settings addressed by dot-separated keys, e.g. ``paths.logs``."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else self._find_config_file()
        with open(self.config_path) as f:
            self.config = expand_env(yaml.safe_load(f) or {})

    @staticmethod
    def _find_config_file() -> Path:
        if os.environ.get(CONFIG_ENV_VAR):
            return Path(os.environ[CONFIG_ENV_VAR])

        candidates = [
            Path.cwd() / "configs" / "default.yaml",
            Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml",
            Path.home() / ".resprover" / "config.yaml",
        ]
        for path in candidates:
            if path.exists():
                return path
        raise FileNotFoundError("No configuration file found")

    def get(self, key: str, default: Any = None) -> Any:
        value = self.config
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def get_path(self, key: str) -> Optional[Path]:
        """Setting as a path; None when it is missing or empty."""
        value = self.get(key)
        return Path(value).expanduser() if value else None

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def update(self, updates: Dict[str, Any]):
        """Merge nested ``updates`` into the settings."""
        def merge(target, source):
            for k, v in source.items():
                if isinstance(v, dict) and isinstance(target.get(k), dict):
                    merge(target[k], v)
                else:
                    target[k] = v

        merge(self.config, updates)


_config = None


def get_config(config_path: Optional[str] = None) -> Config:
    """Get the process-wide settings, loading them on first use."""
    global _config
    if _config is None or config_path is not None:
        _config = Config(config_path)
    return _config


def reset_config():
    global _config
    _config = None
