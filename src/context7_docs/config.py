"""Service configuration for the Context7 documentation tool.

Sources, highest priority first:
    1. Environment variables (CONTEXT7_API_KEY, CONTEXT7_BASE_URL, CONTEXT7_LOCALE)
    2. JSON config file at $CONTEXT7_CONFIG or ~/.config/context7-docs/config.json
       {
           "context7_api_key": "ctx7sk-...",
           "locale": "en"
       }
    3. Built-in defaults (anonymous access, production base URL, English)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from context7_docs.errors import ConfigurationError

log = logging.getLogger("context7-docs")

DEFAULT_BASE_URL = "https://context7.com/api/v2"
DEFAULT_LOCALE = "en"

_DEFAULT_CONFIG_FILE = Path.home() / ".config" / "context7-docs" / "config.json"


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    """Read-only settings used for a single resolution."""

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    locale: str = DEFAULT_LOCALE


def _env_str(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None


def _config_path() -> tuple[Path, bool]:
    """Return the config file path and whether it was named explicitly."""
    explicit = _env_str("CONTEXT7_CONFIG")
    if explicit:
        return Path(explicit).expanduser(), True
    return _DEFAULT_CONFIG_FILE, False


def _read_config_file(path: Path, required: bool) -> dict[str, object]:
    if not path.exists():
        if required:
            raise ConfigurationError(f"config file not found: {path}")
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {path} must contain a JSON object")
    return data


def _file_str(data: dict[str, object], key: str, path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"'{key}' in {path} must be a string")
    return value.strip() or None


def load_config() -> ServiceConfig:
    """Build a ServiceConfig from the environment and the optional config file.

    Raises:
        ConfigurationError: the config file is missing (when named explicitly),
            unreadable, not valid JSON, or holds values of the wrong type.
    """
    path, required = _config_path()
    data = _read_config_file(path, required)

    api_key = _env_str("CONTEXT7_API_KEY") or _file_str(data, "context7_api_key", path)
    locale = _env_str("CONTEXT7_LOCALE") or _file_str(data, "locale", path) or DEFAULT_LOCALE
    base_url = (_env_str("CONTEXT7_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")

    log.debug(
        "Loaded config: base_url=%s, locale=%s, api_key=%s",
        base_url,
        locale,
        "set" if api_key else "none",
    )
    return ServiceConfig(api_key=api_key, base_url=base_url, locale=locale)
