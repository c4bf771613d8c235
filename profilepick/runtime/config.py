"""Persistent JSON config helpers.

Holds user preferences: UI theme, AWS config location, the environment
variable that names the current profile, and the output line format.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "profilepick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_ENV_VAR_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def is_env_var_name(value: str) -> bool:
    """Whether ``value`` is a portable shell variable name."""
    return _ENV_VAR_NAME_RE.fullmatch(value) is not None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def load_aws_config_file() -> Path | None:
    """Load the configured AWS config path, with ``~`` expanded."""
    value = _load_string("aws_config_file")
    if value is None:
        return None
    return Path(value).expanduser()


def load_env_var() -> str | None:
    """Load the environment variable name that holds the current profile.

    Only shell-identifier-shaped names are accepted.
    """
    value = _load_string("env_var")
    if value is None or not is_env_var_name(value):
        return None
    return value


def load_output_format(allowed: tuple[str, ...]) -> str | None:
    value = _load_string("output_format")
    if value is None or value not in allowed:
        return None
    return value
