"""AWS CLI config reader used as the picker's item source.

Parses ``~/.aws/config`` style INI files into ordered ``Item`` records.
Section naming follows the AWS CLI: ``[profile NAME]`` and bare ``[NAME]``.
"""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PROFILE_SECTION_PREFIX = "profile "
DEFAULT_PROFILE_NAME = "default"
# Keys that make an implicit [DEFAULT] section a usable profile.
DEFAULT_SECTION_MARKER_KEYS = ("aws_access_key_id", "sso_session", "role_arn")

_IMPLICIT_SECTION = "DEFAULT"
# configparser treats its default section as inherited by every other section;
# pick a name no real config uses so [DEFAULT] parses as an ordinary section.
_UNUSED_DEFAULT_SECTION = "\x00profilepick-unused\x00"


@dataclass(frozen=True)
class Item:
    """One selectable entry: display name plus optional detail text."""

    name: str
    metadata: str | None = None


class ProfileSourceError(Exception):
    """Raised when the AWS config file cannot be read or parsed."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message} (file: {path})")
        self.path = path
        self.message = message


def default_config_path() -> Path:
    return Path.home() / ".aws" / "config"


def _profile_name_for_section(section_name: str, section: configparser.SectionProxy) -> str | None:
    if section_name == _IMPLICIT_SECTION:
        if any(key in section for key in DEFAULT_SECTION_MARKER_KEYS):
            return DEFAULT_PROFILE_NAME
        return None
    if section_name.startswith(PROFILE_SECTION_PREFIX):
        return section_name[len(PROFILE_SECTION_PREFIX):].strip()
    return section_name


def parse_profiles(text: str) -> list[Item]:
    """Parse AWS config ``text`` into profile items in file order.

    Keys that appear before the first section header are folded into an
    implicit ``[DEFAULT]`` section, which only counts as the ``default``
    profile when it carries credentials, an SSO session, or a role ARN.
    """
    parser = configparser.ConfigParser(
        default_section=_UNUSED_DEFAULT_SECTION,
        interpolation=None,
        strict=False,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    parser.read_string(f"[{_IMPLICIT_SECTION}]\n{text}")

    items: list[Item] = []
    for section_name in parser.sections():
        section = parser[section_name]
        name = _profile_name_for_section(section_name, section)
        if name is None or not name.strip():
            continue
        role_arn = section.get("role_arn", "").strip()
        items.append(Item(name=name, metadata=role_arn or None))
    return items


def load_profiles(path: Path | None = None) -> list[Item]:
    """Read and parse the AWS config file at ``path``.

    Raises ``ProfileSourceError`` for missing, unreadable, or malformed files.
    An existing file without profiles yields an empty list.
    """
    config_path = path if path is not None else default_config_path()
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProfileSourceError(config_path, f"failed to read AWS config: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ProfileSourceError(config_path, "AWS config is not valid UTF-8") from exc

    try:
        items = parse_profiles(text)
    except configparser.Error as exc:
        raise ProfileSourceError(config_path, f"failed to parse AWS config: {exc.message}") from exc

    logger.debug("loaded %d profile(s) from %s", len(items), config_path)
    return items
