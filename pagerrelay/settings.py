"""Loading and validating the relay's settings file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any

from .errors import EmptyError, JsonAccessError, JsonParseError

DEFAULT_SETTINGS_PATH = "settings.json"


@dataclass
class BrightwheelSettings:
    """Credentials for the Brightwheel API."""

    token: str = ""


@dataclass
class EmailSettings:
    """Outgoing e-mail settings."""

    sender: str = ""
    recipients: str = ""
    password: str = ""


@dataclass
class RelaySettings:
    """All settings of the relay."""

    email: EmailSettings = field(default_factory=EmailSettings)
    brightwheel: BrightwheelSettings = field(default_factory=BrightwheelSettings)


def _as_string(value: Any) -> str:
    if value is None:
        raise JsonAccessError("Unable to load brightwheel token: value is null")
    if isinstance(value, str):
        return value
    return json.dumps(value)


def validate_settings(settings: RelaySettings) -> None:
    """Raise EmptyError if a required setting is empty."""
    if not settings.brightwheel.token:
        raise EmptyError("Brightwheel token is empty")


def read_settings(path: str | os.PathLike[str] = DEFAULT_SETTINGS_PATH) -> RelaySettings:
    """Read and validate settings from the JSON file at *path*."""
    try:
        with open(path, encoding="utf-8") as fh:
            root = json.load(fh)
    except (OSError, ValueError) as exc:
        raise JsonParseError(f"Unable to load settings: {exc}") from exc

    node = root.get("brightwheel") if isinstance(root, dict) else None
    if not isinstance(root, dict) or "brightwheel" not in root:
        raise JsonParseError("Unable to load brightwheel settings")
    if not isinstance(node, dict) or "token" not in node:
        raise JsonParseError("Unable to load brightwheel token")

    settings = RelaySettings(brightwheel=BrightwheelSettings(token=_as_string(node["token"])))
    validate_settings(settings)
    return settings