"""Fetching Brightwheel message threads and finding unread messages."""

from __future__ import annotations

import json
import re
import time
from typing import Any, Callable

from .errors import JsonAccessError, JsonParseError, EmptyError
from .http import HttpResponse, fetch
from .settings import BrightwheelSettings
from .state import BrightState

BRIGHT_API_URL = (
    "https://schools.mybrightwheel.com/api/v2/guardians/"
    "00000000-0000-0000-0000-000000000001/message_threads/"
    "00000000-0000-0000-0000-000000000002/messages?page_limit=5"
)
COOKIE_NAME = "_brightwheel_v2"
# Example: 2026-04-14T20:06:21.107Z; anything after the seconds is ignored.
TIMESTAMP_FMT = "%Y-%m-%dT%H:%M:%S"
TIMESTAMP_LEN = 24

_TIMESTAMP_PREFIX = re.compile(r"\s*\d{1,4}-\d{1,2}-\d{1,2}T\d{1,2}:\d{1,2}:\d{1,2}")

Fetcher = Callable[..., HttpResponse]


def parse_messages(text: str) -> Any:
    """Parse a JSON response body, raising JsonParseError if it is not valid JSON."""
    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        raise JsonParseError(f"Unable to parse json_string: {exc}\n\tString: {text}") from exc


def get_messages(settings: BrightwheelSettings, fetcher: Fetcher | None = None) -> list[Any]:
    """Fetch the message thread and return its "results" array."""
    fetcher = fetcher or fetch
    cookie = f"{COOKIE_NAME}={settings.token}"
    response = fetcher(BRIGHT_API_URL, cookie=cookie)
    document = parse_messages(response.text())
    if not isinstance(document, dict) or "results" not in document:
        raise JsonAccessError("Unable to get results array from response")
    return document["results"]


def get_timestamp(msg: Any) -> int:
    """Return the local-time epoch seconds of a message's "created_at" field."""
    if not isinstance(msg, dict) or "created_at" not in msg:
        raise JsonParseError("Message has no created_at field")
    value = msg["created_at"]
    if not isinstance(value, str):
        raise JsonParseError(f"Message created_at is not a string: {value!r}")
    match = _TIMESTAMP_PREFIX.match(value)
    if match is None:
        raise JsonParseError(f"Unable to parse timestamp: {value}")
    try:
        parsed = time.strptime(match.group(0).strip(), TIMESTAMP_FMT)
        return int(time.mktime(parsed))
    except (ValueError, OverflowError) as exc:
        raise JsonParseError(f"Unable to parse timestamp: {value}") from exc


def get_unread(state: BrightState, msgs: Any) -> dict[str, Any] | None:
    """Return the newest unread message, counting unread ones into *state*.

    Messages are expected newest first. Returns None when nothing is newer
    than the state's last timestamp; otherwise the state's last timestamp is
    moved to that of the returned message.
    """
    if not isinstance(msgs, list) or not msgs:
        raise EmptyError("message array is empty")

    newest: dict[str, Any] | None = None
    for index, entry in enumerate(msgs):
        if not isinstance(entry, dict) or "message" not in entry:
            raise JsonParseError(f"Unable to get message data at index: {index}")
        message = entry["message"]
        try:
            timestamp = get_timestamp(message)
        except JsonParseError as exc:
            raise JsonParseError(f"Unable to get message timestamp at index: {index}") from exc

        if state.last_timestamp > timestamp and index == 0:
            print("No new message")
            break
        if timestamp > state.last_timestamp:
            if newest is None:
                newest = message
            state.unread = (state.unread + 1) % 256
            continue
        if newest is not None:
            break

    if newest is not None:
        print(f"There are {state.unread} unread messages")
        try:
            state.last_timestamp = get_timestamp(newest)
        except JsonParseError as exc:
            raise JsonParseError("Unable to get unread message timestamp") from exc
    return newest