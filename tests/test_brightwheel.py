import json

import pytest

from pagerrelay.brightwheel import (
    BRIGHT_API_URL,
    get_messages,
    get_timestamp,
    get_unread,
    parse_messages,
)
from pagerrelay.errors import EmptyError, JsonAccessError, JsonParseError
from pagerrelay.http import HttpResponse
from pagerrelay.settings import BrightwheelSettings
from pagerrelay.state import BrightState


def _entry(created_at, body="hello"):
    return {"message": {"created_at": created_at, "body": body}}


class _FakeFetcher:
    def __init__(self, body):
        self.body = body
        self.calls = []

    def __call__(self, url, cookie=None, timeout=None):
        self.calls.append((url, cookie))
        response = HttpResponse()
        response.write(self.body.encode("utf-8"))
        return response


def test_parse_messages_valid():
    assert parse_messages('{"results": [1, 2]}') == {"results": [1, 2]}


def test_parse_messages_invalid():
    with pytest.raises(JsonParseError):
        parse_messages("{not json")


def test_get_messages_sends_cookie_and_returns_results():
    fetcher = _FakeFetcher(json.dumps({"results": [_entry("2026-04-14T20:06:21.107Z")]}))
    msgs = get_messages(BrightwheelSettings(token="token"), fetcher)
    assert msgs == [_entry("2026-04-14T20:06:21.107Z")]
    assert fetcher.calls == [(BRIGHT_API_URL, "_brightwheel_v2=token")]


def test_get_messages_missing_results():
    fetcher = _FakeFetcher(json.dumps({"other": []}))
    with pytest.raises(JsonAccessError):
        get_messages(BrightwheelSettings(token="token"), fetcher)


def test_get_messages_bad_json():
    fetcher = _FakeFetcher("<html>")
    with pytest.raises(JsonParseError):
        get_messages(BrightwheelSettings(token="token"), fetcher)


def test_get_timestamp_ignores_fraction_and_zone():
    with_fraction = get_timestamp({"created_at": "2026-04-14T20:06:21.107Z"})
    without = get_timestamp({"created_at": "2026-04-14T20:06:21"})
    assert with_fraction == without


def test_get_timestamp_orders_seconds():
    earlier = get_timestamp({"created_at": "2026-04-14T20:06:21.000Z"})
    later = get_timestamp({"created_at": "2026-04-14T20:06:51.000Z"})
    assert later - earlier == 30


@pytest.mark.parametrize(
    "msg",
    [
        {},
        {"created_at": None},
        {"created_at": 12},
        {"created_at": "yesterday"},
        {"created_at": "2026-13-40T20:06:21Z"},
        "not a dict",
    ],
)
def test_get_timestamp_errors(msg):
    with pytest.raises(JsonParseError):
        get_timestamp(msg)


def test_get_unread_empty():
    with pytest.raises(EmptyError):
        get_unread(BrightState(last_timestamp=0), [])


def test_get_unread_counts_new_messages():
    msgs = [
        _entry("2026-04-14T20:10:00.000Z", "newest"),
        _entry("2026-04-14T20:09:00.000Z", "middle"),
        _entry("2026-04-14T20:00:00.000Z", "old"),
    ]
    state = BrightState(last_timestamp=get_timestamp({"created_at": "2026-04-14T20:05:00"}))
    msg = get_unread(state, msgs)
    assert msg["body"] == "newest"
    assert state.unread == 2
    assert state.last_timestamp == get_timestamp(msgs[0]["message"])


def test_get_unread_no_new_message(capsys):
    msgs = [_entry("2026-04-14T20:00:00.000Z")]
    last = get_timestamp({"created_at": "2026-04-14T21:00:00"})
    state = BrightState(last_timestamp=last)
    assert get_unread(state, msgs) is None
    assert state.unread == 0
    assert state.last_timestamp == last
    assert "No new message" in capsys.readouterr().out


def test_get_unread_reports_count(capsys):
    msgs = [_entry("2026-04-14T20:10:00.000Z")]
    state = BrightState(last_timestamp=0)
    get_unread(state, msgs)
    assert "There are 1 unread messages" in capsys.readouterr().out


def test_get_unread_missing_message_key():
    state = BrightState(last_timestamp=0)
    with pytest.raises(JsonParseError):
        get_unread(state, [{"nope": {}}])


def test_get_unread_bad_timestamp():
    state = BrightState(last_timestamp=0)
    with pytest.raises(JsonParseError):
        get_unread(state, [_entry("garbage")])