# pagerrelay

pagerrelay checks a Brightwheel message thread once and reports unread
messages. It reads an authentication token from a JSON settings file,
fetches the latest messages of the thread, and prints how many are newer
than the last timestamp it knows of.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Configuration

By default the settings are read from `settings.json` in the working
directory:

```json
{
  "brightwheel": {
    "token": "token"
  }
}
```

The `token` value is sent as the `_brightwheel_v2` cookie. It must be
present and must not be empty; otherwise loading fails.

## Usage

```
pager-relay [SETTINGS]
```

`SETTINGS` is the path of the settings file and defaults to
`settings.json`. The command loads the settings, fetches the messages from
the URL in `pagerrelay.brightwheel.BRIGHT_API_URL` and, when there are
messages newer than the last known timestamp, prints
`There are N unread messages`; if the newest message is older it prints
`No new message`.

On failure the error is printed to standard error and the command exits with
the `code` of the raised error:

| Error              | Exit code |
|--------------------|-----------|
| `SettingsError`    | 1         |
| `EmptyError`       | 2         |
| `JsonParseError`   | 3         |
| `JsonAccessError`  | 4         |
| `ConvertError`     | 6         |

Network failures exit with code 1.

## Library use

```python
from pagerrelay.settings import read_settings
from pagerrelay.state import RelayState
from pagerrelay.brightwheel import get_messages, get_unread

settings = read_settings("settings.json")
state = RelayState()
msgs = get_messages(settings.brightwheel)
latest = get_unread(state.bright_state, msgs)
```

- `read_settings(path)` returns a `RelaySettings` and validates it with
  `validate_settings`.
- `get_messages(settings, fetcher=None)` returns the `results` array of the
  response. `fetcher` defaults to `pagerrelay.http.fetch`, which performs a
  GET without verifying TLS certificates and returns an `HttpResponse`; any
  callable taking the URL and a `cookie` keyword and returning an
  `HttpResponse` may be passed instead.
- `get_unread(state, msgs)` expects messages newest first, each holding a
  `message` object with a `created_at` timestamp such as
  `2026-04-14T20:06:21.107Z`. It returns the newest unread message (or
  `None`), counts unread messages into `state.unread`, and moves
  `state.last_timestamp` to the returned message's time.
- `get_timestamp(msg)` reads `created_at` up to the seconds and interprets it
  as local time; `parse_messages(text)` parses a response body.
- `pagerrelay.util.print_json_str(parent, key)` prints and returns a string
  member of a message.

All failures raise subclasses of `pagerrelay.errors.RelayError`.

## What it does not do

- It checks once and exits; it does not poll repeatedly.
- `BrightState.last_timestamp` starts at the current time and is not saved
  between runs, so each run only counts messages created after it started.
- It does not send e-mail or any other notification. `EmailSettings` exists
  in `RelaySettings` but is neither read from the settings file nor used.
- The thread to fetch is fixed by `BRIGHT_API_URL` and cannot be set from the
  settings file or the command line.

## Running the tests

```
pip install .[test]
pytest
```