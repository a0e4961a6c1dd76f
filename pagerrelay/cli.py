"""Command line entry point of the relay."""

from __future__ import annotations

import argparse
import sys

from .brightwheel import get_messages, get_unread
from .errors import RelayError
from .settings import DEFAULT_SETTINGS_PATH, read_settings
from .state import RelayState


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pager-relay", description="Relay new Brightwheel messages."
    )
    parser.add_argument(
        "settings",
        nargs="?",
        default=DEFAULT_SETTINGS_PATH,
        help="path of the settings file (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Check Brightwheel once for unread messages; return the exit code."""
    args = _parse_args(argv)
    try:
        settings = read_settings(args.settings)
        state = RelayState()
        msgs = get_messages(settings.brightwheel)
        get_unread(state.bright_state, msgs)
    except RelayError as exc:
        print(exc, file=sys.stderr)
        return exc.code
    except OSError as exc:
        print(f"Unable to process request: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())