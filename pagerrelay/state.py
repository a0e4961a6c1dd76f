"""Runtime state kept by the relay between polls."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class BrightState:
    """Timestamp of the newest seen message and the count of unread ones."""

    last_timestamp: int = field(default_factory=lambda: int(time.time()))
    unread: int = 0


@dataclass
class RelayState:
    """All state of the relay."""

    bright_state: BrightState = field(default_factory=BrightState)