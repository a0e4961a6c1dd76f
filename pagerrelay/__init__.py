"""Check a Brightwheel message thread and report unread messages."""

__version__ = "0.1.0"