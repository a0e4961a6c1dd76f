"""Exceptions raised by the relay, each carrying the process exit code it maps to."""


class RelayError(Exception):
    """Base class for every error the relay reports."""

    code = 1


class SettingsError(RelayError):
    """The settings could not be used."""

    code = 1


class EmptyError(RelayError):
    """A required value or collection was empty."""

    code = 2


class JsonParseError(RelayError):
    """A JSON document could not be parsed or lacked an expected member."""

    code = 3


class JsonAccessError(RelayError):
    """A JSON member was present but its value could not be read."""

    code = 4


class ConvertError(RelayError):
    """A value could not be converted to the required type."""

    code = 6