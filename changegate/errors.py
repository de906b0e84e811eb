"""Error types raised by changegate."""


class ChangeGateError(Exception):
    """Base class for every fatal changegate failure."""


class ConfigError(ChangeGateError):
    """Required environment values are missing or the event is unsupported."""


class FetchError(ChangeGateError):
    """The changed-file listing could not be retrieved from GitHub."""

    def __init__(self, message: str, payload: str = ""):
        super().__init__(message)
        self.payload = payload


class PatternError(ChangeGateError):
    """The supplied regular expression does not compile."""
