"""changegate - gate CI steps on whether changed files match a pattern."""

__version__ = "0.1.0"
