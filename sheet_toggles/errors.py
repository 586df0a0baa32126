from __future__ import annotations

"""Error taxonomy shared by the resolver, row sources and shell.

- InvalidArgumentError: a required input is missing; the whole call fails
- MalformedRowError: one matched row cannot become a toggle; only that toggle is dropped
- RowSourceError: the sheet could not be loaded
- ConfigError: settings could not be loaded or validated

A name without a matching row is not an error.
"""

__all__ = [
    "ToggleError",
    "InvalidArgumentError",
    "MalformedRowError",
    "RowSourceError",
    "ConfigError",
]


class ToggleError(Exception):
    """Base exception for every failure surfaced to the shell."""

    def describe(self) -> str:
        """Return ``ClassName: message``, the text sent back on a 500 response."""
        return f"{type(self).__name__}: {self}"


class InvalidArgumentError(ToggleError):
    pass


class MalformedRowError(ToggleError):
    pass


class RowSourceError(ToggleError):
    pass


class ConfigError(ToggleError):
    pass
