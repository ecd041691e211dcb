"""Exception hierarchy for ischema."""

from __future__ import annotations


class IschemaError(Exception):
    """Base class for errors raised by ischema."""


class ConfigError(IschemaError):
    """Raised when an ``ischema`` config file cannot be read or is invalid."""


class SchemaRejectedError(IschemaError):
    """Raised when a compiled schema fails draft-07 validation."""

    def __init__(self, title: str, reason: str | None = None) -> None:
        self.title = title
        self.reason = reason
        msg = f"Invalid schema: {title}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
