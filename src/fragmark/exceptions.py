"""Exception hierarchy for fragmark."""

from __future__ import annotations


class FragmarkError(Exception):
    """Base exception for all fragmark errors."""


class MissingLinkFieldError(FragmarkError, ValueError):
    """A link was rendered without a url or without inner content."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class ConfigError(FragmarkError):
    """Renderer configuration loading or validation failure."""
