"""Exception types raised by the transport, locator and tool registry."""

from __future__ import annotations

from typing import Any


class WordPressMCPError(Exception):
    """Base class for errors raised by this package."""


class TransportError(WordPressMCPError):
    """A WordPress (or WordPress.org) request failed.

    Raised for non-2xx responses and for network failures. ``status`` is
    ``None`` when no response was received.
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        code: str | None = None,
        data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.data = data

    def __str__(self) -> str:
        return self.message


class NotFoundError(WordPressMCPError):
    """No content item matched a URL or slug lookup."""


class UnknownToolError(WordPressMCPError, KeyError):
    """A tool name is not present in the active registry."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Tool not found: {self.name}"
