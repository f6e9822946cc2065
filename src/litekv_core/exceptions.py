"""Custom exception hierarchy for the LiteKV client."""

from __future__ import annotations


class LiteKVError(Exception):
    """Base exception for all LiteKV client errors."""


class TransportError(LiteKVError):
    """Raised when a request fails on the network or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AppNotFoundError(LiteKVError):
    """Raised when the application id cannot be validated against the service."""

    def __init__(self, message: str, app_id: str) -> None:
        super().__init__(message)
        self.app_id = app_id
