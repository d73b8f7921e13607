"""Exceptions raised by the API client and data-access services."""

from __future__ import annotations

from typing import Optional


class ApiError(Exception):
    """Request to the project/version API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class AuthenticationError(ApiError):
    """The API rejected the token (HTTP 401)."""


class NotFoundError(ApiError):
    """The requested resource does not exist (HTTP 404)."""
