"""appjwt exceptions."""

from __future__ import annotations


class AppJWTError(Exception):
    """Base exception for all appjwt errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(AppJWTError):
    """Raised when issuance parameters are missing, invalid or contradictory."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class SigningError(AppJWTError):
    """Raised when the signing step fails."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
