"""appjwt models - Data classes for a single token issuance.

This module provides:
- The raw issuance parameters as collected from the command line
- The resolved claim set and its temporal validation
- The signed token handed back to the caller
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from appjwt.exceptions import ConfigError

DEFAULT_DURATION = timedelta(minutes=10)
DEFAULT_ALGORITHM = "RS256"


@dataclass(frozen=True)
class IssuanceParameters:
    """Inputs for one issuance.

    ``issued_at``, ``expires_at`` and ``duration`` are ``None`` unless the
    caller set them explicitly.
    """

    issuer_id: int
    key_material: bytes
    issued_at: int | None = None
    expires_at: int | None = None
    duration: timedelta | None = None
    algorithm: str = DEFAULT_ALGORITHM
    key_password: bytes | None = None

    @property
    def effective_duration(self) -> timedelta:
        """Token lifetime to apply when no explicit expiry is given."""
        return self.duration if self.duration is not None else DEFAULT_DURATION


@dataclass(frozen=True)
class ResolvedClaims:
    """The registered JWT claims of an application token."""

    issuer: int
    issued_at: int
    expires_at: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JWT payload.

        ``iss`` is a StringOrURI claim, so the numeric issuer is rendered as
        a string.
        """
        return {
            "iss": str(self.issuer),
            "iat": self.issued_at,
            "exp": self.expires_at,
        }

    @property
    def lifetime(self) -> int:
        """Seconds between issuance and expiry."""
        return self.expires_at - self.issued_at

    def validate(self, now: int) -> None:
        """Validate the temporal claims against ``now``.

        Raises:
            ConfigError: If the claim set is not usable at ``now``.
        """
        if self.expires_at <= self.issued_at:
            raise ConfigError(
                f"token expires at {self.expires_at}, not after it is issued at {self.issued_at}",
                field="exp",
            )

        if self.expires_at < now:
            raise ConfigError(f"token is expired by {now - self.expires_at}s", field="exp")

        if self.issued_at > now:
            raise ConfigError(
                f"token used before issued: iat {self.issued_at} is {self.issued_at - now}s in the future",
                field="iat",
            )


@dataclass(frozen=True)
class Resolution:
    """Everything the signing step needs."""

    claims: ResolvedClaims
    key: Any
    algorithm: str


@dataclass(frozen=True)
class SignedToken:
    """A compact JWS and the claims it carries."""

    token: str
    claims: ResolvedClaims
    algorithm: str

    def __str__(self) -> str:
        return self.token
