"""Application token issuer."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import jwt

from appjwt.algorithms import DEFAULT_REGISTRY, AlgorithmRegistry
from appjwt.durations import format_duration
from appjwt.exceptions import ConfigError, SigningError
from appjwt.keys import load_private_key
from appjwt.models import IssuanceParameters, Resolution, ResolvedClaims, SignedToken

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Resolves the validity window of an application JWT and signs it.

    Example:
        >>> issuer = TokenIssuer()
        >>> params = IssuanceParameters(issuer_id=1234, key_material=pem)
        >>> print(issuer.issue(params))
    """

    def __init__(
        self,
        registry: AlgorithmRegistry | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the issuer.

        Args:
            registry: Signing algorithms to accept. Uses PyJWT's defaults if not provided.
            clock: Returns the current Unix time; read once per resolution.
        """
        self.registry = registry or DEFAULT_REGISTRY
        self.clock = clock

    def resolve(self, params: IssuanceParameters, now: int | None = None) -> Resolution:
        """Validate the parameters and compute the claim set.

        Checks run in order and stop at the first failure: issuer, key,
        algorithm, duration/expiry conflict, then the temporal claims.

        Args:
            params: The issuance parameters.
            now: Invocation time as Unix seconds. Read from the clock if not provided.

        Returns:
            Resolution with the claims, the loaded key and the algorithm name.

        Raises:
            ConfigError: If any parameter is missing, invalid or conflicting.
        """
        if not params.issuer_id:
            raise ConfigError("issuer required: iss issuer ID must be non-zero", field="iss")

        key = load_private_key(params.key_material, params.key_password)

        if not params.algorithm:
            raise ConfigError("unknown algorithm: algorithm is required", field="alg")
        if params.algorithm not in self.registry:
            raise ConfigError(
                f"unknown algorithm: signing method {params.algorithm!r} could not be found "
                f"(available: {', '.join(self.registry.names())})",
                field="alg",
            )

        if params.duration is not None and params.expires_at is not None:
            raise ConfigError(
                "duration and expiry are mutually exclusive: specify --dur or --exp, not both",
                field="exp",
            )

        if now is None:
            now = int(self.clock())

        issued_at = params.issued_at if params.issued_at is not None else now

        if params.expires_at is not None:
            expires_at = params.expires_at
        else:
            expires_at = issued_at + int(params.effective_duration.total_seconds())
            logger.debug(
                f"Expiry computed from iat {issued_at} + {format_duration(params.effective_duration)}"
            )

        claims = ResolvedClaims(issuer=params.issuer_id, issued_at=issued_at, expires_at=expires_at)
        claims.validate(now)

        logger.debug(f"Resolved claims iss={claims.issuer} iat={claims.issued_at} exp={claims.expires_at}")
        return Resolution(claims=claims, key=key, algorithm=params.algorithm)

    def sign(self, claims: ResolvedClaims, key: Any, algorithm: str) -> SignedToken:
        """Sign the claim set.

        Args:
            claims: Resolved claims.
            key: Private key object from :func:`appjwt.keys.load_private_key`.
            algorithm: Registered algorithm name.

        Returns:
            SignedToken holding the compact JWS.

        Raises:
            SigningError: If the algorithm is unknown or rejects the key.
        """
        if self.registry.get(algorithm) is None:
            raise SigningError(f"signing method {algorithm!r} is not registered")

        try:
            token = jwt.encode(claims.to_dict(), key, algorithm=algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            expects = "a matching private key" if self.registry.is_asymmetric(algorithm) else "a shared secret"
            raise SigningError(f"failed to sign token with {algorithm} (expects {expects}): {e}", cause=e) from e

        logger.debug(f"Signed token with {algorithm}, valid for {claims.lifetime}s")
        return SignedToken(token=token, claims=claims, algorithm=algorithm)

    def issue(self, params: IssuanceParameters, now: int | None = None) -> SignedToken:
        """Resolve the parameters and sign the result."""
        resolution = self.resolve(params, now=now)
        return self.sign(resolution.claims, resolution.key, resolution.algorithm)
