"""Environment-driven defaults for the command line."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from appjwt.exceptions import ConfigError
from appjwt.models import DEFAULT_ALGORITHM

ENV_PREFIX = "APPJWT_"


@dataclass(frozen=True)
class Settings:
    """Defaults read from ``APPJWT_*`` variables; command-line flags win."""

    issuer: int = 0
    pem_path: str | None = None
    algorithm: str = DEFAULT_ALGORITHM
    key_password: bytes | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment.

        Raises:
            ConfigError: If ``APPJWT_ISSUER`` is not an integer or
                ``APPJWT_LOG_LEVEL`` is not a logging level name.
        """
        env = os.environ if environ is None else environ

        raw_issuer = env.get(f"{ENV_PREFIX}ISSUER", "").strip()
        try:
            issuer = int(raw_issuer) if raw_issuer else 0
        except ValueError as e:
            raise ConfigError(f"{ENV_PREFIX}ISSUER must be an integer, got {raw_issuer!r}", field="iss") from e

        log_level = (env.get(f"{ENV_PREFIX}LOG_LEVEL") or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(
                f"{ENV_PREFIX}LOG_LEVEL must be a logging level name, got {log_level!r}", field="log_level"
            )

        password = env.get(f"{ENV_PREFIX}KEY_PASSWORD")

        return cls(
            issuer=issuer,
            pem_path=env.get(f"{ENV_PREFIX}PEM") or None,
            algorithm=env.get(f"{ENV_PREFIX}ALGORITHM") or DEFAULT_ALGORITHM,
            key_password=password.encode("utf-8") if password else None,
            log_level=log_level,
        )
