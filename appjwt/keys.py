"""Private key loading."""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from appjwt.exceptions import ConfigError

logger = logging.getLogger(__name__)


def read_key_file(path: str | Path | None) -> bytes:
    """Read raw PEM key material from ``path``.

    Raises:
        ConfigError: If no path is given or the file cannot be read.
    """
    if not path:
        raise ConfigError("key required: pem path is required", field="key")

    try:
        with open(path, "rb") as f:
            material = f.read()
    except OSError as e:
        raise ConfigError(f"key required: {e}", field="key") from e

    logger.debug(f"Read {len(material)} bytes of key material from {path}")
    return material


def load_private_key(material: bytes, password: bytes | None = None) -> PrivateKeyTypes:
    """Parse a PEM-encoded private key.

    Args:
        material: PEM bytes (PKCS#1, PKCS#8 or SEC1).
        password: Passphrase for encrypted keys.

    Returns:
        A ``cryptography`` private key object.

    Raises:
        ConfigError: If the material is empty or not a usable private key.
    """
    if not material or not material.strip():
        raise ConfigError("key required", field="key")

    try:
        key = serialization.load_pem_private_key(material, password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ConfigError(f"key required: could not parse private key: {e}", field="key") from e

    logger.debug(f"Loaded {type(key).__name__} private key")
    return key
