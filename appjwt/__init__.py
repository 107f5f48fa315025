"""appjwt - signed application JWTs for API authentication.

This package provides a simple interface for:
- Resolving a token validity window from issued-at, expiry and duration inputs
- Loading PEM private keys and signing the claim set
- Printing the token from the command line (``appjwt --iss 1234 --pem app.pem``)
"""

from appjwt.algorithms import DEFAULT_REGISTRY, AlgorithmRegistry
from appjwt.durations import format_duration, parse_duration
from appjwt.exceptions import AppJWTError, ConfigError, SigningError
from appjwt.issuer import TokenIssuer
from appjwt.keys import load_private_key, read_key_file
from appjwt.models import (
    DEFAULT_ALGORITHM,
    DEFAULT_DURATION,
    IssuanceParameters,
    Resolution,
    ResolvedClaims,
    SignedToken,
)

__version__ = "0.1.0"
__all__ = [
    "TokenIssuer",
    "IssuanceParameters",
    "ResolvedClaims",
    "Resolution",
    "SignedToken",
    "DEFAULT_ALGORITHM",
    "DEFAULT_DURATION",
    "AlgorithmRegistry",
    "DEFAULT_REGISTRY",
    "load_private_key",
    "read_key_file",
    "parse_duration",
    "format_duration",
    "AppJWTError",
    "ConfigError",
    "SigningError",
]
