"""
Fixtures for appjwt tests
"""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from appjwt.models import IssuanceParameters

NOW = 1700000000


def _private_pem(private_key, password: bytes | None = None) -> bytes:
    encryption = (
        serialization.BestAvailableEncryption(password) if password else serialization.NoEncryption()
    )
    return private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=encryption,
    )


def _public_pem(private_key) -> bytes:
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


@pytest.fixture(scope="session")
def rsa_key():
    """RSA private key shared by the whole session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_pem(rsa_key) -> bytes:
    """PKCS#8 PEM of the RSA key."""
    return _private_pem(rsa_key)


@pytest.fixture(scope="session")
def rsa_traditional_pem(rsa_key) -> bytes:
    """PKCS#1 PEM of the RSA key, as downloaded for a GitHub App."""
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def rsa_public_pem(rsa_key) -> bytes:
    """Public half of the RSA key."""
    return _public_pem(rsa_key)


@pytest.fixture(scope="session")
def ec_key():
    """P-256 private key shared by the whole session."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_pem(ec_key) -> bytes:
    """PKCS#8 PEM of the EC key."""
    return _private_pem(ec_key)


@pytest.fixture(scope="session")
def ec_public_pem(ec_key) -> bytes:
    """Public half of the EC key."""
    return _public_pem(ec_key)


@pytest.fixture(scope="session")
def encrypted_rsa_pem(rsa_key) -> bytes:
    """RSA key encrypted with the passphrase ``s3cret``."""
    return _private_pem(rsa_key, password=b"s3cret")


@pytest.fixture
def rsa_pem_path(tmp_path, rsa_pem):
    """RSA key written to a temporary file."""
    path = tmp_path / "app.private-key.pem"
    path.write_bytes(rsa_pem)
    return path


@pytest.fixture
def params(rsa_pem) -> IssuanceParameters:
    """Minimal valid parameters: issuer 1234 and the RSA key."""
    return IssuanceParameters(issuer_id=1234, key_material=rsa_pem)
