"""
Test configuration and fixtures.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import structlog

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.x509.oid import NameOID

from acmeconf.accounts import AccountRecord


# ============== FIXTURES ==============

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from the caller's ACME settings and logging config."""
    monkeypatch.delenv("ACME_CONFIG", raising=False)
    monkeypatch.delenv("ACME_LOG_LEVEL", raising=False)
    yield
    structlog.reset_defaults()


@pytest.fixture
def config_dir(tmp_path):
    """Config directory that does not exist yet."""
    return tmp_path / "home" / ".config" / "acme"


@pytest.fixture(scope="session")
def rsa_key():
    """A 2048-bit RSA key, shared across the session."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key():
    """A P-256 EC key."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def ec_key_pem(ec_key):
    """EC key in SEC1 PEM ("EC PRIVATE KEY")."""
    return ec_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def certificate(ec_key):
    """Self-signed certificate for example.com."""
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "example.com")])
    now = datetime.now(timezone.utc)

    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(ec_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=90))
        .sign(ec_key, hashes.SHA256())
    )


@pytest.fixture(scope="session")
def certificate_pem(certificate):
    """Certificate in PEM format."""
    return certificate.public_bytes(serialization.Encoding.PEM)


@pytest.fixture
def sample_record():
    """A registered account that accepted the current terms."""
    return AccountRecord(
        uri="https://acme.example.com/acme/reg/42",
        contact=["mailto:admin@example.com", "mailto:ops@example.com"],
        agreed_terms="https://acme.example.com/terms/v1",
        current_terms="https://acme.example.com/terms/v1",
        ca="https://acme.example.com/directory",
    )
