"""
acme-conf - Local identity material for ACME certificate clients.

Persists the CA account record and its signing key, decodes PEM keys and
certificates, and renders a human-readable account summary.
"""

__version__ = "1.0.0"
__author__ = "acme-conf Team"

from acmeconf.config import AcmeConfig
from acmeconf.errors import (
    AcmeConfError,
    NotFoundError,
    FormatError,
    UnsupportedTypeError,
    ParseError,
)

__all__ = [
    "AcmeConfig",
    "AcmeConfError",
    "NotFoundError",
    "FormatError",
    "UnsupportedTypeError",
    "ParseError",
    "__version__",
]
