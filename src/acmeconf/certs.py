"""
Certificate PEM codec.

Decodes a single certificate. Chains and trust are not checked.
"""

from pathlib import Path
from typing import Optional, Union

from cryptography import x509

from acmeconf.errors import FormatError, UnsupportedTypeError
from acmeconf.files import read_file
from acmeconf.keys.pem import CERTIFICATE, decode_block


def decode_certificate(data: bytes, source: Optional[str] = None) -> x509.Certificate:
    """
    Decode the first PEM block in data as an X.509 certificate.

    Args:
        data: PEM-encoded certificate
        source: Optional name of the input, used in error messages

    Returns:
        Parsed certificate

    Raises:
        FormatError: No PEM block, or the block is not a valid certificate
        UnsupportedTypeError: The block is not tagged CERTIFICATE
    """
    block = decode_block(data, source)
    if block.type != CERTIFICATE:
        raise UnsupportedTypeError(block.type, source)

    try:
        return x509.load_der_x509_certificate(block.data)
    except ValueError as e:
        raise FormatError(f"malformed certificate: {e}") from e


def read_certificate(path: Union[str, Path]) -> x509.Certificate:
    """Read and decode the certificate stored at path."""
    return decode_certificate(read_file(path), source=str(path))


__all__ = ["decode_certificate", "read_certificate"]
