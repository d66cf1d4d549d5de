"""
Account key store.

Loads the account private key from disk, or generates and persists a new
RSA key when none exists yet.
"""

from pathlib import Path
from typing import Union

from cryptography.hazmat.primitives.asymmetric import rsa
import structlog

from acmeconf.errors import NotFoundError
from acmeconf.files import read_file, write_private_file
from acmeconf.keys.codec import SigningKey, decode_key, encode_key

logger = structlog.get_logger()

# Generated account keys
RSA_KEY_BITS = 2048
RSA_PUBLIC_EXPONENT = 65537


def load_key(path: Union[str, Path]) -> SigningKey:
    """
    Read and decode the private key stored at path.

    Raises:
        NotFoundError: No file at path
        FormatError: The file holds no usable PEM key
        UnsupportedTypeError: The PEM tag is not an RSA or EC key
        OSError: Any other read failure
    """
    return decode_key(read_file(path), source=str(path))


def write_key(path: Union[str, Path], key: rsa.RSAPrivateKey) -> None:
    """Store an RSA key at path in PEM format, created with mode 0600."""
    write_private_file(path, encode_key(key))


def generate_key() -> rsa.RSAPrivateKey:
    """Generate a fresh account key."""
    return rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=RSA_KEY_BITS,
    )


def resolve_key(path: Union[str, Path], allow_generate: bool = False) -> SigningKey:
    """
    Load the key at path, or generate one if it is missing.

    Args:
        path: Key file location
        allow_generate: Generate and store a new RSA key when the file
            does not exist

    Returns:
        The loaded or newly generated key

    Raises:
        NotFoundError: The file is missing and generation is not allowed
        OSError: The new key could not be written
        FormatError, UnsupportedTypeError: The existing file is unusable.
            No key is generated in that case.
    """
    try:
        return load_key(path)
    except NotFoundError:
        if not allow_generate:
            raise

    key = generate_key()
    try:
        write_key(path, key)
    except OSError as e:
        logger.error("account_key_write_failed", path=str(path), error=str(e))
        raise

    logger.info("account_key_generated", path=str(path), bits=key.key_size)
    return key


__all__ = [
    "RSA_KEY_BITS",
    "load_key",
    "write_key",
    "generate_key",
    "resolve_key",
]
