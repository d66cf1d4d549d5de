"""
Private key PEM codec.

Decodes RSA (PKCS#1) and EC (SEC1) private keys. PKCS#8 bodies are rejected
under these tags. Only RSA keys are encoded.
"""

from typing import Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from acmeconf.errors import FormatError, UnsupportedTypeError
from acmeconf.keys.pem import KeyType, PemBlock, decode_block, encode_block

SigningKey = Union[rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey]

_KEY_CLASSES = {
    KeyType.RSA: rsa.RSAPrivateKey,
    KeyType.EC: ec.EllipticCurvePrivateKey,
}


def decode_key(data: bytes, source: Optional[str] = None) -> SigningKey:
    """
    Decode a private key from the first PEM block in data.

    Args:
        data: PEM-encoded key
        source: Optional name of the input, used in error messages

    Returns:
        RSA or EC private key

    Raises:
        FormatError: No PEM block, or the block is not a valid key
        UnsupportedTypeError: The block tag is not a supported key type
    """
    block = decode_block(data, source)
    key_type = KeyType.from_tag(block.type, source)

    if _is_pkcs8(block.data):
        raise FormatError(f"{key_type.value} block holds a PKCS#8 key")

    try:
        key = serialization.load_der_private_key(block.data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise FormatError(f"malformed {key_type.value} block: {e}") from e

    if not isinstance(key, _KEY_CLASSES[key_type]):
        raise FormatError(f"{key_type.value} block holds a {type(key).__name__}")

    return key


def _der_element_end(der: bytes, offset: int) -> int:
    """Offset just past the DER element starting at offset."""
    length = der[offset + 1]
    start = offset + 2
    if length & 0x80:
        size = length & 0x7F
        length = int.from_bytes(der[start:start + size], "big")
        start += size
    return start + length


def _is_pkcs8(der: bytes) -> bool:
    """
    Whether der is a PKCS#8 PrivateKeyInfo.

    PKCS#1 and SEC1 keys follow the version INTEGER with an INTEGER or an
    OCTET STRING; PKCS#8 follows it with the AlgorithmIdentifier SEQUENCE.
    """
    try:
        if der[0] != 0x30:
            return False
        first = 2 + (der[1] & 0x7F if der[1] & 0x80 else 0)
        return der[_der_element_end(der, first)] == 0x30
    except IndexError:
        return False


def encode_key(key: rsa.RSAPrivateKey) -> bytes:
    """
    Encode an RSA private key as an unencrypted PKCS#1 PEM block.

    Raises:
        UnsupportedTypeError: key is not an RSA private key
    """
    if not isinstance(key, rsa.RSAPrivateKey):
        raise UnsupportedTypeError(type(key).__name__)

    der = key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return encode_block(PemBlock(type=KeyType.RSA.value, data=der))


__all__ = ["SigningKey", "decode_key", "encode_key"]
