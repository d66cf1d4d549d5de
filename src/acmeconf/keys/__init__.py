"""
Account keys - PEM codec and on-disk key store.
"""

from acmeconf.keys.pem import KeyType, PemBlock, decode_block, encode_block
from acmeconf.keys.codec import SigningKey, decode_key, encode_key
from acmeconf.keys.store import load_key, resolve_key, write_key

__all__ = [
    "KeyType",
    "PemBlock",
    "decode_block",
    "encode_block",
    "SigningKey",
    "decode_key",
    "encode_key",
    "load_key",
    "resolve_key",
    "write_key",
]
