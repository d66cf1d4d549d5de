"""
PEM envelope parsing.

A block is a base64 body between "-----BEGIN <TAG>-----" and
"-----END <TAG>-----" lines, optionally preceded by "Name: value" headers.
Only the first well-formed block of the input is used; blocks with a
broken body are skipped.
"""

import base64
import binascii
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from acmeconf.errors import FormatError, UnsupportedTypeError

CERTIFICATE = "CERTIFICATE"

_BLOCK_RE = re.compile(
    rb"-----BEGIN (?P<tag>[^\r\n-]*)-----\r?\n"
    rb"(?P<body>.*?)"
    rb"-----END (?P=tag)-----",
    re.DOTALL,
)


class KeyType(str, Enum):
    """Private key PEM tags handled by the key codec."""

    RSA = "RSA PRIVATE KEY"
    EC = "EC PRIVATE KEY"

    @classmethod
    def from_tag(cls, tag: str, source: Optional[str] = None) -> "KeyType":
        """Map a PEM tag to a key type, raising UnsupportedTypeError otherwise."""
        try:
            return cls(tag)
        except ValueError:
            raise UnsupportedTypeError(tag, source) from None


@dataclass
class PemBlock:
    """A decoded PEM block."""

    type: str
    data: bytes
    headers: Dict[str, str] = field(default_factory=dict)


def decode_block(data: bytes, source: Optional[str] = None) -> PemBlock:
    """
    Decode the first well-formed PEM block found in data.

    Args:
        data: Raw file contents
        source: Optional name of the input, used in error messages

    Returns:
        The first block

    Raises:
        FormatError: No well-formed block in data
    """
    where = f" in {source}" if source else ""

    pos = 0
    while True:
        match = _BLOCK_RE.search(data, pos)
        if match is None:
            raise FormatError(f"no PEM block found{where}")

        parsed = _parse_body(match.group("body"))
        if parsed is not None:
            headers, body = parsed
            return PemBlock(
                type=match.group("tag").decode("ascii", "replace"),
                data=body,
                headers=headers,
            )

        # Malformed block, keep looking after its BEGIN line
        pos = match.end("tag")


def _parse_body(raw: bytes) -> Optional[Tuple[Dict[str, str], bytes]]:
    """Split headers from the base64 body. None if the body is not base64."""
    lines = raw.splitlines()
    headers: Dict[str, str] = {}

    # Headers end at the first blank line
    if lines and b":" in lines[0]:
        while lines and lines[0].strip():
            name, _, value = lines.pop(0).decode("ascii", "replace").partition(":")
            headers[name.strip()] = value.strip()
        if lines:
            lines.pop(0)

    try:
        body = base64.b64decode(b"".join(line.strip() for line in lines), validate=True)
    except (binascii.Error, ValueError):
        return None
    return headers, body


def encode_block(block: PemBlock) -> bytes:
    """Encode a block with 64-column base64 lines."""
    body = base64.b64encode(block.data)
    lines = [f"-----BEGIN {block.type}-----".encode("ascii")]
    for name, value in block.headers.items():
        lines.append(f"{name}: {value}".encode("ascii"))
    if block.headers:
        lines.append(b"")
    lines.extend(body[i:i + 64] for i in range(0, len(body), 64))
    lines.append(f"-----END {block.type}-----".encode("ascii"))
    return b"\n".join(lines) + b"\n"


__all__ = [
    "CERTIFICATE",
    "KeyType",
    "PemBlock",
    "decode_block",
    "encode_block",
]
