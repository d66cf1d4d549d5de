"""
Error taxonomy for account and key storage.

Plain OSError is propagated unchanged for every other read/write failure.
"""

from typing import Optional


class AcmeConfError(Exception):
    """Base class for all acme-conf errors."""


class NotFoundError(AcmeConfError, FileNotFoundError):
    """An expected file does not exist."""

    def __init__(self, path, message: Optional[str] = None):
        self.path = str(path)
        super().__init__(message or f"{self.path} does not exist")

    def __str__(self) -> str:
        return self.args[0]


class FormatError(AcmeConfError, ValueError):
    """No decodable PEM block was found."""


class UnsupportedTypeError(AcmeConfError, ValueError):
    """A PEM block was found but its type tag is not handled here."""

    def __init__(self, type_tag: str, source: Optional[str] = None):
        self.type_tag = type_tag
        message = f"{type_tag!r} is unsupported"
        if source:
            message = f"{message} in {source}"
        super().__init__(message)


class ParseError(AcmeConfError, ValueError):
    """The account file is not a well-formed account record."""


__all__ = [
    "AcmeConfError",
    "NotFoundError",
    "FormatError",
    "UnsupportedTypeError",
    "ParseError",
]
