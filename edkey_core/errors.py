# edkey_core/errors.py
from __future__ import annotations
from typing import Optional


class PublicKeyError(Exception):
    pass


class NullInputError(PublicKeyError, TypeError):
    pass


class InvalidLengthError(PublicKeyError, ValueError):
    def __init__(self, expected: int, actual: int, what: str = "public key"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid {what} length: expected {expected} bytes, got {actual}")


class DecodeError(PublicKeyError, ValueError):
    def __init__(self, encoding: str, detail: Optional[str] = None):
        self.encoding = encoding
        msg = f"Malformed {encoding} text"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
