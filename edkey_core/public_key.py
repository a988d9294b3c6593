"""
edkey_core.public_key
---------------------
Defines PublicKey, an immutable 32-byte Ed25519 public key.

One canonical byte buffer backs every representation:

- raw bytes            -> to_bytes() / key_bytes
- "0x" lowercase hex   -> to_hex() / key / str(key)
- Base58 (Bitcoin)     -> to_base58() / key_base58

All forms are derived once at construction, so instances can be shared
freely and compared or hashed by their hex form.
"""

from __future__ import annotations
from typing import Union
from .constants import KEY_LENGTH
from .crypto import ed25519_verify, ed25519_is_on_curve
from .errors import NullInputError, InvalidLengthError
from .utils import hex_encode, hex_decode, b58e, b58d

BytesLike = Union[bytes, bytearray, memoryview]


class PublicKey:
    """
    Ed25519 public key.

    PublicKey(b"...")      raw 32 bytes (bytes, bytearray or memoryview; copied)
    PublicKey("0x...")     hex text, prefix optional, any case
    PublicKey.from_base58  Base58 text

    Raises NullInputError for None, InvalidLengthError when the key is not
    32 bytes, and DecodeError for malformed text.
    """

    KEY_LENGTH = KEY_LENGTH

    __slots__ = ("_key", "_key_bytes", "_key_base58")

    def __init__(self, key: Union[str, BytesLike]):
        if key is None:
            raise NullInputError("key must not be None")
        if isinstance(key, str):
            raw = hex_decode(key)
        elif isinstance(key, (bytes, bytearray, memoryview)):
            raw = bytes(key)
        else:
            raise TypeError(f"key must be str or bytes-like, not {type(key).__name__}")

        if len(raw) != KEY_LENGTH:
            raise InvalidLengthError(KEY_LENGTH, len(raw))

        object.__setattr__(self, "_key_bytes", raw)
        object.__setattr__(self, "_key", hex_encode(raw))
        object.__setattr__(self, "_key_base58", b58e(raw))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ---------------------------
    # Named constructors
    # ---------------------------
    @classmethod
    def from_hex(cls, key: str) -> "PublicKey":
        if key is None:
            raise NullInputError("key must not be None")
        if not isinstance(key, str):
            raise TypeError(f"hex key must be str, not {type(key).__name__}")
        return cls(key)

    @classmethod
    def from_bytes(cls, key: BytesLike) -> "PublicKey":
        if key is None:
            raise NullInputError("key must not be None")
        if isinstance(key, str):
            raise TypeError("bytes key must be bytes-like, not str")
        return cls(key)

    @classmethod
    def from_base58(cls, key: str) -> "PublicKey":
        if key is None:
            raise NullInputError("key must not be None")
        return cls(b58d(key))

    # ---------------------------
    # Representations
    # ---------------------------
    @property
    def key(self) -> str:
        return self._key

    @property
    def key_bytes(self) -> bytes:
        return self._key_bytes

    @property
    def key_base58(self) -> str:
        return self._key_base58

    @property
    def key_bytes_from_base58(self) -> bytes:
        return self.from_base58_bytes()

    def to_hex(self) -> str:
        return self._key

    def to_bytes(self) -> bytes:
        return self._key_bytes

    def to_base58(self) -> str:
        return self._key_base58

    def from_base58_bytes(self) -> bytes:
        """Decode the Base58 form back to bytes; always equal to to_bytes()."""
        return b58d(self._key_base58)

    # ---------------------------
    # Operations
    # ---------------------------
    def verify(self, message: bytes, signature: bytes) -> bool:
        """Verify an Ed25519 signature over message. Returns False on any mismatch."""
        return ed25519_verify(self._key_bytes, signature, message)

    def is_on_curve(self) -> bool:
        return ed25519_is_on_curve(self._key_bytes)

    # ---------------------------
    # Value semantics
    # ---------------------------
    def __eq__(self, other) -> bool:
        if isinstance(other, PublicKey):
            return other.key == self.key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self._key

    def __bytes__(self) -> bytes:
        return self._key_bytes

    def __repr__(self) -> str:
        return f"PublicKey({self._key!r})"

    def __reduce__(self):
        return (type(self), (self._key_bytes,))
