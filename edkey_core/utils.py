"""
edkey_core.utils
----------------
Text codecs for key material: 0x-prefixed lowercase hex and Bitcoin-alphabet Base58.
Decoders raise DecodeError so callers see one error type per malformed input.
"""

from __future__ import annotations
import binascii
import base58
from .constants import HEX_PREFIX
from .errors import DecodeError


def strip_hex_prefix(s: str) -> str:
    if s[:2].lower() == HEX_PREFIX:
        return s[2:]
    return s

def hex_encode(b: bytes) -> str:
    return HEX_PREFIX + binascii.hexlify(b).decode("ascii")

def hex_decode(s: str) -> bytes:
    try:
        return binascii.unhexlify(strip_hex_prefix(s))
    except ValueError as exc:  # binascii.Error, non-ascii text
        raise DecodeError("hex", str(exc)) from exc

def b58e(b: bytes) -> str:
    return base58.b58encode(b).decode("ascii")

_B58_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))

def b58d(s: str) -> bytes:
    # b58decode strips trailing whitespace before decoding
    for ch in s:
        if ch not in _B58_ALPHABET:
            raise DecodeError("base58", f"invalid character {ch!r}")
    try:
        return base58.b58decode(s)
    except ValueError as exc:
        raise DecodeError("base58", str(exc)) from exc
