"""
edkey_core
==========
Ed25519 public key value type shared by wallet and transaction tooling.

Provides:
- PublicKey: raw bytes / 0x-hex / Base58 conversions, signature verification,
  curve-membership check
- Error types for null, wrong-length and malformed key input
- Structured JSON logger configured from EDKEY_LOG_LEVEL / EDKEY_LOG_FILE
"""

from .errors import PublicKeyError, NullInputError, InvalidLengthError, DecodeError
from .public_key import PublicKey

__version__ = "0.1.0"

__all__ = [
    "PublicKey",
    "PublicKeyError",
    "NullInputError",
    "InvalidLengthError",
    "DecodeError",
]
