from __future__ import annotations
from typing import Optional
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519
from .constants import KEY_LENGTH, SIGNATURE_LENGTH
from .logger import get_logger

log = get_logger("edkey_core.crypto")

# --------- Ed25519 (verify) ----------
def ed25519_verify(pub_raw: bytes, sig: bytes, data: bytes) -> bool:
    if len(sig) != SIGNATURE_LENGTH:
        log.debug(f"[ED25519 VERIFY] bad signature length={len(sig)}")
        return False
    try:
        ed25519.Ed25519PublicKey.from_public_bytes(bytes(pub_raw)).verify(bytes(sig), bytes(data))
        return True
    except (InvalidSignature, ValueError) as exc:
        log.debug(f"[ED25519 VERIFY] rejected pubkey={bytes(pub_raw).hex()} reason={exc.__class__.__name__}")
        return False

# --------- edwards25519 point decoding ----------
# Field prime p = 2^255 - 19
_P = 2**255 - 19
# Curve constant d = -121665/121666 (mod p)
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


def _recover_x(y: int, sign: int) -> Optional[int]:
    """Recover x from y and sign bit (RFC 8032 5.1.3); None if y is not a valid coordinate."""
    if y >= _P:
        return None
    x2 = (y * y - 1) * pow(_D * y * y + 1, _P - 2, _P) % _P
    if x2 == 0:
        return 0 if sign == 0 else None
    x = pow(x2, (_P + 3) // 8, _P)
    if (x * x - x2) % _P != 0:
        x = x * _SQRT_M1 % _P
    if (x * x - x2) % _P != 0:
        return None
    if (x & 1) != sign:
        x = _P - x
    return x


def ed25519_is_on_curve(pub_raw: bytes) -> bool:
    """
    True iff pub_raw is a canonical compressed edwards25519 point.

    Only decompression is checked; small-order and mixed-order points
    still count as on the curve.
    """
    if len(pub_raw) != KEY_LENGTH:
        return False
    y = int.from_bytes(bytes(pub_raw), "little")
    sign = y >> 255
    y &= (1 << 255) - 1
    if _recover_x(y, sign) is None:
        log.debug(f"[ED25519 CURVE] not a point pubkey={bytes(pub_raw).hex()}")
        return False
    return True
