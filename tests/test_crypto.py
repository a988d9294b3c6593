# tests/test_crypto.py

import logging
from cryptography.hazmat.primitives.asymmetric import ed25519
from cryptography.hazmat.primitives import serialization
from edkey_core import PublicKey
from edkey_core.crypto import ed25519_verify, ed25519_is_on_curve


def _keypair():
    sk = ed25519.Ed25519PrivateKey.generate()
    pub = sk.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return sk, pub


def test_sign_verify():
    sk, pub = _keypair()
    msg = b"transfer 10 APT"
    sig = sk.sign(msg)
    assert ed25519_verify(pub, sig, msg)
    assert PublicKey(pub).verify(msg, sig)
    assert not ed25519_verify(pub, sig, msg + b"!")


def test_generated_keys_on_curve():
    for _ in range(5):
        _, pub = _keypair()
        assert ed25519_is_on_curve(pub)
        assert PublicKey(pub).is_on_curve()


def test_is_on_curve_wrong_length():
    assert not ed25519_is_on_curve(b"\x01" * 31)


def test_verify_failure_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="edkey_core.crypto")
    sk, pub = _keypair()
    sig = bytearray(sk.sign(b"m"))
    sig[10] ^= 0xFF
    assert not ed25519_verify(pub, bytes(sig), b"m")
    assert "[ED25519 VERIFY]" in caplog.text
    assert pub.hex() in caplog.text


def test_bad_length_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="edkey_core.crypto")
    _, pub = _keypair()
    assert not ed25519_verify(pub, b"\x00" * 10, b"m")
    assert "bad signature length=10" in caplog.text
