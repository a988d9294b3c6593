# tests/test_utils.py

import pytest
from edkey_core.errors import DecodeError
from edkey_core.utils import strip_hex_prefix, hex_encode, hex_decode, b58e, b58d


def test_strip_hex_prefix():
    assert strip_hex_prefix("0xabcd") == "abcd"
    assert strip_hex_prefix("0XABCD") == "ABCD"
    assert strip_hex_prefix("abcd") == "abcd"
    assert strip_hex_prefix("") == ""


def test_hex_codec():
    assert hex_encode(b"\x00\xab\xff") == "0x00abff"
    assert hex_decode("0x00ABff") == b"\x00\xab\xff"
    assert hex_decode("00abff") == b"\x00\xab\xff"
    assert hex_decode("0x") == b""


def test_hex_decode_error_chained():
    with pytest.raises(DecodeError) as exc:
        hex_decode("0xabc")
    assert exc.value.encoding == "hex"
    assert exc.value.__cause__ is not None


def test_base58_codec():
    assert b58e(b"\x00\x00\x01") == "112"
    assert b58d("112") == b"\x00\x00\x01"
    assert b58e(b"hello world") == "StV1DL6CwTryKyV"
    assert b58d("StV1DL6CwTryKyV") == b"hello world"


def test_base58_decode_error():
    with pytest.raises(DecodeError):
        b58d("abc0")


@pytest.mark.parametrize("text", ["StV1DL6CwTryKyV ", "StV1DL6CwTryKyV\n", "StV1DL6CwTryKyV\t ", " StV1DL6CwTryKyV", "StV1 DL6CwTryKyV"])
def test_base58_whitespace_rejected(text):
    with pytest.raises(DecodeError) as exc:
        b58d(text)
    assert exc.value.encoding == "base58"
