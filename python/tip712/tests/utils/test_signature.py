"""
Tests for signature recovery byte normalization
"""

import pytest

from tron_tip712.exceptions import MalformedSignatureError, SignatureError
from tron_tip712.utils.signature import normalize_signature, signature_to_bytes

R_S = "ab" * 32 + "cd" * 32


@pytest.mark.parametrize(
    "tail,expected",
    [
        ("00", "1b"),
        ("01", "1c"),
        ("1b", "1b"),
        ("1c", "1c"),
        ("05", "05"),
    ],
)
def test_normalize_recovery_byte(tail, expected):
    assert normalize_signature("0x" + R_S + tail) == "0x" + R_S + expected


def test_normalize_without_prefix():
    assert normalize_signature(R_S + "00") == "0x" + R_S + "1b"


def test_normalize_uppercase_hex():
    assert normalize_signature("0x" + R_S.upper() + "01") == "0x" + R_S + "1c"


def test_normalize_bytes_input():
    raw = bytes.fromhex(R_S) + b"\x01"
    assert normalize_signature(raw) == "0x" + R_S + "1c"


def test_normalize_keeps_r_and_s():
    normalized = normalize_signature("0x" + R_S + "00")
    assert normalized[2:130] == R_S


@pytest.mark.parametrize("tail", ["00", "01", "1b", "1c", "ff"])
def test_normalize_idempotent(tail):
    once = normalize_signature(R_S + tail)
    assert normalize_signature(once) == once


@pytest.mark.parametrize(
    "signature",
    [
        "0x",
        "0x" + R_S,
        "0x" + R_S + "1b" + "00",
        "0x" + R_S + "1",
        "0x" + "zz" * 65,
        b"\x00" * 64,
    ],
)
def test_normalize_rejects_malformed(signature):
    with pytest.raises(MalformedSignatureError):
        normalize_signature(signature)


def test_malformed_signature_error_details():
    with pytest.raises(MalformedSignatureError) as exc_info:
        signature_to_bytes("0x" + R_S)

    assert exc_info.value.length == 64
    assert exc_info.value.expected == 65
    assert isinstance(exc_info.value, SignatureError)
    assert isinstance(exc_info.value, ValueError)


def test_signature_to_bytes():
    raw = signature_to_bytes("0x" + R_S + "1c")
    assert len(raw) == 65
    assert raw[-1] == 0x1C
