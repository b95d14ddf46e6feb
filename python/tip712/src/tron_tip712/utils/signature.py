"""
Signature normalization utilities.

A recoverable ECDSA signature is r (32 bytes) || s (32 bytes) || v (1 byte).
Some signers emit v as a 0/1 recovery id, while ecrecover-based contracts
expect 27/28.
"""

from tron_tip712.exceptions import MalformedSignatureError
from tron_tip712.utils.address import strip_hex_prefix

SIGNATURE_LENGTH = 65
RECOVERY_ID_OFFSET = 64

_RECOVERY_ID_MAP = {0: 27, 1: 28}


def signature_to_bytes(signature: str | bytes) -> bytes:
    """
    Convert a signature to its raw 65 bytes.

    Args:
        signature: Hex string (0x prefix optional) or raw bytes

    Returns:
        65-byte signature

    Raises:
        MalformedSignatureError: If the signature is not exactly 65 bytes
    """
    if isinstance(signature, (bytes, bytearray)):
        raw = bytes(signature)
    else:
        hex_str = strip_hex_prefix(signature)
        if len(hex_str) % 2:
            raise MalformedSignatureError(len(hex_str) // 2)
        try:
            raw = bytes.fromhex(hex_str)
        except ValueError as e:
            raise MalformedSignatureError(len(hex_str) // 2) from e

    if len(raw) != SIGNATURE_LENGTH:
        raise MalformedSignatureError(len(raw))
    return raw


def normalize_signature(signature: str | bytes) -> str:
    """
    Rewrite the recovery byte from 0/1 to 27/28 (0x1b/0x1c).

    Any other recovery byte is left unchanged, so normalizing twice equals
    normalizing once.

    Args:
        signature: Hex string (0x prefix optional) or raw bytes

    Returns:
        0x-prefixed lowercase hex signature

    Raises:
        MalformedSignatureError: If the signature is not exactly 65 bytes
    """
    raw = bytearray(signature_to_bytes(signature))
    v = raw[RECOVERY_ID_OFFSET]
    raw[RECOVERY_ID_OFFSET] = _RECOVERY_ID_MAP.get(v, v)
    return "0x" + raw.hex()
