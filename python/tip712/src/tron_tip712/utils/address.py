"""
Address utility functions for TRON and hex address conversion
"""

import logging

import base58

logger = logging.getLogger(__name__)

TRON_ZERO_ADDRESS = "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb"
TRON_ADDRESS_PREFIX = "41"


def strip_hex_prefix(value: str) -> str:
    return value[2:] if value.startswith(("0x", "0X")) else value


def tron_address_to_evm(tron_addr: str) -> str:
    """Convert TRON Base58Check address to hex format (0x...)

    TIP-712 hashes addresses as 20-byte values, which is this hex form.

    Args:
        tron_addr: TRON address in Base58 format, 41-prefixed hex, or 0x hex

    Returns:
        Lowercase hex address (0x...)

    Raises:
        ValueError: If the address cannot be decoded
    """
    hex_str = strip_hex_prefix(tron_addr)
    if len(hex_str) == 42 and hex_str.startswith(TRON_ADDRESS_PREFIX):
        # Remove TRON version prefix
        hex_str = hex_str[2:]

    if len(hex_str) == 40 and all(c in "0123456789abcdefABCDEF" for c in hex_str):
        return "0x" + hex_str.lower()

    try:
        decoded = base58.b58decode_check(tron_addr)
    except ValueError as e:
        raise ValueError(f"Invalid TRON address {tron_addr!r}: {e}") from e

    # TRON address payload is 21 bytes: 1 byte version (0x41) + 20 bytes address
    if len(decoded) != 21 or decoded[0] != 0x41:
        raise ValueError(f"Invalid TRON address {tron_addr!r}: unexpected payload")
    return "0x" + decoded[1:].hex()


def private_key_to_address(private_key: str) -> str:
    """Derive TRON Base58 address from a hex private key (0x prefix optional)"""
    from tronpy.keys import PrivateKey

    pk = PrivateKey(bytes.fromhex(strip_hex_prefix(private_key)))
    return pk.public_key.to_base58check_address()
