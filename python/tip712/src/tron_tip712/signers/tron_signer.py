"""
TronTypedDataSigner - TIP-712 signer and local verifier for TRON keys
"""

import json
import logging
from typing import Any

from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_keys.exceptions import BadSignature

from tron_tip712.abi import MAIL_PRIMARY_TYPE
from tron_tip712.exceptions import SignatureCreationError
from tron_tip712.types import TypedDataDomain
from tron_tip712.utils.address import (
    private_key_to_address,
    strip_hex_prefix,
    tron_address_to_evm,
)
from tron_tip712.utils.eip712 import build_typed_data
from tron_tip712.utils.signature import signature_to_bytes

logger = logging.getLogger(__name__)


class TronTypedDataSigner:
    """Signs and verifies TIP-712 typed data with a TRON private key"""

    def __init__(self, private_key: str) -> None:
        clean_key = strip_hex_prefix(private_key)
        self._private_key = clean_key
        self._address = private_key_to_address(clean_key)
        logger.info(f"TronTypedDataSigner initialized: address={self._address}")

    @classmethod
    def from_private_key(cls, private_key: str) -> "TronTypedDataSigner":
        """Create signer from private key.

        Args:
            private_key: TRON private key (hex string, 0x prefix optional)

        Returns:
            TronTypedDataSigner instance
        """
        return cls(private_key)

    def get_address(self) -> str:
        return self._address

    async def sign_typed_data(
        self,
        domain: TypedDataDomain | dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        primary_type: str,
    ) -> str:
        """Sign TIP-712 typed data.

        Returns:
            0x-prefixed 65-byte signature (r || s || v)

        Raises:
            SignatureCreationError: If encoding or signing fails
        """
        try:
            typed_data = build_typed_data(domain, types, primary_type, message)
        except (KeyError, TypeError, ValueError) as e:
            raise SignatureCreationError(f"Cannot encode typed data: {e}") from e

        logger.info(
            f"Signing TIP-712 typed data: domain={typed_data['domain'].get('name')}, "
            f"primaryType={primary_type}"
        )
        logger.debug(f"[SIGN] Domain: {json.dumps(typed_data['domain'])}")
        logger.debug(f"[SIGN] Message: {json.dumps(typed_data['message'])}")

        try:
            signable = encode_typed_data(full_message=typed_data)
            signed_message = Account.sign_message(signable, bytes.fromhex(self._private_key))
        except (TypeError, ValueError) as e:
            raise SignatureCreationError(f"Failed to sign typed data: {e}") from e

        signature = "0x" + strip_hex_prefix(signed_message.signature.hex())
        logger.info(f"[SIGN] Signature: {signature}")
        return signature

    async def verify_typed_data(
        self,
        address: str,
        domain: TypedDataDomain | dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        signature: str | bytes,
        primary_type: str = MAIL_PRIMARY_TYPE,
    ) -> bool:
        """Verify a TIP-712 signature by recovering the signer.

        Args:
            address: Expected signer (TRON Base58 or hex)
            primary_type: Root type of *message* (default: Mail)

        Returns:
            True if the recovered signer matches address

        Raises:
            MalformedSignatureError: If the signature is not 65 bytes
        """
        sig_bytes = signature_to_bytes(signature)
        typed_data = build_typed_data(domain, types, primary_type, message)
        signable = encode_typed_data(full_message=typed_data)

        try:
            recovered = Account.recover_message(signable, signature=sig_bytes)
        except (BadSignature, ValueError) as e:
            logger.warning(f"Signature recovery failed: {e}")
            return False

        # Compare in hex form
        expected_evm = tron_address_to_evm(address)
        logger.info(
            "Signature verification: expected_tron=%s, expected_evm=%s, recovered=%s",
            address,
            expected_evm,
            recovered,
        )
        return recovered.lower() == expected_evm.lower()
