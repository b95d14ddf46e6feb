"""
Tip712VerifierContract - read-only access to a deployed Tip712Verifier
"""

import logging
from typing import Any, List, Optional

from tronpy.async_contract import AsyncContract

from tron_tip712.abi import TIP712_VERIFIER_ABI
from tron_tip712.exceptions import ContractCallError
from tron_tip712.types import Mail
from tron_tip712.utils.eip712 import mail_to_tuple
from tron_tip712.utils.signature import signature_to_bytes

logger = logging.getLogger(__name__)


class Tip712VerifierContract:
    """On-chain TIP-712 verifier bound to one contract address"""

    def __init__(
        self,
        client: Any,
        address: str,
        abi: Optional[List[dict[str, Any]]] = None,
    ) -> None:
        self._client = client
        self._address = address
        self._abi = abi if abi is not None else TIP712_VERIFIER_ABI
        # ABI is known up front, so no getcontract lookup on the node
        self._contract = AsyncContract(addr=address, abi=self._abi, client=client)

    @property
    def address(self) -> str:
        return self._address

    async def verify(self, mail: Mail, signer_address: str, signature: str | bytes) -> bool:
        """Call verify(mail, signer, signature) as a read-only call.

        Args:
            mail: Signed message
            signer_address: Expected signer (TRON Base58)
            signature: 65-byte signature

        Returns:
            Contract result

        Raises:
            MalformedSignatureError: If the signature is not 65 bytes
            ContractCallError: If the node call fails
        """
        sig_bytes = signature_to_bytes(signature)
        mail_arg = mail_to_tuple(mail)
        logger.info(
            "Calling %s.verify(nonce=%s, signer=%s)", self._address, mail.nonce, signer_address
        )
        try:
            # AsyncTron: constant functions resolve to the decoded result
            result = await self._contract.functions.verify(mail_arg, signer_address, sig_bytes)
        except Exception as e:
            raise ContractCallError(f"verify call on {self._address} failed: {e}") from e

        logger.info(f"On-chain verify result: {result}")
        return bool(result)
