"""
Sign-and-verify flow for the Mail demo message.

Domain -> sign -> normalize -> local verify -> (optional) on-chain verify,
each step awaited before the next.
"""

import logging
import time
from typing import Optional

from tron_tip712.abi import MAIL_PRIMARY_TYPE, get_mail_eip712_types
from tron_tip712.contract import Tip712VerifierContract
from tron_tip712.signers import TronTypedDataSigner
from tron_tip712.types import Mail, Person, TypedDataDomain, VerificationResult
from tron_tip712.utils.eip712 import mail_to_message
from tron_tip712.utils.signature import normalize_signature

logger = logging.getLogger(__name__)


def build_demo_mail(signer_address: str, contents: str, nonce: Optional[int] = None) -> Mail:
    """Mail from "Cow" to "Bob", both wallets set to the signer; nonce defaults to now in ms"""
    if nonce is None:
        nonce = int(time.time() * 1000)
    return Mail(
        **{
            "from": Person(name="Cow", wallet=signer_address),
            "to": Person(name="Bob", wallet=signer_address),
            "contents": contents,
            "nonce": nonce,
        }
    )


async def sign_mail(
    signer: TronTypedDataSigner, domain: TypedDataDomain, mail: Mail
) -> tuple[str, str]:
    """Sign mail and normalize the recovery byte.

    Returns:
        (raw signature, normalized signature)
    """
    raw = await signer.sign_typed_data(
        domain, get_mail_eip712_types(), mail_to_message(mail), MAIL_PRIMARY_TYPE
    )
    return raw, normalize_signature(raw)


async def verify_mail(
    signer: TronTypedDataSigner,
    domain: TypedDataDomain,
    mail: Mail,
    signature: str,
    expected_signer: str,
) -> bool:
    """Local TIP-712 verification of mail against expected_signer"""
    return await signer.verify_typed_data(
        expected_signer,
        domain,
        get_mail_eip712_types(),
        mail_to_message(mail),
        signature,
        MAIL_PRIMARY_TYPE,
    )


async def sign_and_verify(
    signer: TronTypedDataSigner,
    domain: TypedDataDomain,
    mail: Mail,
    contract: Optional[Tip712VerifierContract] = None,
) -> VerificationResult:
    """
    Run one signing and verification cycle.

    Args:
        signer: Signer holding the private key
        domain: Signing domain (must match the deployed contract)
        mail: Message to sign
        contract: Deployed verifier; on-chain verification is skipped when None

    Returns:
        VerificationResult with the normalized signature and both outcomes
    """
    signer_address = signer.get_address()
    _, signature = await sign_mail(signer, domain, mail)

    local_ok = await verify_mail(signer, domain, mail, signature, signer_address)
    logger.info(f"Local verify: {local_ok}")

    on_chain_ok = None
    if contract is not None:
        on_chain_ok = await contract.verify(mail, signer_address, signature)
        logger.info(f"On-chain verify: {on_chain_ok}")

    return VerificationResult(
        signature=signature,
        signer=signer_address,
        localOk=local_ok,
        onChainOk=on_chain_ok,
    )
