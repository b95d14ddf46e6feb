"""
Command-line entry points.

    tip712-demo    sign, verify locally, verify through the deployed contract
    tip712-sign    sign and verify locally, the signer acts as verifying contract
    tip712-deploy  deploy Tip712Verifier with NAME/VERSION

Configuration comes from the environment or a .env file. Each command exits
with status 0 on success and 1 on any error.
"""

import asyncio
import logging
import sys

from tron_tip712.artifact import load_artifact
from tron_tip712.config import Settings, load_settings
from tron_tip712.contract import Tip712VerifierContract
from tron_tip712.deploy import deploy_verifier
from tron_tip712.flow import build_demo_mail, sign_and_verify, sign_mail, verify_mail
from tron_tip712.logging_config import resolve_log_level, setup_logging
from tron_tip712.signers import TronTypedDataSigner
from tron_tip712.utils.eip712 import build_domain
from tron_tip712.utils.tron_client import create_async_tron_client

logger = logging.getLogger(__name__)

DEMO_CONTENTS = "Hello TIP-712 on TRON!"
SIGN_CONTENTS = "Hello from TRON typed data!"


async def run_demo(settings: Settings) -> None:
    """Sign, verify locally, then verify through the deployed contract"""
    artifact = load_artifact(settings.artifact_path)
    signer = TronTypedDataSigner.from_private_key(settings.private_key)

    # Domain must match the contract constructor and address
    domain = build_domain(
        settings.name, settings.version, settings.network, settings.verifying_contract
    )
    mail = build_demo_mail(signer.get_address(), DEMO_CONTENTS)

    client = create_async_tron_client(settings.full_host, settings.api_key, settings.network)
    try:
        contract = Tip712VerifierContract(client, settings.verifying_contract, artifact["abi"])
        result = await sign_and_verify(signer, domain, mail, contract)
    finally:
        await client.close()

    print(f"Signature: {result.signature}")
    print(f"Local verify: {result.local_ok}")
    print(f"On-chain verify: {result.on_chain_ok}")


async def run_sign(settings: Settings) -> None:
    """Sign and verify locally against a domain bound to the signer's own address"""
    signer = TronTypedDataSigner.from_private_key(settings.private_key)
    signer_address = signer.get_address()

    domain = build_domain(settings.name, settings.version, settings.network, signer_address)
    mail = build_demo_mail(signer_address, SIGN_CONTENTS)

    raw, signature = await sign_mail(signer, domain, mail)
    print(f"Signature: {raw}")
    print(f"Signature: {signature}")

    ok = await verify_mail(signer, domain, mail, signature, signer_address)
    print(f"Verified: {ok}")


async def run_deploy(settings: Settings) -> None:
    """Deploy Tip712Verifier with the configured domain name and version"""
    artifact = load_artifact(settings.artifact_path)
    client = create_async_tron_client(settings.full_host, settings.api_key, settings.network)
    try:
        address = await deploy_verifier(
            client, settings.private_key, artifact, settings.name, settings.version
        )
    finally:
        await client.close()

    print(f"Tip712Verifier deployed at: {address}")


def _run(command, require_full_host: bool, require_verifying_contract: bool) -> int:
    setup_logging(resolve_log_level())
    try:
        settings = load_settings(
            require_full_host=require_full_host,
            require_verifying_contract=require_verifying_contract,
        )
        asyncio.run(command(settings))
    except Exception:
        logger.exception(f"{command.__name__} failed")
        return 1
    return 0


def main_demo() -> int:
    return _run(run_demo, require_full_host=True, require_verifying_contract=True)


def main_sign() -> int:
    return _run(run_sign, require_full_host=False, require_verifying_contract=False)


def main_deploy() -> int:
    return _run(run_deploy, require_full_host=True, require_verifying_contract=False)


if __name__ == "__main__":
    sys.exit(main_demo())
