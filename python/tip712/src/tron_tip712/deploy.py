"""
Tip712Verifier deployment migration.

Deploys the verifier with constructor arguments (name, version); these become
the TIP-712 domain the contract checks signatures against.
"""

import logging
from typing import Any

from eth_abi import encode
from tronpy.async_contract import AsyncContract
from tronpy.keys import PrivateKey, to_base58check_address

from tron_tip712.exceptions import DeploymentError
from tron_tip712.utils.address import private_key_to_address, strip_hex_prefix

logger = logging.getLogger(__name__)

CONTRACT_NAME = "Tip712Verifier"
DEFAULT_FEE_LIMIT = 1_000_000_000  # 1000 TRX in SUN


def build_deploy_bytecode(bytecode: str, name: str, version: str) -> str:
    """Append ABI-encoded constructor arguments (name, version) to creation bytecode"""
    constructor_args = encode(["string", "string"], [name, version])
    return strip_hex_prefix(bytecode) + constructor_args.hex()


async def deploy_verifier(
    client: Any,
    private_key: str,
    artifact: dict[str, Any],
    name: str,
    version: str,
    fee_limit: int = DEFAULT_FEE_LIMIT,
) -> str:
    """
    Deploy Tip712Verifier and wait for confirmation.

    Args:
        client: AsyncTron client
        private_key: Deployer private key (hex)
        artifact: Compiled artifact with "abi" and "bytecode"
        name: Domain name constructor argument
        version: Domain version constructor argument
        fee_limit: Fee limit in SUN

    Returns:
        Deployed contract address (Base58)

    Raises:
        DeploymentError: If the artifact has no bytecode or the deployment fails
    """
    bytecode = artifact.get("bytecode")
    if not bytecode or not strip_hex_prefix(bytecode):
        raise DeploymentError("Contract artifact has no bytecode; compile the contract first")

    owner = private_key_to_address(private_key)
    logger.info(
        f"Deploying {CONTRACT_NAME}: owner={owner}, name={name}, version={version}, "
        f"fee_limit={fee_limit}"
    )

    contract = AsyncContract(
        name=artifact.get("contractName", CONTRACT_NAME),
        bytecode=build_deploy_bytecode(bytecode, name, version),
        abi=artifact["abi"],
    )

    try:
        txn_builder = client.trx.deploy_contract(owner, contract)
        txn = await txn_builder.fee_limit(fee_limit).build()
        txn = txn.sign(PrivateKey(bytes.fromhex(strip_hex_prefix(private_key))))
        logger.info("Broadcasting deployment transaction...")
        result = await txn.broadcast()
        info = await result.wait()
    except Exception as e:
        raise DeploymentError(f"{CONTRACT_NAME} deployment failed: {e}") from e

    receipt_result = info.get("receipt", {}).get("result", "")
    contract_address = info.get("contract_address")
    if receipt_result != "SUCCESS" or not contract_address:
        raise DeploymentError(
            f"{CONTRACT_NAME} deployment failed: txid={info.get('id')}, result={receipt_result}"
        )

    address = to_base58check_address(contract_address)
    logger.info(f"{CONTRACT_NAME} deployed: address={address}, txid={info.get('id')}")
    return address
