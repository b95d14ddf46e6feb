"""
Shared ABI and TIP-712 type definitions for the Tip712Verifier contract
"""

import copy
from typing import Any, List

# TIP-712 Primary Type for the demo message
MAIL_PRIMARY_TYPE = "Mail"

# TIP-712 Domain Type
# Based on contract:
# keccak256("EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)")
EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

# Field order must match the Solidity structs
MAIL_TYPES: dict[str, List[dict[str, str]]] = {
    "Person": [
        {"name": "name", "type": "string"},
        {"name": "wallet", "type": "address"},
    ],
    "Mail": [
        {"name": "from", "type": "Person"},
        {"name": "to", "type": "Person"},
        {"name": "contents", "type": "string"},
        {"name": "nonce", "type": "uint256"},
    ],
}

_PERSON_COMPONENTS = [
    {"name": "name", "type": "string"},
    {"name": "wallet", "type": "address"},
]

# Tip712Verifier contract ABI
TIP712_VERIFIER_ABI: List[dict[str, Any]] = [
    {
        "inputs": [
            {"name": "name", "type": "string"},
            {"name": "version", "type": "string"},
        ],
        "stateMutability": "nonpayable",
        "type": "constructor",
    },
    {
        "inputs": [
            {
                "name": "mail",
                "type": "tuple",
                "components": [
                    {"name": "from", "type": "tuple", "components": _PERSON_COMPONENTS},
                    {"name": "to", "type": "tuple", "components": _PERSON_COMPONENTS},
                    {"name": "contents", "type": "string"},
                    {"name": "nonce", "type": "uint256"},
                ],
            },
            {"name": "signer", "type": "address"},
            {"name": "signature", "type": "bytes"},
        ],
        "name": "verify",
        "stateMutability": "view",
        "type": "function",
        "outputs": [{"name": "", "type": "bool"}],
    },
]


def get_mail_eip712_types() -> dict[str, Any]:
    """Get TIP-712 type definitions for Mail

    Based on the verifier contract:
    - PERSON_TYPEHASH = "Person(string name,address wallet)"
    - MAIL_TYPEHASH =
      "Mail(Person from,Person to,string contents,uint256 nonce)Person(string name,address wallet)"

    Returns a copy, so callers may extend it freely.
    """
    return copy.deepcopy(MAIL_TYPES)
