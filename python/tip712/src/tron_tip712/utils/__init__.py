"""
Utility functions for TIP-712 signing on TRON
"""

from tron_tip712.utils.address import private_key_to_address, tron_address_to_evm
from tron_tip712.utils.eip712 import (
    build_domain,
    build_typed_data,
    mail_to_message,
    mail_to_tuple,
    person_to_tuple,
    validate_types,
)
from tron_tip712.utils.signature import normalize_signature, signature_to_bytes

__all__ = [
    "private_key_to_address",
    "tron_address_to_evm",
    "build_domain",
    "build_typed_data",
    "mail_to_message",
    "mail_to_tuple",
    "person_to_tuple",
    "validate_types",
    "normalize_signature",
    "signature_to_bytes",
]
