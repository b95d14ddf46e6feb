"""
TIP-712 typed data utilities.

Builds the signing domain, converts Mail models into TIP-712 message dicts,
and maps them onto the positional tuples the verifier contract expects.
"""

import logging
import re
from typing import Any, Callable, Optional

from tron_tip712.abi import EIP712_DOMAIN_TYPE, MAIL_PRIMARY_TYPE, MAIL_TYPES
from tron_tip712.config import NetworkConfig
from tron_tip712.types import Mail, Person, TypedDataDomain
from tron_tip712.utils.address import tron_address_to_evm

logger = logging.getLogger(__name__)

_ARRAY_SUFFIX = re.compile(r"\[\d*\]$")

_PRIMITIVE_TYPES = frozenset(
    ["string", "bytes", "bool", "address"]
    + [f"{sign}int{bits}" for sign in ("", "u") for bits in range(8, 257, 8)]
    + [f"bytes{size}" for size in range(1, 33)]
)


def _base_type(field_type: str) -> str:
    """Strip array suffixes ("Person[2][]" -> "Person")"""
    while _ARRAY_SUFFIX.search(field_type):
        field_type = _ARRAY_SUFFIX.sub("", field_type)
    return field_type


def build_domain(
    name: str,
    version: str,
    network: Optional[str],
    verifying_contract: str,
) -> TypedDataDomain:
    """
    Build the TIP-712 signing domain.

    Args:
        name: Domain name (must match the contract constructor)
        version: Domain version (must match the contract constructor)
        network: Network name; None means nile
        verifying_contract: Verifier contract address

    Returns:
        TypedDataDomain instance

    Raises:
        UnsupportedNetworkError: If network is not supported
    """
    chain_id = NetworkConfig.get_chain_id(network)
    domain = TypedDataDomain(
        name=name,
        version=version,
        chainId=chain_id,
        verifyingContract=verifying_contract,
    )
    logger.info(
        "Domain built: name=%s, version=%s, chainId=%s, verifyingContract=%s",
        domain.name,
        domain.version,
        domain.chain_id_hex,
        domain.verifying_contract,
    )
    return domain


def validate_types(types: dict[str, Any], primary_type: str) -> None:
    """
    Check that a type schema is self-contained.

    Raises:
        ValueError: If the primary type or a referenced struct type is undefined
    """
    if primary_type not in types:
        raise ValueError(f"Primary type '{primary_type}' is not defined in types")

    for type_name, fields in types.items():
        seen: set[str] = set()
        for field in fields:
            field_name = field["name"]
            if field_name in seen:
                raise ValueError(f"Duplicate field '{field_name}' in type '{type_name}'")
            seen.add(field_name)

            base = _base_type(field["type"])
            if base not in _PRIMITIVE_TYPES and base not in types:
                raise ValueError(
                    f"Type '{type_name}' references undefined type '{base}' "
                    f"in field '{field_name}'"
                )


def domain_to_dict(domain: TypedDataDomain) -> dict[str, Any]:
    """Convert domain model to a TIP-712 domain dict"""
    return domain.model_dump(by_alias=True)


def mail_to_message(mail: Mail) -> dict[str, Any]:
    """Convert Mail model to a TIP-712 message dict"""
    return mail.model_dump(by_alias=True)


def convert_struct_addresses(
    types: dict[str, Any],
    type_name: str,
    value: dict[str, Any],
    convert_fn: Callable[[str], str] = tron_address_to_evm,
) -> dict[str, Any]:
    """
    Return a copy of *value* with every address field converted, following the schema.

    Args:
        types: TIP-712 type schema
        type_name: Type of *value*
        value: Struct value
        convert_fn: Address conversion function

    Returns:
        Converted copy; the input is left untouched

    Raises:
        ValueError: If *value* lacks a field of *type_name*
    """
    converted = {}
    for field in types[type_name]:
        name = field["name"]
        if name not in value:
            raise ValueError(f"Missing field '{name}' in {type_name}")
        converted[name] = _convert_field(types, field["type"], value[name], convert_fn)
    return converted


def _convert_field(
    types: dict[str, Any], field_type: str, value: Any, convert_fn: Callable[[str], str]
) -> Any:
    if _ARRAY_SUFFIX.search(field_type):
        inner = _ARRAY_SUFFIX.sub("", field_type, count=1)
        return [_convert_field(types, inner, item, convert_fn) for item in value]
    if field_type in types:
        return convert_struct_addresses(types, field_type, value, convert_fn)
    if field_type == "address":
        return convert_fn(value)
    return value


def build_typed_data(
    domain: TypedDataDomain | dict[str, Any],
    types: dict[str, Any],
    primary_type: str,
    message: dict[str, Any],
) -> dict[str, Any]:
    """
    Build a full TIP-712 typed data document.

    TRON Base58 addresses in the domain and message are converted to hex,
    which is how TIP-712 hashes them.

    Args:
        domain: Signing domain
        types: Type schema without EIP712Domain
        primary_type: Root type of *message*
        message: Message value tree

    Returns:
        Dict with types, primaryType, domain and message

    Raises:
        ValueError: If the schema is inconsistent or an address is invalid
    """
    validate_types(types, primary_type)

    domain_dict = domain_to_dict(domain) if isinstance(domain, TypedDataDomain) else dict(domain)
    if "verifyingContract" in domain_dict:
        domain_dict["verifyingContract"] = tron_address_to_evm(domain_dict["verifyingContract"])

    full_types = {
        "EIP712Domain": [
            field for field in EIP712_DOMAIN_TYPE if field["name"] in domain_dict
        ],
        **types,
    }

    return {
        "types": full_types,
        "primaryType": primary_type,
        "domain": domain_dict,
        "message": convert_struct_addresses(types, primary_type, message),
    }


def struct_to_tuple(types: dict[str, Any], type_name: str, value: dict[str, Any]) -> tuple:
    """Flatten a struct value into a positional tuple in schema field order"""
    items = []
    for field in types[type_name]:
        item = value[field["name"]]
        if field["type"] in types:
            item = struct_to_tuple(types, field["type"], item)
        items.append(item)
    return tuple(items)


def person_to_tuple(person: Person) -> tuple[str, str]:
    """Person -> (name, wallet)"""
    return struct_to_tuple(MAIL_TYPES, "Person", person.model_dump(by_alias=True))


def mail_to_tuple(mail: Mail) -> tuple[tuple[str, str], tuple[str, str], str, int]:
    """Mail -> ((name, wallet), (name, wallet), contents, nonce)"""
    # Keyed by TIP-712 field name ("from", not "from_")
    values = {
        (info.alias or name): getattr(mail, name) for name, info in Mail.model_fields.items()
    }
    items = []
    for field in MAIL_TYPES[MAIL_PRIMARY_TYPE]:
        item = values[field["name"]]
        if field["type"] == "Person":
            item = person_to_tuple(item)
        items.append(item)
    return tuple(items)
