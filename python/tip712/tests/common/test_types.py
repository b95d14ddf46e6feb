"""
Tests for typed data models
"""

import pytest
from pydantic import ValidationError

from tron_tip712.types import Mail, Person, TypedDataDomain, VerificationResult


def test_domain_aliases():
    domain = TypedDataDomain(
        name="TRON TIP-712 Demo",
        version="1",
        chainId=0xCD8690DC,
        verifyingContract="TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t",
    )

    assert domain.model_dump(by_alias=True) == {
        "name": "TRON TIP-712 Demo",
        "version": "1",
        "chainId": 3448148188,
        "verifyingContract": "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t",
    }


def test_domain_populate_by_name():
    domain = TypedDataDomain(name="n", version="1", chain_id=1, verifying_contract="T")
    assert domain.chain_id_hex == "0x00000001"


def test_mail_from_alias():
    mail = Mail(
        **{
            "from": {"name": "Cow", "wallet": "TA"},
            "to": {"name": "Bob", "wallet": "TB"},
            "contents": "hi",
            "nonce": 1,
        }
    )

    assert mail.from_ == Person(name="Cow", wallet="TA")
    assert "from" in mail.model_dump(by_alias=True)


def test_mail_rejects_negative_nonce():
    with pytest.raises(ValidationError):
        Mail(
            **{
                "from": {"name": "Cow", "wallet": "TA"},
                "to": {"name": "Bob", "wallet": "TB"},
                "contents": "hi",
                "nonce": -1,
            }
        )


def test_verification_result_defaults():
    result = VerificationResult(signature="0x00", signer="TA", localOk=True)

    assert result.local_ok is True
    assert result.on_chain_ok is None
