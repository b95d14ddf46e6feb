"""
Pytest configuration and fixtures
"""

import pytest

from tron_tip712.signers import TronTypedDataSigner
from tron_tip712.types import Mail, Person
from tron_tip712.utils.eip712 import build_domain

ENV_VARS = (
    "FULL_HOST",
    "TRON_PRO_API_KEY",
    "PRIVATE_KEY",
    "NETWORK",
    "NAME",
    "VERSION",
    "VERIFYING_CONTRACT",
    "TIP712_ARTIFACT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep settings from the developer's shell out of the tests"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_tron_private_key():
    """Mock TRON private key for tests"""
    return "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


@pytest.fixture
def other_private_key():
    """A second key that did not sign anything"""
    return "fedcba9876543210fedcba9876543210fedcba9876543210fedcba9876543210"


@pytest.fixture
def signer(mock_tron_private_key):
    return TronTypedDataSigner.from_private_key(mock_tron_private_key)


@pytest.fixture
def signer_address(signer):
    return signer.get_address()


@pytest.fixture
def domain(signer_address):
    return build_domain("TRON TIP-712 Demo", "1", "nile", signer_address)


@pytest.fixture
def mail(signer_address):
    return Mail(
        **{
            "from": Person(name="Cow", wallet=signer_address),
            "to": Person(name="Bob", wallet=signer_address),
            "contents": "Hello from TRON typed data!",
            "nonce": 1700000000000,
        }
    )
