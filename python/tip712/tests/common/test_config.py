"""
Tests for network configuration and settings loading
"""

from pathlib import Path

import pytest

from tron_tip712.config import NetworkConfig, load_settings
from tron_tip712.exceptions import ConfigurationError, UnsupportedNetworkError


@pytest.mark.parametrize(
    "network,expected",
    [
        ("mainnet", "0x2b6653dc"),
        ("nile", "0xcd8690dc"),
        ("shasta", "0x94a9059e"),
        ("NILE", "0xcd8690dc"),
        ("tron:mainnet", "0x2b6653dc"),
    ],
)
def test_chain_id_hex(network, expected):
    assert NetworkConfig.get_chain_id_hex(network) == expected


def test_chain_id_values():
    assert NetworkConfig.get_chain_id("mainnet") == 728126428
    assert NetworkConfig.get_chain_id("nile") == 3448148188


def test_missing_network_defaults_to_nile():
    assert NetworkConfig.get_chain_id(None) == NetworkConfig.CHAIN_IDS["nile"]
    assert NetworkConfig.get_chain_id("") == NetworkConfig.CHAIN_IDS["nile"]


def test_unknown_network_raises():
    with pytest.raises(UnsupportedNetworkError) as exc_info:
        NetworkConfig.get_chain_id("ropsten")

    assert exc_info.value.network == "ropsten"
    assert "nile" in exc_info.value.supported
    assert isinstance(exc_info.value, ConfigurationError)


def test_full_host_default():
    assert NetworkConfig.get_full_host("nile") == "https://nile.trongrid.io"
    with pytest.raises(UnsupportedNetworkError):
        NetworkConfig.get_full_host("devnet")


@pytest.fixture
def no_env_file(tmp_path) -> Path:
    return tmp_path / "missing.env"


def test_load_settings_full(monkeypatch, no_env_file):
    monkeypatch.setenv("FULL_HOST", "https://api.trongrid.io")
    monkeypatch.setenv("PRIVATE_KEY", "ab" * 32)
    monkeypatch.setenv("NETWORK", "Mainnet")
    monkeypatch.setenv("VERIFYING_CONTRACT", "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t")
    monkeypatch.setenv("TRON_PRO_API_KEY", "key-123")
    monkeypatch.setenv("NAME", "Custom")
    monkeypatch.setenv("VERSION", "2")

    settings = load_settings(env_file=no_env_file)

    assert settings.full_host == "https://api.trongrid.io"
    assert settings.network == "mainnet"
    assert settings.api_key == "key-123"
    assert settings.name == "Custom"
    assert settings.version == "2"
    assert settings.verifying_contract == "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t"


def test_load_settings_defaults(monkeypatch, no_env_file):
    monkeypatch.setenv("PRIVATE_KEY", "ab" * 32)

    settings = load_settings(
        require_full_host=False, require_verifying_contract=False, env_file=no_env_file
    )

    assert settings.network == "nile"
    assert settings.full_host == "https://nile.trongrid.io"
    assert settings.name == "TRON TIP-712 Demo"
    assert settings.version == "1"
    assert settings.api_key is None
    assert settings.verifying_contract is None
    assert settings.artifact_path == Path("build/contracts/Tip712Verifier.json")


def test_load_settings_reports_all_missing(no_env_file):
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(env_file=no_env_file)

    assert exc_info.value.missing == ["PRIVATE_KEY", "FULL_HOST", "VERIFYING_CONTRACT"]


def test_load_settings_private_key_always_required(monkeypatch, no_env_file):
    monkeypatch.setenv("FULL_HOST", "https://nile.trongrid.io")

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(
            require_full_host=False, require_verifying_contract=False, env_file=no_env_file
        )

    assert exc_info.value.missing == ["PRIVATE_KEY"]


def test_load_settings_blank_value_is_missing(monkeypatch, no_env_file):
    monkeypatch.setenv("PRIVATE_KEY", "   ")

    with pytest.raises(ConfigurationError):
        load_settings(
            require_full_host=False, require_verifying_contract=False, env_file=no_env_file
        )


def test_load_settings_unknown_network(monkeypatch, no_env_file):
    monkeypatch.setenv("PRIVATE_KEY", "ab" * 32)
    monkeypatch.setenv("NETWORK", "testnet")

    with pytest.raises(UnsupportedNetworkError):
        load_settings(
            require_full_host=False, require_verifying_contract=False, env_file=no_env_file
        )


def test_load_settings_reads_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PRIVATE_KEY=" + "cd" * 32 + "\nNETWORK=shasta\n")
    # load_dotenv writes into os.environ; let monkeypatch restore it afterwards
    monkeypatch.setenv("PRIVATE_KEY", "")
    monkeypatch.delenv("PRIVATE_KEY")
    monkeypatch.setenv("NETWORK", "")
    monkeypatch.delenv("NETWORK")

    settings = load_settings(
        require_full_host=False, require_verifying_contract=False, env_file=env_file
    )

    assert settings.private_key == "cd" * 32
    assert settings.network == "shasta"
    assert settings.full_host == "https://api.shasta.trongrid.io"
