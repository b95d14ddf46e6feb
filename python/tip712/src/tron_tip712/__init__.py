"""
tron_tip712 - TIP-712 typed data signing and verification on TRON

Signs structured data with a TRON key, verifies it locally, and checks it
against a deployed Tip712Verifier contract.
"""

__version__ = "0.1.0"

from tron_tip712.config import NetworkConfig, Settings, load_settings
from tron_tip712.contract import Tip712VerifierContract
from tron_tip712.exceptions import (
    ArtifactError,
    ConfigurationError,
    ContractCallError,
    ContractError,
    DeploymentError,
    MalformedSignatureError,
    SignatureCreationError,
    SignatureError,
    Tip712Error,
    UnsupportedNetworkError,
)
from tron_tip712.signers import TronTypedDataSigner
from tron_tip712.types import Mail, Person, TypedDataDomain, VerificationResult

__all__ = [
    "__version__",
    # Types
    "TypedDataDomain",
    "Person",
    "Mail",
    "VerificationResult",
    # Exceptions
    "Tip712Error",
    "ConfigurationError",
    "UnsupportedNetworkError",
    "SignatureError",
    "MalformedSignatureError",
    "SignatureCreationError",
    "ContractError",
    "ArtifactError",
    "ContractCallError",
    "DeploymentError",
    # Config
    "NetworkConfig",
    "Settings",
    "load_settings",
    # Signing and verification
    "TronTypedDataSigner",
    "Tip712VerifierContract",
]
