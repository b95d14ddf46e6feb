"""
tron_tip712 custom exception hierarchy
"""


class Tip712Error(Exception):
    """tron_tip712 base exception"""

    pass


class ConfigurationError(Tip712Error):
    """Configuration-related error"""

    def __init__(self, message: str, missing: list[str] | None = None):
        self.missing = missing or []
        super().__init__(message)


class UnsupportedNetworkError(ConfigurationError):
    """Unsupported network"""

    def __init__(self, network: str, supported: list[str] | None = None):
        self.network = network
        self.supported = supported or []
        message = f"Unsupported network: {network}"
        if self.supported:
            message += f". Expected one of: {', '.join(self.supported)}"
        super().__init__(message)


class SignatureError(Tip712Error):
    """Signature-related error"""

    pass


class MalformedSignatureError(SignatureError, ValueError):
    """Signature does not have the expected r || s || v layout"""

    def __init__(self, length: int, expected: int = 65):
        self.length = length
        self.expected = expected
        super().__init__(f"Invalid signature length: {length} bytes. Expected {expected} bytes")


class SignatureCreationError(SignatureError):
    """Signature creation failed"""

    pass


class ContractError(Tip712Error):
    """Contract-related error"""

    pass


class ArtifactError(ContractError):
    """Contract artifact could not be loaded"""

    pass


class ContractCallError(ContractError):
    """Read-only contract call failed"""

    pass


class DeploymentError(ContractError):
    """Contract deployment failed"""

    pass
