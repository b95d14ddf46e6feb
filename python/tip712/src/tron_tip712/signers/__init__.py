"""
Signers for TIP-712 typed data
"""

from tron_tip712.signers.tron_signer import TronTypedDataSigner

__all__ = ["TronTypedDataSigner"]
