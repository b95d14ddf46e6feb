"""
Type definitions for TIP-712 typed data
"""

from typing import Optional

from pydantic import BaseModel, Field


class TypedDataDomain(BaseModel):
    """TIP-712 signing domain

    Must match the values baked into the deployed verifier contract.
    """

    name: str
    version: str
    chain_id: int = Field(alias="chainId", ge=0)
    verifying_contract: str = Field(alias="verifyingContract")

    class Config:
        populate_by_name = True

    @property
    def chain_id_hex(self) -> str:
        return f"0x{self.chain_id:08x}"


class Person(BaseModel):
    """Mail participant"""

    name: str
    wallet: str


class Mail(BaseModel):
    """Mail message, the primary type of the demo schema"""

    from_: Person = Field(alias="from")
    to: Person
    contents: str
    nonce: int = Field(ge=0, lt=2**256)

    class Config:
        populate_by_name = True


class VerificationResult(BaseModel):
    """Outcome of one sign-and-verify cycle"""

    signature: str
    signer: str
    local_ok: bool = Field(alias="localOk")
    on_chain_ok: Optional[bool] = Field(None, alias="onChainOk")

    class Config:
        populate_by_name = True
