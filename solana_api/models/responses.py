"""Response models for the API.

Every endpoint answers with ``ApiResponse[T]``: a ``success`` flag and a
``data`` object whose shape is fixed per endpoint. Failed requests keep that
shape, with placeholder values and the error text in one of its string fields.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from solders.instruction import Instruction

from solana_api.utils.validation import b64encode_str

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response envelope."""

    success: bool = Field(..., description="Whether the operation succeeded")
    data: T

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, data: T) -> "ApiResponse[T]":
        return cls(success=False, data=data)


class KeypairData(BaseModel):
    """Freshly generated keypair."""

    pubkey: str = Field(..., description="Base58 public key")
    secret: str = Field(..., description="Base58 64-byte secret key")


class SignMessageData(BaseModel):
    """Result of signing a message."""

    model_config = ConfigDict(populate_by_name=True)

    signature: str = Field(..., description="Base64 Ed25519 signature")
    public_key: str = Field(..., alias="publicKey", description="Base58 public key of the signer")
    message: str = Field(..., description="The signed message, or the error text on failure")

    @classmethod
    def failure(cls, error: str) -> "SignMessageData":
        return cls(signature="", public_key="", message=error)


class VerifyMessageData(BaseModel):
    """Result of verifying a signature."""

    valid: bool = Field(..., description="Whether the signature is valid")
    message: str = Field(..., description="The verified message, or the error text on failure")
    pubkey: str = Field(..., description="The public key from the request")

    @classmethod
    def failure(cls, error: str, pubkey: str) -> "VerifyMessageData":
        return cls(valid=False, message=error, pubkey=pubkey)


class AccountMetaData(BaseModel):
    """Account reference with signer and writable flags."""

    pubkey: str
    is_signer: bool
    is_writable: bool


class TokenInstructionData(BaseModel):
    """SPL token instruction with full account metadata."""

    program_id: str = Field(..., description="Base58 program id")
    accounts: List[AccountMetaData] = Field(default_factory=list)
    instruction_data: str = Field(..., description="Base64 instruction data, or the error text on failure")

    @classmethod
    def from_instruction(cls, ix: Instruction) -> "TokenInstructionData":
        return cls(
            program_id=str(ix.program_id),
            accounts=[
                AccountMetaData(
                    pubkey=str(meta.pubkey),
                    is_signer=meta.is_signer,
                    is_writable=meta.is_writable,
                )
                for meta in ix.accounts
            ],
            instruction_data=b64encode_str(bytes(ix.data)),
        )

    @classmethod
    def failure(cls, error: str) -> "TokenInstructionData":
        return cls(program_id="", accounts=[], instruction_data=error)


class SolTransferData(BaseModel):
    """System program transfer with the account addresses only."""

    program_id: str = Field(..., description="Base58 program id")
    accounts: List[str] = Field(default_factory=list)
    instruction_data: str = Field(..., description="Base64 instruction data, or base64 error text on failure")

    @classmethod
    def from_instruction(cls, ix: Instruction) -> "SolTransferData":
        return cls(
            program_id=str(ix.program_id),
            accounts=[str(meta.pubkey) for meta in ix.accounts],
            instruction_data=b64encode_str(bytes(ix.data)),
        )

    @classmethod
    def failure(cls, error: str) -> "SolTransferData":
        return cls(program_id="", accounts=[], instruction_data=b64encode_str(error.encode("utf-8")))


class CompactAccountMeta(BaseModel):
    """Account reference with the signer flag only."""

    model_config = ConfigDict(populate_by_name=True)

    pubkey: str
    is_signer: bool = Field(..., alias="isSigner")


class TokenTransferData(BaseModel):
    """TransferChecked instruction with compact account metadata."""

    program_id: str = Field(..., description="Base58 program id")
    accounts: List[CompactAccountMeta] = Field(default_factory=list)
    instruction_data: str = Field(..., description="Base64 instruction data, or base64 error text on failure")

    @classmethod
    def from_instruction(cls, ix: Instruction) -> "TokenTransferData":
        return cls(
            program_id=str(ix.program_id),
            accounts=[
                CompactAccountMeta(pubkey=str(meta.pubkey), is_signer=meta.is_signer)
                for meta in ix.accounts
            ],
            instruction_data=b64encode_str(bytes(ix.data)),
        )

    @classmethod
    def failure(cls, error: str) -> "TokenTransferData":
        return cls(program_id="", accounts=[], instruction_data=b64encode_str(error.encode("utf-8")))
