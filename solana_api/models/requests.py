"""Request validation models for the API.

This module defines Pydantic models for validating API request data.
Field names follow the wire format, which is camelCase. Numeric fields are
strict: JSON strings, booleans and floats are rejected rather than coerced.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from solana_api.constants import U8_MAX, U64_MAX


class SignMessageRequest(BaseModel):
    """Model for message signing requests."""

    message: str = Field(..., description="UTF-8 message to sign")
    secret: str = Field(..., description="Base58 64-byte secret key")


class VerifyMessageRequest(BaseModel):
    """Model for signature verification requests."""

    message: str = Field(..., description="UTF-8 message that was signed")
    signature: str = Field(..., description="Base64 Ed25519 signature")
    pubkey: str = Field(..., description="Base58 public key of the signer")


class CreateTokenRequest(BaseModel):
    """Model for InitializeMint instruction requests."""

    model_config = ConfigDict(populate_by_name=True)

    mint_authority: str = Field(..., alias="mintAuthority", description="Base58 mint authority")
    mint: str = Field(..., description="Base58 mint address")
    decimals: StrictInt = Field(..., ge=0, le=U8_MAX, description="Token decimal places")


class MintTokenRequest(BaseModel):
    """Model for MintTo instruction requests."""

    mint: str = Field(..., description="Base58 mint address")
    destination: str = Field(..., description="Base58 destination token account")
    authority: str = Field(..., description="Base58 mint authority")
    amount: StrictInt = Field(..., ge=0, le=U64_MAX, description="Raw token amount")


class SendSolRequest(BaseModel):
    """Model for System program transfer requests."""

    model_config = ConfigDict(populate_by_name=True)

    from_pubkey: str = Field(..., alias="from", description="Base58 sender address")
    to_pubkey: str = Field(..., alias="to", description="Base58 recipient address")
    lamports: StrictInt = Field(..., ge=0, le=U64_MAX, description="Amount in lamports")


class SendTokenRequest(BaseModel):
    """Model for TransferChecked instruction requests."""

    destination: str = Field(..., description="Base58 destination token account")
    mint: str = Field(..., description="Base58 mint address")
    owner: str = Field(..., description="Base58 owner, used as source and authority")
    amount: StrictInt = Field(..., ge=0, le=U64_MAX, description="Raw token amount")
