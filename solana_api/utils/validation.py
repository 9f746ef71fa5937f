"""Validation utilities for Solana API.

Helpers that turn request strings into typed Solana values, raising the
errors from :mod:`solana_api.utils.errors` on bad input.
"""

import base64
import binascii

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from solana_api.constants import PUBKEY_LENGTH, SECRET_KEY_LENGTH, SIGNATURE_LENGTH
from solana_api.utils.errors import (
    EncodingError,
    InvalidKeyMaterialError,
    InvalidPublicKeyError,
)

INVALID_SECRET_MESSAGE = "Invalid or malformed secret key (expected 64-byte base58)"
KEYPAIR_PARSE_MESSAGE = "Failed to parse secret key into Keypair"
INVALID_BASE58_PUBKEY_MESSAGE = "Invalid base58 pubkey"
PUBKEY_PARSE_MESSAGE = "Failed to parse pubkey"
INVALID_BASE64_SIGNATURE_MESSAGE = "Invalid base64 signature"
SIGNATURE_PARSE_MESSAGE = "Failed to parse signature"


def b64encode_str(data: bytes) -> str:
    """Standard base64 with padding, as text."""
    return base64.b64encode(data).decode("ascii")


def b58encode_str(data: bytes) -> str:
    """Base58 (Bitcoin alphabet), as text."""
    return base58.b58encode(data).decode("ascii")


def decode_base58(value: str, error_message: str) -> bytes:
    """Decode a base58 string.

    Args:
        value: The base58 text
        error_message: Message for the raised error

    Returns:
        The decoded bytes

    Raises:
        EncodingError: If the text is not valid base58
    """
    try:
        return base58.b58decode(value)
    except ValueError as e:
        raise EncodingError(error_message, details={"reason": str(e)}) from e


def decode_base64(value: str, error_message: str) -> bytes:
    """Decode a standard, padded base64 string.

    Raises:
        EncodingError: If the text is not valid base64
    """
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(error_message, details={"reason": str(e)}) from e


def parse_pubkey(value: str, label: str) -> Pubkey:
    """Parse a base58 account address.

    Only the encoding and length are checked, so off-curve addresses such as
    program derived addresses are accepted.

    Args:
        value: The base58 address
        label: Field label used in the error message, e.g. ``mint``

    Returns:
        The parsed public key

    Raises:
        InvalidPublicKeyError: If the address does not parse
    """
    try:
        return Pubkey.from_string(value)
    except ValueError as e:
        raise InvalidPublicKeyError(label, value) from e


def parse_verifying_key(value: str) -> Pubkey:
    """Parse a base58 Ed25519 public key used to check a signature.

    Unlike :func:`parse_pubkey` the key must also be a point on the curve.

    Raises:
        EncodingError: If the text is not base58
        InvalidKeyMaterialError: If the bytes are not a valid Ed25519 key
    """
    raw = decode_base58(value, INVALID_BASE58_PUBKEY_MESSAGE)
    if len(raw) != PUBKEY_LENGTH:
        raise InvalidKeyMaterialError(PUBKEY_PARSE_MESSAGE, details={"length": len(raw)})

    pubkey = Pubkey.from_bytes(raw)
    if not pubkey.is_on_curve():
        raise InvalidKeyMaterialError(PUBKEY_PARSE_MESSAGE, details={"reason": "point is not on the curve"})
    return pubkey


def parse_signature(value: str) -> Signature:
    """Parse a base64 Ed25519 signature.

    Raises:
        EncodingError: If the text is not base64
        InvalidKeyMaterialError: If the bytes are not a 64-byte signature
    """
    raw = decode_base64(value, INVALID_BASE64_SIGNATURE_MESSAGE)
    if len(raw) != SIGNATURE_LENGTH:
        raise InvalidKeyMaterialError(SIGNATURE_PARSE_MESSAGE, details={"length": len(raw)})

    try:
        return Signature.from_bytes(raw)
    except ValueError as e:
        raise InvalidKeyMaterialError(SIGNATURE_PARSE_MESSAGE) from e


def parse_keypair(secret: str) -> Keypair:
    """Parse a base58 64-byte secret (seed followed by public key).

    Raises:
        EncodingError: If the secret is not base58
        InvalidKeyMaterialError: If it is not 64 bytes or not a consistent keypair
    """
    raw = decode_base58(secret, INVALID_SECRET_MESSAGE)
    if len(raw) != SECRET_KEY_LENGTH:
        raise InvalidKeyMaterialError(INVALID_SECRET_MESSAGE, details={"length": len(raw)})

    try:
        keypair = Keypair.from_bytes(raw)
    except ValueError as e:
        raise InvalidKeyMaterialError(KEYPAIR_PARSE_MESSAGE) from e

    # the trailing half must be the key derived from the seed
    if bytes(keypair.pubkey()) != raw[PUBKEY_LENGTH:]:
        raise InvalidKeyMaterialError(KEYPAIR_PARSE_MESSAGE, details={"reason": "public key does not match seed"})
    return keypair
