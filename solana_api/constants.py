"""Constants used throughout the Solana API application.

This module defines common constants to avoid duplication and ensure consistency.
"""

# Solana program IDs
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
SYSVAR_RENT_ID = "SysvarRent111111111111111111111111111111111"

# Ed25519 material sizes in bytes
PUBKEY_LENGTH = 32
SECRET_KEY_LENGTH = 64
SIGNATURE_LENGTH = 64

# Numeric bounds for request fields
U8_MAX = 2**8 - 1
U64_MAX = 2**64 - 1

# /send/token does not look up the mint, so TransferChecked always uses this
TRANSFER_CHECKED_DECIMALS = 6
