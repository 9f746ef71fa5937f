"""Unit tests for the keypair and instruction services."""

import base64

import base58
import pytest
from solders.keypair import Keypair
from spl.token.constants import TOKEN_PROGRAM_ID as TOKEN_PROGRAM_PUBKEY
from spl.token.instructions import initialize_mint
from spl.token.models import InitializeMintParams

from solana_api.constants import SYSTEM_PROGRAM_ID, TOKEN_PROGRAM_ID
from solana_api.services.instruction_service import InstructionService, without_freeze_authority
from solana_api.services.keypair_service import KeypairService
from solana_api.utils.errors import (
    EncodingError,
    ErrorCode,
    InstructionBuildError,
    InvalidKeyMaterialError,
    InvalidPublicKeyError,
    SolanaApiError,
)


@pytest.fixture
def keypair_service():
    return KeypairService()


@pytest.fixture
def instruction_service():
    return InstructionService()


def test_generate_keypair(keypair_service):
    data = keypair_service.generate_keypair()

    secret = base58.b58decode(data.secret)
    restored = Keypair.from_bytes(secret)
    assert str(restored.pubkey()) == data.pubkey


def test_sign_and_verify(keypair_service, keypair):
    secret = base58.b58encode(bytes(keypair)).decode()

    signed = keypair_service.sign_message("gm", secret)
    result = keypair_service.verify_message("gm", signed.signature, signed.public_key)

    assert result.valid is True
    assert result.pubkey == str(keypair.pubkey())


def test_verify_flipped_signature_byte(keypair_service, keypair):
    secret = base58.b58encode(bytes(keypair)).decode()
    signature = bytearray(base64.b64decode(keypair_service.sign_message("gm", secret).signature))
    signature[0] ^= 0x01

    result = keypair_service.verify_message("gm", base64.b64encode(bytes(signature)).decode(), str(keypair.pubkey()))

    assert result.valid is False


def test_sign_errors_are_typed(keypair_service):
    with pytest.raises(EncodingError) as exc_info:
        keypair_service.sign_message("gm", "0OIl")
    assert exc_info.value.code is ErrorCode.INVALID_ENCODING

    with pytest.raises(InvalidKeyMaterialError) as exc_info:
        keypair_service.sign_message("gm", base58.b58encode(b"\x01" * 63).decode())
    assert exc_info.value.code is ErrorCode.INVALID_KEY_MATERIAL
    assert exc_info.value.details == {"length": 63}


def test_transfer_sol(instruction_service):
    sender, recipient = str(Keypair().pubkey()), str(Keypair().pubkey())

    ix = instruction_service.transfer_sol(sender, recipient, 5)

    assert str(ix.program_id) == SYSTEM_PROGRAM_ID
    assert [str(meta.pubkey) for meta in ix.accounts] == [sender, recipient]
    assert [meta.is_signer for meta in ix.accounts] == [True, False]


def test_transfer_token_uses_fixed_decimals(instruction_service):
    owner = str(Keypair().pubkey())

    ix = instruction_service.transfer_token(str(Keypair().pubkey()), str(Keypair().pubkey()), owner, 1)

    assert str(ix.program_id) == TOKEN_PROGRAM_ID
    assert bytes(ix.data)[-1] == 6


def test_invalid_pubkey_error(instruction_service):
    with pytest.raises(InvalidPublicKeyError) as exc_info:
        instruction_service.transfer_sol("bad", str(Keypair().pubkey()), 1)

    error = exc_info.value
    assert error.message == "Invalid 'from' pubkey"
    assert error.code is ErrorCode.INVALID_PUBLIC_KEY
    assert error.to_dict() == {
        "code": "INVALID_PUBLIC_KEY",
        "message": "Invalid 'from' pubkey",
        "details": {"field": "'from'", "value": "bad"},
    }


def test_builder_failure_is_wrapped(instruction_service, monkeypatch):
    """Test that an exception from the instruction builder surfaces as InstructionBuildError"""
    def broken_builder(params):
        raise ValueError("decimals out of range")

    monkeypatch.setattr("solana_api.services.instruction_service.initialize_mint", broken_builder)

    with pytest.raises(InstructionBuildError) as exc_info:
        instruction_service.initialize_mint(str(Keypair().pubkey()), str(Keypair().pubkey()), 6)

    assert exc_info.value.message == "decimals out of range"
    assert exc_info.value.details == {"instruction": "InitializeMint"}


def test_initialize_mint_ends_at_freeze_flag(instruction_service):
    """Test that an unset freeze authority is encoded as the option flag alone"""
    authority = Keypair().pubkey()

    ix = instruction_service.initialize_mint(str(Keypair().pubkey()), str(authority), 2)

    assert bytes(ix.data) == bytes([0, 2]) + bytes(authority) + bytes([0])
    assert [meta.is_writable for meta in ix.accounts] == [True, False]


def test_without_freeze_authority_keeps_set_authority():
    freeze = Keypair().pubkey()
    ix = initialize_mint(
        InitializeMintParams(
            decimals=0,
            program_id=TOKEN_PROGRAM_PUBKEY,
            mint=Keypair().pubkey(),
            mint_authority=Keypair().pubkey(),
            freeze_authority=freeze,
        )
    )

    assert without_freeze_authority(ix) == ix
    assert bytes(ix.data)[-32:] == bytes(freeze)


def test_base_error_defaults():
    error = SolanaApiError("something broke")

    assert error.code is ErrorCode.UNKNOWN_ERROR
    assert error.to_dict() == {"code": "UNKNOWN_ERROR", "message": "something broke"}
