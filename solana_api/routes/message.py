"""Message signing and verification routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from solana_api.api.error_handling import envelope_errors
from solana_api.dependencies import get_keypair_service
from solana_api.models.requests import SignMessageRequest, VerifyMessageRequest
from solana_api.models.responses import ApiResponse, SignMessageData, VerifyMessageData
from solana_api.services.keypair_service import KeypairService
from solana_api.utils.errors import SolanaApiError

router = APIRouter(prefix="/message", tags=["message"])


def sign_failure(error: SolanaApiError, _kwargs: Dict[str, Any]) -> ApiResponse[SignMessageData]:
    return ApiResponse[SignMessageData].failed(SignMessageData.failure(error.message))


def verify_failure(error: SolanaApiError, kwargs: Dict[str, Any]) -> ApiResponse[VerifyMessageData]:
    # the caller's pubkey is echoed back; the message field carries the error
    payload: VerifyMessageRequest = kwargs["payload"]
    return ApiResponse[VerifyMessageData].failed(VerifyMessageData.failure(error.message, payload.pubkey))


@router.post(
    "/sign",
    response_model=ApiResponse[SignMessageData],
    summary="Sign a message",
    description="Signs the UTF-8 bytes of a message with a base58 64-byte secret key."
)
@envelope_errors(sign_failure)
async def sign_message(
    payload: SignMessageRequest,
    service: KeypairService = Depends(get_keypair_service)
) -> ApiResponse[SignMessageData]:
    """Sign a message.

    Args:
        payload: Message and secret key
        service: The keypair service

    Returns:
        Base64 signature, base58 public key and the original message
    """
    return ApiResponse[SignMessageData].ok(service.sign_message(payload.message, payload.secret))


@router.post(
    "/verify",
    response_model=ApiResponse[VerifyMessageData],
    summary="Verify a signed message",
    description="Checks a base64 Ed25519 signature over a message against a base58 public key."
)
@envelope_errors(verify_failure)
async def verify_message(
    payload: VerifyMessageRequest,
    service: KeypairService = Depends(get_keypair_service)
) -> ApiResponse[VerifyMessageData]:
    """Verify a signature.

    An invalid signature is still a successful request: ``success`` is true
    and ``valid`` is false. Only undecodable inputs set ``success`` to false.
    """
    result = service.verify_message(payload.message, payload.signature, payload.pubkey)
    return ApiResponse[VerifyMessageData].ok(result)
