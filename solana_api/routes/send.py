"""Transfer instruction routes.

Unlike the /token routes, failures here put the error text into
``instruction_data`` base64-encoded.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from solana_api.api.error_handling import envelope_errors
from solana_api.dependencies import get_instruction_service
from solana_api.models.requests import SendSolRequest, SendTokenRequest
from solana_api.models.responses import ApiResponse, SolTransferData, TokenTransferData
from solana_api.services.instruction_service import InstructionService
from solana_api.utils.errors import SolanaApiError

router = APIRouter(prefix="/send", tags=["send"])


def sol_failure(error: SolanaApiError, _kwargs: Dict[str, Any]) -> ApiResponse[SolTransferData]:
    return ApiResponse[SolTransferData].failed(SolTransferData.failure(error.message))


def token_transfer_failure(error: SolanaApiError, _kwargs: Dict[str, Any]) -> ApiResponse[TokenTransferData]:
    return ApiResponse[TokenTransferData].failed(TokenTransferData.failure(error.message))


@router.post(
    "/sol",
    response_model=ApiResponse[SolTransferData],
    summary="Build a SOL transfer instruction",
    description="Builds a System program transfer of lamports between two accounts."
)
@envelope_errors(sol_failure)
async def send_sol(
    payload: SendSolRequest,
    service: InstructionService = Depends(get_instruction_service)
) -> ApiResponse[SolTransferData]:
    """Build a lamport transfer.

    Returns:
        Program id, the [from, to] addresses and base64 instruction data
    """
    ix = service.transfer_sol(payload.from_pubkey, payload.to_pubkey, payload.lamports)
    return ApiResponse[SolTransferData].ok(SolTransferData.from_instruction(ix))


@router.post(
    "/token",
    response_model=ApiResponse[TokenTransferData],
    summary="Build a token transfer instruction",
    description=(
        "Builds an SPL token TransferChecked instruction. The owner is used as "
        "the source account and the signing authority; decimals is fixed at 6."
    )
)
@envelope_errors(token_transfer_failure)
async def send_token(
    payload: SendTokenRequest,
    service: InstructionService = Depends(get_instruction_service)
) -> ApiResponse[TokenTransferData]:
    ix = service.transfer_token(payload.destination, payload.mint, payload.owner, payload.amount)
    return ApiResponse[TokenTransferData].ok(TokenTransferData.from_instruction(ix))
