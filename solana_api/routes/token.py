"""SPL token instruction routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from solana_api.api.error_handling import envelope_errors
from solana_api.dependencies import get_instruction_service
from solana_api.models.requests import CreateTokenRequest, MintTokenRequest
from solana_api.models.responses import ApiResponse, TokenInstructionData
from solana_api.services.instruction_service import InstructionService
from solana_api.utils.errors import SolanaApiError

router = APIRouter(prefix="/token", tags=["token"])


def token_failure(error: SolanaApiError, _kwargs: Dict[str, Any]) -> ApiResponse[TokenInstructionData]:
    # error text goes into instruction_data as plain text
    return ApiResponse[TokenInstructionData].failed(TokenInstructionData.failure(error.message))


@router.post(
    "/create",
    response_model=ApiResponse[TokenInstructionData],
    summary="Build an InitializeMint instruction",
    description="Builds an SPL token InitializeMint instruction without a freeze authority."
)
@envelope_errors(token_failure)
async def create_token(
    payload: CreateTokenRequest,
    service: InstructionService = Depends(get_instruction_service)
) -> ApiResponse[TokenInstructionData]:
    """Build the instruction that initializes a mint account.

    Args:
        payload: Mint, mint authority and decimals
        service: The instruction service

    Returns:
        Program id, account metas and base64 instruction data
    """
    ix = service.initialize_mint(payload.mint, payload.mint_authority, payload.decimals)
    return ApiResponse[TokenInstructionData].ok(TokenInstructionData.from_instruction(ix))


@router.post(
    "/mint",
    response_model=ApiResponse[TokenInstructionData],
    summary="Build a MintTo instruction",
    description="Builds an SPL token MintTo instruction signed by a single mint authority."
)
@envelope_errors(token_failure)
async def mint_token(
    payload: MintTokenRequest,
    service: InstructionService = Depends(get_instruction_service)
) -> ApiResponse[TokenInstructionData]:
    ix = service.mint_to(payload.mint, payload.destination, payload.authority, payload.amount)
    return ApiResponse[TokenInstructionData].ok(TokenInstructionData.from_instruction(ix))
