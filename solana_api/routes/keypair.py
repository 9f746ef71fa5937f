"""Keypair generation route."""

from fastapi import APIRouter, Depends

from solana_api.dependencies import get_keypair_service
from solana_api.models.responses import ApiResponse, KeypairData
from solana_api.services.keypair_service import KeypairService

router = APIRouter(tags=["keypair"])


@router.post(
    "/keypair",
    response_model=ApiResponse[KeypairData],
    summary="Generate a keypair",
    description="Generates a new Ed25519 keypair. The secret is returned to the caller and not stored."
)
async def generate_keypair(
    service: KeypairService = Depends(get_keypair_service)
) -> ApiResponse[KeypairData]:
    return ApiResponse[KeypairData].ok(service.generate_keypair())
