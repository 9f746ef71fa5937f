"""
Dependency providers for the Solana API.

Services are stateless, so each provider hands out one shared instance.
Tests can swap them through ``app.dependency_overrides``.
"""

from functools import lru_cache

from solana_api.services.instruction_service import InstructionService
from solana_api.services.keypair_service import KeypairService


@lru_cache()
def get_keypair_service() -> KeypairService:
    """Get the shared keypair service."""
    return KeypairService()


@lru_cache()
def get_instruction_service() -> InstructionService:
    """Get the shared instruction service."""
    return InstructionService()
