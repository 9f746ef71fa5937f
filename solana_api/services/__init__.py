"""Stateless services behind the HTTP routes."""

from solana_api.services.keypair_service import KeypairService
from solana_api.services.instruction_service import InstructionService

__all__ = ["KeypairService", "InstructionService"]
