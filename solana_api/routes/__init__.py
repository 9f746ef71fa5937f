"""API routes package for the Solana API server."""

from solana_api.routes.keypair import router as keypair_router
from solana_api.routes.message import router as message_router
from solana_api.routes.token import router as token_router
from solana_api.routes.send import router as send_router

# List of available routers
__all__ = [
    "keypair_router",
    "message_router",
    "token_router",
    "send_router",
]
