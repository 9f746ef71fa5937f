"""Main entry point for the Solana API server."""

# Standard library imports
import sys
import argparse

# Third-party library imports
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Internal imports
from solana_api import __version__
from solana_api.api.error_handling import register_error_handlers
from solana_api.config import get_server_config
from solana_api.logging_config import configure_logging, get_logger, RequestIdMiddleware
from solana_api.routes import keypair_router, message_router, token_router, send_router

# Setup logging
configure_logging(get_server_config().log_level)
logger = get_logger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        The configured FastAPI application
    """
    app = FastAPI(
        title="Solana API Server",
        description="Keypair, message signing and instruction building endpoints for Solana",
        version=__version__,
    )

    # Add middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIdMiddleware)

    register_error_handlers(app)

    # Include routers
    app.include_router(keypair_router)
    app.include_router(message_router)
    app.include_router(token_router)
    app.include_router(send_router)

    @app.get("/health", tags=["system"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/version", tags=["system"])
    async def version():
        """Get API version information."""
        return {
            "version": __version__,
            "name": "Solana API Server",
        }

    return app


app = create_application()


def run_server(port=None):
    """Run the server from command line.

    Args:
        port: Optional port override

    This function is used as an entry point in setup.py.
    """
    config = get_server_config()

    # Override port if specified
    if port is not None:
        try:
            config.port = int(port)
        except ValueError:
            logger.error(f"Invalid port number: {port}")
            sys.exit(1)

    logger.info(
        f"Starting Solana API Server on {config.bind_address} (Environment: {config.environment})"
    )

    uvicorn.run(
        "solana_api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Solana API Server")
    parser.add_argument("--port", type=int, help="Server port")
    args = parser.parse_args()

    run_server(port=args.port)
