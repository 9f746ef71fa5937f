"""Solana API Package.

This package provides a small HTTP service for local Solana operations:
keypair generation, message signing and verification, and construction of
SPL token and System program instructions.
"""

__version__ = "0.1.0"
__author__ = "Solana API Contributors"
__email__ = "dev@example.com"
