"""
Error handling utilities for Solana API.

This module defines the exception classes raised by the services. Routes
catch them and flatten them into the endpoint's response envelope.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Error codes for the Solana API."""

    # General errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # Input errors
    INVALID_ENCODING = "INVALID_ENCODING"
    INVALID_KEY_MATERIAL = "INVALID_KEY_MATERIAL"
    INVALID_PUBLIC_KEY = "INVALID_PUBLIC_KEY"

    # Instruction errors
    INVALID_INSTRUCTION = "INVALID_INSTRUCTION"


class ErrorResponse(BaseModel):
    """Error body used for transport-level failures."""

    success: bool = False
    error: str


class SolanaApiError(Exception):
    """Base exception for all Solana API errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a new Solana API error.

        Args:
            message: Human-readable error message, returned to the caller
            code: Error code
            details: Additional error details
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary representation."""
        error_dict = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            error_dict["details"] = self.details
        return error_dict


class EncodingError(SolanaApiError):
    """Input could not be decoded from base58 or base64."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_ENCODING, details)


class InvalidKeyMaterialError(SolanaApiError):
    """Decoded bytes are not a usable key or signature."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_KEY_MATERIAL, details)


class InvalidPublicKeyError(SolanaApiError):
    """A named account field is not a valid Solana public key."""

    def __init__(self, label: str, value: Optional[str] = None):
        details = {"field": label}
        if value is not None:
            details["value"] = value
        super().__init__(f"Invalid {label} pubkey", ErrorCode.INVALID_PUBLIC_KEY, details)


class InstructionBuildError(SolanaApiError):
    """The instruction builder rejected its arguments."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_INSTRUCTION, details)
