"""Configuration module for the Solana API server."""

# Standard library imports
import os
from typing import Any, Callable, Optional, Tuple
from dataclasses import dataclass
from functools import lru_cache

# Third-party library imports
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

VALID_ENVIRONMENTS = ("development", "testing", "staging", "production")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

Validator = Callable[[str], Any]


def get_env_var(key: str, default: Any = None, validator: Optional[Validator] = None) -> Any:
    """Read an environment variable, converting it with ``validator`` when set.

    Raises:
        ValueError: If the validator rejects the value; the message names the variable
    """
    value = os.environ.get(key)
    if value is None or validator is None:
        return default if value is None else value

    try:
        return validator(value)
    except ValueError as e:
        raise ValueError(f"{key}={value!r} is invalid: {e}") from e


def bool_validator(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "y", "on")


def port_validator(value: str) -> int:
    """Parse a TCP port in 1..65535."""
    try:
        port = int(value)
    except ValueError:
        raise ValueError("not an integer") from None
    if not 0 < port <= 65535:
        raise ValueError("port must be between 1 and 65535")
    return port


def choice_validator(choices: Tuple[str, ...], normalize: Callable[[str], str]) -> Validator:
    """Build a validator accepting one of ``choices`` after ``normalize``."""
    def validate(value: str) -> str:
        normalized = normalize(value.strip())
        if normalized not in choices:
            raise ValueError(f"expected one of {', '.join(choices)}")
        return normalized

    return validate


log_level_validator = choice_validator(VALID_LOG_LEVELS, str.upper)
environment_validator = choice_validator(VALID_ENVIRONMENTS, str.lower)


@dataclass
class ServerConfig:
    """Configuration for the server."""

    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def bind_address(self) -> str:
        """Get the bind address for the server.

        Returns:
            Formatted bind address
        """
        return f"{self.host}:{self.port}"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {self.environment}")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}")

        if not 0 < self.port <= 65535:
            raise ValueError(f"Invalid port: {self.port}")


@lru_cache()
def get_server_config() -> ServerConfig:
    """Get server configuration from environment variables.

    Returns:
        ServerConfig instance

    Raises:
        ValueError: If environment variables fail validation
    """
    return ServerConfig(
        host=get_env_var("HOST", "0.0.0.0"),
        port=get_env_var("PORT", 3000, validator=port_validator),
        debug=get_env_var("DEBUG", False, validator=bool_validator),
        environment=get_env_var("ENVIRONMENT", "development", validator=environment_validator),
        log_level=get_env_var("LOG_LEVEL", "INFO", validator=log_level_validator),
    )
