"""
Base service class for Solana API services.
"""

import logging
from typing import Optional


class BaseService:
    """
    Base service class with a per-class logger.

    Services hold no request state, so one instance can serve every request.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the base service.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(f"solana_api.services.{self.__class__.__name__}")
