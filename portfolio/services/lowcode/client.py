"""
Client for the n8n webhook that lists published workflows.
"""

import httpx

from portfolio.core.logging import get_logger
from portfolio.models.results import ApiError, ApiResult, Failure, Success, format_failure
from .schemas import LowCodeProject

logger = get_logger(__name__)


class LowCodeApiService:
    """HTTP client for the low-code workflows webhook."""

    def __init__(self, webhook_url: str, timeout: float | None = 10.0):
        self._webhook_url = webhook_url
        self._timeout = timeout

    async def get_projects(self) -> ApiResult[list[LowCodeProject]]:
        """Fetch every workflow exposed by the webhook."""
        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(self._webhook_url)

            if not response.is_success:
                logger.warning("Workflows webhook returned %s", response.status_code)
                return Failure(ApiError("Projects not found", response.status_code))

            return Success(response.json())
        except Exception as e:
            logger.error("Workflows webhook request failed: %s", e)
            return Failure(ApiError(format_failure(e), 500))
