"""
Low-code repository: unwraps workflow client results.
"""

from portfolio.models.results import ErrorResponse, Failure
from portfolio.services.lowcode.client import LowCodeApiService
from portfolio.services.lowcode.schemas import LowCodeProject


class LowCodeRepository:
    """Exposes the workflow list as a bare payload or ErrorResponse."""

    def __init__(self, api_service: LowCodeApiService):
        self._api_service = api_service

    async def get_low_code_projects(self) -> list[LowCodeProject] | ErrorResponse:
        result = await self._api_service.get_projects()
        if isinstance(result, Failure):
            return ErrorResponse(result.error)
        return result.data
