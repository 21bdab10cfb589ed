"""
GitHub repository: composes API client calls into portfolio payloads.
"""

import asyncio

from portfolio.core.logging import get_logger
from portfolio.models.results import ApiError, ErrorResponse, Failure, format_failure
from portfolio.services.github.client import USERNAME_REQUIRED, GithubApiService
from portfolio.services.github.schemas import GithubRepo, GithubUserData, RawFileRequest

logger = get_logger(__name__)


class GithubRepository:
    """Unwraps GitHub client results into bare payloads or ErrorResponse."""

    def __init__(self, api_service: GithubApiService):
        self._api_service = api_service

    async def get_github_data(self, username: str) -> GithubUserData | ErrorResponse:
        """
        Fetch profile and repositories concurrently and merge them.

        The profile error wins over the repositories error when both fail.

        Returns:
            Profile dict with a ``repos`` key, or ErrorResponse
        """
        if not username:
            return ErrorResponse(ApiError(USERNAME_REQUIRED, 400))

        try:
            user_data, user_repos = await asyncio.gather(
                self.get_github_user_data(username),
                self.get_github_user_repos(username),
            )

            if isinstance(user_data, ErrorResponse):
                return user_data

            if isinstance(user_repos, ErrorResponse):
                return user_repos

            return {**user_data, "repos": user_repos}
        except Exception as e:
            logger.exception(f"Failed to combine GitHub data for {username}")
            return ErrorResponse(ApiError(format_failure(e), 500))

    async def get_github_user_data(self, username: str) -> GithubUserData | ErrorResponse:
        result = await self._api_service.get_user_data(username)
        if isinstance(result, Failure):
            return ErrorResponse(result.error)
        return result.data

    async def get_github_user_repos(self, username: str) -> list[GithubRepo] | ErrorResponse:
        result = await self._api_service.get_user_repos(username)
        if isinstance(result, Failure):
            return ErrorResponse(result.error)
        return result.data

    async def get_github_raw_file(self, file_data: RawFileRequest) -> str | ErrorResponse:
        result = await self._api_service.get_raw_file(file_data)
        if isinstance(result, Failure):
            return ErrorResponse(result.error)
        return result.data
