"""
GitHub API client for profile, repository and raw file lookups.
"""

import httpx

from portfolio.core.logging import get_logger
from portfolio.models.results import ApiError, ApiResult, Failure, Success, format_failure
from .schemas import GithubRepo, GithubUserData, RawFileRequest

logger = get_logger(__name__)

USERNAME_REQUIRED = "Username is required"
FILE_FIELDS_REQUIRED = "Owner, repo, branch and filepath are required"


class GithubApiService:
    """Client for the public GitHub REST API and raw content host."""

    BASE_URL = "https://api.github.com"
    RAW_BASE_URL = "https://raw.githubusercontent.com"

    def __init__(
        self,
        base_url: str = BASE_URL,
        raw_base_url: str = RAW_BASE_URL,
        timeout: float | None = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._raw_base_url = raw_base_url.rstrip("/")
        self._timeout = timeout

    async def get_user_data(self, username: str) -> ApiResult[GithubUserData]:
        """
        Fetch a user's public profile.

        Args:
            username: GitHub login

        Returns:
            Success with the profile JSON, or Failure. Upstream errors keep
            the upstream status and carry the error body as details.
        """
        if not username:
            return Failure(ApiError(USERNAME_REQUIRED, 400))

        url = f"{self._base_url}/users/{username}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(url)

            if not response.is_success:
                logger.warning(f"GitHub user lookup for {username} returned {response.status_code}")
                return Failure(
                    ApiError("User not found", response.status_code, details=response.json())
                )

            return Success(response.json())
        except Exception as e:
            logger.error(f"GitHub user lookup for {username} failed: {e}")
            return Failure(ApiError(format_failure(e), 500))

    async def get_user_repos(self, username: str) -> ApiResult[list[GithubRepo]]:
        """
        Fetch a user's public repositories.

        Args:
            username: GitHub login

        Returns:
            Success with the repository list, or Failure
        """
        if not username:
            return Failure(ApiError(USERNAME_REQUIRED, 400))

        url = f"{self._base_url}/users/{username}/repos"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(url)

            if not response.is_success:
                logger.warning(f"GitHub repos lookup for {username} returned {response.status_code}")
                return Failure(ApiError("User not found", response.status_code))

            return Success(response.json())
        except Exception as e:
            logger.error(f"GitHub repos lookup for {username} failed: {e}")
            return Failure(ApiError(format_failure(e), 500))

    async def get_raw_file(self, file_data: RawFileRequest) -> ApiResult[str]:
        """
        Fetch a file's raw text from a repository branch.

        Args:
            file_data: Owner, repo, branch and path of the file

        Returns:
            Success with the unparsed body text, or Failure
        """
        if not file_data.is_complete():
            return Failure(ApiError(FILE_FIELDS_REQUIRED, 400))

        url = f"{self._raw_base_url}/{file_data.to_path()}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
                response = await client.get(url)

            if not response.is_success:
                logger.warning(f"Raw file {file_data.to_path()} returned {response.status_code}")
                return Failure(ApiError("File not found", response.status_code))

            return Success(response.text)
        except Exception as e:
            logger.error(f"Raw file {file_data.to_path()} failed: {e}")
            return Failure(ApiError(format_failure(e), 500))
