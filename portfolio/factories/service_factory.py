"""
Service factory holding one repository instance per kind.
"""

from portfolio.core.config import Settings, settings as default_settings
from portfolio.core.logging import get_logger
from portfolio.repositories.github import GithubRepository
from portfolio.repositories.lowcode import LowCodeRepository
from portfolio.services.github.client import GithubApiService
from portfolio.services.lowcode.client import LowCodeApiService

logger = get_logger(__name__)


class ServiceFactory:
    """
    Lazily builds and caches the repositories.

    One factory is created at startup and passed to whatever needs it.
    Repeated ``get_*`` calls return the same instance until ``set_*`` or
    ``reset()`` replaces it. Not thread-safe; meant for a single event loop.
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings if settings is not None else default_settings
        self._github_repository: GithubRepository | None = None
        self._low_code_repository: LowCodeRepository | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_github_repository(self) -> GithubRepository:
        """Return the GitHub repository, building it on first use."""
        if self._github_repository is None:
            logger.debug("Creating GitHub repository")
            api_service = GithubApiService(
                base_url=self._settings.github_api_url,
                raw_base_url=self._settings.github_raw_url,
                timeout=self._settings.http_timeout,
            )
            self._github_repository = GithubRepository(api_service)
        return self._github_repository

    def get_low_code_repository(self) -> LowCodeRepository:
        """Return the low-code repository, building it on first use."""
        if self._low_code_repository is None:
            logger.debug("Creating low-code repository")
            api_service = LowCodeApiService(
                webhook_url=self._settings.low_code_webhook_url,
                timeout=self._settings.http_timeout,
            )
            self._low_code_repository = LowCodeRepository(api_service)
        return self._low_code_repository

    def set_github_repository(self, repository: GithubRepository) -> None:
        """Replace the GitHub repository, e.g. with a test double."""
        self._github_repository = repository

    def set_low_code_repository(self, repository: LowCodeRepository) -> None:
        """Replace the low-code repository, e.g. with a test double."""
        self._low_code_repository = repository

    def reset(self) -> None:
        """Drop both repositories so the next get rebuilds them."""
        self._github_repository = None
        self._low_code_repository = None
