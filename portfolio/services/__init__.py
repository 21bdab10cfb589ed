# Services module - external API integrations
from .github import GithubApiService
from .lowcode import LowCodeApiService

__all__ = ["GithubApiService", "LowCodeApiService"]
