# GitHub services - GitHub REST API and raw content
from .client import GithubApiService
from .schemas import GithubRepo, GithubUserData, RawFileRequest

__all__ = ["GithubApiService", "GithubRepo", "GithubUserData", "RawFileRequest"]
