"""
Public async entry points backed by the service factory.
"""

from portfolio.factories.service_factory import ServiceFactory
from portfolio.models.results import ErrorResponse
from portfolio.services.github.schemas import GithubRepo, GithubUserData, RawFileRequest
from portfolio.services.lowcode.schemas import LowCodeProject


async def get_github_data(factory: ServiceFactory, username: str) -> GithubUserData | ErrorResponse:
    """Get a user's profile merged with its repositories."""
    return await factory.get_github_repository().get_github_data(username)


async def get_github_user_data(factory: ServiceFactory, username: str) -> GithubUserData | ErrorResponse:
    """Get a user's profile."""
    return await factory.get_github_repository().get_github_user_data(username)


async def get_github_user_repos(factory: ServiceFactory, username: str) -> list[GithubRepo] | ErrorResponse:
    """Get a user's public repositories."""
    return await factory.get_github_repository().get_github_user_repos(username)


async def get_github_raw_file(factory: ServiceFactory, file_data: RawFileRequest) -> str | ErrorResponse:
    """Get a repository file as text."""
    return await factory.get_github_repository().get_github_raw_file(file_data)


async def get_low_code_projects(factory: ServiceFactory) -> list[LowCodeProject] | ErrorResponse:
    """Get the published n8n workflows."""
    return await factory.get_low_code_repository().get_low_code_projects()
