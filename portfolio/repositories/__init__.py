# Repositories - normalised access to external data
from .github import GithubRepository
from .lowcode import LowCodeRepository

__all__ = ["GithubRepository", "LowCodeRepository"]
