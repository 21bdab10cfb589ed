"""
Data schemas for GitHub API payloads.

User and repository payloads are passed through as the JSON GitHub returns;
the TypedDicts only name the fields the portfolio reads.
"""

from dataclasses import dataclass
from typing import TypedDict


class GithubRepo(TypedDict, total=False):
    """Repository entry from /users/{username}/repos."""

    id: int
    name: str
    full_name: str
    description: str | None
    language: str | None
    html_url: str
    stargazers_count: int
    forks_count: int
    fork: bool
    updated_at: str


class GithubUserData(TypedDict, total=False):
    """Profile from /users/{username}, optionally extended with its repos."""

    login: str
    name: str | None
    avatar_url: str
    html_url: str
    bio: str | None
    location: str | None
    blog: str | None
    public_repos: int
    followers: int
    following: int
    repos: list[GithubRepo]


@dataclass(frozen=True)
class RawFileRequest:
    """Location of a file on raw.githubusercontent.com."""

    owner: str = ""
    repo: str = ""
    branch: str = ""
    filepath: str = ""

    def is_complete(self) -> bool:
        """True when every path segment is non-empty."""
        return all((self.owner, self.repo, self.branch, self.filepath))

    def to_path(self) -> str:
        """Path relative to the raw content host."""
        return f"{self.owner}/{self.repo}/{self.branch}/{self.filepath}"

