from .actions import (
    get_github_data,
    get_github_raw_file,
    get_github_user_data,
    get_github_user_repos,
    get_low_code_projects,
)

__all__ = [
    "get_github_data",
    "get_github_raw_file",
    "get_github_user_data",
    "get_github_user_repos",
    "get_low_code_projects",
]
