"""
Home page composition.

Gathers everything the portfolio home page shows: header navigation, the
README rendered in the about section, repository cards, n8n workflows and the
contact footer. The first failing source stops composition and its error is
returned instead of the page.
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Sequence

from portfolio.core.logging import get_logger
from portfolio.factories.service_factory import ServiceFactory
from portfolio.helpers.strings import capitalize_first_letter
from portfolio.lib.actions import get_github_data, get_github_raw_file, get_low_code_projects
from portfolio.models.profile import Profile
from portfolio.models.results import ErrorResponse
from portfolio.services.github.schemas import GithubRepo, RawFileRequest
from portfolio.services.lowcode.schemas import LowCodeProject

logger = get_logger(__name__)

HEADER_SECTIONS = ("About", "Projects", "Contact")


@dataclass(frozen=True)
class NavLink:
    label: str
    href: str


@dataclass(frozen=True)
class Header:
    title: str
    sections: list[NavLink]


@dataclass(frozen=True)
class ProjectCard:
    id: int | None
    name: str
    description: str | None
    language: str | None
    html_url: str


@dataclass(frozen=True)
class WorkflowCard:
    id: str | None
    name: str
    # JSON string handed to the n8n-demo widget
    workflow: str


@dataclass(frozen=True)
class ContactLink:
    label: str
    url: str
    icon: str
    icon_dark: str


@dataclass(frozen=True)
class Footer:
    profile_name: str
    github_url: str
    contacts: list[ContactLink] = field(default_factory=list)


@dataclass(frozen=True)
class HomePage:
    header: Header
    about: str
    projects: list[ProjectCard]
    low_code_projects: list[WorkflowCard]
    footer: Footer

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


def build_header(title: str, sections: Sequence[str] = HEADER_SECTIONS) -> Header:
    """Header with one in-page anchor per section."""
    links = [NavLink(label=section, href=f"#{section.strip().lower()}") for section in sections]
    return Header(title=title, sections=links)


def build_project_cards(repos: list[GithubRepo]) -> list[ProjectCard]:
    return [
        ProjectCard(
            id=repo.get("id"),
            name=repo.get("name", ""),
            description=repo.get("description"),
            language=repo.get("language"),
            html_url=repo.get("html_url", ""),
        )
        for repo in repos
    ]


def build_workflow_cards(projects: list[LowCodeProject]) -> list[WorkflowCard]:
    return [
        WorkflowCard(
            id=project.get("id"),
            name=project.get("name", ""),
            workflow=json.dumps(project),
        )
        for project in projects
    ]


def build_footer(profile: Profile) -> Footer:
    contacts = [
        ContactLink(
            label=capitalize_first_letter(name),
            url=channel.url,
            icon=channel.icon,
            icon_dark=channel.icon_dark,
        )
        for name, channel in profile.contact.items()
    ]
    github = profile.contact.get("github")
    github_url = github.url if github else f"https://github.com/{profile.username}"
    return Footer(profile_name=profile.profile_name, github_url=github_url, contacts=contacts)


async def build_home_page(
    factory: ServiceFactory,
    profile: Profile,
    *,
    readme_branch: str = "main",
    readme_filepath: str = "README.md",
) -> HomePage | ErrorResponse:
    """
    Fetch and assemble the home page for ``profile``.

    Args:
        factory: Source of the repositories
        profile: Portfolio owner
        readme_branch: Branch of the profile README repository
        readme_filepath: README path inside that repository

    Returns:
        HomePage, or the ErrorResponse of the first source that failed
    """
    github_data = await get_github_data(factory, profile.username)
    if isinstance(github_data, ErrorResponse):
        logger.warning(f"GitHub data unavailable: {github_data.error.message}")
        return github_data

    about = await get_github_raw_file(
        factory,
        RawFileRequest(
            owner=profile.username,
            repo=profile.username,
            branch=readme_branch,
            filepath=readme_filepath,
        ),
    )
    if not isinstance(about, str):
        logger.warning(f"Profile README unavailable: {about.error.message}")
        return about

    low_code_projects = await get_low_code_projects(factory)
    if isinstance(low_code_projects, ErrorResponse):
        logger.warning(f"Low-code projects unavailable: {low_code_projects.error.message}")
        return low_code_projects

    return HomePage(
        header=build_header(profile.profile_name),
        about=about,
        projects=build_project_cards(github_data.get("repos", [])),
        low_code_projects=build_workflow_cards(low_code_projects),
        footer=build_footer(profile),
    )
