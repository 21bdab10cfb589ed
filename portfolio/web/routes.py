"""
HTTP handlers exposing the portfolio data as JSON.
"""

from aiohttp import web

from portfolio.core.config import Settings
from portfolio.core.logging import get_logger
from portfolio.factories.service_factory import ServiceFactory
from portfolio.lib.actions import get_github_data, get_github_raw_file, get_low_code_projects
from portfolio.models.profile import Profile
from portfolio.models.results import ErrorResponse
from portfolio.pages.home import build_home_page
from portfolio.services.github.schemas import RawFileRequest

logger = get_logger(__name__)

SERVICES_KEY = web.AppKey("services", ServiceFactory)
PROFILE_KEY = web.AppKey("profile", Profile)
SETTINGS_KEY = web.AppKey("settings", Settings)


def error_response(result: ErrorResponse) -> web.Response:
    """Serialize an ErrorResponse with its own status code."""
    return web.json_response(result.to_dict(), status=result.error.status)


async def handle_home(request: web.Request) -> web.Response:
    """Return the assembled home page."""
    app = request.app
    settings = app[SETTINGS_KEY]
    page = await build_home_page(
        app[SERVICES_KEY],
        app[PROFILE_KEY],
        readme_branch=settings.readme_branch,
        readme_filepath=settings.readme_filepath,
    )
    if isinstance(page, ErrorResponse):
        return error_response(page)
    return web.json_response(page.to_dict())


async def handle_github_data(request: web.Request) -> web.Response:
    """Return a user's profile with its repositories."""
    username = request.match_info["username"]
    result = await get_github_data(request.app[SERVICES_KEY], username)
    if isinstance(result, ErrorResponse):
        return error_response(result)
    return web.json_response(result)


async def handle_raw_file(request: web.Request) -> web.Response:
    """Return a repository file as plain text."""
    file_data = RawFileRequest(
        owner=request.match_info["owner"],
        repo=request.match_info["repo"],
        branch=request.match_info["branch"],
        filepath=request.match_info["filepath"],
    )
    result = await get_github_raw_file(request.app[SERVICES_KEY], file_data)
    if isinstance(result, ErrorResponse):
        return error_response(result)
    return web.Response(text=result, content_type="text/plain")


async def handle_projects(request: web.Request) -> web.Response:
    """Return the published n8n workflows."""
    result = await get_low_code_projects(request.app[SERVICES_KEY])
    if isinstance(result, ErrorResponse):
        return error_response(result)
    return web.json_response(result)


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})
