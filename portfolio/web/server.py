"""
Web server setup.
"""

from aiohttp import web

from portfolio.core.config import Settings
from portfolio.core.logging import get_logger
from portfolio.factories.service_factory import ServiceFactory
from portfolio.models.profile import Profile
from portfolio.web.routes import (
    PROFILE_KEY,
    SERVICES_KEY,
    SETTINGS_KEY,
    handle_github_data,
    handle_health,
    handle_home,
    handle_projects,
    handle_raw_file,
)

logger = get_logger(__name__)


def create_web_app(factory: ServiceFactory, profile: Profile | None = None) -> web.Application:
    """
    Build the aiohttp application around a service factory.

    Args:
        factory: Shared service factory
        profile: Portfolio owner, derived from the factory settings if omitted
    """
    settings: Settings = factory.settings

    app = web.Application()
    app[SERVICES_KEY] = factory
    app[SETTINGS_KEY] = settings
    app[PROFILE_KEY] = profile or Profile.from_settings(settings)

    app.router.add_get("/", handle_home)
    app.router.add_get("/healthz", handle_health)
    app.router.add_get("/api/github/{username}", handle_github_data)
    app.router.add_get("/api/projects", handle_projects)
    app.router.add_get("/api/raw/{owner}/{repo}/{branch}/{filepath:.+}", handle_raw_file)
    return app


async def start_server(app: web.Application, host: str = "0.0.0.0", port: int = 8080) -> web.AppRunner:
    """
    Start serving the application.

    Args:
        app: Application from create_web_app
        host: Host to bind to
        port: Port to bind to

    Returns:
        The runner, to be cleaned up on shutdown
    """
    runner = web.AppRunner(app)
    await runner.setup()

    site = web.TCPSite(runner, host, port)
    await site.start()

    logger.info(f"Portfolio server started on {host}:{port}")
    return runner
