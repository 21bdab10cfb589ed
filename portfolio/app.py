"""
Application factory and main entry point.
"""

import asyncio

from portfolio.core.config import settings
from portfolio.core.logging import setup_logging, get_logger
from portfolio.factories.service_factory import ServiceFactory
from portfolio.web.server import create_web_app, start_server

logger = get_logger(__name__)


async def main() -> None:
    """Main application entry point."""
    setup_logging(settings.log_level)
    logger.info(f"Starting portfolio for {settings.github_username}...")

    factory = ServiceFactory(settings)
    app = create_web_app(factory)
    runner = await start_server(app, settings.host, settings.port)

    # Keep running until cancelled
    stop_signal = asyncio.Event()
    try:
        await stop_signal.wait()
    except asyncio.CancelledError:
        pass
    finally:
        await runner.cleanup()
