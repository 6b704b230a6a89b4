"""Liveness endpoint.

Answers GET / so uptime monitors can keep the hosting container awake and
tell whether the bot process is running.
"""

from aiohttp import web

from fsops.core.logging_system import get_logger

logger = get_logger(__name__)

ALIVE_MESSAGE = "FS Operations Bot is alive!"


async def handle_root(request: web.Request) -> web.Response:
    """Report that the process is alive."""
    return web.Response(text=ALIVE_MESSAGE)


def create_app() -> web.Application:
    """Create the liveness web application."""
    app = web.Application()
    app.router.add_get("/", handle_root)
    return app


async def run_liveness_server(host: str = "0.0.0.0", port: int = 5000) -> web.AppRunner:
    """Start the liveness server in the running event loop.

    Args:
        host: Interface to bind.
        port: TCP port.

    Returns:
        The AppRunner; call cleanup() on it to stop the server.
    """
    runner = web.AppRunner(create_app())
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info("Liveness server running on %s:%d", host, port)
    return runner
