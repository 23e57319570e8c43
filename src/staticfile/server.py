"""aiohttp server for Staticfile.

Application factory wiring the favicon and static file handlers into a
handler chain, with a plain 404 for whatever the chain declines.
"""

from aiohttp import web

from staticfile.app_keys import chain_key, config_key
from staticfile.chain import Handler, HandlerChain
from staticfile.config import Config
from staticfile.handlers import StaticFiles


def build_chain(config: Config) -> HandlerChain:
    """Build the handler chain described by the configuration.

    Args:
        config: Application configuration

    Returns:
        Chain running the favicon handler (if configured), then static files
    """
    handlers: list[Handler] = []
    if config.favicon is not None:
        handlers.append(StaticFiles.favicon(config.favicon.path))
    handlers.append(StaticFiles(config.static.root_dir))
    return HandlerChain(handlers, prefix=config.static.prefix)


async def not_found(request: web.Request) -> web.Response:
    """Last handler for requests every earlier handler declined."""
    return web.Response(status=404, text="Not Found")


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    chain = build_chain(config)
    app = web.Application(middlewares=[chain.middleware])

    app[config_key] = config
    app[chain_key] = chain

    app.router.add_route("*", "/{path:.*}", not_found)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
