"""Handler chain and mount prefix composition.

Runs handlers in order until one terminates, and plugs into aiohttp as a
middleware so a fully declined request falls through to normal routing.
"""

from collections.abc import Sequence
from typing import Protocol

from aiohttp import web
from aiohttp.typedefs import Handler as AiohttpHandler, Middleware

from staticfile.core.types import HandlerOutcome, RequestContext, Terminate


class Handler(Protocol):
    async def handle(self, ctx: RequestContext) -> HandlerOutcome: ...


def strip_prefix(prefix: str, path: str) -> str | None:
    """Strip a mount prefix from a path on a segment boundary.

    Args:
        prefix: Mount prefix without trailing slash (e.g., "/static")
        path: Decoded request path

    Returns:
        Sub-path starting with "/", "" for the mount root itself, or None if
        the path is outside the mount
    """
    if not prefix:
        return path
    if path == prefix:
        return ""
    if path.startswith(prefix + "/"):
        return path[len(prefix) :]
    return None


class HandlerChain:
    """Ordered handlers, optionally mounted under a path prefix.

    Exceptions raised by a handler are not caught here; aiohttp turns them
    into a 500 response.
    """

    def __init__(self, handlers: Sequence[Handler], *, prefix: str = "") -> None:
        """Initialize the chain.

        Args:
            handlers: Handlers to run, in order
            prefix: Mount prefix; requests outside it are declined wholesale
        """
        self._handlers = tuple(handlers)
        self._prefix = prefix.rstrip("/")

    @property
    def handlers(self) -> tuple[Handler, ...]:
        return self._handlers

    @property
    def prefix(self) -> str:
        return self._prefix

    def context_for(self, request: web.BaseRequest) -> RequestContext | None:
        """Build the handler context, or None when the request is outside the mount."""
        ctx = RequestContext.from_request(request)
        if not self._prefix or ctx.path is None:
            return ctx
        sub_path = strip_prefix(self._prefix, ctx.path)
        if sub_path is None:
            return None
        return RequestContext(target=ctx.target, path=sub_path, original_url=ctx.path)

    async def dispatch(self, ctx: RequestContext) -> web.StreamResponse | None:
        """Run handlers until one terminates.

        Returns:
            Response of the terminating handler, or None if all declined
        """
        for handler in self._handlers:
            outcome = await handler.handle(ctx)
            if isinstance(outcome, Terminate):
                return outcome.response
        return None

    async def run(self, request: web.BaseRequest) -> web.StreamResponse | None:
        ctx = self.context_for(request)
        if ctx is None:
            return None
        return await self.dispatch(ctx)

    @property
    def middleware(self) -> Middleware:
        """aiohttp middleware running this chain ahead of the router."""

        @web.middleware
        async def handler_chain_middleware(
            request: web.Request,
            handler: AiohttpHandler,
        ) -> web.StreamResponse:
            response = await self.run(request)
            if response is None:
                return await handler(request)
            return response

        return handler_chain_middleware
