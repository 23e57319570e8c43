"""Static file handler.

Resolves request paths against a root directory and serves the matching
file, the directory's index.html, or a redirect to the slash-terminated URL.
Any failure declines so a later handler can decide the response.
"""

import logging
from pathlib import Path

from staticfile.core.files import is_regular_file, see_other, serve_file
from staticfile.core.resolve import (
    DeclineIndex,
    RedirectToDirectory,
    ServeIndex,
    candidate_path,
    has_traversal,
    index_path,
    plan_index,
)
from staticfile.core.types import (
    Decline,
    DeclineReason,
    HandlerOutcome,
    RequestContext,
    Terminate,
)
from staticfile.handlers.favicon import Favicon

logger = logging.getLogger(__name__)


class StaticFiles:
    """Serve files from a root directory.

    The root path may be relative or absolute; Path("") serves from the
    current directory. It is not checked at construction, so a missing
    root simply makes every request decline.
    """

    def __init__(self, root_path: str | Path) -> None:
        self._root_path = Path(root_path)

    @property
    def root_path(self) -> Path:
        return self._root_path

    @staticmethod
    def favicon(favicon_path: str | Path) -> Favicon:
        """Create a handler serving a single favicon file."""
        return Favicon(favicon_path)

    async def handle(self, ctx: RequestContext) -> HandlerOutcome:
        """Serve the file matching the request path, if any.

        Args:
            ctx: Request context

        Returns:
            Terminate with the file, index file or redirect response;
            Decline when nothing under the root applies
        """
        path = ctx.path
        if path is None:
            return Decline(DeclineReason.NO_URL)

        if has_traversal(path):
            logger.warning(f"Rejected path with parent segment: {path!r}")
            return Decline(DeclineReason.TRAVERSAL)

        candidate = candidate_path(self._root_path, path)
        # Path() drops the trailing slash; "file.css/" must not match a file
        if not path.endswith("/"):
            try:
                response = serve_file(candidate)
            except OSError:
                pass
            else:
                logger.debug(f"Serving static file at {candidate}.")
                return Terminate(response)

        index = index_path(candidate)
        action = plan_index(path, is_regular_file(index), ctx.original_url)

        match action:
            case DeclineIndex():
                return Decline(DeclineReason.NOT_FOUND)
            case ServeIndex():
                try:
                    response = serve_file(index)
                except OSError as e:
                    logger.debug(f"Failed while trying to serve index.html: {e}")
                    return Decline(DeclineReason.IO_ERROR)
                logger.debug(f"Serving static file at {index}.")
                return Terminate(response)
            case RedirectToDirectory(location=location):
                logger.debug(f"Redirecting {path} to {location}")
                return Terminate(see_other(location))
