"""Favicon handler: serves one fixed file for URLs ending in /favicon."""

import logging
import re
from pathlib import Path

from staticfile.core.files import serve_file
from staticfile.core.types import (
    Decline,
    DeclineReason,
    HandlerOutcome,
    RequestContext,
    Terminate,
)

logger = logging.getLogger(__name__)

FAVICON_PATTERN = re.compile(r"/favicon$")
FAVICON_MAX_AGE = 86400


class Favicon:
    """Serve a single file for favicon requests with a one-day cache lifetime."""

    def __init__(self, favicon_path: str | Path) -> None:
        self._favicon_path = Path(favicon_path)

    @property
    def favicon_path(self) -> Path:
        return self._favicon_path

    async def handle(self, ctx: RequestContext) -> HandlerOutcome:
        if not ctx.is_origin_form:
            return Decline(DeclineReason.UNSUPPORTED_TARGET)

        target_path = ctx.target.split("?", 1)[0]
        if FAVICON_PATTERN.search(target_path) is None:
            return Decline(DeclineReason.NO_MATCH)

        try:
            response = serve_file(self._favicon_path)
        except OSError as e:
            logger.debug(f"Failed to serve favicon {self._favicon_path}: {e}")
            return Decline(DeclineReason.IO_ERROR)

        response.headers["Cache-Control"] = f"max-age={FAVICON_MAX_AGE}"
        return Terminate(response)
