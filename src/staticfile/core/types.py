"""Core type definitions.

Per-request context passed into handlers and the tagged outcome they return.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from aiohttp import web
from yarl import URL


class DeclineReason(Enum):
    """Why a handler left the request to the rest of the chain."""

    NO_URL = "no-url"
    NOT_FOUND = "not-found"
    IO_ERROR = "io-error"
    TRAVERSAL = "traversal"
    UNSUPPORTED_TARGET = "unsupported-target"
    NO_MATCH = "no-match"


@dataclass(frozen=True)
class Terminate:
    """Handler produced the full response; stop the chain."""

    response: web.StreamResponse


@dataclass(frozen=True)
class Decline:
    """Handler did not respond; continue with the next handler."""

    reason: DeclineReason


HandlerOutcome = Terminate | Decline


def extract_path(target: str) -> str | None:
    """Extract the decoded URL path from a raw request target.

    Decoding is left to yarl, as aiohttp does for `request.rel_url`.

    Args:
        target: Request target as it appeared on the request line

    Returns:
        Path without query string, or None for asterisk- and authority-form
        targets that carry no path
    """
    if target.startswith("/"):
        raw_path = target.partition("?")[0].partition("#")[0]
        return URL.build(path=raw_path, encoded=True).path
    if "://" in target:
        return URL(target).path or "/"
    return None


@dataclass(frozen=True)
class RequestContext:
    """Per-request input to a handler.

    The mount prefix and original URL are explicit fields filled in by
    whoever composes the chain, not looked up from shared request state.
    """

    target: str
    path: str | None
    original_url: str | None = None

    @property
    def is_origin_form(self) -> bool:
        return self.target.startswith("/")

    @classmethod
    def from_target(cls, target: str, *, original_url: str | None = None) -> Self:
        return cls(target=target, path=extract_path(target), original_url=original_url)

    @classmethod
    def from_request(
        cls,
        request: web.BaseRequest,
        *,
        path: str | None = None,
        original_url: str | None = None,
    ) -> Self:
        """Build a context from an aiohttp request.

        Args:
            request: Incoming aiohttp request
            path: Sub-path to use instead of the one extracted from the target
            original_url: Full path before a mount prefix was stripped

        Returns:
            RequestContext for the request
        """
        target = request.raw_path
        if path is None:
            path = request.rel_url.path if target.startswith("/") else extract_path(target)
        return cls(target=target, path=path, original_url=original_url)
