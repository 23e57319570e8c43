"""Staticfile - static file serving handlers for aiohttp."""

from staticfile.chain import HandlerChain
from staticfile.core.types import (
    Decline,
    DeclineReason,
    HandlerOutcome,
    RequestContext,
    Terminate,
)
from staticfile.handlers import Favicon, StaticFiles

__all__ = [
    "Decline",
    "DeclineReason",
    "Favicon",
    "HandlerChain",
    "HandlerOutcome",
    "RequestContext",
    "StaticFiles",
    "Terminate",
]
