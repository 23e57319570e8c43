"""Core types, resolution policy and file primitives."""

from staticfile.core.files import is_regular_file, see_other, serve_file
from staticfile.core.resolve import (
    DeclineIndex,
    IndexAction,
    RedirectToDirectory,
    ServeIndex,
    plan_index,
)
from staticfile.core.types import (
    Decline,
    DeclineReason,
    HandlerOutcome,
    RequestContext,
    Terminate,
)

__all__ = [
    "Decline",
    "DeclineIndex",
    "DeclineReason",
    "HandlerOutcome",
    "IndexAction",
    "RedirectToDirectory",
    "RequestContext",
    "ServeIndex",
    "Terminate",
    "is_regular_file",
    "plan_index",
    "see_other",
    "serve_file",
]
