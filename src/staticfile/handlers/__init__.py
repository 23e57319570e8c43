"""Request handlers."""

from staticfile.handlers.favicon import Favicon
from staticfile.handlers.static import StaticFiles

__all__ = ["Favicon", "StaticFiles"]
