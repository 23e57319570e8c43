"""Path-resolution policy for static file serving.

Pure functions: nothing here touches the filesystem. The handler feeds the
results of its own filesystem queries into `plan_index`, which keeps the
index/redirect decision testable without a server or a directory tree.
"""

from dataclasses import dataclass
from pathlib import Path

from yarl import URL

INDEX_FILENAME = "index.html"


@dataclass(frozen=True)
class ServeIndex:
    """Serve the directory's index file in place."""


@dataclass(frozen=True)
class RedirectToDirectory:
    """Redirect the client to the slash-terminated form of the URL."""

    location: str


@dataclass(frozen=True)
class DeclineIndex:
    """No index file; leave the request to the next handler."""


IndexAction = ServeIndex | RedirectToDirectory | DeclineIndex


def candidate_path(root: Path, path: str) -> Path:
    """Join a request path onto the root directory.

    The request path is always anchored with "./" so it is treated as
    relative: "/.hidden" becomes root/.hidden, never "root.hidden", and
    "//etc" stays under root.

    Args:
        root: Directory files are served from
        path: Decoded URL path (e.g., "/docs/guide.html")

    Returns:
        Filesystem path of the requested file
    """
    return root / ("./" + path)


def index_path(candidate: Path) -> Path:
    return candidate / INDEX_FILENAME


def ends_with_slash(path: str) -> bool:
    """Check whether the path is directory-style.

    An empty path is the root of the mount and counts as "/".
    """
    return path == "" or path.endswith("/")


def has_traversal(path: str) -> bool:
    """Check whether any path segment climbs to a parent directory."""
    return ".." in path.replace("\\", "/").split("/")


def redirect_target(path: str, original_url: str | None) -> str:
    """Compute the Location for a trailing-slash redirect.

    The original URL, when a mount supplied one, wins over the sub-path so
    the client is sent to the full URL it asked for. Both are decoded paths;
    the result is percent-encoded so "?", "#" or CR/LF in a directory name
    stay part of the path.
    """
    base = original_url if original_url is not None else path
    return URL.build(path=base).raw_path + "/"


def plan_index(path: str, index_is_file: bool, original_url: str | None) -> IndexAction:
    """Decide what to do once the direct file lookup has failed.

    The trailing-slash check applies to the URL the client sees: the
    original URL when mounted, so the mount root "/static" redirects to
    "/static/" even though its sub-path is empty.

    Args:
        path: Decoded URL path (sub-path when mounted)
        index_is_file: Whether candidate/index.html is a regular file
        original_url: Full path before mount prefix stripping, if any

    Returns:
        Action for the handler to carry out
    """
    if not index_is_file:
        return DeclineIndex()
    client_path = original_url if original_url is not None else path
    if ends_with_slash(client_path):
        return ServeIndex()
    # Serving index.html at a non-slash URL would break relative links in it
    return RedirectToDirectory(location=redirect_target(path, original_url))
