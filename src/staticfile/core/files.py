"""File-serve and status-write primitives on top of aiohttp responses."""

import stat
from pathlib import Path

from aiohttp import web


def is_regular_file(path: Path) -> bool:
    """Stat-based check that never raises."""
    try:
        return stat.S_ISREG(path.stat().st_mode)
    except (OSError, ValueError):
        return False


def serve_file(path: Path) -> web.FileResponse:
    """Build a 200 response streaming the file at path.

    The file is opened once up front so that a missing, non-regular or
    unreadable file is reported here rather than after headers are sent.

    Args:
        path: File to serve

    Returns:
        FileResponse for the file; content type is guessed by aiohttp

    Raises:
        FileNotFoundError: If the path does not exist
        IsADirectoryError: If the path is a directory
        PermissionError: If the file cannot be read
        OSError: For any other stat or open failure
    """
    try:
        st = path.stat()
    except ValueError as e:
        # Embedded NUL bytes in the decoded URL
        raise FileNotFoundError(f"Invalid path: {path!r}") from e
    if stat.S_ISDIR(st.st_mode):
        raise IsADirectoryError(f"Is a directory: {path}")
    if not stat.S_ISREG(st.st_mode):
        raise FileNotFoundError(f"Not a regular file: {path}")
    with path.open("rb"):
        pass
    return web.FileResponse(path)


def see_other(location: str) -> web.Response:
    """Build a 303 redirect with a short plain-text body."""
    return web.Response(
        status=303,
        text=f"Redirecting to {location}",
        headers={"Location": location},
    )
