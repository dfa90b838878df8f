"""Per-request user directory resolution.

A host that authenticates users sets `request.state.user_root` in its own
middleware. Without one, requests fall back to the default user's directory
under the app's data dir. Roots are never validated here.
"""

from pathlib import Path

from fastapi import Request


def default_user_root(data_dir: Path, user: str) -> Path:
    return data_dir / user


def user_root(request: Request) -> Path:
    """FastAPI dependency returning the caller's ResourceRoot."""
    root = getattr(request.state, "user_root", None)
    if root is not None:
        return Path(root)
    return request.app.state.default_user_root
