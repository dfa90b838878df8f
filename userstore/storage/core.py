"""Store errors, name checks, and JSON file helpers."""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Callable, TypeVar

T = TypeVar("T")

JSON_SUFFIX = ".json"


class StoreError(Exception):
    """Base class for store outcomes the HTTP layer turns into responses."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(StoreError):
    """The named file does not exist."""


class InvalidItem(StoreError):
    """Caller-supplied data failed a precondition. Raised before any I/O."""


class StoreIOError(StoreError):
    """Any filesystem or parse failure other than a missing file."""


def check_name(name: str) -> None:
    """Reject names that would escape the collection directory.

    "temp-0.7", "v1..2" → ok; "..", "../secrets", "a/b", "x.json" → InvalidItem
    """
    if name in (".", ".."):
        raise InvalidItem("Invalid name")
    if any(ch in name for ch in ("/", "\\", "\0")):
        raise InvalidItem("Invalid name")
    if name.endswith(JSON_SUFFIX):
        raise InvalidItem("Invalid name")


def item_path(directory: Path, name: str) -> Path:
    return directory / f"{name}{JSON_SUFFIX}"


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def write_json(path: Path, data: Any) -> None:
    """Write data as 2-space indented JSON, replacing the file atomically.

    Each writer gets its own temp file next to the target, so concurrent
    writers of the same path race only on the final rename (last one wins).
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


async def run_io(func: Callable[..., T], *args: Any) -> T:
    """Run blocking filesystem work off the event loop."""
    return await asyncio.to_thread(func, *args)
