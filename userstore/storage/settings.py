"""Single settings document per user (missing file reads as {})."""

import json
from pathlib import Path
from typing import Any

from .core import StoreIOError, read_json, run_io, write_json


class SettingsStore:
    def __init__(self, filename: str) -> None:
        self.filename = filename

    def path(self, root: Path) -> Path:
        return root / self.filename

    def _read(self, root: Path) -> Any:
        try:
            return read_json(self.path(root))
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            raise StoreIOError("Failed to read settings") from e

    def _write(self, root: Path, value: Any) -> None:
        # The root is never created here; it belongs to the host.
        try:
            write_json(self.path(root), value)
        except (OSError, TypeError, ValueError) as e:
            raise StoreIOError("Failed to save settings") from e

    async def read(self, root: Path) -> Any:
        return await run_io(self._read, root)

    async def write(self, root: Path, value: Any) -> None:
        await run_io(self._write, root, value)
