"""Directory of named JSON documents per user: one <name>.json file per item.

Membership is exactly the set of regular *.json files directly inside the
collection directory. The directory is created on first put; reading or
listing a root without it behaves like an empty collection.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .core import (
    JSON_SUFFIX,
    InvalidItem,
    NotFound,
    StoreIOError,
    check_name,
    item_path,
    read_json,
    run_io,
    write_json,
)


class CollectionStore:
    def __init__(self, dirname: str, label: str, require_preset: bool = False) -> None:
        self.dirname = dirname
        self.label = label  # singular noun used in messages, e.g. "preset"
        self.require_preset = require_preset

    def directory(self, root: Path) -> Path:
        return root / self.dirname

    # ------------------------------------------------------------------
    # Blocking implementations
    # ------------------------------------------------------------------

    def _list(self, root: Path) -> list[dict[str, Any]]:
        base = self.directory(root)
        try:
            entries = sorted(base.iterdir())
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StoreIOError(f"Failed to read {self.label}s") from e

        items: list[dict[str, Any]] = []
        for path in entries:
            name = path.name[: -len(JSON_SUFFIX)]
            if not path.name.endswith(JSON_SUFFIX) or not name:
                continue
            if path.is_symlink() or not path.is_file():
                continue
            try:
                check_name(name)
            except InvalidItem:
                continue  # would not round-trip through get/delete
            try:
                preset = read_json(path)
            except FileNotFoundError:
                continue  # deleted while listing
            except (OSError, json.JSONDecodeError) as e:
                raise StoreIOError(f"Failed to read {self.label}s") from e
            items.append({"name": name, "preset": preset})
        return items

    def _get(self, root: Path, name: str) -> dict[str, Any]:
        check_name(name)
        try:
            preset = read_json(item_path(self.directory(root), name))
        except FileNotFoundError:
            raise NotFound(f"{self.label.capitalize()} not found")
        except (OSError, json.JSONDecodeError) as e:
            raise StoreIOError(f"Failed to read {self.label}") from e
        return {"name": name, "preset": preset}

    def _put(self, root: Path, name: str, preset: Any) -> None:
        base = self.directory(root)
        try:
            base.mkdir(parents=True, exist_ok=True)
            write_json(item_path(base, name), preset)
        except (OSError, TypeError, ValueError) as e:
            raise StoreIOError(f"Failed to save {self.label}") from e

    def _delete(self, root: Path, name: str) -> None:
        check_name(name)
        try:
            item_path(self.directory(root), name).unlink()
        except FileNotFoundError:
            raise NotFound(f"{self.label.capitalize()} not found")
        except OSError as e:
            raise StoreIOError(f"Failed to delete {self.label}") from e

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, name: str | None, preset: Any) -> None:
        """Check put preconditions. Never touches the filesystem."""
        if self.require_preset:
            if not name or preset in (None, False, "", 0):
                raise InvalidItem("Both name and preset are required")
        elif not name:
            raise InvalidItem("name is required")
        check_name(name)

    async def list(self, root: Path) -> list[dict[str, Any]]:
        """All items as [{"name", "preset"}]. Sorted by filename."""
        return await run_io(self._list, root)

    async def get(self, root: Path, name: str) -> dict[str, Any]:
        return await run_io(self._get, root, name)

    async def put(self, root: Path, name: str | None, preset: Any) -> None:
        """Create or fully replace an item."""
        self.validate(name, preset)
        await run_io(self._put, root, name, preset)

    async def delete(self, root: Path, name: str) -> None:
        await run_io(self._delete, root, name)
