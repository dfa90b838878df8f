"""Settings document endpoints."""

from pathlib import Path
from typing import Any

from fastapi import APIRouter, Body, Depends

from userstore.storage import SettingsStore, StoreError
from userstore.users import user_root

from .errors import error_response


def settings_router(store: SettingsStore) -> APIRouter:
    router = APIRouter()

    @router.get("/settings")
    async def get_settings(root: Path = Depends(user_root)):
        """Get the user's settings document ({} if never saved)."""
        try:
            return await store.read(root)
        except StoreError as e:
            return error_response(e)

    @router.post("/settings")
    async def save_settings(body: Any = Body(...), root: Path = Depends(user_root)):
        """Replace the user's settings document with the request body."""
        try:
            await store.write(root, body)
        except StoreError as e:
            return error_response(e)
        return {"success": True}

    return router
