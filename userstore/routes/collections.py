"""Named collection endpoints (sampler presets, themes)."""

from pathlib import Path

from fastapi import APIRouter, Depends, Response

from userstore.storage import CollectionStore, StoreError
from userstore.users import user_root

from .errors import error_response
from .models import NamedItemBody


def collection_router(store: CollectionStore, route: str) -> APIRouter:
    """Bind list/get/put/delete for one collection under /<route>."""
    router = APIRouter()
    base = f"/{route}"

    @router.get(base)
    async def list_items(root: Path = Depends(user_root)):
        try:
            return await store.list(root)
        except StoreError as e:
            return error_response(e)

    @router.get(base + "/{name}")
    async def get_item(name: str, root: Path = Depends(user_root)):
        try:
            return await store.get(root, name)
        except StoreError as e:
            return error_response(e)

    # POST and PUT are the same upsert
    @router.api_route(base, methods=["POST", "PUT"])
    async def save_item(body: NamedItemBody, root: Path = Depends(user_root)):
        try:
            await store.put(root, body.name, body.preset)
        except StoreError as e:
            return error_response(e)
        return {"success": True}

    @router.delete(base + "/{name}", status_code=204)
    async def delete_item(name: str, root: Path = Depends(user_root)):
        try:
            await store.delete(root, name)
        except StoreError as e:
            return error_response(e)
        return Response(status_code=204)

    return router
