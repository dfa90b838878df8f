"""FastAPI endpoints for one plugin profile.

Endpoint groups: settings (single document), the sampler preset collection
(route name depends on the profile) and themes. Every handler makes exactly
one store call and answers with JSON, or 204 for a successful delete. Store
errors become {"error": ...} bodies with 404/400/500.
"""

from fastapi import APIRouter

from userstore.storage import Profile

from .collections import collection_router
from .settings import settings_router


def build_router(profile: Profile) -> APIRouter:
    router = APIRouter()
    router.include_router(settings_router(profile.settings))
    router.include_router(collection_router(profile.presets, profile.preset_route))
    router.include_router(collection_router(profile.themes, profile.theme_route))
    return router
