"""Pydantic request/response models for API endpoints."""

from typing import Any

from pydantic import BaseModel


class NamedItemBody(BaseModel):
    """Body for creating or replacing a sampler preset or theme."""

    name: str | None = None
    preset: Any = None


class PluginInfo(BaseModel):
    id: str
    name: str
    description: str
