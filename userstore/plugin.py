"""Host registration interface: descriptor, init(router) and exit()."""

import logging

from fastapi import APIRouter

from userstore.routes import build_router
from userstore.routes.models import PluginInfo
from userstore.storage import PROFILES, Profile

logger = logging.getLogger(__name__)


class Plugin:
    """One server extension the host loads and mounts under its own router."""

    def __init__(self, profile: Profile) -> None:
        self.profile = profile
        self.info = PluginInfo(
            id=profile.id, name=profile.name, description=profile.description
        )

    def init(self, router: APIRouter) -> None:
        """Attach this plugin's routes to the router the host provides."""
        router.include_router(build_router(self.profile))
        logger.info(f"Plugin '{self.info.id}' initialized")

    def exit(self) -> None:
        pass


PLUGINS: list[Plugin] = [Plugin(profile) for profile in PROFILES]


def get_plugin(plugin_id: str) -> Plugin | None:
    for plugin in PLUGINS:
        if plugin.info.id == plugin_id:
            return plugin
    return None
