import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI

from userstore.plugin import PLUGINS
from userstore.routes.models import PluginInfo
from userstore.users import default_user_root

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_USER = "default-user"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    for plugin in PLUGINS:
        plugin.exit()


def create_app(data_dir: Path | None = None, user: str | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    user = user or os.getenv("DEFAULT_USER", DEFAULT_USER)

    app = FastAPI(title="User Store", lifespan=lifespan)
    # Stores never create the user root; the host does.
    app.state.default_user_root = default_user_root(resolved, user)
    app.state.default_user_root.mkdir(parents=True, exist_ok=True)

    api = APIRouter()

    @api.get("/health")
    async def health():
        """Health check."""
        return {"status": "ok"}

    @api.get("/plugins", response_model=list[PluginInfo])
    async def list_plugins():
        """Descriptors of all loaded plugins."""
        return [plugin.info for plugin in PLUGINS]

    for plugin in PLUGINS:
        plugin_router = APIRouter()
        plugin.init(plugin_router)
        api.include_router(plugin_router, prefix=f"/plugins/{plugin.info.id}")

    app.include_router(api, prefix="/api")
    logger.info(f"Serving user data from {app.state.default_user_root}")
    return app


# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
