import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from tinymce_field import __version__
from tinymce_field.api.deps import get_rules, get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Fail fast on an unreadable plugin config
    try:
        get_rules(settings)
        logger.info("Plugin config loaded from %s", settings.rules_path)
    except Exception as e:
        logger.critical("Plugin config load failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="TinyMCE Field API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from tinymce_field.api.routes import field  # noqa: E402

app.include_router(field.router, prefix="/api/field", tags=["Field"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    return {"status": "ok", "version": __version__}
