import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from accessaudit.api_routers.v1 import api_router
from accessaudit.features.health.routes.health import router as health_router
from accessaudit.platform.config import Settings, get_settings
from accessaudit.platform.exceptions import add_exception_handlers
from accessaudit.platform.logger import get_logger
from accessaudit.platform.storage.base import Store
from accessaudit.platform.storage.factory import build_store
from accessaudit.platform.storage.seed import seed_store

# Configure logging to show INFO level messages
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store or await build_store(settings)
        logger.info(f"Storage backend: {app.state.store.backend}")
        try:
            if settings.SEED_ON_STARTUP:
                await seed_store(app.state.store)
            yield
        finally:
            await app.state.store.close()

    app = FastAPI(
        title=settings.APP_NAME,
        description="API for mock accessibility scans, the audit checklist and the knowledge base",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.random_source = random.Random()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
