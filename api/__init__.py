"""
FastAPI application factory for the LifeAid storefront API server.

Serves the public storefront JSON API and the admin CMS API.
"""

import logging
import os
import sys

# Ensure the project root is in Python path for local imports
_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the schema exists, then warm the product cache."""
    from api.database import run_sync
    from catalog.cache import product_cache
    from db import init_database

    await run_sync(init_database)
    await product_cache.prefetch()
    logger.info("Storefront API ready")
    yield
    # Shutdown: nothing to clean up (sqlite connections are per-request)


def create_app() -> FastAPI:
    """FastAPI application factory."""
    from api import config

    app = FastAPI(
        title="LifeAid Storefront API",
        description="Bilingual medical-equipment storefront and admin CMS API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.SITE_CONFIG['cors_origins'],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    from api.routers.auth import router as auth_router
    from api.routers.catalog import router as catalog_router
    from api.routers.contact import router as contact_router
    from api.routers.i18n import router as i18n_router
    from api.routers.admin_products import router as admin_products_router
    from api.routers.admin_testimonials import router as admin_testimonials_router
    from api.routers.admin_videos import router as admin_videos_router
    from api.routers.admin_inbox import router as admin_inbox_router
    from api.routers.admin_settings import router as admin_settings_router
    from api.routers.admin_editor import router as admin_editor_router

    app.include_router(auth_router)
    app.include_router(catalog_router)
    app.include_router(contact_router)
    app.include_router(i18n_router)
    app.include_router(admin_products_router)
    app.include_router(admin_testimonials_router)
    app.include_router(admin_videos_router)
    app.include_router(admin_inbox_router)
    app.include_router(admin_settings_router)
    app.include_router(admin_editor_router)

    return app
