from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.errors import register_exception_handlers
from storefront.api.routers.catalog import router as catalog_router
from storefront.api.routers.checkout import router as checkout_router
from storefront.api.routers.storefront import router as storefront_router
from storefront.shared.config import get_settings


settings = get_settings()
logging.getLogger("storefront").setLevel(settings.log_level)

app = FastAPI(title="Storefront API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(storefront_router)
app.include_router(catalog_router)
app.include_router(checkout_router)
