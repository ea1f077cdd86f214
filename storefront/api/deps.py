from __future__ import annotations

from functools import lru_cache

import stripe
from fastapi import HTTPException

from storefront.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from storefront.application.use_cases.list_packages import ListPackagesUseCase
from storefront.infrastructure.catalog.static_catalog import StaticCatalogRepository
from storefront.infrastructure.clients.stripe_client import (
    StripeCheckoutClient,
    build_stripe_sdk_client,
)
from storefront.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_stripe_sdk_client() -> stripe.StripeClient:
    settings = get_settings()
    if not settings.stripe_secret_key:
        raise HTTPException(status_code=500, detail="STRIPE_SECRET_KEY is required.")
    return build_stripe_sdk_client(
        secret_key=settings.stripe_secret_key,
        api_version=settings.stripe_api_version,
        timeout_seconds=settings.stripe_timeout_seconds,
    )


@lru_cache(maxsize=1)
def _get_catalog_repository() -> StaticCatalogRepository:
    return StaticCatalogRepository()


def get_list_packages_use_case() -> ListPackagesUseCase:
    return ListPackagesUseCase(catalog_port=_get_catalog_repository())


def get_create_checkout_session_use_case() -> CreateCheckoutSessionUseCase:
    settings = get_settings()
    return CreateCheckoutSessionUseCase(
        catalog_port=_get_catalog_repository(),
        payment_port=StripeCheckoutClient(sdk_client_factory=_get_stripe_sdk_client),
        currency=settings.checkout_currency,
        enforce_catalog_pricing=settings.enforce_catalog_pricing,
    )
