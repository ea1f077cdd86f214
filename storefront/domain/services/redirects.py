from __future__ import annotations

from storefront.domain.exceptions import CheckoutInputError


SUCCESS_MARKER = "success=1"
CANCELED_MARKER = "canceled=1"


def build_redirect_urls(origin: str) -> tuple[str, str]:
    base = (origin or "").strip().rstrip("/")
    if not base:
        raise CheckoutInputError("Request origin is required to build redirect URLs.")
    return f"{base}/?{SUCCESS_MARKER}", f"{base}/?{CANCELED_MARKER}"
