from __future__ import annotations

import logging
from typing import Callable

import stripe

from storefront.application.dto.checkout import ProviderCheckoutSessionResult
from storefront.application.ports.payment_port import PaymentPort
from storefront.domain.entities.checkout_session import CheckoutSessionRequest
from storefront.domain.exceptions import PaymentProviderError


logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Stripe error"


def build_stripe_sdk_client(
    *,
    secret_key: str,
    api_version: str | None,
    timeout_seconds: float,
) -> stripe.StripeClient:
    return stripe.StripeClient(
        secret_key,
        stripe_version=api_version or None,
        max_network_retries=0,
        http_client=stripe.RequestsClient(timeout=timeout_seconds),
    )


class StripeCheckoutClient(PaymentPort):
    """Checkout-session adapter over a shared ``stripe.StripeClient``.

    The SDK handle is fetched from ``sdk_client_factory`` on the first
    provider call, so missing credentials surface only once a request has
    passed validation.
    """

    def __init__(self, *, sdk_client_factory: Callable[[], stripe.StripeClient]):
        self._sdk_client_factory = sdk_client_factory

    def create_checkout_session(self, request: CheckoutSessionRequest) -> ProviderCheckoutSessionResult:
        item = request.line_item
        params = {
            "mode": request.mode,
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": item.currency,
                        "product_data": {"name": item.product_name},
                        "unit_amount": item.unit_amount,
                    },
                    "quantity": item.quantity,
                }
            ],
            "success_url": request.success_url,
            "cancel_url": request.cancel_url,
        }

        sdk = self._sdk_client_factory()
        try:
            session = sdk.checkout.sessions.create(params=params)
        except stripe.StripeError as exc:
            logger.warning(
                "stripe_client: checkout_session_failed error=%s code=%s request_id=%s",
                type(exc).__name__,
                getattr(exc, "code", None),
                getattr(exc, "request_id", None),
            )
            raise PaymentProviderError(exc.user_message or FALLBACK_ERROR_MESSAGE) from exc
        except Exception as exc:
            logger.warning("stripe_client: checkout_session_failed error=%s", type(exc).__name__)
            raise PaymentProviderError(str(exc) or FALLBACK_ERROR_MESSAGE) from exc

        session_id = getattr(session, "id", None)
        if not session_id:
            raise PaymentProviderError("Stripe checkout session response is incomplete.")
        return ProviderCheckoutSessionResult(id=str(session_id))
