from __future__ import annotations

from typing import Protocol

from storefront.application.dto.checkout import ProviderCheckoutSessionResult
from storefront.domain.entities.checkout_session import CheckoutSessionRequest


class PaymentPort(Protocol):
    def create_checkout_session(self, request: CheckoutSessionRequest) -> ProviderCheckoutSessionResult:
        ...
