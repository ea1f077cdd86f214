from __future__ import annotations

import logging

from storefront.application.dto.checkout import CreateCheckoutSessionInput, CreateCheckoutSessionOutput
from storefront.application.ports.catalog_port import CatalogPort
from storefront.application.ports.payment_port import PaymentPort
from storefront.domain.entities.checkout_session import CheckoutSessionRequest, LineItem
from storefront.domain.exceptions import CheckoutInputError
from storefront.domain.services.catalog import resolve_catalog_package
from storefront.domain.services.money import to_minor_units
from storefront.domain.services.redirects import build_redirect_urls


logger = logging.getLogger(__name__)


class CreateCheckoutSessionUseCase:
    def __init__(
        self,
        *,
        catalog_port: CatalogPort,
        payment_port: PaymentPort,
        currency: str,
        enforce_catalog_pricing: bool = True,
    ):
        self._catalog_port = catalog_port
        self._payment_port = payment_port
        self._currency = currency
        self._enforce_catalog_pricing = enforce_catalog_pricing

    def execute(self, command: CreateCheckoutSessionInput) -> CreateCheckoutSessionOutput:
        name = command.package_name.strip() if command.package_name else ""
        if not name:
            raise CheckoutInputError("Package name is required.")

        price = command.package_price
        if self._enforce_catalog_pricing:
            package = resolve_catalog_package(
                self._catalog_port.list_packages(),
                name=name,
                group=command.package_group,
                price=price,
            )
            price = package.price

        unit_amount = to_minor_units(price)
        success_url, cancel_url = build_redirect_urls(command.origin)

        request = CheckoutSessionRequest(
            line_item=LineItem(
                currency=self._currency,
                product_name=command.package_name,
                unit_amount=unit_amount,
                quantity=1,
            ),
            success_url=success_url,
            cancel_url=cancel_url,
        )
        result = self._payment_port.create_checkout_session(request)

        logger.info(
            "create_checkout_session: created session_id=%s product=%s unit_amount=%s currency=%s",
            result.id,
            command.package_name,
            unit_amount,
            self._currency,
        )
        return CreateCheckoutSessionOutput(checkout_session_id=result.id)
