from __future__ import annotations

from types import SimpleNamespace

import pytest
import stripe
from fastapi.testclient import TestClient

from storefront.api import deps
from storefront.api.deps import get_create_checkout_session_use_case
from storefront.application.dto.checkout import ProviderCheckoutSessionResult
from storefront.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from storefront.domain.entities.checkout_session import CheckoutSessionRequest
from storefront.domain.exceptions import PaymentProviderError
from storefront.infrastructure.catalog.static_catalog import StaticCatalogRepository
from storefront.infrastructure.clients.stripe_client import StripeCheckoutClient
from storefront.main import app


class FakePaymentPort:
    def __init__(self, *, error: Exception | None = None):
        self.requests: list[CheckoutSessionRequest] = []
        self._error = error

    def create_checkout_session(self, request: CheckoutSessionRequest) -> ProviderCheckoutSessionResult:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return ProviderCheckoutSessionResult(id="sess_123")


def _install(payment_port, *, enforce_catalog_pricing: bool = True) -> None:
    use_case = CreateCheckoutSessionUseCase(
        catalog_port=StaticCatalogRepository(),
        payment_port=payment_port,
        currency="usd",
        enforce_catalog_pricing=enforce_catalog_pricing,
    )
    app.dependency_overrides[get_create_checkout_session_use_case] = lambda: use_case


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


VALID_BODY = {"pkg": {"name": "4 reels", "price": 600, "group": "Full Service"}}


def test_post_returns_session_id(client):
    payment_port = FakePaymentPort()
    _install(payment_port)

    response = client.post("/api/checkout", json=VALID_BODY, headers={"Origin": "https://shop.example.com"})

    assert response.status_code == 200
    assert response.json() == {"id": "sess_123"}
    assert len(payment_port.requests) == 1
    request = payment_port.requests[0]
    assert request.line_item.unit_amount == 60000
    assert request.success_url == "https://shop.example.com/?success=1"
    assert request.cancel_url == "https://shop.example.com/?canceled=1"


def test_missing_origin_falls_back_to_base_url(client):
    payment_port = FakePaymentPort()
    _install(payment_port)

    response = client.post("/api/checkout", json=VALID_BODY)

    assert response.status_code == 200
    assert payment_port.requests[0].success_url == "http://testserver/?success=1"


@pytest.mark.parametrize("method", ["get", "put", "delete", "patch"])
def test_non_post_is_method_not_allowed(client, method):
    payment_port = FakePaymentPort()
    _install(payment_port)

    response = getattr(client, method)("/api/checkout")

    assert response.status_code == 405
    assert response.headers["allow"] == "POST"
    assert response.text == "Method Not Allowed"
    assert payment_port.requests == []


@pytest.mark.parametrize(
    "body",
    [
        {"pkg": {"price": 100}},
        {"pkg": {"name": "x", "price": -5}},
        {"pkg": {"name": "   ", "price": 100}},
        {"pkg": {"name": "4 reels", "price": "abc"}},
        {},
    ],
)
def test_malformed_package_is_rejected_before_provider_call(client, body):
    payment_port = FakePaymentPort()
    _install(payment_port)

    response = client.post("/api/checkout", json=body)

    assert response.status_code == 400
    assert response.json()["error"]
    assert payment_port.requests == []


def test_invalid_json_is_rejected(client):
    payment_port = FakePaymentPort()
    _install(payment_port)

    response = client.post(
        "/api/checkout",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert payment_port.requests == []


def test_tampered_price_is_rejected(client):
    payment_port = FakePaymentPort()
    _install(payment_port)

    response = client.post(
        "/api/checkout",
        json={"pkg": {"name": "4 reels", "price": 1, "group": "Full Service"}},
    )

    assert response.status_code == 400
    assert "does not match the catalog" in response.json()["error"]
    assert payment_port.requests == []


def test_provider_error_message_is_passed_through(client):
    _install(FakePaymentPort(error=PaymentProviderError("Card declined")))

    response = client.post("/api/checkout", json=VALID_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "Card declined"}


def test_provider_error_without_message_uses_fallback(client):
    def _raise(params):
        _ = params
        raise stripe.APIConnectionError("")

    sdk = SimpleNamespace(checkout=SimpleNamespace(sessions=SimpleNamespace(create=_raise)))
    _install(StripeCheckoutClient(sdk_client_factory=lambda: sdk))

    response = client.post("/api/checkout", json=VALID_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "Stripe error"}


@pytest.mark.parametrize("price", [1e30, 1_000_000])
def test_out_of_range_price_is_rejected_when_catalog_pricing_is_off(client, price):
    payment_port = FakePaymentPort()
    _install(payment_port, enforce_catalog_pricing=False)

    response = client.post("/api/checkout", json={"pkg": {"name": "Custom", "price": price}})

    assert response.status_code == 400
    assert response.json() == {"error": "price is too large."}
    assert payment_port.requests == []


@pytest.fixture
def unconfigured_stripe(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    deps._get_stripe_sdk_client.cache_clear()
    yield
    deps._get_stripe_sdk_client.cache_clear()


def test_malformed_package_is_rejected_even_without_stripe_credentials(client, unconfigured_stripe):
    response = client.post("/api/checkout", json={"pkg": {"price": 100}})

    assert response.status_code == 400
    assert "pkg.name" in response.json()["error"]


def test_missing_stripe_credentials_surface_after_validation(client, unconfigured_stripe):
    response = client.post("/api/checkout", json=VALID_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "STRIPE_SECRET_KEY is required."}
