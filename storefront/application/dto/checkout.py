from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CreateCheckoutSessionInput:
    package_name: str
    package_price: Decimal
    package_group: str | None
    origin: str


@dataclass(frozen=True)
class CreateCheckoutSessionOutput:
    checkout_session_id: str


@dataclass(frozen=True)
class ProviderCheckoutSessionResult:
    id: str
