from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineItem:
    currency: str
    product_name: str
    unit_amount: int
    quantity: int = 1


@dataclass(frozen=True)
class CheckoutSessionRequest:
    line_item: LineItem
    success_url: str
    cancel_url: str
    mode: str = "payment"
