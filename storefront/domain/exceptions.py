from __future__ import annotations


class DomainError(Exception):
    """Base for storefront domain errors."""


class CheckoutInputError(DomainError):
    """Package payload is missing fields or carries invalid values."""


class PackageNotFoundError(DomainError):
    """Package is not part of the catalog."""


class PaymentProviderError(DomainError):
    """Payment provider failed to create the checkout session."""
