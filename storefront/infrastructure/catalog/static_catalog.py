from __future__ import annotations

from decimal import Decimal

from storefront.application.ports.catalog_port import CatalogPort
from storefront.domain.entities.package import EDITING_ONLY, FULL_SERVICE, Package


# Prices in USD, display order.
PACKAGES: tuple[Package, ...] = (
    # Filming + editing
    Package(name="1 reel", price=Decimal("250"), group=FULL_SERVICE),
    Package(name="2 reels", price=Decimal("400"), group=FULL_SERVICE),
    Package(name="4 reels", price=Decimal("600"), group=FULL_SERVICE),
    Package(name="8 reels", price=Decimal("1000"), group=FULL_SERVICE),
    Package(name="12 reels", price=Decimal("1500"), group=FULL_SERVICE),
    # Minimum purchase covers 1–4 reels
    Package(name="1–4 reels", price=Decimal("250"), group=EDITING_ONLY),
    Package(name="8 reels", price=Decimal("300"), group=EDITING_ONLY),
    Package(name="12 reels", price=Decimal("450"), group=EDITING_ONLY),
)


class StaticCatalogRepository(CatalogPort):
    def __init__(self, packages: tuple[Package, ...] = PACKAGES):
        self._packages = packages

    def list_packages(self) -> list[Package]:
        return list(self._packages)
