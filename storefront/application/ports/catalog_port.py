from __future__ import annotations

from typing import Protocol

from storefront.domain.entities.package import Package


class CatalogPort(Protocol):
    def list_packages(self) -> list[Package]:
        ...
