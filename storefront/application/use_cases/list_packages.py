from __future__ import annotations

from storefront.application.dto.catalog import EDITING_ONLY_NOTE, ListPackagesOutput
from storefront.application.ports.catalog_port import CatalogPort
from storefront.domain.services.catalog import group_packages


class ListPackagesUseCase:
    def __init__(self, *, catalog_port: CatalogPort):
        self._catalog_port = catalog_port

    def execute(self) -> ListPackagesOutput:
        return ListPackagesOutput(
            groups=group_packages(self._catalog_port.list_packages()),
            note=EDITING_ONLY_NOTE,
        )
