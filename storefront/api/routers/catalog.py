from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.api.deps import get_list_packages_use_case
from storefront.api.schemas.catalog import CatalogResponse, PackageGroupResponse, PackageResponse
from storefront.application.use_cases.list_packages import ListPackagesUseCase


router = APIRouter()


@router.get("/api/packages", response_model=CatalogResponse)
def list_packages(
    use_case: ListPackagesUseCase = Depends(get_list_packages_use_case),
):
    output = use_case.execute()
    return CatalogResponse(
        groups=[
            PackageGroupResponse(
                group=group.label,
                packages=[
                    PackageResponse(name=package.name, price=package.price, group=package.group)
                    for package in group.packages
                ],
            )
            for group in output.groups
        ],
        note=output.note,
    )
