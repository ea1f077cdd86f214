from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from storefront.api.deps import get_list_packages_use_case
from storefront.application.use_cases.list_packages import ListPackagesUseCase
from storefront.shared.config import Settings, get_settings
from storefront.ui.page import render_storefront_page


router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def storefront_page(
    success: str | None = None,
    canceled: str | None = None,
    settings: Settings = Depends(get_settings),
    use_case: ListPackagesUseCase = Depends(get_list_packages_use_case),
):
    output = use_case.execute()
    return HTMLResponse(
        render_storefront_page(
            groups=output.groups,
            note=output.note,
            publishable_key=settings.stripe_publishable_key,
            checkout_path="/api/checkout",
            success=success == "1",
            canceled=canceled == "1",
        )
    )
