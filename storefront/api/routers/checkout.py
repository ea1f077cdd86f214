from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from storefront.api.deps import get_create_checkout_session_use_case
from storefront.api.schemas.checkout import (
    CreateCheckoutSessionRequest,
    CreateCheckoutSessionResponse,
    ErrorResponse,
)
from storefront.application.dto.checkout import CreateCheckoutSessionInput
from storefront.application.use_cases.create_checkout_session import CreateCheckoutSessionUseCase
from storefront.domain.exceptions import (
    CheckoutInputError,
    PackageNotFoundError,
    PaymentProviderError,
)


router = APIRouter()


def _request_origin(request: Request) -> str:
    return request.headers.get("origin") or str(request.base_url)


@router.post(
    "/api/checkout",
    response_model=CreateCheckoutSessionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_checkout_session(
    req: CreateCheckoutSessionRequest,
    request: Request,
    use_case: CreateCheckoutSessionUseCase = Depends(get_create_checkout_session_use_case),
):
    try:
        output = use_case.execute(
            CreateCheckoutSessionInput(
                package_name=req.pkg.name,
                package_price=req.pkg.price,
                package_group=req.pkg.group,
                origin=_request_origin(request),
            )
        )
    except (CheckoutInputError, PackageNotFoundError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except PaymentProviderError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return CreateCheckoutSessionResponse(id=output.checkout_session_id)
