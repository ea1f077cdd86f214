from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class PackagePayload(BaseModel):
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    group: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class CreateCheckoutSessionRequest(BaseModel):
    pkg: PackagePayload


class CreateCheckoutSessionResponse(BaseModel):
    id: str


class ErrorResponse(BaseModel):
    error: str
