from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class PackageResponse(BaseModel):
    name: str
    price: Decimal
    group: str


class PackageGroupResponse(BaseModel):
    group: str
    packages: list[PackageResponse]


class CatalogResponse(BaseModel):
    groups: list[PackageGroupResponse]
    note: str
