from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


FULL_SERVICE = "Full Service"
EDITING_ONLY = "Editing Only"

PACKAGE_GROUPS = (FULL_SERVICE, EDITING_ONLY)


@dataclass(frozen=True)
class Package:
    name: str
    price: Decimal
    group: str


@dataclass(frozen=True)
class PackageGroup:
    label: str
    packages: list[Package]
