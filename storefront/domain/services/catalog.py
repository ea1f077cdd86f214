from __future__ import annotations

from decimal import Decimal

from storefront.domain.entities.package import PACKAGE_GROUPS, Package, PackageGroup
from storefront.domain.exceptions import CheckoutInputError, PackageNotFoundError


def group_packages(packages: list[Package]) -> list[PackageGroup]:
    groups: list[PackageGroup] = []
    for label in PACKAGE_GROUPS:
        members = [package for package in packages if package.group == label]
        if members:
            groups.append(PackageGroup(label=label, packages=members))
    return groups


def resolve_catalog_package(
    packages: list[Package],
    *,
    name: str,
    group: str | None,
    price: Decimal,
) -> Package:
    """Find the catalog entry a client selection refers to.

    Names repeat across groups ("8 reels"), so a selection without a group is
    only accepted when the submitted price singles out one candidate.
    """
    candidates = [package for package in packages if package.name == name]
    if group is not None:
        candidates = [package for package in candidates if package.group == group]
    if not candidates:
        raise PackageNotFoundError(f"Unknown package '{name}'.")

    if len(candidates) > 1:
        candidates = [package for package in candidates if package.price == price]
        if len(candidates) != 1:
            raise CheckoutInputError(f"Package '{name}' is ambiguous; group is required.")

    package = candidates[0]
    if package.price != price:
        raise CheckoutInputError(f"Price for package '{name}' does not match the catalog.")
    return package
