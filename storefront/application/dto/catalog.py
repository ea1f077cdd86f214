from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.entities.package import PackageGroup


EDITING_ONLY_NOTE = "Editing-only packages require a minimum block of 1–4 reels."


@dataclass(frozen=True)
class ListPackagesOutput:
    groups: list[PackageGroup]
    note: str
