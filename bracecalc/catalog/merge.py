"""Overlay user-defined bracing types onto the base catalog."""

from __future__ import annotations

from collections.abc import Iterable

from bracecalc.config import CUSTOM_SYSTEM_NAME
from bracecalc.models.catalog import BracingData, BracingSystem, CustomBracing


def merge_catalog(
    base: BracingData,
    custom: Iterable[CustomBracing],
    *,
    system_name: str = CUSTOM_SYSTEM_NAME,
) -> BracingData:
    """Return a new catalog with *custom* appended to the custom system.

    Custom types follow any types the base catalog already lists under
    that system.  If the base has no such system, one is added at the end.
    *base* is never modified.
    """
    custom_types = [c.to_bracing_type() for c in custom]

    systems: list[BracingSystem] = []
    merged = False
    for system in base.systems:
        if system.name == system_name and not merged:
            systems.append(
                BracingSystem(name=system.name, types=[*system.types, *custom_types])
            )
            merged = True
        else:
            systems.append(system)

    if not merged:
        systems.append(BracingSystem(name=system_name, types=custom_types))

    return BracingData(systems=systems)
