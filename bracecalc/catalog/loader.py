"""Load the catalog document and look types up by name."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from bracecalc.config import DEFAULT_CATALOG_PATH
from bracecalc.models.catalog import BracingData, BracingType

logger = logging.getLogger(__name__)


def catalog_from_dict(data: dict[str, Any]) -> BracingData:
    """Build a catalog from a parsed JSON document.

    Systems or types that are not objects, or that have no name, are
    dropped.  Rows referencing them later resolve as invalid.
    """
    systems: list[dict[str, Any]] = []
    for raw_system in data.get("systems") or []:
        if not isinstance(raw_system, dict) or not raw_system.get("name"):
            logger.debug("Skipping malformed system entry: %r", raw_system)
            continue
        types = [
            t
            for t in raw_system.get("types") or []
            if isinstance(t, dict) and t.get("name")
        ]
        systems.append({"name": str(raw_system["name"]), "types": types})
    return BracingData.model_validate({"systems": systems})


def load_catalog(path: str | Path | None = None) -> BracingData:
    """Read a catalog JSON file.  Defaults to the bundled sample catalog.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    json.JSONDecodeError
        If the file is not valid JSON.
    """
    p = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    if not p.is_file():
        raise FileNotFoundError(f"Catalog not found: {p}")

    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        data = {}
    catalog = catalog_from_dict(data)
    logger.info(
        "Loaded catalog %s: %d systems, %d types",
        p,
        len(catalog.systems),
        sum(len(s.types) for s in catalog.systems),
    )
    return catalog


def find_type(
    catalog: BracingData | None, system: str, type_name: str
) -> BracingType | None:
    """Return the type named *type_name* under *system*, or None."""
    if catalog is None:
        return None
    return catalog.get_type(system, type_name)


def list_systems(catalog: BracingData) -> list[str]:
    """System names in catalog order."""
    return [s.name for s in catalog.systems]


def list_types(catalog: BracingData, system: str) -> list[str]:
    """Type names under *system*; empty if the system is unknown."""
    found = catalog.get_system(system)
    if found is None:
        return []
    return [t.name for t in found.types]
