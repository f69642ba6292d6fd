"""Rating catalog loading, lookup, custom-type overlay and persistence."""

from bracecalc.catalog.custom_store import (
    CustomBracingError,
    CustomBracingStore,
    DuplicateBracingError,
    InvalidBracingNameError,
    build_custom_bracing,
    to_form_values,
)
from bracecalc.catalog.loader import find_type, list_systems, list_types, load_catalog
from bracecalc.catalog.merge import merge_catalog

__all__ = [
    "CustomBracingError",
    "CustomBracingStore",
    "DuplicateBracingError",
    "InvalidBracingNameError",
    "build_custom_bracing",
    "find_type",
    "list_systems",
    "list_types",
    "load_catalog",
    "merge_catalog",
    "to_form_values",
]
