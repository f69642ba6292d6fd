"""Row resolution: catalog rating lookup and achieved capacity per row.

A row never raises: a missing system or type, a length below every table
breakpoint, or a null rating all produce an invalid row with zero totals.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any

from bracecalc.config import FLOOR_TYPE_CAPS, NUMBER_BASED_KEY, REFERENCE_HEIGHT_M
from bracecalc.models.catalog import BracingData, BracingType
from bracecalc.models.project import BracingRow, DisplayBracingRow, FloorType

logger = logging.getLogger(__name__)


def _key_value(key: str) -> float | None:
    try:
        value = float(key)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def sorted_length_keys(keys: Iterable[str]) -> list[str]:
    """Numeric-string keys in ascending numeric order.

    Keys that do not parse as numbers cannot be step boundaries and are
    left out.
    """
    numeric = [k for k in keys if _key_value(k) is not None]
    return sorted(numeric, key=lambda k: float(k))


def get_best_match_key(length: float, keys: list[str]) -> str | None:
    """Return the largest key not exceeding *length*.

    *keys* must already be sorted ascending.  Returns None when *length*
    is below every key.
    """
    best_match: str | None = None
    for key in keys:
        if float(key) > length:
            break
        best_match = key
    return best_match


def apply_floor_type_limit(
    floor_type: FloorType | str, rating: float | None
) -> float | None:
    """Cap a length-based rating at the limit for *floor_type*.

    An unknown floor type has no cap.
    """
    if rating is None:
        return None
    cap = FLOOR_TYPE_CAPS.get(getattr(floor_type, "value", floor_type))
    if cap is not None and rating > cap:
        return cap
    return rating


def _lookup_ratings(
    bracing_type: BracingType, length_or_count: float
) -> tuple[float | None, float | None]:
    if bracing_type.is_number_based:
        key: str | None = NUMBER_BASED_KEY
    else:
        key = get_best_match_key(length_or_count, sorted_length_keys(bracing_type.wind))
    if key is None:
        return None, None
    return bracing_type.wind.get(key), bracing_type.eq.get(key)


def _row_fields(row: BracingRow) -> dict[str, Any]:
    return row.model_dump(include=set(BracingRow.model_fields))


def resolve_row(
    row: BracingRow,
    catalog: BracingData,
    floor_type: FloorType | str,
) -> DisplayBracingRow:
    """Resolve *row* against *catalog* and compute its wind/EQ totals."""
    bracing_type = catalog.get_type(row.system, row.type)
    if bracing_type is None:
        logger.debug("Row %s: no type %s / %s in catalog", row.id, row.system, row.type)
        return DisplayBracingRow(**_row_fields(row), is_row_invalid=True)

    number_based = bracing_type.is_number_based
    wind_rating, eq_rating = _lookup_ratings(bracing_type, row.length_or_count)

    if not number_based:
        wind_rating = apply_floor_type_limit(floor_type, wind_rating)
        eq_rating = apply_floor_type_limit(floor_type, eq_rating)

    if wind_rating is None or eq_rating is None:
        logger.debug("Row %s: no rating for %s at %s", row.id, row.type, row.length_or_count)
        return DisplayBracingRow(
            **_row_fields(row),
            wind_rating=wind_rating,
            eq_rating=eq_rating,
            is_row_invalid=True,
        )

    if number_based:
        factor = row.length_or_count
    else:
        height_ratio = REFERENCE_HEIGHT_M / row.height if row.height > 0 else 0.0
        factor = row.length_or_count * height_ratio

    total_wind = wind_rating * factor
    total_eq = eq_rating * factor
    if not (math.isfinite(total_wind) and math.isfinite(total_eq)):
        logger.debug("Row %s: total out of range for %s", row.id, row.type)
        return DisplayBracingRow(
            **_row_fields(row),
            wind_rating=wind_rating,
            eq_rating=eq_rating,
            is_row_invalid=True,
        )

    return DisplayBracingRow(
        **_row_fields(row),
        wind_rating=wind_rating,
        eq_rating=eq_rating,
        total_wind=total_wind,
        total_eq=total_eq,
        is_row_invalid=False,
    )


def calculate_line_rows(
    rows: Iterable[BracingRow],
    catalog: BracingData,
    floor_type: FloorType | str,
) -> list[DisplayBracingRow]:
    """Resolve every row of a bracing line, preserving order."""
    return [resolve_row(row, catalog, floor_type) for row in rows]
