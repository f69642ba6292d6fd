"""Bracing line totals, minimum demand and pass/fail checks."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from bracecalc.config import (
    FAIR_SHARE_FACTOR,
    MIN_DEMAND_ABSOLUTE,
    MIN_DEMAND_PER_WALL_METRE,
)
from bracecalc.models.project import DisplayBracingRow


class LineSummary(BaseModel):
    """Totals and checks for one bracing line."""

    line_total_wind: float = 0.0
    line_total_eq: float = 0.0
    min_demand_wind: float = 0.0
    min_demand_eq: float = 0.0
    is_wind_ok: bool = False
    is_eq_ok: bool = False


def calculate_line_totals(rows: Iterable[DisplayBracingRow]) -> tuple[float, float]:
    """Sum row totals.  Returns ``(line_total_wind, line_total_eq)``."""
    total_wind = 0.0
    total_eq = 0.0
    for row in rows:
        total_wind += row.total_wind
        total_eq += row.total_eq
    return total_wind, total_eq


def _min_demand(external_wall_length: float, tab_demand: float, line_count: int) -> float:
    return max(
        MIN_DEMAND_ABSOLUTE,
        MIN_DEMAND_PER_WALL_METRE * external_wall_length,
        FAIR_SHARE_FACTOR * (tab_demand / line_count),
    )


def calculate_min_demand(
    external_wall_length: float,
    tab_demand_wind: float,
    tab_demand_eq: float,
    bracingline_count: int,
) -> tuple[float, float]:
    """Minimum demand a line must reach.  Returns ``(wind, eq)``.

    The larger of an absolute floor, a per-metre allowance on the external
    wall length, and half an even share of the tab demand.
    """
    count = bracingline_count if bracingline_count > 0 else 1
    return (
        _min_demand(external_wall_length, tab_demand_wind, count),
        _min_demand(external_wall_length, tab_demand_eq, count),
    )


def validate_line_totals(
    line_total_wind: float,
    line_total_eq: float,
    min_demand_wind: float,
    min_demand_eq: float,
) -> tuple[bool, bool]:
    """Returns ``(is_wind_ok, is_eq_ok)``; each axis is checked on its own."""
    return line_total_wind >= min_demand_wind, line_total_eq >= min_demand_eq


def summarize_line(
    rows: list[DisplayBracingRow],
    external_wall_length: float,
    tab_demand_wind: float,
    tab_demand_eq: float,
    bracingline_count: int,
) -> LineSummary:
    """Totals, minimum demand and pass flags for one resolved line."""
    total_wind, total_eq = calculate_line_totals(rows)
    min_wind, min_eq = calculate_min_demand(
        external_wall_length, tab_demand_wind, tab_demand_eq, bracingline_count
    )
    wind_ok, eq_ok = validate_line_totals(total_wind, total_eq, min_wind, min_eq)
    return LineSummary(
        line_total_wind=total_wind,
        line_total_eq=total_eq,
        min_demand_wind=min_wind,
        min_demand_eq=min_eq,
        is_wind_ok=wind_ok,
        is_eq_ok=eq_ok,
    )
