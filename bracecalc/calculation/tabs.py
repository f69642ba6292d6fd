"""Tab totals: achieved capacity against tab demand."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from bracecalc.calculation.lines import LineSummary


class TabSummary(BaseModel):
    """Achieved capacity and rate for one tab."""

    achieved_wind: float = 0.0
    achieved_eq: float = 0.0
    wind_rate: float = 0.0
    """Achieved wind as a percentage of demand."""

    eq_rate: float = 0.0

    @property
    def is_wind_ok(self) -> bool:
        return self.wind_rate >= 100

    @property
    def is_eq_ok(self) -> bool:
        return self.eq_rate >= 100


def calculate_rate(achieved: float, demand: float) -> float:
    """*achieved* as a percentage of *demand*; 0 when demand is 0."""
    if demand == 0:
        return 0.0
    return achieved / demand * 100


def summarize_tab(
    lines: Iterable[LineSummary],
    demand_wind: float,
    demand_eq: float,
) -> TabSummary:
    """Sum line totals and compare with the tab demand."""
    achieved_wind = 0.0
    achieved_eq = 0.0
    for line in lines:
        achieved_wind += line.line_total_wind
        achieved_eq += line.line_total_eq
    return TabSummary(
        achieved_wind=achieved_wind,
        achieved_eq=achieved_eq,
        wind_rate=calculate_rate(achieved_wind, demand_wind),
        eq_rate=calculate_rate(achieved_eq, demand_eq),
    )
