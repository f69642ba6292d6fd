"""Bracing calculations: row resolution, line checks and tab summaries."""

from bracecalc.calculation.lines import (
    LineSummary,
    calculate_line_totals,
    calculate_min_demand,
    summarize_line,
    validate_line_totals,
)
from bracecalc.calculation.rows import (
    apply_floor_type_limit,
    calculate_line_rows,
    get_best_match_key,
    resolve_row,
)
from bracecalc.calculation.tabs import TabSummary, calculate_rate, summarize_tab

__all__ = [
    "LineSummary",
    "TabSummary",
    "apply_floor_type_limit",
    "calculate_line_rows",
    "calculate_line_totals",
    "calculate_min_demand",
    "calculate_rate",
    "get_best_match_key",
    "resolve_row",
    "summarize_line",
    "summarize_tab",
    "validate_line_totals",
]
