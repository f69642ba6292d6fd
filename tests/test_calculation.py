"""Tests for row resolution, bracing line checks and tab summaries.

Catalogs are built in memory; no files are read.
"""

from __future__ import annotations

import math

import pytest

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
    sorted_length_keys,
)
from bracecalc.calculation.tabs import TabSummary, calculate_rate, summarize_tab
from bracecalc.models.catalog import BracingData
from bracecalc.models.project import BracingRow, DisplayBracingRow, FloorType


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog() -> BracingData:
    return BracingData.model_validate(
        {
            "systems": [
                {
                    "name": "Walls",
                    "types": [
                        {
                            "name": "Stepped",
                            "wind": {"3.6": 140, "1.2": 100, "2.4": 110},
                            "eq": {"3.6": 130, "1.2": 90, "2.4": 105},
                        },
                        {
                            "name": "Gappy",
                            "wind": {"0.4": None, "1.2": 80},
                            "eq": {"0.4": 20, "1.2": 70},
                        },
                    ],
                },
                {
                    "name": "Piles",
                    "types": [
                        {"name": "Anchor", "wind": {"n_1": 50}, "eq": {"n_1": 40}},
                        {"name": "Heavy", "wind": {"n_1": 200}, "eq": {"n_1": 180}},
                    ],
                },
            ]
        }
    )


def _row(system: str, type_name: str, length: float, height: float = 2.4, row_id: int = 1) -> BracingRow:
    return BracingRow(
        id=row_id,
        label=f"BL-1-{row_id}",
        system=system,
        type=type_name,
        length_or_count=length,
        height=height,
    )


# ---------------------------------------------------------------------------
# Step lookup
# ---------------------------------------------------------------------------


class TestBestMatchKey:
    keys = ["1.2", "2.4", "3.6"]

    def test_between_keys_takes_lower(self) -> None:
        assert get_best_match_key(3.0, self.keys) == "2.4"

    def test_below_all_keys(self) -> None:
        assert get_best_match_key(1.0, self.keys) is None

    def test_boundary_is_inclusive(self) -> None:
        assert get_best_match_key(3.6, self.keys) == "3.6"
        assert get_best_match_key(1.2, self.keys) == "1.2"

    def test_above_all_keys_takes_largest(self) -> None:
        assert get_best_match_key(10.0, self.keys) == "3.6"

    def test_empty_keys(self) -> None:
        assert get_best_match_key(2.0, []) is None

    def test_sorted_length_keys_is_numeric(self) -> None:
        assert sorted_length_keys(["10", "2.4", "0.6"]) == ["0.6", "2.4", "10"]

    def test_sorted_length_keys_drops_non_numeric(self) -> None:
        assert sorted_length_keys(["2.4", "n_1", "abc"]) == ["2.4"]

    def test_sorted_length_keys_drops_non_finite(self) -> None:
        assert sorted_length_keys(["nan", "2.4", "inf", "1.2", "-inf"]) == ["1.2", "2.4"]


# ---------------------------------------------------------------------------
# Floor type cap
# ---------------------------------------------------------------------------


class TestFloorTypeLimit:
    def test_timber_caps_at_120(self) -> None:
        assert apply_floor_type_limit(FloorType.TIMBER, 140) == 120

    def test_concrete_keeps_140(self) -> None:
        assert apply_floor_type_limit(FloorType.CONCRETE, 140) == 140

    def test_concrete_caps_at_150(self) -> None:
        assert apply_floor_type_limit("Concrete", 180) == 150

    def test_values_at_cap_pass_through(self) -> None:
        assert apply_floor_type_limit("Timber", 120) == 120

    def test_none_passes_through(self) -> None:
        assert apply_floor_type_limit(FloorType.TIMBER, None) is None

    def test_unknown_floor_type_is_uncapped(self) -> None:
        assert apply_floor_type_limit("Steel", 180) == 180

    def test_idempotent(self) -> None:
        for floor_type in FloorType:
            for rating in (None, 50.0, 120.0, 140.0, 200.0):
                once = apply_floor_type_limit(floor_type, rating)
                assert apply_floor_type_limit(floor_type, once) == once


# ---------------------------------------------------------------------------
# Row resolution
# ---------------------------------------------------------------------------


class TestResolveRow:
    def test_length_lookup_uses_step_function(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 3.0), catalog, FloorType.TIMBER)
        assert row.wind_rating == 110
        assert row.eq_rating == 105
        assert row.is_row_invalid is False
        assert row.total_wind == pytest.approx(330.0)
        assert row.total_eq == pytest.approx(315.0)

    def test_length_below_table_is_invalid(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 1.0), catalog, FloorType.TIMBER)
        assert row.wind_rating is None
        assert row.eq_rating is None
        assert row.is_row_invalid is True
        assert row.total_wind == 0
        assert row.total_eq == 0

    def test_timber_cap_applies_to_length_ratings(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 3.6), catalog, FloorType.TIMBER)
        assert row.wind_rating == 120
        assert row.eq_rating == 120

    def test_concrete_cap_leaves_140(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 3.6), catalog, FloorType.CONCRETE)
        assert row.wind_rating == 140
        assert row.eq_rating == 130

    def test_height_ratio_scaling(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 2.0, height=4.8), catalog, FloorType.TIMBER)
        assert row.wind_rating == 100
        assert row.total_wind == pytest.approx(100.0)
        assert row.total_eq == pytest.approx(90.0)

    def test_zero_height_gives_zero_total(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 2.4, height=0), catalog, FloorType.TIMBER)
        assert row.total_wind == 0
        assert row.total_eq == 0
        assert not math.isnan(row.total_wind)
        assert row.is_row_invalid is False

    def test_negative_height_gives_zero_total(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 2.4, height=-1), catalog, FloorType.TIMBER)
        assert row.total_wind == 0

    def test_number_based_ignores_height(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Piles", "Anchor", 3, height=7.0), catalog, FloorType.TIMBER)
        assert row.wind_rating == 50
        assert row.total_wind == pytest.approx(150.0)
        assert row.total_eq == pytest.approx(120.0)

    def test_number_based_is_never_capped(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Piles", "Heavy", 1), catalog, FloorType.TIMBER)
        assert row.wind_rating == 200
        assert row.eq_rating == 180
        assert row.total_wind == pytest.approx(200.0)

    def test_missing_system_is_invalid(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Nope", "Stepped", 2.4), catalog, FloorType.TIMBER)
        assert row.is_row_invalid is True
        assert row.wind_rating is None
        assert row.total_wind == 0

    def test_missing_type_is_invalid(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Deleted custom", 2.4), catalog, FloorType.TIMBER)
        assert row.is_row_invalid is True
        assert row.total_eq == 0

    def test_one_null_rating_invalidates_row(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Gappy", 0.5), catalog, FloorType.TIMBER)
        assert row.wind_rating is None
        assert row.eq_rating == 20
        assert row.is_row_invalid is True
        assert row.total_eq == 0

    def test_nan_key_is_not_a_step(self) -> None:
        catalog = BracingData.model_validate(
            {
                "systems": [
                    {
                        "name": "Walls",
                        "types": [
                            {
                                "name": "Odd",
                                "wind": {"nan": 500, "1.2": 100},
                                "eq": {"nan": 500, "1.2": 90},
                            }
                        ],
                    }
                ]
            }
        )
        below = resolve_row(_row("Walls", "Odd", 0.6), catalog, FloorType.TIMBER)
        assert below.is_row_invalid is True
        assert below.wind_rating is None
        row = resolve_row(_row("Walls", "Odd", 2.4), catalog, FloorType.TIMBER)
        assert row.wind_rating == 100

    def test_overflowing_total_is_invalid(self, catalog: BracingData) -> None:
        row = resolve_row(
            _row("Walls", "Stepped", 1e300, height=1e-10), catalog, FloorType.TIMBER
        )
        assert row.is_row_invalid is True
        assert row.total_wind == 0
        assert row.total_eq == 0
        assert math.isfinite(row.total_wind)

    def test_unknown_floor_type_does_not_raise(self, catalog: BracingData) -> None:
        row = resolve_row(_row("Walls", "Stepped", 3.6), catalog, "Steel")
        assert row.wind_rating == 140
        assert row.is_row_invalid is False

    def test_keeps_row_fields(self, catalog: BracingData) -> None:
        source = _row("Walls", "Stepped", 2.4, row_id=7)
        row = resolve_row(source, catalog, FloorType.TIMBER)
        assert isinstance(row, DisplayBracingRow)
        assert row.id == 7
        assert row.label == "BL-1-7"
        assert row.length_or_count == 2.4

    def test_resolving_a_display_row_again(self, catalog: BracingData) -> None:
        first = resolve_row(_row("Walls", "Stepped", 2.4), catalog, FloorType.TIMBER)
        second = resolve_row(first, catalog, FloorType.TIMBER)
        assert second == first

    def test_does_not_mutate_input(self, catalog: BracingData) -> None:
        source = _row("Walls", "Stepped", 2.4)
        before = source.model_dump()
        resolve_row(source, catalog, FloorType.TIMBER)
        assert source.model_dump() == before


# ---------------------------------------------------------------------------
# Bracing line
# ---------------------------------------------------------------------------


class TestLine:
    def test_invalid_row_isolation(self, catalog: BracingData) -> None:
        rows = calculate_line_rows(
            [
                _row("Piles", "Anchor", 2, row_id=1),
                _row("Walls", "Missing", 2.4, row_id=2),
                _row("Piles", "Anchor", 1, row_id=3),
            ],
            catalog,
            FloorType.TIMBER,
        )
        assert [r.id for r in rows] == [1, 2, 3]
        assert rows[1].is_row_invalid is True
        total_wind, total_eq = calculate_line_totals(rows)
        assert total_wind == pytest.approx(150.0)
        assert total_eq == pytest.approx(120.0)

    def test_empty_line_totals(self) -> None:
        assert calculate_line_totals([]) == (0.0, 0.0)

    def test_min_demand_absolute_floor(self) -> None:
        assert calculate_min_demand(0, 0, 0, 2) == (100, 100)

    def test_min_demand_wall_length(self) -> None:
        wind, eq = calculate_min_demand(10, 0, 0, 2)
        assert wind == pytest.approx(150.0)
        assert eq == pytest.approx(150.0)

    def test_min_demand_fair_share(self) -> None:
        wind, eq = calculate_min_demand(0, 1000, 600, 2)
        assert wind == pytest.approx(250.0)
        assert eq == pytest.approx(150.0)

    def test_min_demand_zero_lines(self) -> None:
        wind, eq = calculate_min_demand(0, 1000, 1000, 0)
        assert wind == pytest.approx(500.0)
        assert eq == pytest.approx(500.0)

    def test_validation_is_per_axis(self) -> None:
        assert validate_line_totals(150, 90, 100, 100) == (True, False)
        assert validate_line_totals(100, 100, 100, 100) == (True, True)

    def test_summarize_line(self, catalog: BracingData) -> None:
        rows = calculate_line_rows(
            [_row("Piles", "Anchor", 3)], catalog, FloorType.TIMBER
        )
        summary = summarize_line(rows, 0, 500, 500, 2)
        assert isinstance(summary, LineSummary)
        assert summary.line_total_wind == pytest.approx(150.0)
        assert summary.line_total_eq == pytest.approx(120.0)
        assert summary.min_demand_wind == pytest.approx(125.0)
        assert summary.is_wind_ok is True
        assert summary.is_eq_ok is False


# ---------------------------------------------------------------------------
# Tab
# ---------------------------------------------------------------------------


class TestTab:
    def test_rate(self) -> None:
        assert calculate_rate(250, 500) == pytest.approx(50.0)

    def test_rate_zero_demand(self) -> None:
        assert calculate_rate(250, 0) == 0

    def test_summarize_tab(self) -> None:
        lines = [
            LineSummary(line_total_wind=300, line_total_eq=200),
            LineSummary(line_total_wind=250, line_total_eq=100),
        ]
        summary = summarize_tab(lines, 500, 400)
        assert isinstance(summary, TabSummary)
        assert summary.achieved_wind == pytest.approx(550.0)
        assert summary.achieved_eq == pytest.approx(300.0)
        assert summary.wind_rate == pytest.approx(110.0)
        assert summary.eq_rate == pytest.approx(75.0)
        assert summary.is_wind_ok is True
        assert summary.is_eq_ok is False

    def test_summarize_empty_tab(self) -> None:
        summary = summarize_tab([], 0, 0)
        assert summary.achieved_wind == 0
        assert summary.wind_rate == 0
        assert summary.eq_rate == 0
