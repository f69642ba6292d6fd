"""ReportDocument model and Markdown report generation.

The document is fully denormalised: every row carries its system, type,
ratings and totals, so a renderer never needs the catalog.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field

from bracecalc.calculation.lines import LineSummary
from bracecalc.calculation.tabs import TabSummary
from bracecalc.models.project import DisplayBracingRow, FloorType, ProjectInfo


class ReportBracingline(BaseModel):
    """One bracing line with its resolved rows and summary."""

    id: int | str
    bracingline_no: str = ""
    external_wall_length: float = 0.0
    display_rows: list[DisplayBracingRow] = Field(default_factory=list)
    line_summary: LineSummary = Field(default_factory=LineSummary)


class ReportTab(BaseModel):
    """One tab: its inputs, processed lines and summary."""

    id: str
    title: str = ""
    level_and_location: str = ""
    direction: str = ""
    floor_type: FloorType = FloorType.TIMBER
    demand_wind: float = 0.0
    demand_eq: float = 0.0
    processed_lines: list[ReportBracingline] = Field(default_factory=list)
    tab_summary: TabSummary = Field(default_factory=TabSummary)


class ReportDocument(BaseModel):
    """Bracing report for a whole project."""

    project_info: ProjectInfo = Field(default_factory=ProjectInfo)
    tabs: list[ReportTab] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible dict."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def to_markdown(self) -> str:
        """Render the report as a Markdown document."""
        info = self.project_info
        lines: list[str] = []

        lines.append(f"# Bracing Report — {info.project_name or 'Unknown'}")
        lines.append("")
        lines.append(f"**Client:** {info.client}")
        lines.append(f"**Job No:** {info.project_no}")
        lines.append(f"**Design by:** {info.designer}")
        lines.append(f"**Date:** {_format_date(info)}")
        if info.note:
            lines.append(f"**Note:** {info.note}")
        lines.append("")

        for tab in self.tabs:
            lines.extend(_tab_markdown(tab))

        return "\n".join(lines)


def _format_date(info: ProjectInfo) -> str:
    if info.date is None:
        return "N/A"
    return f"{info.date.day}/{info.date.month:02d}/{info.date.year}"


def _num(value: float | None) -> str:
    if value is None:
        return "NA"
    return f"{value:.1f}"


def _cell(text: Any) -> str:
    return str(text).replace("|", "\\|")


def _tab_markdown(tab: ReportTab) -> list[str]:
    summary = tab.tab_summary
    lines = [
        f"## {tab.title or tab.level_and_location}",
        "",
        f"**Location:** {tab.level_and_location} | "
        f"**Direction:** {tab.direction} | "
        f"**Floor Type:** {tab.floor_type.value}",
        "",
        "| | Wind | EQ |",
        "|---|------|----|",
        f"| Total Demand | {_num(tab.demand_wind)} | {_num(tab.demand_eq)} |",
        f"| Total Achieved | {_num(summary.achieved_wind)} | {_num(summary.achieved_eq)} |",
        f"| Rate | {summary.wind_rate:.1f}% {_pass_fail(summary.is_wind_ok)} "
        f"| {summary.eq_rate:.1f}% {_pass_fail(summary.is_eq_ok)} |",
        "",
    ]

    for line in tab.processed_lines:
        ls = line.line_summary
        lines.append(f"### Bracing Line {line.bracingline_no}")
        lines.append("")
        lines.append(f"**External Wall Length:** {line.external_wall_length} m")
        lines.append("")
        lines.append(
            "| Label | Sys. | Type | Length (m) / No. | Height (m) "
            "| BUs/m Wind | BUs/m EQ | Total Wind | Total EQ |"
        )
        lines.append("|---|---|---|---|---|---|---|---|---|")
        for row in line.display_rows:
            lines.append(
                f"| {_cell(row.label)} | {_cell(row.system)} | {_cell(row.type)} "
                f"| {row.length_or_count} | {row.height} "
                f"| {_num(row.wind_rating)} | {_num(row.eq_rating)} "
                f"| {_num(row.total_wind)} | {_num(row.total_eq)} |"
            )
        lines.append("")
        lines.append("| | Wind | EQ |")
        lines.append("|---|------|----|")
        lines.append(f"| Min Demand | {_num(ls.min_demand_wind)} | {_num(ls.min_demand_eq)} |")
        lines.append(f"| Total for Line | {_num(ls.line_total_wind)} | {_num(ls.line_total_eq)} |")
        lines.append(f"| Result | {_ok_ng(ls.is_wind_ok)} | {_ok_ng(ls.is_eq_ok)} |")
        lines.append("")

    return lines


def _pass_fail(ok: bool) -> str:
    return "PASS" if ok else "FAIL"


def _ok_ng(ok: bool) -> str:
    return "OK" if ok else "NG"
