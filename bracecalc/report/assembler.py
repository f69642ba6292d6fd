"""Assemble a ReportDocument from a project snapshot.

Pure: the same snapshot always yields an equal document, and no input is
modified.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from bracecalc.calculation.lines import summarize_line
from bracecalc.calculation.rows import calculate_line_rows
from bracecalc.calculation.tabs import summarize_tab
from bracecalc.models.catalog import BracingData
from bracecalc.models.project import BracinglineData, ProjectInfo, Tab, TabData
from bracecalc.report.models import ReportBracingline, ReportDocument, ReportTab

logger = logging.getLogger(__name__)


def process_bracingline(
    line: BracinglineData,
    tab_data: TabData,
    catalog: BracingData,
) -> ReportBracingline:
    """Resolve and check one bracing line of *tab_data*."""
    display_rows = calculate_line_rows(line.rows, catalog, tab_data.floor_type)
    line_summary = summarize_line(
        display_rows,
        line.external_wall_length,
        tab_data.demand_wind,
        tab_data.demand_eq,
        len(tab_data.bracinglines),
    )
    return ReportBracingline(
        id=line.id,
        bracingline_no=line.bracingline_no,
        external_wall_length=line.external_wall_length,
        display_rows=display_rows,
        line_summary=line_summary,
    )


def process_tab(tab: Tab, tab_data: TabData, catalog: BracingData) -> ReportTab:
    """Process every line of a tab and summarise the tab."""
    processed_lines = [
        process_bracingline(line, tab_data, catalog) for line in tab_data.bracinglines
    ]
    tab_summary = summarize_tab(
        (line.line_summary for line in processed_lines),
        tab_data.demand_wind,
        tab_data.demand_eq,
    )
    return ReportTab(
        id=tab.id,
        title=tab.title,
        level_and_location=tab_data.level_and_location,
        direction=tab_data.direction,
        floor_type=tab_data.floor_type,
        demand_wind=tab_data.demand_wind,
        demand_eq=tab_data.demand_eq,
        processed_lines=processed_lines,
        tab_summary=tab_summary,
    )


def assemble_report(
    project_info: ProjectInfo,
    tabs: list[Tab],
    tabs_data: Mapping[str, TabData],
    catalog: BracingData,
) -> ReportDocument:
    """Build the full report, one entry per tab in *tabs* order.

    Tabs with no entry in *tabs_data* are left out.

    Raises
    ------
    ValueError
        If *catalog* is None.
    """
    if catalog is None:
        raise ValueError("Bracing catalog is not loaded.")

    report_tabs: list[ReportTab] = []
    for tab in tabs:
        tab_data = tabs_data.get(tab.id)
        if tab_data is None:
            logger.warning("No data for tab %s, skipped", tab.id)
            continue
        report_tabs.append(process_tab(tab, tab_data, catalog))

    return ReportDocument(
        project_info=project_info.model_copy(deep=True),
        tabs=report_tabs,
    )
