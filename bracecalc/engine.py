"""BracingEngine — main entry point for bracing calculations.

Usage::

    from bracecalc import BracingEngine

    engine = BracingEngine.from_file()
    summary = engine.calculate_tab(tab_data)
    report = engine.report(project_info, tabs, tabs_data)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from bracecalc.calculation.lines import LineSummary, summarize_line
from bracecalc.calculation.rows import calculate_line_rows
from bracecalc.calculation.tabs import TabSummary
from bracecalc.catalog.custom_store import CustomBracingStore
from bracecalc.catalog.loader import load_catalog
from bracecalc.catalog.merge import merge_catalog
from bracecalc.models.catalog import BracingData, CustomBracing
from bracecalc.models.project import (
    BracinglineData,
    DisplayBracingRow,
    FloorType,
    ProjectInfo,
    Tab,
    TabData,
)
from bracecalc.report.assembler import assemble_report, process_tab
from bracecalc.report.models import ReportDocument
from bracecalc.settings import Settings

logger = logging.getLogger(__name__)


class BracingEngine:
    """Resolve bracing rows and check lines and tabs against demand.

    Parameters
    ----------
    catalog:
        The base rating catalog.
    custom_store:
        Store of user-defined types overlaid on the catalog.  Defaults to
        an empty in-memory store.

    Every calculation re-reads the custom store, so edits to custom types
    apply to the next call.
    """

    def __init__(
        self,
        catalog: BracingData,
        custom_store: CustomBracingStore | None = None,
    ) -> None:
        if catalog is None:
            raise ValueError("Bracing catalog is required.")
        self.catalog = catalog
        self.custom_store = custom_store if custom_store is not None else CustomBracingStore()

    @classmethod
    def from_file(
        cls,
        catalog_path: str | Path | None = None,
        custom_store_path: str | Path | None = None,
    ) -> BracingEngine:
        """Load the catalog from disk.  Defaults to the bundled catalog."""
        return cls(load_catalog(catalog_path), CustomBracingStore(custom_store_path))

    @classmethod
    def from_settings(cls, settings: Settings) -> BracingEngine:
        return cls.from_file(settings.catalog_path, settings.custom_store_path)

    # -- catalog --------------------------------------------------------------

    def effective_catalog(self) -> BracingData:
        """Base catalog with the current custom types merged in."""
        return merge_catalog(self.catalog, self.custom_store.list_all())

    # -- calculation ----------------------------------------------------------

    def resolve_rows(
        self, line: BracinglineData, floor_type: FloorType | str
    ) -> list[DisplayBracingRow]:
        """Ratings and totals for every row of *line*."""
        return calculate_line_rows(line.rows, self.effective_catalog(), floor_type)

    def calculate_line(self, line: BracinglineData, tab_data: TabData) -> LineSummary:
        """Totals and checks for *line* within *tab_data*."""
        rows = self.resolve_rows(line, tab_data.floor_type)
        return summarize_line(
            rows,
            line.external_wall_length,
            tab_data.demand_wind,
            tab_data.demand_eq,
            len(tab_data.bracinglines),
        )

    def calculate_tab(self, tab_data: TabData) -> TabSummary:
        """Achieved capacity and rates for *tab_data*."""
        tab = Tab(id=tab_data.id, title=tab_data.level_and_location)
        return process_tab(tab, tab_data, self.effective_catalog()).tab_summary

    def report(
        self,
        project_info: ProjectInfo,
        tabs: list[Tab],
        tabs_data: Mapping[str, TabData],
    ) -> ReportDocument:
        """Assemble the project report."""
        return assemble_report(project_info, tabs, tabs_data, self.effective_catalog())

    # -- custom bracing -------------------------------------------------------

    def add_custom_bracing(self, bracing: CustomBracing) -> CustomBracing:
        return self.custom_store.create(bracing)

    def update_custom_bracing(self, bracing: CustomBracing) -> CustomBracing:
        return self.custom_store.update(bracing)

    def delete_custom_bracing(self, name: str) -> bool:
        return self.custom_store.delete(name)

    def list_custom_bracings(self) -> list[CustomBracing]:
        return self.custom_store.list_all()
