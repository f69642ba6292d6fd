"""bracecalc — wind and earthquake bracing capacity checks for timber-framed buildings."""

__version__ = "1.0.0"

from bracecalc.calculation.lines import LineSummary
from bracecalc.calculation.tabs import TabSummary
from bracecalc.catalog.custom_store import CustomBracingStore
from bracecalc.catalog.loader import load_catalog
from bracecalc.catalog.merge import merge_catalog
from bracecalc.engine import BracingEngine
from bracecalc.models.catalog import BracingData, BracingSystem, BracingType, CustomBracing
from bracecalc.models.project import (
    BracinglineData,
    BracingRow,
    DisplayBracingRow,
    FloorType,
    ProjectInfo,
    Tab,
    TabData,
)
from bracecalc.report.assembler import assemble_report
from bracecalc.report.models import ReportDocument
from bracecalc.settings import Settings, load_settings

__all__ = [
    "__version__",
    # Engine
    "BracingEngine",
    "assemble_report",
    "load_catalog",
    "merge_catalog",
    # Catalog
    "BracingData",
    "BracingSystem",
    "BracingType",
    "CustomBracing",
    "CustomBracingStore",
    # Project snapshot
    "BracingRow",
    "BracinglineData",
    "DisplayBracingRow",
    "FloorType",
    "ProjectInfo",
    "Tab",
    "TabData",
    # Results
    "LineSummary",
    "ReportDocument",
    "TabSummary",
    # Settings
    "Settings",
    "load_settings",
]
