"""Data models for the bracing catalog and the editable project snapshot."""

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

__all__ = [
    "BracingData",
    "BracingRow",
    "BracingSystem",
    "BracingType",
    "BracinglineData",
    "CustomBracing",
    "DisplayBracingRow",
    "FloorType",
    "ProjectInfo",
    "Tab",
    "TabData",
]
