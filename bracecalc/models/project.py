"""Project snapshot models: project info, tabs, bracing lines and rows.

These are the values the editing layer hands to the calculation engine.
The engine reads them and derives new values; it never mutates them.
"""

from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from bracecalc.config import (
    DEFAULT_DEMAND_EQ,
    DEFAULT_DEMAND_WIND,
    DEFAULT_DIRECTION,
    DEFAULT_FLOOR_TYPE,
    DEFAULT_HEIGHT_M,
    DEFAULT_LENGTH_OR_COUNT,
    DEFAULT_PROJECT_NAME,
    DEFAULT_SYSTEM,
    DEFAULT_TYPE,
)


class FloorType(str, Enum):
    """Floor construction of a level; selects the rating cap."""

    TIMBER = "Timber"
    CONCRETE = "Concrete"


class ProjectInfo(BaseModel):
    """Identifying metadata printed in the report header."""

    project_name: str = DEFAULT_PROJECT_NAME
    project_no: str = ""
    client: str = ""
    designer: str = ""
    date: dt.date | None = None
    note: str = ""


class Tab(BaseModel):
    """A report tab: one level and direction."""

    id: str
    title: str = ""


class BracingRow(BaseModel):
    """One physical bracing element.

    ``system`` and ``type`` reference the catalog by name.
    ``length_or_count`` is a length in metres for length-based types and
    a count for number-based types.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    id: int | str
    label: str = ""
    system: str = DEFAULT_SYSTEM
    type: str = DEFAULT_TYPE
    length_or_count: float = DEFAULT_LENGTH_OR_COUNT
    height: float = DEFAULT_HEIGHT_M


class DisplayBracingRow(BracingRow):
    """A bracing row with its derived ratings and totals."""

    wind_rating: float | None = None
    eq_rating: float | None = None
    total_wind: float = 0.0
    total_eq: float = 0.0
    is_row_invalid: bool = False


class BracinglineData(BaseModel):
    """An ordered run of bracing rows along one wall line."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: int | str
    bracingline_no: str = ""
    external_wall_length: float = 0.0
    rows: list[BracingRow] = Field(default_factory=list)


class TabData(BaseModel):
    """Calculation inputs for one tab."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: str
    level_and_location: str = ""
    direction: str = DEFAULT_DIRECTION
    floor_type: FloorType = FloorType(DEFAULT_FLOOR_TYPE)
    demand_wind: float = DEFAULT_DEMAND_WIND
    demand_eq: float = DEFAULT_DEMAND_EQ
    bracinglines: list[BracinglineData] = Field(default_factory=list)
