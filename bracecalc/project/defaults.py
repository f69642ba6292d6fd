"""Factories for newly created rows, bracing lines and tabs.

Identifiers come from an :class:`IdSequence` owned by the caller, so two
editing sessions never share a counter.
"""

from __future__ import annotations

import datetime as dt

from bracecalc.config import MIN_BRACINGLINES_PER_TAB
from bracecalc.models.project import BracinglineData, BracingRow, ProjectInfo, Tab, TabData


class IdSequence:
    """Monotonically increasing integer ids."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """The id the next call to :meth:`next` will return."""
        return self._next


def new_row(bracingline_no: str, row_count: int, ids: IdSequence) -> BracingRow:
    """A default row labelled ``<line>-<n>`` where n follows *row_count*."""
    return BracingRow(id=ids.next(), label=f"{bracingline_no}-{row_count + 1}")


def new_bracingline(line_id: int, row_ids: IdSequence) -> BracinglineData:
    """A default bracing line ``BL-<id>`` holding one default row."""
    bracingline_no = f"BL-{line_id}"
    return BracinglineData(
        id=line_id,
        bracingline_no=bracingline_no,
        external_wall_length=0.0,
        rows=[new_row(bracingline_no, 0, row_ids)],
    )


def new_tab_data(tab: Tab, line_ids: IdSequence, row_ids: IdSequence) -> TabData:
    """Default inputs for *tab* with the minimum number of bracing lines."""
    return TabData(
        id=tab.id,
        level_and_location=tab.title,
        bracinglines=[
            new_bracingline(line_ids.next(), row_ids)
            for _ in range(MIN_BRACINGLINES_PER_TAB)
        ],
    )


def new_project_info(today: dt.date | None = None) -> ProjectInfo:
    return ProjectInfo(date=today or dt.date.today())
