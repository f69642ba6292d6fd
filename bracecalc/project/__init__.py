"""Default project entities for editors and examples."""

from bracecalc.project.defaults import (
    IdSequence,
    new_bracingline,
    new_project_info,
    new_row,
    new_tab_data,
)

__all__ = ["IdSequence", "new_bracingline", "new_project_info", "new_row", "new_tab_data"]
