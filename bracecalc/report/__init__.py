"""Report assembly: flatten the project snapshot into a printable document."""

from bracecalc.report.assembler import assemble_report, process_bracingline, process_tab
from bracecalc.report.models import ReportBracingline, ReportDocument, ReportTab

__all__ = [
    "ReportBracingline",
    "ReportDocument",
    "ReportTab",
    "assemble_report",
    "process_bracingline",
    "process_tab",
]
