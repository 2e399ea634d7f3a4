"""Text reporting for the costing hierarchy.

Key components:
- ReportConfig: Presentation options (currency label, divider, indentation)
- describe_operation / describe_process: Per-level descriptions
- render_warehouse_report: Full warehouse report
"""

from .report_config import DEFAULT_REPORT_CONFIG, ReportConfig
from .text_report import (
    describe_operation,
    describe_process,
    format_cost,
    render_warehouse_report,
)

__all__ = [
    "DEFAULT_REPORT_CONFIG",
    "ReportConfig",
    "describe_operation",
    "describe_process",
    "format_cost",
    "render_warehouse_report",
]
