"""Plain-text rendering of operations, processes and warehouses.

Every function returns a string and leaves output to the caller. Figures
are taken from the models' own aggregation methods and written with the
shortest repr that round-trips, so numbers read back from a report equal
the computed values exactly.

Layout:
    Production Warehouse: <id>
    Process ID: <id> (<kind>)
    Operation: <id> (<description>)
    Duration: <h>h <m>min
    Resources:
       - <resource>
    Operation Cost: <cost> EUR

    Total Process Time: <minutes> minutes
    Total Process Cost: <cost> EUR

    ----------------------------------
    Total Production Time: <minutes> minutes
    Total Production Cost: <cost> EUR
"""

import logging
from typing import TYPE_CHECKING, Optional

from .report_config import DEFAULT_REPORT_CONFIG, ReportConfig

if TYPE_CHECKING:
    from ..models.operation import Operation
    from ..models.process import Process
    from ..models.warehouse import Warehouse

logger = logging.getLogger(__name__)


def format_cost(value: float, config: Optional[ReportConfig] = None) -> str:
    """Format a cost figure with its currency label."""
    config = config or DEFAULT_REPORT_CONFIG
    return f"{float(value)!r} {config.currency}"


def describe_operation(operation: "Operation", config: Optional[ReportConfig] = None) -> str:
    """
    Describe one operation with its resources and cost.

    Args:
        operation: Operation to describe
        config: Presentation options (defaults when None)

    Returns:
        Multi-line description without trailing newline
    """
    config = config or DEFAULT_REPORT_CONFIG
    lines = [
        f"Operation: {operation.id} ({operation.description})",
        f"Duration: {operation.nominal_time}",
        "Resources:",
    ]
    lines.extend(
        f"{config.resource_indent}- {resource.describe()}"
        for resource in operation.resources
    )
    lines.append(f"Operation Cost: {format_cost(operation.cost(), config)}")
    return "\n".join(lines)


def describe_process(process: "Process", config: Optional[ReportConfig] = None) -> str:
    """
    Describe a process: each operation followed by the process totals.

    Args:
        process: Process to describe
        config: Presentation options (defaults when None)

    Returns:
        Multi-line description ending with a newline
    """
    config = config or DEFAULT_REPORT_CONFIG
    data = f"Process ID: {process.id} ({process.kind.label})\n"
    for operation in process.operations:
        data += describe_operation(operation, config) + "\n\n"
    data += f"Total Process Time: {process.duration_minutes()} minutes\n"
    data += f"Total Process Cost: {format_cost(process.cost(), config)}\n"
    return data


def render_warehouse_report(warehouse: "Warehouse", config: Optional[ReportConfig] = None) -> str:
    """
    Render the full report of a warehouse.

    Args:
        warehouse: Warehouse to report on
        config: Presentation options (defaults when None)

    Returns:
        Report text: header, one block per process separated by the divider,
        then the warehouse totals labelled by warehouse kind
    """
    config = config or DEFAULT_REPORT_CONFIG
    label = warehouse.kind.label

    parts = [f"{label} Warehouse: {warehouse.id}\n"]
    for process in warehouse.processes:
        parts.append(describe_process(process, config) + "\n")
        parts.append(config.divider + "\n")
    parts.append(f"Total {label} Time: {warehouse.total_duration_minutes()} minutes\n")
    parts.append(f"Total {label} Cost: {format_cost(warehouse.total_cost(), config)}")

    logger.debug(
        f"Rendered report for {label.lower()} warehouse {warehouse.id} "
        f"({len(warehouse.processes)} processes)"
    )
    return "".join(parts)
