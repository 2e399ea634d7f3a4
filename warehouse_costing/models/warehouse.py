"""Warehouse model: top-level aggregate of processes."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..reporting.report_config import ReportConfig
from ..reporting.text_report import render_warehouse_report
from .base import CostingModel, ordered_sum
from .process import Process


class WarehouseKind(str, Enum):
    """Type of warehouse. Changes report wording only."""
    PRODUCTION = "production"
    STORAGE = "storage"

    @property
    def label(self) -> str:
        """Display label ("Production" or "Storage")."""
        return self.value.capitalize()


class Warehouse(CostingModel):
    """
    Operational site composed of processes.

    total_cost() and total_duration_minutes() are available without
    rendering a report.

    Attributes:
        id: Warehouse identifier
        processes: Processes in report order
        kind: Warehouse type (production or storage)
    """
    id: str = Field(..., description="Warehouse identifier")
    processes: List[Process] = Field(default_factory=list, description="Processes in order")
    kind: WarehouseKind = Field(..., description="Warehouse type")

    def total_cost(self) -> float:
        """Sum of process costs, in process order."""
        return ordered_sum(process.cost() for process in self.processes)

    def total_duration_minutes(self) -> int:
        """Sum of process durations in minutes."""
        return ordered_sum(
            (process.duration_minutes() for process in self.processes),
            start=0,
        )

    def report(self, config: Optional[ReportConfig] = None) -> str:
        """Full text report; the caller decides where it goes."""
        return render_warehouse_report(self, config)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.kind.label} Warehouse: {self.id}"
