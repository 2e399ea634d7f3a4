"""Process model: an ordered sequence of operations."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..reporting.report_config import ReportConfig
from ..reporting.text_report import describe_process
from .base import CostingModel, ordered_sum
from .operation import Operation


class ProcessKind(str, Enum):
    """Type of business process. Both kinds aggregate identically."""
    INDUSTRIAL = "industrial"
    MANAGEMENT = "management"

    @property
    def label(self) -> str:
        """Display label."""
        return self.value.capitalize()


class Process(CostingModel):
    """
    Business workflow made of operations.

    Attributes:
        id: Process identifier
        operations: Operations in execution order
        kind: Process type (industrial or management)
    """
    id: str = Field(..., description="Process identifier")
    operations: List[Operation] = Field(default_factory=list, description="Operations in order")
    kind: ProcessKind = Field(..., description="Process type")

    def cost(self) -> float:
        """Sum of operation costs, in operation order."""
        return ordered_sum(operation.cost() for operation in self.operations)

    def duration_minutes(self) -> int:
        """Sum of operation durations in minutes."""
        return ordered_sum(
            (operation.duration_minutes() for operation in self.operations),
            start=0,
        )

    def describe(self, config: Optional[ReportConfig] = None) -> str:
        """Multi-line description of every operation plus process totals."""
        return describe_process(self, config)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.kind.label} Process: {self.id}"
