"""Operation model: a unit of work costed over its nominal time."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from ..reporting.report_config import ReportConfig
from ..reporting.text_report import describe_operation
from .base import CostingModel, ordered_sum
from .resource import Resource
from .time_value import Time


class OperationKind(str, Enum):
    """Type of operation. Affects labels only, never the cost."""
    TRANSPORT = "transport"
    HUMAN = "human"

    @property
    def label(self) -> str:
        """Display label."""
        return self.value.capitalize()


class Operation(CostingModel):
    """
    Activity performed over a nominal duration with a set of resources.

    Every resource is costed against the same nominal time; there is no
    per-resource duration. An operation without resources is valid and
    costs nothing.

    Attributes:
        id: Operation identifier
        description: What the operation does
        nominal_time: Planned duration
        resources: Resources used, in report order
        kind: Operation type (transport or human)
    """
    id: str = Field(..., description="Operation identifier")
    description: str = Field(default="", description="Operation description")
    nominal_time: Time = Field(..., description="Planned duration")
    resources: List[Resource] = Field(default_factory=list, description="Resources used")
    kind: OperationKind = Field(..., description="Operation type")

    @property
    def resource_count(self) -> int:
        """Number of resources used by the operation."""
        return len(self.resources)

    def resource_costs(self) -> List[float]:
        """Cost of each resource over the nominal time, in resource order."""
        return [resource.cost(self.nominal_time) for resource in self.resources]

    def cost(self) -> float:
        """Total cost of the operation (0.0 without resources)."""
        return ordered_sum(self.resource_costs())

    def duration_minutes(self) -> int:
        """Duration of the operation, i.e. its nominal time in minutes."""
        return self.nominal_time.to_minutes()

    def describe(self, config: Optional[ReportConfig] = None) -> str:
        """Multi-line description with resources and cost."""
        return describe_operation(self, config)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.kind.label} Operation: {self.id}"
