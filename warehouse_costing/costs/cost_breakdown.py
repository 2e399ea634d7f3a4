"""Cost breakdown data models.

Data classes mirroring the costing hierarchy for analysis and reporting.
Each level keeps its children in input order together with its own totals.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

import pandas as pd

from ..models.base import ordered_sum

BREAKDOWN_COLUMNS = [
    "warehouse_id",
    "process_id",
    "operation_id",
    "resource",
    "kind",
    "duration_minutes",
    "cost",
]


@dataclass
class ResourceCostLine:
    """
    Cost of one resource within one operation.

    Attributes:
        resource_name: Name of the resource
        kind: Resource kind value (human, material, ...)
        cost: Cost over the operation's nominal time
    """
    resource_name: str
    kind: str
    cost: float = 0.0

    def __str__(self) -> str:
        """String representation."""
        return f"{self.resource_name} [{self.kind}]: {self.cost:,.2f}"


@dataclass
class OperationCostBreakdown:
    """
    Detailed cost of one operation.

    Attributes:
        operation_id: Operation identifier
        kind: Operation kind value
        duration_minutes: Nominal time in minutes
        total_cost: Sum of resource costs
        resource_costs: Per-resource cost lines
    """
    operation_id: str
    kind: str
    duration_minutes: int = 0
    total_cost: float = 0.0
    resource_costs: List[ResourceCostLine] = field(default_factory=list)

    def __str__(self) -> str:
        """String representation."""
        return (
            f"Operation {self.operation_id}: {self.total_cost:,.2f} "
            f"({self.duration_minutes} min, {len(self.resource_costs)} resources)"
        )


@dataclass
class ProcessCostBreakdown:
    """
    Detailed cost of one process.

    Attributes:
        process_id: Process identifier
        kind: Process kind value
        duration_minutes: Sum of operation durations
        total_cost: Sum of operation costs
        operations: Per-operation breakdowns
    """
    process_id: str
    kind: str
    duration_minutes: int = 0
    total_cost: float = 0.0
    operations: List[OperationCostBreakdown] = field(default_factory=list)

    def __str__(self) -> str:
        """String representation."""
        return (
            f"Process {self.process_id}: {self.total_cost:,.2f} "
            f"({self.duration_minutes} min, {len(self.operations)} operations)"
        )


@dataclass
class WarehouseCostBreakdown:
    """
    Aggregated cost of a warehouse across all its processes.

    Attributes:
        warehouse_id: Warehouse identifier
        kind: Warehouse kind value
        total_cost: Sum of process costs
        total_duration_minutes: Sum of process durations
        processes: Per-process breakdowns
    """
    warehouse_id: str
    kind: str
    total_cost: float = 0.0
    total_duration_minutes: int = 0
    processes: List[ProcessCostBreakdown] = field(default_factory=list)

    def __str__(self) -> str:
        """String representation."""
        lines = [
            f"Warehouse {self.warehouse_id} ({self.kind}): {self.total_cost:,.2f} "
            f"over {self.total_duration_minutes} min"
        ]
        lines.extend(f"  {process}" for process in self.processes)
        return "\n".join(lines)

    def get_cost_proportions(self) -> Dict[str, float]:
        """
        Get proportion of the total cost carried by each process.

        Returns:
            Dictionary mapping process id to proportion (0.0 to 1.0)
        """
        if self.total_cost == 0:
            return {process.process_id: 0.0 for process in self.processes}

        return {
            process.process_id: process.total_cost / self.total_cost
            for process in self.processes
        }

    def cost_by_resource_kind(self) -> Dict[str, float]:
        """
        Total cost per resource kind across the warehouse.

        Returns:
            Dictionary mapping resource kind to cost, in first-seen order
        """
        grouped: Dict[str, List[float]] = defaultdict(list)
        for process in self.processes:
            for operation in process.operations:
                for line in operation.resource_costs:
                    grouped[line.kind].append(line.cost)
        return {kind: ordered_sum(costs) for kind, costs in grouped.items()}

    def to_dict_rows(self) -> List[Dict]:
        """One row per resource cost line, for DataFrame export."""
        rows = []
        for process in self.processes:
            for operation in process.operations:
                for line in operation.resource_costs:
                    rows.append({
                        "warehouse_id": self.warehouse_id,
                        "process_id": process.process_id,
                        "operation_id": operation.operation_id,
                        "resource": line.resource_name,
                        "kind": line.kind,
                        "duration_minutes": operation.duration_minutes,
                        "cost": line.cost,
                    })
        return rows

    def to_dataframe(self) -> pd.DataFrame:
        """Resource cost lines as a DataFrame (empty frame keeps the columns)."""
        return pd.DataFrame(self.to_dict_rows(), columns=BREAKDOWN_COLUMNS)
