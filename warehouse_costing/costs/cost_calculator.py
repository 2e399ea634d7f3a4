"""Cost calculator for the warehouse hierarchy.

Walks a warehouse graph bottom-up and records every intermediate figure:
- Resource costs over each operation's nominal time
- Operation totals
- Process totals and durations
- Warehouse totals

Totals are folded in input order exactly like the models' own cost()
methods, so a breakdown always agrees with Warehouse.total_cost().
"""

import logging
from typing import Iterable, List

from ..models.base import ordered_sum
from ..models.operation import Operation
from ..models.process import Process
from ..models.warehouse import Warehouse
from .cost_breakdown import (
    OperationCostBreakdown,
    ProcessCostBreakdown,
    ResourceCostLine,
    WarehouseCostBreakdown,
)

logger = logging.getLogger(__name__)


class CostCalculator:
    """
    Builds structured cost breakdowns from warehouse graphs.

    Example:
        calculator = CostCalculator()
        breakdown = calculator.calculate_warehouse_cost(warehouse)
        print(breakdown)  # Shows per-process totals
        df = breakdown.to_dataframe()
    """

    def calculate_operation_cost(self, operation: Operation) -> OperationCostBreakdown:
        """
        Calculate the cost of one operation, resource by resource.

        Args:
            operation: Operation to cost

        Returns:
            Operation breakdown with one line per resource
        """
        breakdown = OperationCostBreakdown(
            operation_id=operation.id,
            kind=operation.kind.value,
            duration_minutes=operation.duration_minutes(),
        )

        for resource in operation.resources:
            breakdown.resource_costs.append(
                ResourceCostLine(
                    resource_name=resource.name,
                    kind=resource.kind,
                    cost=resource.cost(operation.nominal_time),
                )
            )

        breakdown.total_cost = ordered_sum(line.cost for line in breakdown.resource_costs)
        return breakdown

    def calculate_process_cost(self, process: Process) -> ProcessCostBreakdown:
        """
        Calculate the cost and duration of a process.

        Args:
            process: Process to cost

        Returns:
            Process breakdown with one entry per operation
        """
        breakdown = ProcessCostBreakdown(process_id=process.id, kind=process.kind.value)

        for operation in process.operations:
            breakdown.operations.append(self.calculate_operation_cost(operation))

        breakdown.total_cost = ordered_sum(op.total_cost for op in breakdown.operations)
        breakdown.duration_minutes = ordered_sum(
            (op.duration_minutes for op in breakdown.operations),
            start=0,
        )

        logger.debug(
            f"Process {process.id}: {breakdown.total_cost} over "
            f"{breakdown.duration_minutes} min ({len(breakdown.operations)} operations)"
        )
        return breakdown

    def calculate_warehouse_cost(self, warehouse: Warehouse) -> WarehouseCostBreakdown:
        """
        Calculate total cost and duration of a warehouse.

        Args:
            warehouse: Warehouse to cost

        Returns:
            Complete breakdown down to individual resources
        """
        breakdown = WarehouseCostBreakdown(warehouse_id=warehouse.id, kind=warehouse.kind.value)

        for process in warehouse.processes:
            breakdown.processes.append(self.calculate_process_cost(process))

        breakdown.total_cost = ordered_sum(p.total_cost for p in breakdown.processes)
        breakdown.total_duration_minutes = ordered_sum(
            (p.duration_minutes for p in breakdown.processes),
            start=0,
        )

        logger.info(
            f"Warehouse {warehouse.id} ({warehouse.kind.value}): "
            f"cost {breakdown.total_cost}, duration {breakdown.total_duration_minutes} min"
        )
        return breakdown

    def calculate_portfolio_cost(self, warehouses: Iterable[Warehouse]) -> List[WarehouseCostBreakdown]:
        """Calculate breakdowns for several warehouses, in input order."""
        return [self.calculate_warehouse_cost(warehouse) for warehouse in warehouses]
