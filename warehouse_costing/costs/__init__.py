"""Cost breakdown module.

Structured counterpart of the text report: every figure of a warehouse
graph, from single resources up to warehouse totals.

Key components:
- ResourceCostLine / OperationCostBreakdown / ProcessCostBreakdown /
  WarehouseCostBreakdown: Data models for each level
- CostCalculator: Builds breakdowns from model graphs
"""

from .cost_breakdown import (
    BREAKDOWN_COLUMNS,
    OperationCostBreakdown,
    ProcessCostBreakdown,
    ResourceCostLine,
    WarehouseCostBreakdown,
)
from .cost_calculator import CostCalculator

__all__ = [
    "BREAKDOWN_COLUMNS",
    "ResourceCostLine",
    "OperationCostBreakdown",
    "ProcessCostBreakdown",
    "WarehouseCostBreakdown",
    "CostCalculator",
]
