"""Cost and time accounting for a warehouse's operational hierarchy.

Resources are costed against an operation's nominal time; operations roll
up into processes and processes into warehouses, yielding a total cost and
a total duration per warehouse.
"""

from .models import (
    HardwareResource,
    HumanResource,
    InvalidInputError,
    MaterialResource,
    Operation,
    OperationKind,
    Position,
    Process,
    ProcessKind,
    ResourceKind,
    SoftwareResource,
    Time,
    VehicleResource,
    Warehouse,
    WarehouseKind,
)
from .costs import CostCalculator, WarehouseCostBreakdown
from .reporting import ReportConfig

__version__ = "1.0.0"

__all__ = [
    "HardwareResource",
    "HumanResource",
    "InvalidInputError",
    "MaterialResource",
    "Operation",
    "OperationKind",
    "Position",
    "Process",
    "ProcessKind",
    "ResourceKind",
    "SoftwareResource",
    "Time",
    "VehicleResource",
    "Warehouse",
    "WarehouseKind",
    "CostCalculator",
    "WarehouseCostBreakdown",
    "ReportConfig",
]
