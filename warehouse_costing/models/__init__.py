"""Data models for the warehouse costing hierarchy."""

from .base import CostingModel, InvalidInputError, ordered_sum
from .time_value import Time
from .position import Position
from .resource import (
    BaseResource,
    HardwareResource,
    HumanResource,
    MaterialResource,
    Resource,
    ResourceKind,
    SoftwareResource,
    VehicleResource,
    hourly_cost,
)
from .operation import Operation, OperationKind
from .process import Process, ProcessKind
from .warehouse import Warehouse, WarehouseKind

__all__ = [
    # Base
    "CostingModel",
    "InvalidInputError",
    "ordered_sum",
    # Values
    "Time",
    "Position",
    # Resources
    "BaseResource",
    "HardwareResource",
    "HumanResource",
    "MaterialResource",
    "Resource",
    "ResourceKind",
    "SoftwareResource",
    "VehicleResource",
    "hourly_cost",
    # Hierarchy
    "Operation",
    "OperationKind",
    "Process",
    "ProcessKind",
    "Warehouse",
    "WarehouseKind",
]
