#!/usr/bin/env python3
"""
Example: Costing a production and a storage warehouse

Builds a small warehouse graph (workers, AGVs, materials and software
spread over three operations and two processes), prints both warehouse
reports and the per-kind cost split.
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from warehouse_costing import (
    CostCalculator,
    HumanResource,
    MaterialResource,
    Operation,
    OperationKind,
    Position,
    Process,
    ProcessKind,
    SoftwareResource,
    Time,
    VehicleResource,
    Warehouse,
    WarehouseKind,
)


def build_sample_warehouses():
    """Build the sample production and storage warehouses."""
    # === RESOURCES ===
    john = HumanResource(name="John", hourly_rate=20, skill_level="Skilled Worker")
    steel = MaterialResource(name="Steel Beams", unit_price=15, quantity=5)
    warehouse_app = SoftwareResource(name="WarehouseApp", hourly_rate=10, version="1.2")
    agv_a1 = VehicleResource(
        identifier="A1",
        hourly_rate=8,
        battery_level=80,
        consumption_rate=5.5,
        recharge_time=Time(1, 0),
        position=Position(0, 0),
        max_speed=2.0,
        current_speed=1.5,
    )

    mary = HumanResource(name="Mary", hourly_rate=25, skill_level="Supervisor")
    boxes = MaterialResource(name="Plastic Boxes", unit_price=5, quantity=10)
    inventory_sys = SoftwareResource(name="InventorySys", hourly_rate=12, version="2.0")
    agv_a2 = VehicleResource(
        identifier="A2",
        hourly_rate=9,
        battery_level=85,
        consumption_rate=6.0,
        recharge_time=Time(1, 15),
        position=Position(2, 1),
        max_speed=2.5,
        current_speed=2.0,
    )

    # === OPERATIONS ===
    op1 = Operation(
        id="OP1",
        description="Move materials",
        nominal_time=Time(2, 0),
        resources=[john, agv_a1, steel],
        kind=OperationKind.TRANSPORT,
    )
    op2 = Operation(
        id="OP2",
        description="Update system and package goods",
        nominal_time=Time(1, 30),
        resources=[mary, warehouse_app, boxes],
        kind=OperationKind.HUMAN,
    )
    op3 = Operation(
        id="OP3",
        description="Deliver products",
        nominal_time=Time(2, 15),
        resources=[agv_a2, inventory_sys],
        kind=OperationKind.TRANSPORT,
    )

    # === PROCESSES ===
    industrial = Process(
        id="IndustrialProcess01",
        operations=[op1, op2],
        kind=ProcessKind.INDUSTRIAL,
    )
    management = Process(
        id="ManagementProcess01",
        operations=[op2, op3],
        kind=ProcessKind.MANAGEMENT,
    )

    # === WAREHOUSES ===
    production = Warehouse(id="Production WH", processes=[industrial], kind=WarehouseKind.PRODUCTION)
    storage = Warehouse(id="Storage WH", processes=[management], kind=WarehouseKind.STORAGE)
    return [production, storage]


def main():
    """Print the report and cost split of each sample warehouse."""
    logging.basicConfig(level=logging.INFO, format='%(levelname)s:%(name)s:%(message)s')

    warehouses = build_sample_warehouses()
    breakdowns = CostCalculator().calculate_portfolio_cost(warehouses)

    for index, (warehouse, breakdown) in enumerate(zip(warehouses, breakdowns)):
        if index:
            print("\n" + "=" * 36 + "\n")
        print(warehouse.report())
        print("\nCost by resource kind:")
        for kind, cost in breakdown.cost_by_resource_kind().items():
            print(f"  {kind:<10} {cost:>10.2f}")


if __name__ == "__main__":
    main()
