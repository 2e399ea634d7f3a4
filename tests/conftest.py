"""Pytest configuration and shared fixtures."""

import pytest

from warehouse_costing.models import (
    HardwareResource,
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


@pytest.fixture
def john():
    """Fixture for a skilled worker at 20/h."""
    return HumanResource(name="John", hourly_rate=20.0, skill_level="Skilled Worker")


@pytest.fixture
def mary():
    """Fixture for a supervisor at 25/h."""
    return HumanResource(name="Mary", hourly_rate=25.0, skill_level="Supervisor")


@pytest.fixture
def steel_beams():
    """Fixture for 5 steel beams at 15 per unit."""
    return MaterialResource(name="Steel Beams", unit_price=15.0, quantity=5)


@pytest.fixture
def plastic_boxes():
    """Fixture for 10 plastic boxes at 5 per unit."""
    return MaterialResource(name="Plastic Boxes", unit_price=5.0, quantity=10)


@pytest.fixture
def warehouse_app():
    """Fixture for warehouse software at 10/h."""
    return SoftwareResource(name="WarehouseApp", hourly_rate=10.0, version="1.2")


@pytest.fixture
def inventory_sys():
    """Fixture for inventory software at 12/h."""
    return SoftwareResource(name="InventorySys", hourly_rate=12.0, version="2.0")


@pytest.fixture
def forklift():
    """Fixture for stationary hardware at 14/h."""
    return HardwareResource(name="Forklift", hourly_rate=14.0)


@pytest.fixture
def agv_a1():
    """Fixture for AGV A1: 8/h plus 5.5 per use."""
    return VehicleResource(
        identifier="A1",
        hourly_rate=8.0,
        battery_level=80.0,
        consumption_rate=5.5,
        recharge_time=Time(1, 0),
        position=Position(0.0, 0.0),
        max_speed=2.0,
        current_speed=1.5,
    )


@pytest.fixture
def agv_a2():
    """Fixture for AGV A2: 9/h plus 6.0 per use."""
    return VehicleResource(
        identifier="A2",
        hourly_rate=9.0,
        battery_level=85.0,
        consumption_rate=6.0,
        recharge_time=Time(1, 15),
        position=Position(2.0, 1.0),
        max_speed=2.5,
        current_speed=2.0,
    )


@pytest.fixture
def move_materials(john, agv_a1, steel_beams):
    """Transport operation OP1 (2h): 40.0 + 21.5 + 75.0 = 136.5."""
    return Operation(
        id="OP1",
        description="Move materials",
        nominal_time=Time(2, 0),
        resources=[john, agv_a1, steel_beams],
        kind=OperationKind.TRANSPORT,
    )


@pytest.fixture
def package_goods(mary, warehouse_app, plastic_boxes):
    """Human operation OP2 (1h30): 37.5 + 15.0 + 50.0 = 102.5."""
    return Operation(
        id="OP2",
        description="Update system and package goods",
        nominal_time=Time(1, 30),
        resources=[mary, warehouse_app, plastic_boxes],
        kind=OperationKind.HUMAN,
    )


@pytest.fixture
def deliver_products(agv_a2, inventory_sys):
    """Transport operation OP3 (2h15): 26.25 + 27.0 = 53.25."""
    return Operation(
        id="OP3",
        description="Deliver products",
        nominal_time=Time(2, 15),
        resources=[agv_a2, inventory_sys],
        kind=OperationKind.TRANSPORT,
    )


@pytest.fixture
def industrial_process(move_materials, package_goods):
    """Industrial process: 239.0 over 210 minutes."""
    return Process(
        id="IndustrialProcess01",
        operations=[move_materials, package_goods],
        kind=ProcessKind.INDUSTRIAL,
    )


@pytest.fixture
def management_process(package_goods, deliver_products):
    """Management process: 155.75 over 225 minutes."""
    return Process(
        id="ManagementProcess01",
        operations=[package_goods, deliver_products],
        kind=ProcessKind.MANAGEMENT,
    )


@pytest.fixture
def production_warehouse(industrial_process):
    """Production warehouse with the industrial process."""
    return Warehouse(
        id="Production WH",
        processes=[industrial_process],
        kind=WarehouseKind.PRODUCTION,
    )


@pytest.fixture
def storage_warehouse(management_process):
    """Storage warehouse with the management process."""
    return Warehouse(
        id="Storage WH",
        processes=[management_process],
        kind=WarehouseKind.STORAGE,
    )


@pytest.fixture
def multi_process_warehouse(industrial_process, management_process):
    """Production warehouse running both processes."""
    return Warehouse(
        id="Combined WH",
        processes=[industrial_process, management_process],
        kind=WarehouseKind.PRODUCTION,
    )
