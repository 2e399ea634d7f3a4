"""Resource models and their costing rules.

A resource is anything an operation consumes while it runs. Each kind
supplies its own cost formula:

- Human, software and hardware resources are billed by the hour
- Materials are billed per unit consumed, independent of duration
- Vehicles (AGVs) are billed by the hour plus a fixed consumption surcharge

Variants form a closed set tagged by ``kind``; the ``Resource`` union lets
operations hold any of them and lets graphs be validated from plain dicts.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from ..constants import AGV_NAME_PREFIX, MAX_BATTERY_LEVEL, MINUTES_PER_HOUR
from .base import CostingModel
from .position import Position
from .time_value import Time


class ResourceKind(str, Enum):
    """Kind of resource, used as the union discriminator."""
    HUMAN = "human"
    MATERIAL = "material"
    SOFTWARE = "software"
    HARDWARE = "hardware"
    VEHICLE = "vehicle"


def hourly_cost(duration: Time, hourly_rate: float) -> float:
    """
    Cost of holding a resource for a duration at an hourly rate.

    Args:
        duration: Time the resource is engaged
        hourly_rate: Cost per hour

    Returns:
        (minutes / 60) * hourly_rate
    """
    return (duration.to_minutes() / MINUTES_PER_HOUR) * hourly_rate


class BaseResource(CostingModel, ABC):
    """
    Common shape of every resource kind.

    Attributes:
        kind: Resource kind tag, fixed by each variant
        name: Human-readable resource name
    """
    kind: str = Field(..., description="Resource kind tag")
    name: str = Field(..., description="Resource name")

    @property
    def resource_kind(self) -> ResourceKind:
        """Kind as an enum member."""
        return ResourceKind(self.kind)

    @abstractmethod
    def cost(self, duration: Time) -> float:
        """
        Cost of using this resource for the given duration.

        Args:
            duration: Nominal time of the operation using the resource

        Returns:
            Non-negative cost
        """

    def describe(self) -> str:
        """One-line label used in operation descriptions."""
        return self.name

    def __str__(self) -> str:
        """String representation."""
        return self.describe()


class HumanResource(BaseResource):
    """
    Worker billed by the hour.

    Attributes:
        hourly_rate: Labor cost per hour
        skill_level: Free-form qualification label (e.g. "Supervisor")
    """
    kind: Literal["human"] = "human"
    hourly_rate: float = Field(..., description="Labor cost per hour", ge=0)
    skill_level: str = Field(default="", description="Qualification label")

    def cost(self, duration: Time) -> float:
        return hourly_cost(duration, self.hourly_rate)

    def describe(self) -> str:
        return f"Human: {self.name} ({self.skill_level})"


class MaterialResource(BaseResource):
    """
    Consumable billed per unit.

    The cost does not depend on how long the operation takes.

    Attributes:
        unit_price: Price of one unit
        quantity: Units consumed by the operation
    """
    kind: Literal["material"] = "material"
    unit_price: float = Field(..., description="Price per unit", ge=0)
    quantity: int = Field(..., description="Units consumed", ge=0)

    def cost(self, duration: Time) -> float:
        return self.quantity * self.unit_price

    def describe(self) -> str:
        return f"Material: {self.name} (Qty: {self.quantity})"


class SoftwareResource(BaseResource):
    """
    Software license billed by the hour.

    Attributes:
        hourly_rate: License cost per hour
        version: Version label
    """
    kind: Literal["software"] = "software"
    hourly_rate: float = Field(..., description="License cost per hour", ge=0)
    version: str = Field(default="", description="Software version")

    def cost(self, duration: Time) -> float:
        return hourly_cost(duration, self.hourly_rate)

    def describe(self) -> str:
        return f"Software: {self.name} v{self.version}"


class HardwareResource(BaseResource):
    """Stationary equipment billed by the hour."""
    kind: Literal["hardware"] = "hardware"
    hourly_rate: float = Field(..., description="Equipment cost per hour", ge=0)

    def cost(self, duration: Time) -> float:
        return hourly_cost(duration, self.hourly_rate)

    def describe(self) -> str:
        return f"Hardware: {self.name}"


class VehicleResource(BaseResource):
    """
    Automated guided vehicle (AGV).

    Billed like hardware, plus a fixed consumption surcharge every time it is
    used by an operation. Battery, recharge time, position and speeds are
    descriptive and do not influence the cost.

    Attributes:
        identifier: Vehicle ID; the name defaults to "AGV-<identifier>"
        hourly_rate: Operating cost per hour
        battery_level: Charge in percent (0-100)
        consumption_rate: Fixed surcharge per use
        recharge_time: Time needed for a full recharge
        position: Current floor position
        max_speed: Maximum speed
        current_speed: Current speed (not checked against max_speed)
    """
    kind: Literal["vehicle"] = "vehicle"
    identifier: str = Field(..., description="Vehicle identifier")
    name: str = Field(default="", description="Display name")
    hourly_rate: float = Field(..., description="Operating cost per hour", ge=0)
    battery_level: float = Field(
        default=MAX_BATTERY_LEVEL,
        description="Battery charge in percent",
        ge=0,
        le=MAX_BATTERY_LEVEL
    )
    consumption_rate: float = Field(
        default=0.0,
        description="Fixed energy surcharge per use",
        ge=0
    )
    recharge_time: Time = Field(default_factory=Time, description="Full recharge duration")
    position: Position = Field(default_factory=Position, description="Floor position")
    max_speed: float = Field(default=0.0, description="Maximum speed", ge=0)
    current_speed: float = Field(default=0.0, description="Current speed", ge=0)

    @model_validator(mode="before")
    @classmethod
    def derive_name(cls, data):
        """Name the vehicle after its identifier when no name is given."""
        if isinstance(data, dict) and not data.get("name") and "identifier" in data:
            data = {**data, "name": f"{AGV_NAME_PREFIX}{data['identifier']}"}
        return data

    def hardware_cost(self, duration: Time) -> float:
        """Time-based part of the cost, without the surcharge."""
        return hourly_cost(duration, self.hourly_rate)

    def cost(self, duration: Time) -> float:
        return self.hardware_cost(duration) + self.consumption_rate

    def describe(self) -> str:
        return (
            f"AGV {self.identifier} | Battery: {self.battery_level}% "
            f"| Position: {self.position}"
        )


Resource = Annotated[
    Union[
        HumanResource,
        MaterialResource,
        SoftwareResource,
        HardwareResource,
        VehicleResource,
    ],
    Field(discriminator="kind"),
]
