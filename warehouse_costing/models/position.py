"""Position model for mobile resources."""

from pydantic import Field

from .base import CostingModel


class Position(CostingModel):
    """
    2D floor coordinate of a vehicle.

    Descriptive only: positions never enter a cost or duration calculation.
    """
    x: float = Field(default=0.0, description="X coordinate")
    y: float = Field(default=0.0, description="Y coordinate")

    def __init__(self, x: float = 0.0, y: float = 0.0, **data):
        """Allow positional construction, e.g. Position(2, 1)."""
        super().__init__(x=x, y=y, **data)

    def __str__(self) -> str:
        """String representation."""
        return f"({self.x}, {self.y})"
