"""Time value model used as the nominal duration of operations."""

from pydantic import Field

from ..constants import MINUTES_PER_HOUR
from .base import CostingModel


class Time(CostingModel):
    """
    Duration expressed as hours and minutes.

    Minutes are not normalized: Time(hours=1, minutes=90) is valid and lasts
    150 minutes.

    Attributes:
        hours: Whole hours (>= 0)
        minutes: Additional minutes (>= 0)
    """
    hours: int = Field(default=0, description="Whole hours", ge=0)
    minutes: int = Field(default=0, description="Additional minutes", ge=0)

    def __init__(self, hours: int = 0, minutes: int = 0, **data):
        """Allow positional construction, e.g. Time(2, 30)."""
        super().__init__(hours=hours, minutes=minutes, **data)

    @classmethod
    def from_minutes(cls, total_minutes: int) -> "Time":
        """
        Split a minute count into hours and remaining minutes.

        Args:
            total_minutes: Non-negative number of minutes

        Returns:
            Time with minutes in 0..59
        """
        hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)
        return cls(hours, minutes)

    def to_minutes(self) -> int:
        """Total duration in minutes."""
        return self.hours * MINUTES_PER_HOUR + self.minutes

    def __str__(self) -> str:
        """String representation."""
        return f"{self.hours}h {self.minutes}min"
