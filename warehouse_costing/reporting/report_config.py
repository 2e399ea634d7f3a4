"""Presentation options for text reports."""

from dataclasses import dataclass

from ..constants import DEFAULT_CURRENCY, REPORT_DIVIDER, RESOURCE_INDENT


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for rendering descriptions and warehouse reports.

    Attributes:
        currency: Label appended to every cost figure
        divider: Line written after each process in a warehouse report
        resource_indent: Prefix in front of each resource bullet
    """
    currency: str = DEFAULT_CURRENCY
    divider: str = REPORT_DIVIDER
    resource_indent: str = RESOURCE_INDENT

    def __post_init__(self):
        """Validate configuration."""
        if not self.currency.strip():
            raise ValueError("currency label cannot be empty")
        if not self.divider:
            raise ValueError("divider cannot be empty")
        if "\n" in self.divider or "\n" in self.resource_indent:
            raise ValueError("divider and resource_indent must be single-line")


DEFAULT_REPORT_CONFIG = ReportConfig()
