"""Centralized constants for warehouse costing.

This module holds the fixed values used across the cost model and the
report renderer. Keeping them in one place keeps report wording and unit
conversions consistent.
"""

# ============================================================================
# TIME CONSTANTS
# ============================================================================

#: Minutes in one hour, used to convert nominal times to billable hours
MINUTES_PER_HOUR = 60


# ============================================================================
# RESOURCE CONSTANTS
# ============================================================================

#: Upper bound of an AGV battery level (percent)
MAX_BATTERY_LEVEL = 100.0

#: Prefix used to derive a vehicle's display name from its identifier
AGV_NAME_PREFIX = "AGV-"


# ============================================================================
# REPORT CONSTANTS
# ============================================================================

#: Currency label appended to every cost in text reports
DEFAULT_CURRENCY = "EUR"

#: Line printed between processes in a warehouse report
REPORT_DIVIDER = "-" * 34

#: Indentation in front of each resource bullet in an operation description
RESOURCE_INDENT = " " * 3
