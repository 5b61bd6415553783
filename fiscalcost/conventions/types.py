"""
Basic types and enums used across the fiscal period system.
"""

from enum import Enum


class FiscalPeriodKind(Enum):
    """Fiscal period lengths."""

    QUARTER = 3
    HALF = 6
    YEAR = 12

    def months(self) -> int:
        return self.value

    def periods_per_year(self) -> int:
        return 12 // self.value

