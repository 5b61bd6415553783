"""Library-wide defaults for fiscal period and cost calculations."""

# April 1 fiscal year; label year is the calendar year of the start month
FISCAL_YEAR_START_MONTH = 4

DEFAULT_AMORTIZATION_PERIOD_MONTHS = 12

CURRENCY_DECIMALS = 2

DAYS_PER_WEEK = 7

# Number of fiscal years offered around the current one
FISCAL_YEAR_CHOICE_SPAN = 5
