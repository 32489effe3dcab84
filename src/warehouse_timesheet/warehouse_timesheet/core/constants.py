"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SHIFT_HOURS = 8.0
DEFAULT_WAREHOUSE = "Main warehouse"
DEFAULT_SHIFT_NAME = "Day"
REPORT_RULE_WIDTH = 60

# Matches DECIMAL(18, 4) columns for rates and extras.
AMOUNT_PLACES = 4
AMOUNT_LIMIT = 10**14
