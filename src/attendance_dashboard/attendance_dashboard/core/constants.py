"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TICK_SECONDS = 1.0
DEFAULT_GEOLOCATION_TIMEOUT_SECONDS = 10.0
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

ELAPSED_ZERO = "00:00:00"
MAX_YEAR_DIGITS = 4

# Backend endpoints, relative to API base_url.
STATUS_PATH = "attendance/status"
CLOCK_IN_PATH = "attendance/clock-in"
CLOCK_OUT_PATH = "attendance/clock-out"
REGULARIZE_PATH = "attendance/regularize"

ALREADY_CLOCKED_IN_MARKER = "already clocked in"
