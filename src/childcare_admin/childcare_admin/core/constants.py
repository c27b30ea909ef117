"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_LIST_LIMIT = 100
MAX_LIST_LIMIT = 1000
DASHBOARD_ACTIVE_PROGRAMS_LIMIT = 3
DASHBOARD_UPCOMING_PROGRAMS_LIMIT = 10
MIN_PASSWORD_LENGTH = 6
