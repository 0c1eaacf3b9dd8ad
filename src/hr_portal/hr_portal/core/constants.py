"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_HISTORY_LIMIT = 30
MORNING_CHECKIN_REASON = "morning check-in"
