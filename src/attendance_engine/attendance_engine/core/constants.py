"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Ceiling past a shift's own arrival delay after which an arrival is Absent.
DEFAULT_OUTER_GRACE_MINUTES = 240

# Leaving more than this many minutes before shift end turns Present into Half Day.
DEFAULT_EARLY_DEPARTURE_MINUTES = 60

MINUTES_PER_DAY = 24 * 60

SHIFT_REASON_MATCHED = "Closest match based on arrival time"
SHIFT_REASON_FALLBACK = "Closest start time fallback"
SHIFT_REASON_MANUAL = "Manually specified shift"
