"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DAY_START = "00:00"
DAY_END = "23:59"
MINUTES_PER_DAY = 24 * 60

DEFAULT_SNAPSHOT_DAYS_BACK = 30
DEFAULT_SNAPSHOT_DAYS_FORWARD = 90
DEFAULT_SNAPSHOT_CHUNK_SIZE = 5000

DEFAULT_ABSENCE_REASON = "בקשת יציאה"
DEFAULT_BLOCKAGE_REASON = "חסימה"
ABSENCE_ID_PREFIX = "abs-"

HOME_STATUS_LABELS = {
    "leave_shamp": 'חופשה בשמ"פ',
    "gimel": "ג'",
    "absent": "נפקד",
    "organization_days": "ימי התארגנות",
    "not_in_shamp": 'לא בשמ"פ',
    "vacation": "חופשה",
    "org_days": "התארגנות",
    "home": "חופשה",
}
DEFAULT_HOME_LABEL = "חופשה"
