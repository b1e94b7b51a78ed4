import os

DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Layout
DAY_START_HOUR = int(os.environ.get("STUDY_SCHEDULER_DAY_START_HOUR", "8"))
BREAK_LABEL = "Break"
BREAK_COLOR = "#9CA3AF"
DEFAULT_SUBJECT_COLOR = "#3B82F6"

# Difficulty weights, harder subjects go earlier in the day
DIFFICULTY_WEIGHTS = {
    "easy": 1.0,
    "medium": 1.5,
    "hard": 2.0,
}

# Preference defaults
DEFAULT_DAILY_HOURS = 4
DEFAULT_SESSION_DURATION = 25
DEFAULT_BREAK_DURATION = 5

# Accepted input ranges (enforced by the calling layer, not the core)
ALLOWED_SESSION_DURATIONS = (25, 45, 60)
ALLOWED_BREAK_DURATIONS = (5, 10, 15)
DAILY_HOURS_RANGE = (1, 12)
WEEKLY_HOURS_RANGE = (1, 40)
EXAM_PRIORITY_RANGE = (0, 10)

# Service
API_PREFIX = "/v1"
LOG_LEVEL = os.environ.get("STUDY_SCHEDULER_LOG_LEVEL", "INFO").upper()
