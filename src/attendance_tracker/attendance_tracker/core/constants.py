"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from fractions import Fraction

ATTENDANCE_TARGET = Fraction(3, 4)
REPORT_WINDOW_DAYS = 7
PROMPT_POLL_SECONDS = 60
MIN_PASSWORD_LENGTH = 6

NO_WEEKLY_DATA_MESSAGE = "No attendance data for the last week."

# 0 = Sunday, matching the weekday numbers stored on lectures.
DAY_NAMES = {
    0: "Sunday",
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
}

# Order shown in the scheduling form.
DAY_CHOICES = [1, 2, 3, 4, 5, 6, 0]
