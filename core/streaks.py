from typing import Mapping

from core.time_utils import shift_date_key

def compute_streak(logs: Mapping[str, object], today: str) -> int:
    """
    Counts consecutive calendar days with a log entry, ending at `today`.

    Walks backwards one day at a time and stops at the first missing day.
    Recurrence rules are not considered: a Mon/Wed/Fri habit still needs
    every calendar day logged to keep its streak.
    """
    streak = 0
    day = today
    while day in logs:
        streak += 1
        day = shift_date_key(day, -1)
    return streak
