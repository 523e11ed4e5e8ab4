from typing import NamedTuple

from core.config import settings
from core.streaks import compute_streak
from models.habit import Habit, HabitLog

class ToggleResult(NamedTuple):
    habit: Habit
    xp_delta: int
    credits_delta: int
    is_positive: bool # True when completing, False when undoing

def clamp_efficiency(efficiency: int) -> int:
    return min(100, max(0, efficiency))

def efficiency_bonus(efficiency: int) -> int:
    # floor(efficiency / 100 * bonus) in integer arithmetic
    return efficiency * settings.EFFICIENCY_BONUS // 100

def toggle(habit: Habit, today: str, efficiency: int = 100) -> ToggleResult:
    """
    Flips the completion record for `today` on a habit.

    Completing:
       - Adds {date, completed, efficiency} for today.
       - XP: base + efficiency bonus (10..20). Credits: base + bonus (20..30).

    Undoing:
       - Removes today's entry.
       - Flat -10 XP / -20 credits, whatever efficiency was logged. An
         on-then-off pair therefore nets 0..10 XP and 0..10 credits.

    The streak is recomputed from the new log set either way. The input
    habit is left untouched.
    """
    efficiency = clamp_efficiency(efficiency)
    logs = dict(habit.logs)

    if today in logs:
        del logs[today]
        xp_delta = -settings.UNDO_XP_PENALTY
        credits_delta = -settings.UNDO_CREDITS_PENALTY
        is_positive = False
    else:
        logs[today] = HabitLog(date=today, completed=True, efficiency=efficiency)
        bonus = efficiency_bonus(efficiency)
        xp_delta = settings.COMPLETE_XP_BASE + bonus
        credits_delta = settings.COMPLETE_CREDITS_BASE + bonus
        is_positive = True

    updated = habit.model_copy(update={
        "logs": logs,
        "streak": compute_streak(logs, today),
    })
    return ToggleResult(updated, xp_delta, credits_delta, is_positive)

def refresh_streak(habit: Habit, today: str) -> Habit:
    streak = compute_streak(habit.logs, today)
    if streak == habit.streak:
        return habit
    return habit.model_copy(update={"streak": streak})
