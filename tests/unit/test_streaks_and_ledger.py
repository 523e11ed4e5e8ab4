"""
Tests for streak computation and the completion ledger
"""

import pytest

from core.ledger import efficiency_bonus, refresh_streak, toggle
from core.streaks import compute_streak
from models.habit import Habit
from tests.conftest import TODAY, make_logs


# ============================================
# Streak Calculator
# ============================================

def test_streak_counts_consecutive_days_ending_today():
    logs = make_logs("2026-10-19", "2026-10-18", "2026-10-17")
    assert compute_streak(logs, TODAY) == 3


def test_streak_stops_at_gap():
    logs = make_logs("2026-10-19", "2026-10-18", "2026-10-17")
    del logs["2026-10-18"]
    assert compute_streak(logs, TODAY) == 1


def test_streak_is_zero_when_today_missing():
    logs = make_logs("2026-10-18", "2026-10-17")
    assert compute_streak(logs, TODAY) == 0
    assert compute_streak({}, TODAY) == 0


def test_streak_crosses_month_and_year_boundaries():
    logs = make_logs("2027-01-01", "2026-12-31", "2026-12-30")
    assert compute_streak(logs, "2027-01-01") == 3
    logs = make_logs("2026-03-01", "2026-02-28")
    assert compute_streak(logs, "2026-03-01") == 2


def test_streak_ignores_recurrence_rule():
    """A Mon/Wed/Fri habit still needs calendar-day contiguity"""
    habit = Habit(
        title="Gym",
        frequency="SPECIFIC_DAYS",
        frequency_days=[1, 3, 5],
        logs=make_logs("2026-10-19", "2026-10-16"),
    )
    assert compute_streak(habit.logs, TODAY) == 1


# ============================================
# Completion Ledger
# ============================================

@pytest.mark.parametrize("efficiency,xp,credits", [
    (0, 10, 20),
    (50, 15, 25),
    (55, 15, 25),
    (99, 19, 29),
    (100, 20, 30),
])
def test_completion_rewards_scale_with_efficiency(habit, efficiency, xp, credits):
    result = toggle(habit, TODAY, efficiency)

    assert result.is_positive is True
    assert result.xp_delta == xp
    assert result.credits_delta == credits
    assert result.habit.logs[TODAY].efficiency == efficiency
    assert result.habit.logs[TODAY].completed is True


def test_efficiency_defaults_to_full(habit):
    result = toggle(habit, TODAY)
    assert result.xp_delta == 20
    assert result.credits_delta == 30


def test_efficiency_bonus_is_floored():
    assert efficiency_bonus(29) == 2
    assert efficiency_bonus(70) == 7
    assert efficiency_bonus(100) == 10


def test_undo_is_flat_regardless_of_logged_efficiency(habit):
    done = toggle(habit, TODAY, 30).habit
    undone = toggle(done, TODAY, 30)

    assert undone.is_positive is False
    assert undone.xp_delta == -10
    assert undone.credits_delta == -20
    assert TODAY not in undone.habit.logs


@pytest.mark.parametrize("efficiency,net", [(0, 0), (50, 5), (100, 10)])
def test_on_then_off_is_not_zero_sum(habit, efficiency, net):
    on = toggle(habit, TODAY, efficiency)
    off = toggle(on.habit, TODAY, efficiency)

    assert off.habit.logs == habit.logs
    assert on.xp_delta + off.xp_delta == net
    assert on.credits_delta + off.credits_delta == net


def test_toggle_does_not_mutate_input(habit):
    toggle(habit, TODAY)
    assert habit.logs == {}
    assert habit.streak == 0


def test_toggle_recomputes_streak_both_ways():
    habit = Habit(title="Read", logs=make_logs("2026-10-18", "2026-10-17"))

    done = toggle(habit, TODAY)
    assert done.habit.streak == 3

    undone = toggle(done.habit, TODAY)
    # Full recompute: yesterday's run is not counted because today is missing
    assert undone.habit.streak == 0


def test_out_of_range_efficiency_is_clamped(habit):
    result = toggle(habit, TODAY, 250)
    assert result.xp_delta == 20
    assert result.habit.logs[TODAY].efficiency == 100


def test_refresh_streak_after_missed_day():
    habit = Habit(title="Meditate", logs=make_logs("2026-10-17", "2026-10-16"), streak=2)
    assert refresh_streak(habit, TODAY).streak == 0


def test_refresh_streak_returns_same_habit_when_unchanged():
    habit = Habit(title="Meditate", logs=make_logs(TODAY), streak=1)
    assert refresh_streak(habit, TODAY) is habit
