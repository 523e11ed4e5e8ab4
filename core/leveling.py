from core.config import settings

def apply_xp(total_xp: int, delta: int) -> int:
    """Adds an XP delta to the running total, never dropping below zero."""
    return max(0, total_xp + delta)

def apply_credits(total_credits: int, delta: int) -> int:
    """Adds a credit delta to the running total, never dropping below zero."""
    return max(0, total_credits + delta)

def calculate_level(total_xp: int) -> int:
    return total_xp // settings.XP_PER_LEVEL

def level_progress_percent(total_xp: int) -> float:
    """
    Progress through the current level as a percentage.

    Args:
        total_xp (int): The player's total XP.

    Returns:
        float: 0.0 <= value < 100.0
    """
    return (total_xp % settings.XP_PER_LEVEL) / settings.XP_PER_LEVEL * 100

def level_progress_display(total_xp: int) -> float:
    # Presentational only: an empty bar still shows a sliver.
    return min(100.0, max(settings.PROGRESS_DISPLAY_FLOOR, level_progress_percent(total_xp)))
