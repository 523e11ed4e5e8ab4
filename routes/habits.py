from fastapi import APIRouter, status, Depends
from typing import List

from core.exceptions import HabitNotFound
from core.game import GameState
from core.time_utils import today_key
from models.habit import Habit, HabitCreate, HabitUpdate, ToggleRequest, TodayHabits
from routes.deps import get_game, habit_not_found

router = APIRouter(prefix="/habits", tags=["Habits"])

@router.get("/", response_model=List[Habit])
async def get_habits(game: GameState = Depends(get_game)):
    return game.current_habits()

@router.get("/today", response_model=TodayHabits)
async def get_today_habits(game: GameState = Depends(get_game)):
    """Habits scheduled for today (or already logged today): inbox, then timeline by reminder time."""
    return game.habits_for_today()

@router.post("/", response_model=Habit, status_code=status.HTTP_201_CREATED)
async def create_habit(habit_in: HabitCreate, game: GameState = Depends(get_game)):
    return await game.create_habit(habit_in)

@router.get("/{habit_id}", response_model=Habit)
async def get_habit(habit_id: str, game: GameState = Depends(get_game)):
    try:
        return game.current_habit(habit_id)
    except HabitNotFound as e:
        raise habit_not_found(e)

@router.put("/{habit_id}", response_model=Habit)
async def update_habit(habit_id: str, habit_in: HabitUpdate, game: GameState = Depends(get_game)):
    try:
        return await game.update_habit(habit_id, habit_in)
    except HabitNotFound as e:
        raise habit_not_found(e)

@router.delete("/{habit_id}")
async def delete_habit(habit_id: str, game: GameState = Depends(get_game)):
    try:
        await game.delete_habit(habit_id)
    except HabitNotFound as e:
        raise habit_not_found(e)
    return {"message": "Habit deleted"}

@router.post("/{habit_id}/toggle", response_model=dict)
async def toggle_habit(habit_id: str, toggle: ToggleRequest = ToggleRequest(),
                       game: GameState = Depends(get_game)):
    """
    Mark a habit done today, or undo today's completion.

    Completing:
       - +10..20 XP and +20..30 credits, scaled by efficiency.
       - Raises the category attribute by 1..3.

    Undoing:
       - -10 XP and -20 credits flat.
       - Lowers the category attribute by 1..3.

    Returns:
        dict: {
            "habit": Updated Habit,
            "completed": bool (True if today is now logged),
            "stats": Player progression after the toggle
        }
    """
    today = today_key()
    try:
        habit = await game.toggle_habit(habit_id, toggle.efficiency, today)
    except HabitNotFound as e:
        raise habit_not_found(e)

    return {
        "habit": habit,
        "completed": today in habit.logs,
        "stats": game.progression(),
    }

@router.post("/{habit_id}/focus-complete", response_model=dict)
async def complete_focus(habit_id: str, game: GameState = Depends(get_game)):
    """Focus timer finished: completes the habit at 100% efficiency unless already done today."""
    try:
        habit = await game.complete_focus(habit_id)
    except HabitNotFound as e:
        raise habit_not_found(e)
    return {"habit": habit, "completed": True, "stats": game.progression()}
