from fastapi import HTTPException, Request

from core.exceptions import HabitNotFound
from core.game import GameState

def get_game(request: Request) -> GameState:
    """The one GameState, created at startup and stored on the app."""
    return request.app.state.game

def habit_not_found(e: HabitNotFound) -> HTTPException:
    return HTTPException(status_code=404, detail="Habit not found")
