from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from core import coach
from core.game import GameState
from routes.deps import get_game

router = APIRouter(prefix="/coach", tags=["Coach"])

class CoachQuery(BaseModel):
    query: str = Field(..., min_length=1, max_length=2000)

# Plain `def` handlers: FastAPI runs them in its threadpool, so the blocking
# HTTP call to the text service never holds up the game state.

@router.get("/motivation")
def get_motivation(game: GameState = Depends(get_game)):
    return {"text": coach.get_habit_motivation(game.current_habits())}

@router.post("/ask")
def ask_coach(body: CoachQuery, game: GameState = Depends(get_game)):
    return {"text": coach.get_detailed_coaching(game.current_habits(), body.query)}

@router.get("/report")
def get_report(game: GameState = Depends(get_game)):
    return {"text": coach.generate_performance_report(game.current_habits())}
