from fastapi import APIRouter, Depends

from core.game import GameState
from models.analytics import DashboardStats
from models.player import PlayerStats
from routes.deps import get_game

router = APIRouter(tags=["Analytics"])

@router.get("/progression", response_model=PlayerStats)
async def get_progression(game: GameState = Depends(get_game)):
    """XP, credits, level, level progress and attributes."""
    return game.progression()

@router.get("/analytics/dashboard", response_model=DashboardStats)
async def get_dashboard(game: GameState = Depends(get_game)):
    """Total completions, best streak and a 14-day completion heatmap."""
    return game.dashboard()
