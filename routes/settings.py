from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.game import GameState
from routes.deps import get_game

router = APIRouter(prefix="/settings", tags=["Settings"])

class AudioPreference(BaseModel):
    enabled: bool

@router.get("/")
async def get_settings(game: GameState = Depends(get_game)):
    return {"audio_enabled": game.audio_enabled, "gold_theme": game.gold_theme}

@router.put("/audio")
async def set_audio(pref: AudioPreference, game: GameState = Depends(get_game)):
    return {"audio_enabled": await game.set_audio(pref.enabled)}

@router.post("/reset")
async def reset_data(game: GameState = Depends(get_game)):
    """Wipe habits, XP, credits, inventory and attributes. Irreversible."""
    await game.reset()
    return {"message": "All data reset"}
