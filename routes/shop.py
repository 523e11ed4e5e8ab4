from fastapi import APIRouter, HTTPException, Depends
from typing import List

from core.exceptions import ItemNotFound, ThemeNotOwned
from core.game import GameState
from core.shop import CATALOG
from models.shop import ShopItem
from routes.deps import get_game

router = APIRouter(prefix="/shop", tags=["Shop"])

@router.get("/items", response_model=List[ShopItem])
async def get_shop_items():
    return CATALOG

@router.get("/inventory")
async def get_inventory(game: GameState = Depends(get_game)):
    return {"credits": game.total_credits, "inventory": game.inventory}

@router.post("/buy/{item_id}")
async def buy_item(item_id: str, game: GameState = Depends(get_game)):
    try:
        result = await game.buy(item_id)
    except ItemNotFound:
        raise HTTPException(status_code=404, detail="Item not found")

    if not result.ok:
        raise HTTPException(status_code=400, detail=result.reason.value)

    return {
        "message": f"Bought {item_id}",
        "credits": result.credits,
        "inventory": result.inventory,
    }

@router.post("/theme")
async def toggle_theme(game: GameState = Depends(get_game)):
    """Switch the gold theme on or off. Requires owning a theme item."""
    try:
        enabled = await game.toggle_theme()
    except ThemeNotOwned:
        raise HTTPException(status_code=400, detail="Theme not owned")
    return {"gold_theme": enabled}
