from typing import Dict, List, Sequence

from models.shop import ShopItem, PurchaseFailure, PurchaseResult

# Static catalog. Only the 'theme' effect is interpreted (by the theme toggle);
# 'freeze' and 'multiplier' are owned but have no gameplay effect yet.
CATALOG: List[ShopItem] = [
    ShopItem(
        id="streak_freeze",
        name="Streak Freeze",
        description="Protects your streak for 24 hours if you miss a day.",
        cost=500,
        icon="Shield",
        effect="freeze",
    ),
    ShopItem(
        id="xp_boost",
        name="XP Booster",
        description="2x XP gain for the next 24 hours.",
        cost=800,
        icon="Zap",
        effect="multiplier",
    ),
    ShopItem(
        id="theme_gold",
        name="Midas Protocol",
        description="Unlocks the prestigious Gold visual theme for the entire app.",
        cost=5000,
        icon="Crown",
        effect="theme",
    ),
]

CATALOG_BY_ID: Dict[str, ShopItem] = {item.id: item for item in CATALOG}

def purchase(credits: int, inventory: Sequence[str], item: ShopItem) -> PurchaseResult:
    """
    Validates and applies a one-time purchase.

    Fails without changing anything when the item is already owned or the
    player cannot afford it. Ownership is checked first.
    """
    if item.id in inventory:
        return PurchaseResult(ok=False, credits=credits, inventory=list(inventory),
                              reason=PurchaseFailure.ALREADY_OWNED)
    if credits < item.cost:
        return PurchaseResult(ok=False, credits=credits, inventory=list(inventory),
                              reason=PurchaseFailure.INSUFFICIENT_FUNDS)

    return PurchaseResult(ok=True, credits=credits - item.cost,
                          inventory=[*inventory, item.id])

def owns_effect(inventory: Sequence[str], effect: str) -> bool:
    return any(
        item_id in CATALOG_BY_ID and CATALOG_BY_ID[item_id].effect == effect
        for item_id in inventory
    )
