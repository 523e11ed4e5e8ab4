from enum import Enum
from pydantic import BaseModel
from typing import List, Literal, Optional

class ShopItem(BaseModel):
    id: str
    name: str
    description: str
    cost: int
    icon: str
    effect: Literal["freeze", "multiplier", "theme"]
    active: bool = True

class PurchaseFailure(str, Enum):
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    ALREADY_OWNED = "AlreadyOwned"

class PurchaseResult(BaseModel):
    ok: bool
    credits: int
    inventory: List[str]
    reason: Optional[PurchaseFailure] = None
