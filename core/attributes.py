import math
from typing import Dict, Union

from core.config import settings
from models.habit import Category
from models.player import Attributes

# Total mapping: every Category member has an attribute.
CATEGORY_ATTRIBUTE: Dict[Category, str] = {
    Category.HEALTH: "vitality",
    Category.WORK: "intellect",
    Category.SKILL: "tech",
    Category.MINDSET: "willpower",
    Category.ROUTINE: "willpower",
    Category.OTHER: "charisma",
}

def attribute_for(category: Union[Category, str]) -> str:
    return CATEGORY_ATTRIBUTE[Category.coerce(category)]

def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

def attribute_change(is_positive: bool, efficiency: int = 100) -> int:
    """
    Signed attribute change for one completion (or undo).

    efficiency 0 -> 0.5x, 50 -> 1.0x, 100 -> 1.5x of the base change.
    """
    multiplier = 0.5 + efficiency / 100
    base_change = settings.ATTRIBUTE_BASE_CHANGE if is_positive else -settings.ATTRIBUTE_BASE_CHANGE
    return _round_half_up(base_change * multiplier)

def clamp_attribute(value: int) -> int:
    return min(settings.ATTRIBUTE_MAX, max(settings.ATTRIBUTE_MIN, value))

def apply_delta(
    attributes: Attributes,
    category: Union[Category, str],
    is_positive: bool,
    efficiency: int = 100,
) -> Attributes:
    """Returns a new Attributes with the routed attribute moved and clamped."""
    name = attribute_for(category)
    current = getattr(attributes, name)
    updated = clamp_attribute(current + attribute_change(is_positive, efficiency))
    return attributes.model_copy(update={name: updated})

def skill_level(value: int) -> int:
    # Every attribute starts at skill level 1, even with 0 points.
    return value // 10 + 1
