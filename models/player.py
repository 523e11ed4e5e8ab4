from pydantic import BaseModel
from typing import Dict

class Attributes(BaseModel):
    vitality: int = 0   # Health
    intellect: int = 0  # Work
    willpower: int = 0  # Mindset, Routine
    tech: int = 0       # Skill
    charisma: int = 0   # everything else

class PlayerStats(BaseModel):
    xp: int = 0
    credits: int = 0
    level: int = 0
    progress_percent: float = 0.0
    progress_display_percent: float = 0.0
    attributes: Attributes = Attributes()
    skill_levels: Dict[str, int] = {}
