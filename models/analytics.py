from pydantic import BaseModel
from typing import List

class HeatmapDay(BaseModel):
    date: str
    intensity: int = 0 # habits logged on this day

class DashboardStats(BaseModel):
    total_completions: int = 0
    best_streak: int = 0
    heatmap: List[HeatmapDay] = []
