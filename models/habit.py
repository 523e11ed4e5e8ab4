import uuid
from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List, Dict
from datetime import datetime

from core.config import settings
from core.time_utils import get_current_time

ALL_WEEKDAYS = [0, 1, 2, 3, 4, 5, 6]
REMINDER_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
NULLABLE_FIELDS = {"description", "reminder_time"}

def _validate_weekdays(days: List[int]) -> List[int]:
    if any(day not in ALL_WEEKDAYS for day in days):
        raise ValueError("weekday indices must be within 0-6 (0 = Sunday)")
    return sorted(set(days))

class Frequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    SPECIFIC_DAYS = "SPECIFIC_DAYS"

class Category(str, Enum):
    """
    Closed set of habit categories.

    Anything the editor does not offer is stored as OTHER, which routes
    to charisma in the attribute engine.
    """
    HEALTH = "Health"
    WORK = "Work"
    SKILL = "Skill"
    MINDSET = "Mindset"
    ROUTINE = "Routine"
    OTHER = "Other"

    @classmethod
    def coerce(cls, value) -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER

class HabitLog(BaseModel):
    date: str # YYYY-MM-DD, same as its key in Habit.logs
    completed: bool = True
    efficiency: Optional[int] = Field(default=None, ge=0, le=100)

class Habit(BaseModel):
    """
    A user-defined recurring task tracked per calendar day.

    Attributes:
    - logs: date key -> HabitLog. A missing key means "not done".
    - streak: cached consecutive-day count ending today. Always recomputed
      from logs, never patched incrementally.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    frequency: Frequency = Frequency.DAILY
    frequency_days: List[int] = Field(default_factory=lambda: list(ALL_WEEKDAYS))
    reminder_time: Optional[str] = Field(default=None, pattern=REMINDER_PATTERN)
    duration: int = Field(default=settings.DEFAULT_HABIT_DURATION, gt=0)
    category: Category = Category.HEALTH
    icon: str = "Activity"
    created_at: datetime = Field(default_factory=get_current_time)
    logs: Dict[str, HabitLog] = Field(default_factory=dict)
    streak: int = Field(default=0, ge=0)

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, value):
        return Category.coerce(value)

    @field_validator("frequency_days")
    @classmethod
    def check_weekdays(cls, value: List[int]):
        return _validate_weekdays(value)

    @model_validator(mode="after")
    def daily_covers_every_day(self):
        if self.frequency == Frequency.DAILY:
            self.frequency_days = list(ALL_WEEKDAYS)
        return self

    def is_scheduled_on(self, weekday: int) -> bool:
        return weekday in self.frequency_days

class HabitCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    frequency: Frequency = Frequency.DAILY
    frequency_days: List[int] = Field(default_factory=lambda: list(ALL_WEEKDAYS))
    reminder_time: Optional[str] = Field(default=None, pattern=REMINDER_PATTERN)
    duration: Optional[int] = Field(default=None, gt=0)
    category: Category = Category.HEALTH
    icon: str = "Activity"

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, value):
        return Category.coerce(value)

    @field_validator("frequency_days")
    @classmethod
    def check_weekdays(cls, value: List[int]):
        return _validate_weekdays(value)

    @field_validator("reminder_time", mode="before")
    @classmethod
    def blank_reminder_is_none(cls, value):
        # The editor sends "" when no time is picked
        return value or None

class HabitUpdate(BaseModel):
    """
    Partial edit: only the fields sent are changed. Logs and streak are
    never touched. Send reminder_time or description as null to clear them.
    """
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    frequency: Optional[Frequency] = None
    frequency_days: Optional[List[int]] = None
    reminder_time: Optional[str] = Field(default=None, pattern=REMINDER_PATTERN)
    duration: Optional[int] = Field(default=None, gt=0)
    category: Optional[Category] = None
    icon: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, value):
        return None if value is None else Category.coerce(value)

    @field_validator("frequency_days")
    @classmethod
    def check_weekdays(cls, value: Optional[List[int]]):
        return None if value is None else _validate_weekdays(value)

    @field_validator("reminder_time", mode="before")
    @classmethod
    def blank_reminder_is_none(cls, value):
        return value or None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        # null only clears the optional fields
        return {k: v for k, v in data.items() if v is not None or k in NULLABLE_FIELDS}

class ToggleRequest(BaseModel):
    efficiency: int = Field(default=100, ge=0, le=100)

class TodayHabits(BaseModel):
    inbox: List[Habit] = []
    timeline: List[Habit] = []
