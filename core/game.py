import asyncio
import logging
from typing import List, Optional

from core import database
from core.attributes import apply_delta, clamp_attribute, skill_level
from core.exceptions import HabitNotFound, ItemNotFound, ThemeNotOwned
from core.ledger import clamp_efficiency, refresh_streak, toggle
from core.leveling import (
    apply_credits,
    apply_xp,
    calculate_level,
    level_progress_display,
    level_progress_percent,
)
from core.shop import CATALOG_BY_ID, owns_effect, purchase
from core.time_utils import parse_date_key, shift_date_key, today_key, weekday_index
from models.analytics import DashboardStats, HeatmapDay
from models.habit import Habit, HabitCreate, HabitUpdate, TodayHabits
from models.player import Attributes, PlayerStats
from models.shop import PurchaseResult

from core.config import settings

logger = logging.getLogger(__name__)

class GameState:
    """
    The single player-progression record of an installation.

    Owned by the application root and handed to routes explicitly. Every
    action runs under one lock: its whole effect is applied and persisted
    before the next action is accepted.
    """

    def __init__(self, store, habits: Optional[List[Habit]] = None, total_xp: int = 0,
                 total_credits: int = 0, inventory: Optional[List[str]] = None,
                 attributes: Optional[Attributes] = None, audio_enabled: bool = False):
        self.store = store
        self.habits: List[Habit] = habits or []
        self.total_xp = total_xp
        self.total_credits = total_credits
        self.inventory: List[str] = inventory or []
        self.attributes = attributes or Attributes()
        self.audio_enabled = audio_enabled
        # Theme choice is session-only, like the original screen toggle
        self.gold_theme = False
        self.streak_day: Optional[str] = None
        self.lock = asyncio.Lock()

    # --- Persistence ---

    @classmethod
    async def load(cls, store, today: Optional[str] = None) -> "GameState":
        raw_habits = await store.load(database.HABITS_SLOT) or []
        habits = [Habit(**h) for h in raw_habits]

        raw_attributes = await store.load(database.ATTRIBUTES_SLOT)
        attributes = Attributes(**raw_attributes) if raw_attributes else Attributes()
        # Clamp whatever was stored
        attributes = Attributes(**{name: clamp_attribute(value) for name, value in attributes.model_dump().items()})
        total_completions = sum(len(h.logs) for h in habits)
        if total_completions == 0 and attributes.vitality == 20:
            # Old installs started every attribute at 20
            logger.info("Resetting legacy starting attributes")
            attributes = Attributes()

        game = cls(
            store,
            habits=habits,
            total_xp=apply_xp(0, int(await store.load(database.XP_SLOT) or 0)),
            total_credits=apply_credits(0, int(await store.load(database.CREDITS_SLOT) or 0)),
            inventory=list(await store.load(database.INVENTORY_SLOT) or []),
            attributes=attributes,
            audio_enabled=bool(await store.load(database.AUDIO_SLOT) or False),
        )
        game._refresh_streaks(today or today_key())
        logger.info("Loaded %s habits, %s XP, %s credits", len(habits), game.total_xp, game.total_credits)
        return game

    async def persist(self):
        await self.store.save(database.HABITS_SLOT, [h.model_dump(mode="json") for h in self.habits])
        await self.store.save(database.XP_SLOT, self.total_xp)
        await self.store.save(database.CREDITS_SLOT, self.total_credits)
        await self.store.save(database.INVENTORY_SLOT, list(self.inventory))
        await self.store.save(database.ATTRIBUTES_SLOT, self.attributes.model_dump())
        await self.store.save(database.AUDIO_SLOT, self.audio_enabled)

    # --- Lookups ---

    def get_habit(self, habit_id: str) -> Habit:
        for habit in self.habits:
            if habit.id == habit_id:
                return habit
        raise HabitNotFound(habit_id)

    def current_habits(self, today: Optional[str] = None) -> List[Habit]:
        """Habits with streaks as of `today`, without touching the cached ones."""
        today = today or today_key()
        if self.streak_day == today:
            return list(self.habits)
        return [refresh_streak(h, today) for h in self.habits]

    def current_habit(self, habit_id: str, today: Optional[str] = None) -> Habit:
        return refresh_streak(self.get_habit(habit_id), today or today_key())

    def _replace_habit(self, updated: Habit):
        self.habits = [updated if h.id == updated.id else h for h in self.habits]

    # --- Habit editor ---

    async def create_habit(self, habit_in: HabitCreate) -> Habit:
        async with self.lock:
            data = habit_in.model_dump()
            data["duration"] = data["duration"] or settings.DEFAULT_HABIT_DURATION
            habit = Habit(**data)
            self.habits = [*self.habits, habit]
            await self.persist()
        logger.info("Created habit %s (%s)", habit.title, habit.id)
        return habit

    async def update_habit(self, habit_id: str, habit_in: HabitUpdate) -> Habit:
        async with self.lock:
            habit = self.get_habit(habit_id)
            changes = habit_in.changes()
            # Round-trip through the model so validators run on the edited fields
            updated = Habit(**{**habit.model_dump(), **changes})
            self._replace_habit(updated)
            await self.persist()
        logger.info("Updated habit %s", habit_id)
        return updated

    async def delete_habit(self, habit_id: str):
        async with self.lock:
            self.get_habit(habit_id)
            self.habits = [h for h in self.habits if h.id != habit_id]
            await self.persist()
        logger.info("Deleted habit %s", habit_id)

    # --- Completion ---

    def _apply_toggle(self, habit_id: str, efficiency: int, today: str) -> Habit:
        if self.streak_day != today:
            self._refresh_streaks(today)
        habit = self.get_habit(habit_id)
        efficiency = clamp_efficiency(efficiency)
        result = toggle(habit, today, efficiency)

        self._replace_habit(result.habit)
        self.total_xp = apply_xp(self.total_xp, result.xp_delta)
        self.total_credits = apply_credits(self.total_credits, result.credits_delta)
        self.attributes = apply_delta(self.attributes, habit.category, result.is_positive, efficiency)

        logger.info(
            "Habit %s %s on %s (XP %+d, credits %+d)",
            habit.title,
            "completed" if result.is_positive else "undone",
            today,
            result.xp_delta,
            result.credits_delta,
        )
        return result.habit

    async def toggle_habit(self, habit_id: str, efficiency: int = 100,
                           today: Optional[str] = None) -> Habit:
        today = today or today_key()
        async with self.lock:
            updated = self._apply_toggle(habit_id, efficiency, today)
            await self.persist()
        return updated

    async def complete_focus(self, habit_id: str, today: Optional[str] = None) -> Habit:
        """A finished focus session completes the habit at full efficiency, once."""
        today = today or today_key()
        async with self.lock:
            habit = self.get_habit(habit_id)
            if today in habit.logs:
                return refresh_streak(habit, today)
            updated = self._apply_toggle(habit_id, 100, today)
            await self.persist()
        return updated

    def _refresh_streaks(self, today: str):
        self.habits = [refresh_streak(h, today) for h in self.habits]
        self.streak_day = today

    async def rollover(self, today: Optional[str] = None) -> bool:
        """Recomputes cached streaks once the local date has changed."""
        today = today or today_key()
        async with self.lock:
            if self.streak_day == today:
                return False
            self._refresh_streaks(today)
            await self.persist()
        logger.info("Refreshed streaks for %s", today)
        return True

    # --- Shop ---

    async def buy(self, item_id: str) -> PurchaseResult:
        item = CATALOG_BY_ID.get(item_id)
        if item is None:
            raise ItemNotFound(item_id)

        async with self.lock:
            result = purchase(self.total_credits, self.inventory, item)
            if not result.ok:
                logger.info("Purchase of %s rejected: %s", item_id, result.reason.value)
                return result
            self.total_credits = result.credits
            self.inventory = result.inventory
            await self.persist()
        logger.info("Bought %s for %s credits", item.name, item.cost)
        return result

    async def toggle_theme(self) -> bool:
        async with self.lock:
            if not owns_effect(self.inventory, "theme"):
                raise ThemeNotOwned()
            self.gold_theme = not self.gold_theme
        return self.gold_theme

    # --- Settings ---

    async def set_audio(self, enabled: bool) -> bool:
        async with self.lock:
            self.audio_enabled = enabled
            await self.persist()
        return self.audio_enabled

    async def reset(self, today: Optional[str] = None):
        """Wipes every slot. Not recoverable."""
        async with self.lock:
            self.habits = []
            self.total_xp = 0
            self.total_credits = 0
            self.inventory = []
            self.attributes = Attributes()
            self.audio_enabled = False
            self.gold_theme = False
            self.streak_day = today or today_key()
            await self.store.clear_all()
        logger.warning("All player data was reset")

    # --- Views ---

    def habits_for_today(self, today: Optional[str] = None) -> TodayHabits:
        today = today or today_key()
        weekday = weekday_index(parse_date_key(today))
        visible = [h for h in self.current_habits(today) if h.is_scheduled_on(weekday) or today in h.logs]

        inbox = [h for h in visible if not h.reminder_time]
        timeline = sorted((h for h in visible if h.reminder_time), key=lambda h: h.reminder_time)
        return TodayHabits(inbox=inbox, timeline=timeline)

    def progression(self) -> PlayerStats:
        attributes = self.attributes.model_dump()
        return PlayerStats(
            xp=self.total_xp,
            credits=self.total_credits,
            level=calculate_level(self.total_xp),
            progress_percent=level_progress_percent(self.total_xp),
            progress_display_percent=level_progress_display(self.total_xp),
            attributes=self.attributes,
            skill_levels={name: skill_level(value) for name, value in attributes.items()},
        )

    def dashboard(self, today: Optional[str] = None) -> DashboardStats:
        today = today or today_key()
        habits = self.current_habits(today)
        heatmap = []
        for offset in range(settings.HEATMAP_DAYS - 1, -1, -1):
            day = shift_date_key(today, -offset)
            heatmap.append(HeatmapDay(date=day, intensity=sum(1 for h in habits if day in h.logs)))

        return DashboardStats(
            total_completions=sum(len(h.logs) for h in habits),
            best_streak=max((h.streak for h in habits), default=0),
            heatmap=heatmap,
        )
