import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from core.config import settings
from core.time_utils import today_key

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler()

async def run_daily_rollover(game):
    """
    Checks whether the local day has rolled over since streaks were last
    computed. If so, every cached streak is recomputed for the new day, so
    a habit missed yesterday reads 0 even if the player never opens it.
    """
    today = today_key()
    try:
        if await game.rollover(today):
            logger.info("Day rollover to %s processed", today)
    except Exception:
        logger.exception("Day rollover to %s failed", today)

def start_scheduler(game):
    # Run periodically to catch day rollovers without restart
    scheduler.add_job(
        run_daily_rollover,
        IntervalTrigger(minutes=settings.ROLLOVER_CHECK_MINUTES),
        args=[game],
        id="daily_rollover",
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Rollover check scheduled every %s minutes", settings.ROLLOVER_CHECK_MINUTES)

def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=False)
