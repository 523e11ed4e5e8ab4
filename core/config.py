import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    APP_NAME: str = "Just Do Now"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Local timezone used to decide what "today" is
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

    # Frontend
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:5173")

    # Persistence
    # 'mongo' keeps the slots in MongoDB, 'memory' keeps them in process (tests, demos)
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "mongo")
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    DB_NAME: str = os.getenv("DB_NAME", "just_do_now")
    SLOT_COLLECTION: str = os.getenv("SLOT_COLLECTION", "slots")

    # AI Coach (Gemini REST API)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_API_URL: str = os.getenv(
        "GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta/models"
    )
    AI_TIMEOUT_SECONDS: float = float(os.getenv("AI_TIMEOUT_SECONDS", "20"))

    # Day rollover job
    SCHEDULER_ENABLED: bool = os.getenv("SCHEDULER_ENABLED", "true").lower() == "true"
    ROLLOVER_CHECK_MINUTES: int = int(os.getenv("ROLLOVER_CHECK_MINUTES", "15"))

    # Game Configuration
    XP_PER_LEVEL: int = 500
    PROGRESS_DISPLAY_FLOOR: float = 5.0

    # Completion rewards: base + floor(efficiency / 100 * bonus)
    COMPLETE_XP_BASE: int = 10
    COMPLETE_CREDITS_BASE: int = 20
    EFFICIENCY_BONUS: int = 10

    # Undo is flat, regardless of the efficiency originally logged
    UNDO_XP_PENALTY: int = 10
    UNDO_CREDITS_PENALTY: int = 20

    # Attributes
    ATTRIBUTE_BASE_CHANGE: int = 2
    ATTRIBUTE_MIN: int = 0
    ATTRIBUTE_MAX: int = 100

    # Habits
    DEFAULT_HABIT_DURATION: int = 30
    HEATMAP_DAYS: int = 14

    # Pydantic Settings Config
    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
