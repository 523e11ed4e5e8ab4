import copy
import logging
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient
from core.config import settings

logger = logging.getLogger(__name__)

# Slot names, one record set per installation
HABITS_SLOT = "habits"
XP_SLOT = "totalXp"
CREDITS_SLOT = "totalCredits"
INVENTORY_SLOT = "inventory"
ATTRIBUTES_SLOT = "attributes"
AUDIO_SLOT = "audioPreference"

class MongoSlotStore:
    """Keeps each slot as one document: {"_id": slot, "value": ...}."""

    def __init__(self, uri: str = settings.MONGO_URI, db_name: str = settings.DB_NAME,
                 collection: str = settings.SLOT_COLLECTION):
        self.client = AsyncIOMotorClient(uri)
        self.collection = self.client[db_name][collection]

    async def load(self, slot: str) -> Optional[Any]:
        doc = await self.collection.find_one({"_id": slot})
        if doc is None:
            return None
        return doc.get("value")

    async def save(self, slot: str, value: Any) -> None:
        await self.collection.update_one({"_id": slot}, {"$set": {"value": value}}, upsert=True)

    async def clear_all(self) -> None:
        result = await self.collection.delete_many({})
        logger.info("Cleared %s stored slots", result.deleted_count)

    def close(self) -> None:
        self.client.close()

class MemorySlotStore:
    """Process-local slots. Nothing survives a restart."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.slots: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def load(self, slot: str) -> Optional[Any]:
        return copy.deepcopy(self.slots.get(slot))

    async def save(self, slot: str, value: Any) -> None:
        self.slots[slot] = copy.deepcopy(value)

    async def clear_all(self) -> None:
        self.slots.clear()

    def close(self) -> None:
        pass

def create_store():
    if settings.STORAGE_BACKEND == "memory":
        logger.info("Using in-memory slot store")
        return MemorySlotStore()
    if settings.STORAGE_BACKEND != "mongo":
        raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
    logger.info("Using MongoDB slot store (%s.%s)", settings.DB_NAME, settings.SLOT_COLLECTION)
    return MongoSlotStore()
