"""Global test fixtures for the habit core"""
import pytest
from fastapi.testclient import TestClient

from core.config import settings
from core.database import MemorySlotStore
from core.game import GameState
from models.habit import Habit, HabitLog


TODAY = "2026-10-19"  # a Monday


# ============================================================================
# Habit Fixtures
# ============================================================================

def make_logs(*dates, efficiency=100):
    return {d: HabitLog(date=d, completed=True, efficiency=efficiency) for d in dates}


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def habit():
    """Plain daily Health habit with no history"""
    return Habit(title="Morning Run", category="Health")


@pytest.fixture
def store():
    return MemorySlotStore()


@pytest.fixture
async def game(store):
    """Fresh game state backed by an in-memory store"""
    return await GameState.load(store, today=TODAY)


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def client(monkeypatch):
    """TestClient over the real app, wired to an in-memory store"""
    from main import app

    monkeypatch.setattr(settings, "SCHEDULER_ENABLED", False)
    app.state.store = MemorySlotStore()
    with TestClient(app) as test_client:
        yield test_client
    app.state.store = None
