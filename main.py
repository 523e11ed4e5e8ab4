import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from routes import habits, shop, analytics, coach, settings as settings_routes
from core.config import settings
from core.database import create_store
from core.game import GameState
from core.scheduler import start_scheduler, stop_scheduler

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # A store may be attached up front (tests); otherwise build the configured one
    store = getattr(app.state, "store", None) or create_store()
    app.state.store = store
    app.state.game = await GameState.load(store)

    if settings.SCHEDULER_ENABLED:
        start_scheduler(app.state.game)
    yield
    stop_scheduler()
    store.close()

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# CORS
origins = [
    settings.FRONTEND_URL,
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000", # Common alternative
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(habits.router)
app.include_router(shop.router)
app.include_router(analytics.router)
app.include_router(coach.router)
app.include_router(settings_routes.router)

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.APP_NAME}"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
