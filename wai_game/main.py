"""
FastAPI main application
WAi Championship - prompt engineering quiz game server

Modular architecture with separated API routers in wai_game/api/:
- health.py: Health check and system status
- game.py: Game status changes and reset (admin)
- team.py: Team registration, login and management
- questions.py: Question bank management (admin)
- submission.py: Answer submission and lookup
- reactions.py: Audience reactions
- leaderboard.py: Polling summary, rankings, overview, scoreboard
- config.py: Public configuration

All routers receive the single GameStore through wai_game.state.get_store.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from wai_game import state
from wai_game.config import load_settings
from wai_game.core.persistence import GameStateRepository
from wai_game.core.store import GameStore
from wai_game.question_loader import load_questions

# Import all API routers
from wai_game.api import health, game, team, questions, submission, reactions, leaderboard
from wai_game.api import config as config_router


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_store(settings) -> GameStore:
    """Create the store from the snapshot and seed questions if the bank is empty"""
    store = GameStore(GameStateRepository(settings.data_file))

    if settings.questions_file and not store.get_questions():
        store.set_questions(load_questions(settings.questions_file))

    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: build the single store instance
    try:
        state.SETTINGS = load_settings()
        state.STORE = build_store(state.SETTINGS)
        game_state = state.STORE.get_game_state()
        logger.info(
            f"✅ Server started | status={game_state.status.value} | "
            f"{len(game_state.teams)} teams | {len(game_state.questions)} questions"
        )
    except Exception as e:
        logger.error(f"❌ Failed to initialize game store: {e}")
        raise

    yield

    # Shutdown
    logger.info("🛑 Server shutting down")
    state.STORE = None


# Create FastAPI app
app = FastAPI(
    title="WAi Championship - Game Server",
    description="Prompt engineering quiz: similarity scoring, live leaderboard and reactions",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (origins from settings, all by default)
app.add_middleware(
    CORSMiddleware,
    allow_origins=load_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Game lifecycle (GET/POST /api/game)
app.include_router(game.router)

# Teams (GET/POST /api/teams, GET /api/teams/{team_id})
app.include_router(team.router)

# Question bank (GET/POST /api/questions)
app.include_router(questions.router)

# Answers (POST /api/answers, GET /api/answers?teamId&questionId)
app.include_router(submission.router)

# Reactions (GET/POST /api/reactions)
app.include_router(reactions.router)

# Leaderboard (GET /api/poll, /api/rankings, /api/overview, /api/scoreboard)
app.include_router(leaderboard.router)

# Config (GET /config)
app.include_router(config_router.router)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    settings = load_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
