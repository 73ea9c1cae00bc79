"""
Health check and system status endpoints
"""
from fastapi import APIRouter, Depends

from wai_game.core.store import GameStore
from wai_game.state import get_store


router = APIRouter(tags=["health"])


@router.get("/")
def health_check(store: GameStore = Depends(get_store)):
    """Health check endpoint"""
    state = store.get_game_state()
    return {
        "status": "ok",
        "message": "WAi Championship - Game Server",
        "version": "1.0.0",
        "game_status": state.status,
        "total_teams": len(state.teams),
        "total_questions": len(state.questions)
    }
