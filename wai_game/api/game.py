"""
Admin endpoints for the game lifecycle
"""
from fastapi import APIRouter, Depends, HTTPException
import logging

from wai_game.core.store import GameStore
from wai_game.models import GameStatus
from wai_game.state import get_store


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/game", tags=["game"])


@router.get("")
def get_game_state(store: GameStore = Depends(get_store)):
    """Full game state snapshot"""
    return store.get_game_state()


@router.post("")
def game_action(request: dict, store: GameStore = Depends(get_store)):
    """
    Admin: change status or reset the game

    Request:
        {"action": "setStatus", "status": "Running"}
        {"action": "reset"}
    """
    action = request.get("action")

    if action == "setStatus":
        try:
            status = GameStatus(request.get("status"))
        except ValueError:
            allowed = ", ".join(s.value for s in GameStatus)
            raise HTTPException(status_code=400, detail=f"status must be one of: {allowed}")
        store.set_game_status(status)
        return {"success": True, "status": status}

    if action == "reset":
        store.reset_game()
        return {"success": True, "message": "Game reset. Teams and questions kept."}

    raise HTTPException(status_code=400, detail="Invalid action")
