"""
Audience reaction endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from wai_game.core.store import GameStore
from wai_game.models import ReactionType
from wai_game.state import get_store


router = APIRouter(prefix="/api/reactions", tags=["reactions"])


@router.post("")
def add_reaction(request: dict, store: GameStore = Depends(get_store)):
    """
    Request:
        {"questionId": "q-...", "teamId": "team-...", "type": "fire", "userId": "viewer-..."}
    """
    question_id = request.get("questionId")
    team_id = request.get("teamId")
    reaction = request.get("type")
    user_id = request.get("userId")

    if not question_id or not team_id or not reaction or not user_id:
        raise HTTPException(status_code=400, detail="Missing required fields")

    try:
        reaction_type = ReactionType(reaction)
    except ValueError:
        allowed = ", ".join(t.value for t in ReactionType)
        raise HTTPException(status_code=400, detail=f"type must be one of: {allowed}")

    return store.add_reaction(question_id, team_id, reaction_type, user_id)


@router.get("")
def get_reactions(questionId: Optional[str] = None, store: GameStore = Depends(get_store)):
    """Zero-filled counts for one question, or every reaction when no questionId"""
    if questionId:
        return store.get_reaction_counts(questionId)
    return store.get_reactions()
