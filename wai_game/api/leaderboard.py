"""
Leaderboard and polling endpoints
"""
from fastapi import APIRouter, Depends

from wai_game.core.store import GameStore
from wai_game.services.leaderboard import (
    get_overview, get_poll_summary, get_question_board, get_rankings,
)
from wai_game.state import get_store


router = APIRouter(prefix="/api", tags=["leaderboard"])


@router.get("/poll")
def poll(store: GameStore = Depends(get_store)):
    """
    Combined read for clients refreshing every few seconds

    Returns:
        {"status", "rankings": [{"rank", "team", "progress"}], "totalQuestions", "timestamp"}
    """
    return get_poll_summary(store)


@router.get("/rankings")
def rankings(store: GameStore = Depends(get_store)):
    return get_rankings(store)


@router.get("/overview")
def overview(store: GameStore = Depends(get_store)):
    """Admin dashboard numbers: teams, questions, answers, average score"""
    return get_overview(store)


@router.get("/scoreboard")
def scoreboard(store: GameStore = Depends(get_store)):
    """Questions with reaction counts and every team's answer"""
    return get_question_board(store)
