"""
Submission endpoints for team answers
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
import logging

from wai_game.core.store import GameStore
from wai_game.exceptions import GameNotRunning, InvalidInput, QuestionNotFound
from wai_game.models import Settings
from wai_game.services.submission import submit_team_answer
from wai_game.state import get_settings, get_store


router = APIRouter(prefix="/api/answers", tags=["submission"])
logger = logging.getLogger(__name__)


@router.post("")
async def submit_answer(
    request: Request,
    store: GameStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """
    Submit a team's prompt and the chatbot's reply

    Request:
        {
            "teamId": "team-...",
            "questionId": "q-...",
            "userQuestion": "<prompt the team wrote>",
            "answer": "<chatbot reply>"
        }

    Response:
        {"success": true, "score": 8.7, "questionId": "q-...", "feedback": "훌륭해요! 🌟"}
    """
    body = None
    try:
        body = await request.json()
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="JSON object required")

        # scoring and the write-through save stay off the event loop
        return await run_in_threadpool(
            submit_team_answer,
            store,
            settings,
            team_id=body.get("teamId"),
            question_id=body.get("questionId"),
            user_question=body.get("userQuestion"),
            answer=body.get("answer"),
        )

    except HTTPException:
        raise
    except GameNotRunning as e:
        raise HTTPException(status_code=400, detail=str(e))
    except QuestionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        # malformed JSON body
        raise HTTPException(status_code=400, detail=f"Invalid request body: {e}")
    except Exception as e:
        client_ip = request.client.host if request.client else "unknown"
        logger.error(
            f"❌ ERROR in /api/answers from {client_ip}\n"
            f"Request Body: {body}\n"
            f"Error: {str(e)}\n"
            f"Error Type: {type(e).__name__}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.get("")
def get_team_answer(
    teamId: Optional[str] = None,
    questionId: Optional[str] = None,
    store: GameStore = Depends(get_store),
):
    """A team's answer to a question, or null"""
    if not teamId or not questionId:
        raise HTTPException(status_code=400, detail="teamId and questionId are required")
    return store.get_team_answer(teamId, questionId)
