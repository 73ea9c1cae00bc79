"""
Question bank endpoints (admin)
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
import logging

from wai_game.core.store import GameStore
from wai_game.state import get_store


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["questions"])


def _parse_target(value, required: bool = True) -> Optional[str]:
    if value is None and not required:
        return None
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(status_code=400, detail="targetAnswer is required")
    return value.strip()


def _parse_order(value) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise HTTPException(status_code=400, detail="order must be an integer")
    return value


@router.get("")
def list_questions(store: GameStore = Depends(get_store)):
    """All questions sorted by order"""
    return store.get_questions()


@router.post("")
def question_action(request: dict, store: GameStore = Depends(get_store)):
    """
    Admin: manage the question bank

    Request:
        {"action": "create", "targetAnswer": "...", "order": 0}
        {"action": "update", "questionId": "...", "targetAnswer"?, "order"?}
        {"action": "delete", "questionId": "..."}
        {"action": "setAll", "questions": [{"targetAnswer": "...", "order"?}, ...]}
    """
    action = request.get("action")

    if action == "create":
        return store.add_question(
            _parse_target(request.get("targetAnswer")),
            _parse_order(request.get("order")),
        )

    if action == "update":
        question_id = request.get("questionId")
        question = store.update_question(
            question_id,
            target_answer=_parse_target(request.get("targetAnswer"), required=False),
            order=_parse_order(request.get("order")),
        )
        if question is None:
            raise HTTPException(status_code=404, detail=f"Question {question_id} not found")
        return {"success": True, "question": question}

    if action == "delete":
        question_id = request.get("questionId")
        if not question_id:
            raise HTTPException(status_code=400, detail="questionId is required")
        store.delete_question(question_id)
        return {"success": True}

    if action == "setAll":
        items = request.get("questions")
        if not isinstance(items, list):
            raise HTTPException(status_code=400, detail="questions must be a list")
        parsed = []
        for item in items:
            if not isinstance(item, dict):
                raise HTTPException(status_code=400, detail="each question must be an object")
            parsed.append({
                "target_answer": _parse_target(item.get("targetAnswer")),
                "order": _parse_order(item.get("order")),
            })
        questions = store.set_questions(parsed)
        return {"success": True, "questions": questions}

    raise HTTPException(status_code=400, detail="Invalid action")
