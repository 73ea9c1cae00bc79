"""
Configuration endpoints
"""
from fastapi import APIRouter, Depends

from wai_game.core.scoring import FALLBACK_FEEDBACK, FEEDBACK_BANDS, MAX_KEYWORD_BONUS, MAX_SCORE
from wai_game.models import GameStatus, ReactionType, Settings
from wai_game.state import get_settings


router = APIRouter(tags=["config"])


@router.get("/config")
def get_config(settings: Settings = Depends(get_settings)):
    """Public scoring settings and the enum values clients need"""
    return {
        "scoring": {
            "max_score": MAX_SCORE,
            "max_keyword_bonus": MAX_KEYWORD_BONUS,
            "answer_min_length": settings.answer_min_length,
            "answer_max_length": settings.answer_max_length,
            "enforce_answer_length": settings.enforce_answer_length,
            "feedback_bands": [
                {"min_score": threshold, "message": message}
                for threshold, message in FEEDBACK_BANDS
            ] + [{"min_score": 0.0, "message": FALLBACK_FEEDBACK}],
        },
        "statuses": {s.value: s.label for s in GameStatus},
        "reaction_types": {t.value: t.label for t in ReactionType},
    }
