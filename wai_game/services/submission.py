"""
Answer submission workflow

Checks run before any scoring: game must be RUNNING, question must exist.
"""
import logging
from typing import Dict

from wai_game.core.scoring import calculate_score, get_score_feedback, validate_answer_length
from wai_game.core.store import GameStore
from wai_game.exceptions import GameNotRunning, InvalidInput, QuestionNotFound
from wai_game.models import GameStatus, Settings


logger = logging.getLogger(__name__)


def submit_team_answer(
    store: GameStore,
    settings: Settings,
    team_id: str,
    question_id: str,
    user_question: str,
    answer: str,
) -> Dict:
    """
    Score a team's answer and record it

    Args:
        store: Game store
        settings: Server settings (length limits, keywords)
        team_id: Submitting team
        question_id: Question being answered
        user_question: Prompt the team wrote for the chatbot
        answer: Chatbot reply the team pasted

    Returns:
        {"success", "score", "questionId", "feedback"}

    Raises:
        InvalidInput: Missing ids, or answer length out of range when enforced
        GameNotRunning: Game status is not RUNNING
        QuestionNotFound: Unknown question id
    """
    if not team_id or not question_id:
        raise InvalidInput("teamId and questionId are required")

    status = store.get_status()
    if status != GameStatus.RUNNING:
        raise GameNotRunning(status)

    question = store.get_question(question_id)
    if question is None:
        raise QuestionNotFound(question_id)

    user_question = user_question or ''
    answer = answer or ''

    if settings.enforce_answer_length and not validate_answer_length(
        answer, settings.answer_min_length, settings.answer_max_length
    ):
        raise InvalidInput(
            f"answer must be {settings.answer_min_length}-{settings.answer_max_length} characters"
        )

    keywords = settings.keywords.get(question_id)
    score = calculate_score(answer, question.target_answer, keywords)

    store.submit_answer(team_id, question_id, user_question, answer, score)

    logger.info(f"📝 Team {team_id} | {question_id} | Score: {score:.1f}")

    return {
        "success": True,
        "score": score,
        "questionId": question_id,
        "feedback": get_score_feedback(score),
    }
