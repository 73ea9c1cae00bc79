"""
Leaderboard service - rankings and read-only views for polling clients
"""
from typing import Dict, List

from wai_game.core.store import GameStore
from wai_game.models import QuestionWithReactions, ReactionType, TeamAnswerView, TeamRanking, utcnow
from wai_game.utils import round1


def get_rankings(store: GameStore) -> List[TeamRanking]:
    """Teams ranked by total score, earlier registration first on ties"""
    return store.get_team_rankings()


def get_poll_summary(store: GameStore) -> Dict:
    """
    Combined read for periodic refresh clients

    Status, rankings and question count come from one locked snapshot.

    Returns:
        {"status", "rankings", "totalQuestions", "timestamp"}
    """
    with store.lock:
        status = store.get_status()
        rankings = store.get_team_rankings()
        total_questions = len(store.get_questions())

    return {
        "status": status,
        "rankings": rankings,
        "totalQuestions": total_questions,
        "timestamp": utcnow().isoformat(),
    }


def get_overview(store: GameStore) -> Dict:
    """Headline numbers for the admin dashboard"""
    state = store.get_game_state()

    teams = state.teams
    total_answers = sum(len(t.answers) for t in teams)
    average_score = sum(t.total_score for t in teams) / len(teams) if teams else 0.0

    return {
        "status": state.status,
        "totalTeams": len(teams),
        "totalQuestions": len(state.questions),
        "totalAnswers": total_answers,
        "averageScore": round1(average_score),
    }


def get_question_board(store: GameStore) -> List[QuestionWithReactions]:
    """
    Every question in order with its reaction counts and the team answers to it
    """
    state = store.get_game_state()

    counts: Dict[str, Dict[str, int]] = {
        q.id: {reaction_type.value: 0 for reaction_type in ReactionType}
        for q in state.questions
    }
    for reaction in state.reactions:
        if reaction.question_id in counts:
            counts[reaction.question_id][reaction.type.value] += 1

    board = []
    for question in sorted(state.questions, key=lambda q: q.order):
        team_answers = [
            TeamAnswerView(
                team_id=team.id,
                team_name=team.name,
                user_question=answer.user_question,
                answer=answer.answer,
                score=answer.score,
            )
            for team in state.teams
            for answer in team.answers
            if answer.question_id == question.id
        ]
        team_answers.sort(key=lambda a: -a.score)
        board.append(QuestionWithReactions(
            id=question.id,
            target_answer=question.target_answer,
            order=question.order,
            reactions=counts[question.id],
            team_answers=team_answers,
        ))
    return board
