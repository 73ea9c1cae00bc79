"""
Authoritative game state store

One GameStore owns the single GameState aggregate of the process. Every
mutation runs under one re-entrant lock and is written through to the
repository before returning. Reads return deep copies taken under the
same lock, so callers never observe a half-applied mutation.
"""
import logging
import threading
from typing import Dict, Iterable, List, Optional

from wai_game.core.persistence import GameStateRepository
from wai_game.models import (
    Answer, GameState, GameStatus, Question, Reaction, ReactionType,
    Team, TeamRanking, utcnow,
)
from wai_game.utils import generate_id


logger = logging.getLogger(__name__)


class GameStore:
    """Game state aggregate with write-through persistence"""

    def __init__(self, repository: GameStateRepository):
        self._repository = repository
        self._lock = threading.RLock()
        self._state = repository.load()

    @property
    def lock(self) -> threading.RLock:
        """Exclusive section; hold it to read several values consistently"""
        return self._lock

    def _persist(self) -> None:
        if not self._repository.save(self._state):
            logger.warning("⚠️ Game state kept in memory but not saved; disk copy is stale")

    # ==================== GAME STATUS ====================

    def get_game_state(self) -> GameState:
        """Snapshot copy of the whole aggregate"""
        with self._lock:
            return self._state.model_copy(deep=True)

    def get_status(self) -> GameStatus:
        with self._lock:
            return self._state.status

    def set_game_status(self, status: GameStatus) -> None:
        """
        Move to any status (no transition guard)

        Entering RUNNING stamps started_at, entering ENDED stamps ended_at.
        """
        status = GameStatus(status)
        with self._lock:
            self._state.status = status
            if status == GameStatus.RUNNING:
                self._state.started_at = utcnow()
            elif status == GameStatus.ENDED:
                self._state.ended_at = utcnow()
            self._persist()
        logger.info(f"🎮 Game status -> {status.value}")

    def reset_game(self) -> None:
        """Clear answers, scores and reactions; keep teams and questions"""
        with self._lock:
            for team in self._state.teams:
                team.answers = []
                team.total_score = 0.0
                team.current_question_index = 0
            self._state.reactions = []
            self._state.status = GameStatus.PREPARING
            self._state.started_at = None
            self._state.ended_at = None
            self._persist()
        logger.info("🔄 Game reset")

    # ==================== TEAMS ====================

    def _find_team(self, team_id: str) -> Optional[Team]:
        return next((t for t in self._state.teams if t.id == team_id), None)

    def get_teams(self) -> List[Team]:
        with self._lock:
            return [t.model_copy(deep=True) for t in self._state.teams]

    def get_team(self, team_id: str) -> Optional[Team]:
        with self._lock:
            team = self._find_team(team_id)
            return team.model_copy(deep=True) if team else None

    def add_team(self, name: str, members: List[str], password: str) -> Team:
        with self._lock:
            team = Team(
                id=generate_id("team"),
                name=name,
                members=list(members),
                password=password,
                created_at=utcnow(),
            )
            self._state.teams.append(team)
            self._persist()
            created = team.model_copy(deep=True)
        logger.info(f"👥 Team registered: {name} ({created.id})")
        return created

    def update_team(self, team_id: str, name: Optional[str] = None,
                    members: Optional[List[str]] = None,
                    password: Optional[str] = None) -> Optional[Team]:
        """Update team profile fields; None if the team does not exist"""
        with self._lock:
            team = self._find_team(team_id)
            if team is None:
                return None
            if name is not None:
                team.name = name
            if members is not None:
                team.members = list(members)
            if password is not None:
                team.password = password
            self._persist()
            return team.model_copy(deep=True)

    def delete_team(self, team_id: str) -> bool:
        """Remove a team and every reaction it authored"""
        with self._lock:
            before = len(self._state.teams)
            self._state.teams = [t for t in self._state.teams if t.id != team_id]
            self._state.reactions = [r for r in self._state.reactions if r.team_id != team_id]
            removed = len(self._state.teams) < before
            self._persist()
        if removed:
            logger.info(f"🗑️ Team deleted: {team_id}")
        return removed

    def authenticate_team(self, team_id: str, password: str) -> bool:
        """Plaintext password comparison"""
        with self._lock:
            team = self._find_team(team_id)
            return team is not None and team.password == password

    # ==================== QUESTIONS ====================

    def _find_question(self, question_id: str) -> Optional[Question]:
        return next((q for q in self._state.questions if q.id == question_id), None)

    def get_questions(self) -> List[Question]:
        """All questions sorted by order (stable: ties keep insertion order)"""
        with self._lock:
            ordered = sorted(self._state.questions, key=lambda q: q.order)
            return [q.model_copy() for q in ordered]

    def get_question(self, question_id: str) -> Optional[Question]:
        with self._lock:
            question = self._find_question(question_id)
            return question.model_copy() if question else None

    def add_question(self, target_answer: str, order: Optional[int] = None) -> Question:
        with self._lock:
            question = Question(
                id=generate_id("q"),
                target_answer=target_answer,
                order=len(self._state.questions) if order is None else order,
            )
            self._state.questions.append(question)
            self._refresh_progress(self._state.teams)
            self._persist()
            return question.model_copy()

    def update_question(self, question_id: str, target_answer: Optional[str] = None,
                        order: Optional[int] = None) -> Optional[Question]:
        with self._lock:
            question = self._find_question(question_id)
            if question is None:
                return None
            if target_answer is not None:
                question.target_answer = target_answer
            if order is not None:
                question.order = order
            self._persist()
            return question.model_copy()

    def delete_question(self, question_id: str) -> bool:
        """Remove a question with its reactions and the answers to it"""
        with self._lock:
            before = len(self._state.questions)
            self._state.questions = [q for q in self._state.questions if q.id != question_id]
            removed = len(self._state.questions) < before
            self._drop_orphans()
            self._persist()
        return removed

    def set_questions(self, items: Iterable[Dict]) -> List[Question]:
        """
        Replace the whole question bank

        Args:
            items: dicts with target_answer (or targetAnswer) and optional order;
                   missing order defaults to the list position

        Returns:
            The new questions, sorted by order
        """
        with self._lock:
            questions = []
            for index, item in enumerate(items):
                target = item.get("target_answer", item.get("targetAnswer", ""))
                order = item.get("order")
                questions.append(Question(
                    id=generate_id("q"),
                    target_answer=target,
                    order=index if order is None else order,
                ))
            self._state.questions = questions
            self._drop_orphans()
            self._persist()
        logger.info(f"📋 Question bank replaced with {len(questions)} questions")
        return self.get_questions()

    def _drop_orphans(self) -> None:
        """Remove reactions and answers pointing at questions that no longer exist"""
        valid = {q.id for q in self._state.questions}
        self._state.reactions = [r for r in self._state.reactions if r.question_id in valid]
        for team in self._state.teams:
            team.answers = [a for a in team.answers if a.question_id in valid]
            self._recompute_team(team)

    # ==================== ANSWERS ====================

    def _recompute_team(self, team: Team) -> None:
        team.total_score = sum(a.score for a in team.answers)
        self._refresh_progress([team])

    def _refresh_progress(self, teams: Iterable[Team]) -> None:
        last_index = max(len(self._state.questions) - 1, 0)
        for team in teams:
            team.current_question_index = min(len(team.answers), last_index)

    def submit_answer(self, team_id: str, question_id: str, user_question: str,
                      answer: str, score: float) -> Optional[Answer]:
        """
        Upsert a team's answer for a question

        Replaces an existing answer to the same question, otherwise appends.
        Unknown team: silently does nothing and returns None.
        """
        with self._lock:
            team = self._find_team(team_id)
            if team is None:
                logger.warning(f"⚠️ Answer for unknown team {team_id} ignored")
                return None

            record = Answer(
                question_id=question_id,
                user_question=user_question,
                answer=answer,
                score=score,
                submitted_at=utcnow(),
            )
            for index, existing in enumerate(team.answers):
                if existing.question_id == question_id:
                    team.answers[index] = record
                    break
            else:
                team.answers.append(record)

            self._recompute_team(team)
            self._persist()
            return record.model_copy()

    def get_team_answer(self, team_id: str, question_id: str) -> Optional[Answer]:
        with self._lock:
            team = self._find_team(team_id)
            if team is None:
                return None
            found = next((a for a in team.answers if a.question_id == question_id), None)
            return found.model_copy() if found else None

    # ==================== REACTIONS ====================

    def add_reaction(self, question_id: str, team_id: str, reaction_type: ReactionType,
                     user_id: str) -> Reaction:
        """Append a reaction (no de-duplication)"""
        with self._lock:
            reaction = Reaction(
                id=generate_id("r"),
                question_id=question_id,
                team_id=team_id,
                type=ReactionType(reaction_type),
                user_id=user_id,
                created_at=utcnow(),
            )
            self._state.reactions.append(reaction)
            self._persist()
            return reaction.model_copy()

    def get_reactions(self, question_id: Optional[str] = None) -> List[Reaction]:
        with self._lock:
            return [
                r.model_copy() for r in self._state.reactions
                if question_id is None or r.question_id == question_id
            ]

    def get_reaction_counts(self, question_id: str) -> Dict[str, int]:
        """Counts for all five reaction types, zero-filled"""
        with self._lock:
            counts = {reaction_type.value: 0 for reaction_type in ReactionType}
            for reaction in self._state.reactions:
                if reaction.question_id == question_id:
                    counts[reaction.type.value] += 1
            return counts

    # ==================== RANKINGS ====================

    def get_team_rankings(self) -> List[TeamRanking]:
        """
        Teams sorted by total score (desc), then registration time (asc)

        progress = answered / questions × 100, or 0 when there are no questions
        """
        with self._lock:
            total_questions = len(self._state.questions)
            teams = sorted(self._state.teams, key=lambda t: (-t.total_score, t.created_at))
            rankings = []
            for idx, team in enumerate(teams):
                progress = len(team.answers) / total_questions * 100 if total_questions else 0.0
                rankings.append(TeamRanking(
                    rank=idx + 1,
                    team=team.model_copy(deep=True),
                    progress=progress,
                ))
            return rankings
