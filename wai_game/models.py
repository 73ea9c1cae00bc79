"""
Data models for the WAi Championship game server

Field names are snake_case in Python and camelCase on the wire and in the
persisted snapshot (targetAnswer, submittedAt, totalScore, ...).
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GameStatus(str, Enum):
    """Game lifecycle status"""
    PREPARING = "Preparing"
    RUNNING = "Running"
    ENDED = "Ended"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @classmethod
    def _missing_(cls, value):
        # Accept the Korean display labels used by the event screens
        for member, label in _STATUS_LABELS.items():
            if value == label:
                return member
        return None


_STATUS_LABELS = {
    GameStatus.PREPARING: "준비중",
    GameStatus.RUNNING: "진행중",
    GameStatus.ENDED: "종료",
}


class ReactionType(str, Enum):
    """Audience reaction kinds (exactly five)"""
    LIKE = "like"
    CLAP = "clap"
    FIRE = "fire"
    HEART = "heart"
    LAUGH = "laugh"

    @property
    def label(self) -> str:
        return _REACTION_LABELS[self]

    @classmethod
    def _missing_(cls, value):
        for member, label in _REACTION_LABELS.items():
            if value == label:
                return member
        return None


_REACTION_LABELS = {
    ReactionType.LIKE: "좋아요",
    ReactionType.CLAP: "박수",
    ReactionType.FIRE: "불",
    ReactionType.HEART: "하트",
    ReactionType.LAUGH: "웃음",
}


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Question(CamelModel):
    """A target answer teams must get the chatbot to reproduce"""
    id: str
    target_answer: str
    order: int = 0


class Answer(CamelModel):
    """One team's submission for one question"""
    question_id: str
    user_question: str     # prompt the team wrote
    answer: str            # chatbot reply the team pasted
    score: float = 0.0     # 0..10, one decimal
    submitted_at: datetime = Field(default_factory=utcnow)


class Team(CamelModel):
    """Registered team and its answers"""
    id: str
    name: str
    members: List[str] = []
    password: str
    answers: List[Answer] = []
    total_score: float = 0.0
    current_question_index: int = 0
    created_at: datetime = Field(default_factory=utcnow)


class Reaction(CamelModel):
    """Audience reaction to a team's answer on a question (append-only)"""
    id: str
    question_id: str
    team_id: str
    type: ReactionType
    user_id: str
    created_at: datetime = Field(default_factory=utcnow)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value):
        return ReactionType(value) if isinstance(value, str) else value


class GameState(CamelModel):
    """Root aggregate persisted as one JSON document"""
    status: GameStatus = GameStatus.PREPARING
    teams: List[Team] = []
    questions: List[Question] = []
    reactions: List[Reaction] = []
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        return GameStatus(value) if isinstance(value, str) else value


class TeamRanking(CamelModel):
    """Leaderboard row"""
    rank: int
    team: Team
    progress: float


class TeamAnswerView(CamelModel):
    """A team's answer as shown on the scoreboard"""
    team_id: str
    team_name: str
    user_question: str
    answer: str
    score: float


class QuestionWithReactions(CamelModel):
    """Question with reaction counts and all team answers to it"""
    id: str
    target_answer: str
    order: int
    reactions: Dict[str, int]
    team_answers: List[TeamAnswerView] = []


class Settings(BaseModel):
    """Server configuration loaded from YAML"""
    data_file: str = "data/game-state.json"
    questions_file: Optional[str] = None   # seeds the bank when it is empty
    answer_min_length: int = 5
    answer_max_length: int = 5000
    enforce_answer_length: bool = False
    keywords: Dict[str, List[str]] = {}    # question_id -> keywords for bonus
    cors_origins: List[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000
