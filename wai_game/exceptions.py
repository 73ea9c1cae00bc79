"""
Domain errors raised by the services layer

Routers translate these into HTTPException responses.
"""


class InvalidInput(ValueError):
    """Missing or malformed request field"""


class GameNotRunning(ValueError):
    """Answer submitted while the game is not running"""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Game is not running (status: {getattr(status, 'value', status)})")


class NotFound(LookupError):
    """Referenced entity does not exist"""


class TeamNotFound(NotFound):
    def __init__(self, team_id: str):
        self.team_id = team_id
        super().__init__(f"Team {team_id} not found")


class QuestionNotFound(NotFound):
    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"Question {question_id} not found")
