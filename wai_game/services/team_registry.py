"""Team registration and login utilities"""
from typing import List, Optional, Union

from wai_game.core.store import GameStore
from wai_game.exceptions import InvalidInput, TeamNotFound
from wai_game.models import Team


def _parse_members(members: Union[str, List[str], None]) -> List[str]:
    # Admin form may send "Alice, Bob" instead of a list
    if isinstance(members, str):
        members = members.split(',')
    if not isinstance(members, list):
        raise InvalidInput("members must be a list of names")
    names = [m.strip() for m in members if isinstance(m, str) and m.strip()]
    if not names:
        raise InvalidInput("at least one member is required")
    return names


def _parse_name(name: Optional[str]) -> str:
    clean_name = name.strip() if isinstance(name, str) else ''
    if not clean_name:
        raise InvalidInput("name is required")
    return clean_name


def _parse_password(password: Optional[str]) -> str:
    if not isinstance(password, str) or not password.strip():
        raise InvalidInput("password is required")
    return password


def register_team(store: GameStore, name: str, members: Union[str, List[str], None],
                  password: str) -> Team:
    return store.add_team(_parse_name(name), _parse_members(members), _parse_password(password))


def update_team_profile(store: GameStore, team_id: str, name: Optional[str] = None,
                        members: Union[str, List[str], None] = None,
                        password: Optional[str] = None) -> Team:
    """Validate and apply the provided fields; omitted fields stay unchanged"""
    team = store.update_team(
        team_id,
        name=_parse_name(name) if name is not None else None,
        members=_parse_members(members) if members is not None else None,
        password=_parse_password(password) if password is not None else None,
    )
    if team is None:
        raise TeamNotFound(team_id)
    return team


def login_team(store: GameStore, team_id: str, password: str) -> Optional[Team]:
    """Return the team when the password matches, otherwise None"""
    if not team_id or password is None:
        return None
    if not store.authenticate_team(team_id, password):
        return None
    return store.get_team(team_id)


def get_team_or_raise(store: GameStore, team_id: str) -> Team:
    team = store.get_team(team_id)
    if team is None:
        raise TeamNotFound(team_id)
    return team
