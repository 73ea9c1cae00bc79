"""Team registration, login and management endpoints"""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from wai_game.core.store import GameStore
from wai_game.exceptions import InvalidInput, TeamNotFound
from wai_game.services.team_registry import (
    get_team_or_raise, login_team, register_team, update_team_profile,
)
from wai_game.state import get_store


router = APIRouter(prefix="/api/teams", tags=["teams"])


@router.get("")
def list_teams(store: GameStore = Depends(get_store)):
    return store.get_teams()


@router.get("/{team_id}")
def get_team(team_id: str, store: GameStore = Depends(get_store)):
    try:
        return get_team_or_raise(store, team_id)
    except TeamNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("")
def team_action(payload: dict, store: GameStore = Depends(get_store)):
    """
    Request:
        {"action": "create", "name": "...", "members": ["..."], "password": "..."}
        {"action": "authenticate", "teamId": "...", "password": "..."}
        {"action": "update", "teamId": "...", "name"?, "members"?, "password"?}
        {"action": "delete", "teamId": "..."}
    """
    action = payload.get("action")

    if action == "create":
        try:
            return register_team(
                store,
                payload.get("name"),
                payload.get("members"),
                payload.get("password"),
            )
        except InvalidInput as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    if action == "authenticate":
        team = login_team(store, payload.get("teamId"), payload.get("password"))
        if team is None:
            return JSONResponse(status_code=401, content={"success": False})
        return {"success": True, "team": team}

    if action == "update":
        try:
            team = update_team_profile(
                store,
                payload.get("teamId"),
                name=payload.get("name"),
                members=payload.get("members"),
                password=payload.get("password"),
            )
        except InvalidInput as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except TeamNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"success": True, "team": team}

    if action == "delete":
        team_id = payload.get("teamId")
        if not team_id:
            raise HTTPException(status_code=400, detail="teamId is required")
        store.delete_team(team_id)
        return {"success": True}

    raise HTTPException(status_code=400, detail="Invalid action")
