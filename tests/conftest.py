import pytest
from fastapi.testclient import TestClient

from wai_game import state
from wai_game.core.persistence import GameStateRepository
from wai_game.core.store import GameStore
from wai_game.main import app
from wai_game.models import GameStatus, Settings


@pytest.fixture()
def repository(tmp_path):
    return GameStateRepository(tmp_path / "data" / "game-state.json")


@pytest.fixture()
def store(repository):
    return GameStore(repository)


@pytest.fixture()
def running_store(store):
    store.set_game_status(GameStatus.RUNNING)
    return store


@pytest.fixture()
def settings():
    return Settings()


@pytest.fixture()
def client(store, settings):
    app.dependency_overrides[state.get_store] = lambda: store
    app.dependency_overrides[state.get_settings] = lambda: settings
    # No context manager: the lifespan handler (and its config file) is skipped
    yield TestClient(app)
    app.dependency_overrides.clear()
