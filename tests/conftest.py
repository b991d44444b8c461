from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

from boards import router as boards_router
from core.trello import ServiceError
from main import app


def iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def make_board(board_id: str = "b1", name: str = "B1", desc: str = "") -> dict[str, Any]:
    return {
        "id": board_id,
        "name": name,
        "desc": desc,
        "url": f"https://trello.com/b/{board_id}",
        "closed": False,
    }


def make_list(list_id: str, name: str, pos: float) -> dict[str, Any]:
    return {"id": list_id, "name": name, "closed": False, "pos": pos}


def make_card(
    card_id: str,
    name: str,
    list_id: str,
    *,
    last_activity: datetime | None = None,
    desc: str = "",
    due: str | None = None,
    due_complete: bool = False,
    closed: bool = False,
    labels: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    last_activity = last_activity or datetime(2024, 3, 1, tzinfo=timezone.utc)
    return {
        "id": card_id,
        "name": name,
        "desc": desc,
        "due": due,
        "dueComplete": due_complete,
        "closed": closed,
        "idList": list_id,
        "labels": labels or [],
        "dateLastActivity": iso(last_activity),
        "url": f"https://trello.com/c/{card_id}",
    }


class FakeTrelloClient:
    """
    Stands in for TrelloClient. `failures` maps a method name to the
    exception it raises.
    """

    def __init__(
        self,
        *,
        boards: list[dict] | None = None,
        board: dict | None = None,
        lists: list[dict] | None = None,
        cards: list[dict] | None = None,
        failures: dict[str, Exception] | None = None,
    ) -> None:
        self.boards = boards or []
        self.board = board or make_board()
        self.lists = lists or []
        self.cards = cards or []
        self.failures = failures or {}
        self.calls: list[str] = []

    async def _result(self, name: str, value: Any) -> Any:
        self.calls.append(name)
        if name in self.failures:
            raise self.failures[name]
        return value

    async def fetch_boards(self) -> list[dict]:
        return await self._result("fetch_boards", self.boards)

    async def fetch_board(self, board_id: str) -> dict:
        return await self._result("fetch_board", self.board)

    async def fetch_lists(self, board_id: str) -> list[dict]:
        return await self._result("fetch_lists", self.lists)

    async def fetch_cards(self, board_id: str) -> list[dict]:
        return await self._result("fetch_cards", self.cards)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("API_KEY", "TRELLO_API_KEY", "TRELLO_TOKEN", "TRELLO_BASE_URL", "TRELLO_TIMEOUT_S"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    # No `with`: the lifespan (DB pool) does not run.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_trello():
    def _install(fake: FakeTrelloClient) -> FakeTrelloClient:
        app.dependency_overrides[boards_router.get_trello_client] = lambda: fake
        return fake

    return _install


def upstream_error(status: int = 404, body: str = "board not found") -> ServiceError:
    return ServiceError(f"Trello API error: {status} - {body}", status=status, body=body)
