from __future__ import annotations

from datetime import datetime, timedelta, timezone

from conftest import FakeTrelloClient, make_board, make_card, make_list, upstream_error


def _now() -> datetime:
    return datetime.now(timezone.utc)


def test_list_boards_passes_through(client, use_trello):
    use_trello(FakeTrelloClient(boards=[make_board("b1", "One"), make_board("b2", "Two")]))

    resp = client.get("/boards")

    assert resp.status_code == 200
    assert [board["name"] for board in resp.json()] == ["One", "Two"]
    assert resp.json()[0]["url"] == "https://trello.com/b/b1"


def test_get_board_returns_aggregate_with_trello_field_names(client, use_trello):
    use_trello(
        FakeTrelloClient(
            board=make_board("b1", "B1"),
            lists=[make_list("l1", "To Do", 1)],
            cards=[make_card("c1", "Write spec", "l1", due_complete=True)],
        )
    )

    resp = client.get("/boards/b1")

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == "b1"
    assert body["lists"] == [{"id": "l1", "name": "To Do", "closed": False, "pos": 1}]
    card = body["cards"][0]
    assert card["idList"] == "l1"
    assert card["dueComplete"] is True
    assert "dateLastActivity" in card


def test_summary_is_plain_text(client, use_trello):
    use_trello(
        FakeTrelloClient(
            board=make_board("b1", "B1"),
            lists=[make_list("l1", "To Do", 1), make_list("l2", "Done", 2)],
            cards=[make_card("c1", "Write spec", "l1")],
        )
    )

    resp = client.get("/boards/b1/summary")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "# Board: B1\n\n## List: To Do\n\n- **Write spec**\n"


def test_upstream_failure_becomes_500_error_envelope(client, use_trello):
    use_trello(FakeTrelloClient(failures={"fetch_cards": upstream_error(404, "board not found")}))

    resp = client.get("/boards/missing/summary")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Trello API error: 404 - board not found"}


def test_missing_credentials_becomes_500(client):
    resp = client.get("/boards")

    assert resp.status_code == 500
    assert "missing credentials" in resp.json()["error"]


def test_recent_text_by_default(client, use_trello):
    fake = use_trello(
        FakeTrelloClient(
            board=make_board("b1", "Roadmap"),
            cards=[
                make_card("c1", "Fresh", "l1", last_activity=_now() - timedelta(days=1)),
                make_card("c2", "Stale", "l1", last_activity=_now() - timedelta(days=30)),
            ],
        )
    )

    resp = client.get("/boards/b1/recent")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    lines = resp.text.splitlines()
    assert lines[0] == "# Recent Activity: Roadmap"
    assert lines[1] == "Cards modified in the last 7 days:"
    assert any(line.startswith("- **Fresh**") for line in lines)
    assert not any("Stale" in line for line in lines)
    assert "fetch_lists" not in fake.calls


def test_recent_json_when_accepted(client, use_trello):
    use_trello(
        FakeTrelloClient(
            board=make_board("b1", "Roadmap"),
            cards=[
                make_card("c1", "Fresh", "l1", last_activity=_now() - timedelta(days=1), closed=True),
                make_card("c2", "Stale", "l1", last_activity=_now() - timedelta(days=5)),
            ],
        )
    )

    resp = client.get("/boards/b1/recent?days=3", headers={"Accept": "application/json"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["boardId"] == "b1"
    assert body["boardName"] == "Roadmap"
    assert body["days"] == 3
    assert [card["id"] for card in body["cards"]] == ["c1"]


def test_recent_with_nothing_new(client, use_trello):
    use_trello(
        FakeTrelloClient(
            board=make_board("b1", "Roadmap"),
            cards=[make_card("c1", "Stale", "l1", last_activity=_now() - timedelta(days=40))],
        )
    )

    resp = client.get("/boards/b1/recent?days=2")

    assert resp.text.splitlines()[-1] == "No recent activity."
    assert "Stale" not in resp.text


def test_recent_rejects_bad_days(client, use_trello):
    fake = use_trello(FakeTrelloClient())

    assert client.get("/boards/b1/recent?days=-1").status_code == 422
    assert client.get("/boards/b1/recent?days=abc").status_code == 422
    assert fake.calls == []


def test_recent_with_huge_window_lists_every_card(client, use_trello):
    use_trello(
        FakeTrelloClient(
            board=make_board("b1", "Roadmap"),
            cards=[make_card("c1", "Ancient", "l1", last_activity=datetime(1990, 1, 1, tzinfo=timezone.utc))],
        )
    )

    for days in (800000, 10000000000):
        resp = client.get(f"/boards/b1/recent?days={days}", headers={"Accept": "application/json"})

        assert resp.status_code == 200
        assert resp.json()["days"] == days
        assert [card["id"] for card in resp.json()["cards"]] == ["c1"]


def test_lists_failure_returns_error_envelope(client, use_trello):
    use_trello(FakeTrelloClient(failures={"fetch_lists": upstream_error(503, "unavailable")}))

    resp = client.get("/boards/b1")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Trello API error: 503 - unavailable"}
