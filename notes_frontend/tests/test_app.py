"""HTTP tests for the page routes and the JSON API."""

from __future__ import annotations

from fastapi.testclient import TestClient

from src.ui.config import (
    DEFAULT_MAX_SESSIONS,
    DEFAULT_SESSION_COOKIE,
    get_cors_origins,
    get_max_sessions,
    seed_enabled,
)
from src.ui.main import create_app
from src.ui.sessions import SessionRegistry
from src.ui.store import NotesStore


def _titles(client: TestClient, **params) -> list:
    resp = client.get("/api/notes", params=params)
    assert resp.status_code == 200
    return [n["title"] for n in resp.json()]


def _command(client: TestClient, **command) -> dict:
    resp = client.post("/api/commands", json={"command": command})
    assert resp.status_code == 200, resp.text
    return resp.json()


# ---------------------------------------------------------------------------
# Health + page
# ---------------------------------------------------------------------------


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Healthy"}


def test_page_sets_session_cookie(client: TestClient) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert DEFAULT_SESSION_COOKIE in resp.cookies
    assert "Welcome to Notes" in resp.text


def test_search_query_filters_page(client: TestClient) -> None:
    html = client.get("/", params={"q": "color"}).text
    assert "Color palette" in html
    assert "Welcome to Notes" not in html
    # Filter sticks until cleared.
    assert "Welcome to Notes" not in client.get("/").text
    assert "Welcome to Notes" in client.get("/", params={"q": ""}).text


def test_form_create_flow(client: TestClient) -> None:
    resp = client.post("/notes/new", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"
    assert "Create Note" in client.get("/").text

    client.post("/draft/save", data={"title": "", "content": "hello"})
    state = client.get("/api/state").json()
    assert state["dialogOpen"] is False
    assert state["notes"][0]["title"] == "Untitled"
    assert state["notes"][0]["content"] == "hello"
    assert len(state["notes"]) == 3


def test_form_blank_save_is_discarded(client: TestClient) -> None:
    client.post("/notes/new")
    client.post("/draft/save", data={"title": "  ", "content": ""})
    state = client.get("/api/state").json()
    assert len(state["notes"]) == 2
    assert state["dialogOpen"] is False


def test_resubmitted_save_creates_one_note(client: TestClient) -> None:
    client.post("/notes/new")
    client.post("/draft/save", data={"title": "Once", "content": ""})
    resp = client.post("/draft/save", data={"title": "Once", "content": ""}, follow_redirects=False)
    assert resp.status_code == 303
    assert _titles(client) == ["Once", "Color palette", "Welcome to Notes"]


def test_save_without_open_dialog_is_ignored(client: TestClient) -> None:
    client.post("/draft/save", data={"title": "Stray", "content": "form"})
    state = client.get("/api/state").json()
    assert len(state["notes"]) == 2
    assert state["draft"] == {"id": None, "title": "", "content": ""}


def test_form_edit_cancel_and_delete(client: TestClient) -> None:
    note_id = client.get("/api/state").json()["notes"][0]["id"]

    client.post(f"/notes/{note_id}/edit")
    assert client.get("/api/state").json()["draft"]["id"] == note_id
    client.post("/draft/cancel")
    assert client.get("/api/state").json()["dialogOpen"] is False

    client.post(f"/notes/{note_id}/edit")
    client.post("/draft/save", data={"title": "Renamed", "content": "new body"})
    assert "Renamed" in _titles(client)

    client.post(f"/notes/{note_id}/delete")
    assert "Renamed" not in _titles(client)
    resp = client.post("/notes/not-there/delete", follow_redirects=False)
    assert resp.status_code == 303
    assert len(_titles(client)) == 1


def test_sidebar_toggle(client: TestClient) -> None:
    client.post("/sidebar/toggle")
    assert "Show Menu" in client.get("/").text
    client.post("/sidebar/toggle")
    assert "Hide Menu" in client.get("/").text


# ---------------------------------------------------------------------------
# JSON API
# ---------------------------------------------------------------------------


def test_state_shape(client: TestClient) -> None:
    state = client.get("/api/state").json()
    assert set(state) == {"notes", "filter", "dialogOpen", "dialogMode", "draft", "sidebarOpen"}
    assert {"id", "title", "content", "updatedAt"} <= set(state["notes"][0])


def test_api_notes_sorted_and_filtered(client: TestClient) -> None:
    assert _titles(client) == ["Color palette", "Welcome to Notes"]
    assert _titles(client, q="COLOR") == ["Color palette"]
    # The query parameter does not change the stored filter.
    assert client.get("/api/state").json()["filter"] == ""


def test_command_flow(client: TestClient) -> None:
    _command(client, type="open_create")
    _command(client, type="update_draft", title="From API", content="body")
    state = _command(client, type="save_draft")
    assert state["notes"][0]["title"] == "From API"

    state = _command(client, type="set_filter", text="api")
    assert state["filter"] == "api"
    assert _titles(client) == ["From API"]

    state = _command(client, type="toggle_sidebar")
    assert state["sidebarOpen"] is False

    note_id = state["notes"][0]["id"]
    state = _command(client, type="delete", id=note_id)
    assert len(state["notes"]) == 2


def test_edit_unknown_id_via_api(client: TestClient) -> None:
    state = _command(client, type="open_edit", id="missing")
    assert state["dialogOpen"] is False


def test_invalid_command_rejected(client: TestClient) -> None:
    resp = client.post("/api/commands", json={"command": {"type": "undo"}})
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Sessions + config
# ---------------------------------------------------------------------------


def test_sessions_are_isolated() -> None:
    app = create_app(SessionRegistry())
    alice = TestClient(app)
    bob = TestClient(app)

    _command(alice, type="delete", id=alice.get("/api/state").json()["notes"][0]["id"])
    assert len(alice.get("/api/state").json()["notes"]) == 1
    assert len(bob.get("/api/state").json()["notes"]) == 2
    assert len(app.state.sessions) == 2


def test_injected_registry_is_used() -> None:
    registry = SessionRegistry()
    app = create_app(registry)
    assert app.state.sessions is registry

    resp = TestClient(app).get("/")
    assert len(registry) == 1
    assert resp.cookies[DEFAULT_SESSION_COOKIE] in registry


def test_unknown_cookie_starts_fresh_session() -> None:
    registry = SessionRegistry(lambda: NotesStore(seed=False))
    client = TestClient(create_app(registry))
    resp = client.get("/api/state", headers={"cookie": f"{DEFAULT_SESSION_COOKIE}=forged"})
    assert resp.json()["notes"] == []
    assert resp.cookies[DEFAULT_SESSION_COOKIE] != "forged"


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("NOTES_CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("NOTES_SEED", "off")
    assert get_cors_origins() == ["http://a.test", "http://b.test"]
    assert seed_enabled() is False
    monkeypatch.delenv("NOTES_SEED")
    assert seed_enabled() is True


def test_max_sessions_from_env(monkeypatch) -> None:
    monkeypatch.delenv("NOTES_MAX_SESSIONS", raising=False)
    assert get_max_sessions() == DEFAULT_MAX_SESSIONS
    monkeypatch.setenv("NOTES_MAX_SESSIONS", "3")
    assert get_max_sessions() == 3
    app = create_app()
    for _ in range(5):
        TestClient(app).get("/health")
        TestClient(app).get("/api/state")
    assert len(app.state.sessions) == 3
