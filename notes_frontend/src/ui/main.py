from __future__ import annotations

from typing import List, Optional, Tuple

from fastapi import Depends, FastAPI, Form, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse

from src.ui.config import (
    get_cors_origins,
    get_max_sessions,
    get_session_cookie_name,
    seed_enabled,
)
from src.ui.logging_setup import configure_logging
from src.ui.models import CommandRequest, Note, NotesState
from src.ui.render import render_page
from src.ui.sessions import SessionRegistry
from src.ui.store import NotesStore
from src.ui.view import filter_notes

logger = configure_logging()

openapi_tags = [
    {"name": "Health", "description": "Service health checks."},
    {"name": "Page", "description": "Server-rendered notes page and its form actions."},
    {"name": "API", "description": "JSON access to the session's notes state."},
]

Session = Tuple[str, NotesStore]


def _new_store() -> NotesStore:
    return NotesStore(seed=seed_enabled())


def get_session(request: Request) -> Session:
    """Resolve (or start) the caller's session from its cookie."""
    registry: SessionRegistry = request.app.state.sessions
    return registry.get_or_create(request.cookies.get(get_session_cookie_name()))


def _remember(response: Response, session_id: str) -> None:
    # No max-age: the cookie, and with it the notes, end with the browser session.
    response.set_cookie(
        get_session_cookie_name(), session_id, httponly=True, samesite="lax"
    )


def _back_to_page(session_id: str) -> RedirectResponse:
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    _remember(response, session_id)
    return response


# PUBLIC_INTERFACE
def create_app(registry: Optional[SessionRegistry] = None) -> FastAPI:
    """Build the Notes UI application with its own in-memory session registry."""
    app = FastAPI(
        title="Notes",
        description="Single-page notes UI with in-memory, per-session state.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.sessions = (
        registry
        if registry is not None
        else SessionRegistry(_new_store, max_sessions=get_max_sessions())
    )

    # The JSON API may be called from a separately served frontend.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Health"], summary="Health check", description="Basic service health check.")
    async def health_check():
        """Return a basic health response."""
        return {"message": "Healthy"}

    # -- page -----------------------------------------------------------------

    @app.get(
        "/",
        response_class=HTMLResponse,
        tags=["Page"],
        summary="Notes page",
        description="Render the notes page. A `q` parameter replaces the search filter.",
    )
    async def page(q: Optional[str] = None, session: Session = Depends(get_session)) -> HTMLResponse:
        session_id, store = session
        if q is not None:
            store.set_filter(q)
        response = HTMLResponse(render_page(store.state, store.visible_notes()))
        _remember(response, session_id)
        return response

    @app.post("/sidebar/toggle", tags=["Page"], summary="Toggle menu")
    async def toggle_sidebar(session: Session = Depends(get_session)) -> RedirectResponse:
        session_id, store = session
        store.toggle_sidebar()
        return _back_to_page(session_id)

    @app.post("/notes/new", tags=["Page"], summary="Open create dialog")
    async def open_create(session: Session = Depends(get_session)) -> RedirectResponse:
        session_id, store = session
        store.open_create()
        return _back_to_page(session_id)

    @app.post("/notes/{note_id}/edit", tags=["Page"], summary="Open edit dialog")
    async def open_edit(note_id: str, session: Session = Depends(get_session)) -> RedirectResponse:
        session_id, store = session
        store.open_edit(note_id)
        return _back_to_page(session_id)

    @app.post("/notes/{note_id}/delete", tags=["Page"], summary="Delete note")
    async def delete_note(note_id: str, session: Session = Depends(get_session)) -> RedirectResponse:
        session_id, store = session
        store.delete_note(note_id)
        return _back_to_page(session_id)

    @app.post(
        "/draft/save",
        tags=["Page"],
        summary="Save draft",
        description="Commit the dialog fields. A blank title and content closes the dialog without saving.",
    )
    async def save_draft(
        title: str = Form(""),
        content: str = Form(""),
        session: Session = Depends(get_session),
    ) -> RedirectResponse:
        session_id, store = session
        if not store.state.dialog_open:
            # Resubmitted or stale form: there is no draft to commit.
            logger.info("Save ignored, dialog not open")
            return _back_to_page(session_id)
        store.update_draft(title=title, content=content)
        store.save_draft()
        return _back_to_page(session_id)

    @app.post("/draft/cancel", tags=["Page"], summary="Discard draft")
    async def cancel_draft(session: Session = Depends(get_session)) -> RedirectResponse:
        session_id, store = session
        store.cancel_draft()
        return _back_to_page(session_id)

    # -- JSON -----------------------------------------------------------------

    @app.get(
        "/api/state",
        response_model=NotesState,
        tags=["API"],
        summary="Session state",
        operation_id="get_state",
    )
    async def get_state(response: Response, session: Session = Depends(get_session)) -> NotesState:
        session_id, store = session
        _remember(response, session_id)
        return store.snapshot()

    @app.get(
        "/api/notes",
        response_model=List[Note],
        tags=["API"],
        summary="Visible notes",
        description="Notes matching the filter, most recently updated first. "
        "`q` overrides the stored filter for this call only.",
        operation_id="list_notes",
    )
    async def list_notes(
        response: Response,
        q: Optional[str] = None,
        session: Session = Depends(get_session),
    ) -> List[Note]:
        session_id, store = session
        _remember(response, session_id)
        if q is None:
            return store.visible_notes()
        return filter_notes(store.state.notes, q)

    @app.post(
        "/api/commands",
        response_model=NotesState,
        tags=["API"],
        summary="Dispatch command",
        description="Apply one UI command to the session and return the new state.",
        operation_id="dispatch_command",
    )
    async def dispatch_command(
        payload: CommandRequest,
        response: Response,
        session: Session = Depends(get_session),
    ) -> NotesState:
        session_id, store = session
        store.dispatch(payload.command)
        _remember(response, session_id)
        return store.snapshot()

    logger.info("Notes UI ready")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.ui.main:app", host="0.0.0.0", port=3000)
