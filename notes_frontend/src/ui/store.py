"""
In-memory state store for one Notes UI session.

The store owns a single NotesState and exposes one method per UI event.
Every method is total: nothing here raises for bad input, blank drafts,
unknown ids or empty search results. ``dispatch`` routes a command model to
the matching handler so the HTTP layer can drive the store with JSON.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from src.ui.models import (
    UNTITLED,
    CancelDraft,
    Command,
    DeleteNote,
    DialogMode,
    Draft,
    Note,
    NotesState,
    OpenCreate,
    OpenEdit,
    SaveDraft,
    SetFilter,
    ToggleSidebar,
    UpdateDraft,
    new_note_id,
)
from src.ui.view import filter_notes

logger = logging.getLogger("notes_ui.store")

HOUR_MS = 60 * 60 * 1000
MINUTE_MS = 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


def seed_notes(now: int, make_id: Callable[[], str] = new_note_id) -> List[Note]:
    """The two demo notes every new session starts with."""
    return [
        Note(
            id=make_id(),
            title="Welcome to Notes",
            content=(
                "Use the + New Note button to create notes.\n"
                "Click a note's Edit to modify, or Delete to remove."
            ),
            updated_at=now - HOUR_MS,
        ),
        Note(
            id=make_id(),
            title="Color palette",
            content="Primary: #1976D2\nSecondary: #424242\nAccent: #FFC107",
            updated_at=now - 15 * MINUTE_MS,
        ),
    ]


class NotesStore:
    """Owns the state of one session and applies UI events to it."""

    def __init__(
        self,
        notes: Optional[List[Note]] = None,
        *,
        seed: bool = True,
        clock: Callable[[], int] = now_ms,
        make_id: Callable[[], str] = new_note_id,
    ) -> None:
        self._clock = clock
        self._make_id = make_id
        if notes is None:
            notes = seed_notes(clock(), make_id) if seed else []
        self.state = NotesState(notes=list(notes))

    # -- dialog -------------------------------------------------------------

    def open_create(self) -> None:
        self.state.dialog_mode = DialogMode.CREATE
        self.state.draft = Draft()
        self.state.dialog_open = True

    def open_edit(self, note_id: str) -> None:
        """Copy the note into the draft and open the dialog in edit mode."""
        note = self.get(note_id)
        if note is None:
            logger.info("open_edit ignored, no note %s", note_id)
            return
        self.state.dialog_mode = DialogMode.EDIT
        self.state.draft = Draft(id=note.id, title=note.title, content=note.content)
        self.state.dialog_open = True

    def update_draft(self, title: Optional[str] = None, content: Optional[str] = None) -> None:
        draft = self.state.draft
        self.state.draft = Draft(
            id=draft.id,
            title=draft.title if title is None else title,
            content=draft.content if content is None else content,
        )

    def cancel_draft(self) -> None:
        self._close_dialog()

    def save_draft(self) -> Optional[Note]:
        """Commit the draft and close the dialog.

        A draft whose title and content are both blank after trimming is
        discarded without touching the notes. Returns the created or updated
        note, or None when nothing changed.
        """
        title = self.state.draft.title.strip()
        content = self.state.draft.content.strip()
        if not title and not content:
            logger.debug("Blank draft discarded")
            self._close_dialog()
            return None

        saved: Optional[Note] = None
        now = self._clock()
        if self.state.dialog_mode == DialogMode.CREATE:
            saved = Note(
                id=self._make_id(),
                title=title or UNTITLED,
                content=content,
                updated_at=now,
            )
            self.state.notes = [saved, *self.state.notes]
            logger.info("Created note %s", saved.id)
        else:
            draft_id = self.state.draft.id
            notes = []
            for note in self.state.notes:
                if note.id == draft_id:
                    note = note.model_copy(
                        update={
                            "title": title or UNTITLED,
                            "content": content,
                            "updated_at": max(now, note.updated_at),
                        }
                    )
                    saved = note
                notes.append(note)
            self.state.notes = notes
            if saved is None:
                logger.info("Edit of missing note %s dropped", draft_id)
            else:
                logger.info("Updated note %s", saved.id)

        self._close_dialog()
        return saved

    def _close_dialog(self) -> None:
        self.state.dialog_open = False
        self.state.draft = Draft()

    # -- notes --------------------------------------------------------------

    def delete_note(self, note_id: str) -> None:
        before = len(self.state.notes)
        self.state.notes = [n for n in self.state.notes if n.id != note_id]
        if len(self.state.notes) != before:
            logger.info("Deleted note %s", note_id)

    def get(self, note_id: str) -> Optional[Note]:
        for note in self.state.notes:
            if note.id == note_id:
                return note
        return None

    # -- view ---------------------------------------------------------------

    def set_filter(self, text: str) -> None:
        self.state.filter = text

    def toggle_sidebar(self) -> None:
        self.state.sidebar_open = not self.state.sidebar_open

    def visible_notes(self) -> List[Note]:
        return filter_notes(self.state.notes, self.state.filter)

    def snapshot(self) -> NotesState:
        return self.state.model_copy(deep=True)

    # -- commands -----------------------------------------------------------

    def dispatch(self, command: Command) -> None:
        """Apply one command to the state."""
        logger.debug("Dispatch %s", type(command).__name__)
        if isinstance(command, OpenCreate):
            self.open_create()
        elif isinstance(command, OpenEdit):
            self.open_edit(command.id)
        elif isinstance(command, UpdateDraft):
            self.update_draft(title=command.title, content=command.content)
        elif isinstance(command, SaveDraft):
            self.save_draft()
        elif isinstance(command, CancelDraft):
            self.cancel_draft()
        elif isinstance(command, DeleteNote):
            self.delete_note(command.id)
        elif isinstance(command, SetFilter):
            self.set_filter(command.text)
        elif isinstance(command, ToggleSidebar):
            self.toggle_sidebar()
        else:
            raise TypeError(f"Unknown command: {command!r}")
