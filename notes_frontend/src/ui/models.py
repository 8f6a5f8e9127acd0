"""Pydantic models for the Notes UI state and its commands."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field

UNTITLED = "Untitled"


def new_note_id() -> str:
    """Short opaque id, unique enough for a single session."""
    return uuid4().hex[:8]


class Note(BaseModel):
    """A note shown in the grid."""

    id: str = Field(default_factory=new_note_id, description="Note id")
    title: str = Field(UNTITLED, description="Note title")
    content: str = Field("", description="Note content/body")
    updated_at: int = Field(
        ..., alias="updatedAt", description="Last save time, epoch milliseconds"
    )

    model_config = {"populate_by_name": True}


class DialogMode(str, Enum):
    """Whether the dialog creates a new note or edits one."""

    CREATE = "create"
    EDIT = "edit"


class Draft(BaseModel):
    """Edit buffer backing the create/edit dialog."""

    id: Optional[str] = Field(None, description="Id of the note being edited")
    title: str = ""
    content: str = ""


class NotesState(BaseModel):
    """Everything one browser session knows about."""

    notes: List[Note] = Field(default_factory=list)
    filter: str = ""
    dialog_open: bool = Field(False, alias="dialogOpen")
    dialog_mode: DialogMode = Field(DialogMode.CREATE, alias="dialogMode")
    draft: Draft = Field(default_factory=Draft)
    sidebar_open: bool = Field(True, alias="sidebarOpen")

    model_config = {"populate_by_name": True}


# Commands ------------------------------------------------------------------


class OpenCreate(BaseModel):
    """Open the dialog with an empty draft."""

    type: Literal["open_create"] = "open_create"


class OpenEdit(BaseModel):
    """Open the dialog on a copy of an existing note."""

    type: Literal["open_edit"] = "open_edit"
    id: str


class UpdateDraft(BaseModel):
    """Input events from the dialog fields; omitted fields stay as they are."""

    type: Literal["update_draft"] = "update_draft"
    title: Optional[str] = None
    content: Optional[str] = None


class SaveDraft(BaseModel):
    """Commit the draft and close the dialog."""

    type: Literal["save_draft"] = "save_draft"


class CancelDraft(BaseModel):
    """Close the dialog and discard the draft."""

    type: Literal["cancel_draft"] = "cancel_draft"


class DeleteNote(BaseModel):
    """Remove a note by id."""

    type: Literal["delete"] = "delete"
    id: str


class SetFilter(BaseModel):
    """Replace the search text."""

    type: Literal["set_filter"] = "set_filter"
    text: str = ""


class ToggleSidebar(BaseModel):
    """Show or hide the sidebar."""

    type: Literal["toggle_sidebar"] = "toggle_sidebar"


Command = Annotated[
    Union[
        OpenCreate,
        OpenEdit,
        UpdateDraft,
        SaveDraft,
        CancelDraft,
        DeleteNote,
        SetFilter,
        ToggleSidebar,
    ],
    Field(discriminator="type"),
]


class CommandRequest(BaseModel):
    """Request body for the JSON command endpoint."""

    command: Command
