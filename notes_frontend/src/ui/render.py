"""
Server-side rendering of the Notes page.

The page is assembled from small section renderers (header, sidebar, toolbar,
grid, dialog) into HTML_SHELL. All actions are plain HTML forms so the page
works without any client script; every piece of user text goes through
``esc`` before it reaches the markup.
"""

from __future__ import annotations

from html import escape
from typing import List
from urllib.parse import quote

from src.ui.models import UNTITLED, DialogMode, Note, NotesState
from src.ui.styles import CSS_BLOCK
from src.ui.view import format_updated

PAGE_TITLE = "Notes"
PAGE_DESCRIPTION = "A modern, light-themed notes app with full CRUD."
EMPTY_MESSAGE = "No notes found. Create your first note with the “+ New Note” button."

HTML_SHELL = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<meta name="description" content="__DESCRIPTION__" />
<title>__TITLE__</title>
<style>__CSS_BLOCK__</style>
</head>
<body>
__BODY_MARKUP__
</body>
</html>
"""


def esc(text: str) -> str:
    return escape(text, quote=True)


def note_path(note: Note, action: str) -> str:
    return f"/notes/{quote(note.id, safe='')}/{action}"


def render_menu_buttons(state: NotesState) -> str:
    toggle_label = "Hide Menu" if state.sidebar_open else "Show Menu"
    return (
        '<form method="post" action="/sidebar/toggle">'
        f'<button class="btn btn-secondary" type="submit">{toggle_label}</button>'
        "</form>"
        '<form method="post" action="/notes/new">'
        '<button class="btn btn-primary" type="submit">+ New Note</button>'
        "</form>"
    )


def render_search(state: NotesState) -> str:
    return (
        '<form method="get" action="/" role="search">'
        '<input class="search-input" type="search" name="q" '
        f'placeholder="Search notes..." value="{esc(state.filter)}" />'
        "</form>"
    )


def render_header(state: NotesState) -> str:
    return f"""<header class="app-header">
  <div class="inner">
    <div class="brand-logo" aria-hidden="true">N</div>
    <div class="brand-title">Notes</div>
    <div class="header-actions">{render_menu_buttons(state)}</div>
  </div>
</header>"""


def render_sidebar(state: NotesState) -> str:
    if not state.sidebar_open:
        return ""
    return f"""<aside class="sidebar">
  <div class="nav-group">
    <div class="nav-group-title">Navigation</div>
    <ul class="nav-list">
      <li><a class="nav-item active" href="/">Home</a></li>
      <li><a class="nav-item" href="/?q=">All Notes</a></li>
    </ul>
  </div>
  <div class="nav-group" style="margin-top: 12px;">
    <div class="nav-group-title">Filters</div>
    {render_search(state)}
  </div>
</aside>"""


def render_toolbar(state: NotesState) -> str:
    # Small screens hide the sidebar and header actions; the toolbar takes over.
    return f"""<div class="toolbar">
  {render_search(state)}
  <div style="display:flex; gap:8px;">{render_menu_buttons(state)}</div>
</div>"""


def render_card(note: Note) -> str:
    title = note.title or UNTITLED
    return f"""<article class="note-card" aria-label="Note {esc(title)}">
  <h3 class="note-title">{esc(title)}</h3>
  <div class="note-content">{esc(note.content or "No content")}</div>
  <div class="note-meta">
    <span>Updated {esc(format_updated(note.updated_at))}</span>
    <div class="card-actions">
      <form method="post" action="{esc(note_path(note, 'edit'))}"><button class="icon-btn" type="submit">Edit</button></form>
      <form method="post" action="{esc(note_path(note, 'delete'))}"><button class="icon-btn" type="submit">Delete</button></form>
    </div>
  </div>
</article>"""


def render_grid(notes: List[Note]) -> str:
    if not notes:
        return f'<div class="empty">{esc(EMPTY_MESSAGE)}</div>'
    cards = "\n".join(render_card(n) for n in notes)
    return f'<div class="card-grid">\n{cards}\n</div>'


def render_dialog(state: NotesState) -> str:
    if not state.dialog_open:
        return ""
    creating = state.dialog_mode == DialogMode.CREATE
    heading = "Create Note" if creating else "Edit Note"
    confirm = "Create" if creating else "Save"
    draft = state.draft
    return f"""<div class="dialog-backdrop" role="dialog" aria-modal="true" aria-label="Edit note">
  <div class="dialog">
    <div class="dialog-header">
      <h4 class="dialog-title">{heading}</h4>
      <form method="post" action="/draft/cancel"><button class="icon-btn" type="submit">Close</button></form>
    </div>
    <form method="post" action="/draft/save" style="display:block;">
      <div class="dialog-body">
        <div>
          <label for="draft-title">Title</label>
          <input id="draft-title" class="input" type="text" name="title" placeholder="Note title" value="{esc(draft.title)}" autofocus />
        </div>
        <div>
          <label for="draft-content">Content</label>
          <textarea id="draft-content" class="textarea" name="content" placeholder="Write your note...">{esc(draft.content)}</textarea>
        </div>
      </div>
      <div class="dialog-actions">
        <button class="btn btn-secondary" type="submit" formaction="/draft/cancel">Cancel</button>
        <button class="btn btn-accent" type="submit">{confirm}</button>
      </div>
    </form>
  </div>
</div>"""


def render_body(state: NotesState, notes: List[Note]) -> str:
    return f"""<div class="container">
{render_header(state)}
<div class="app-main">
{render_sidebar(state)}
<section class="content">
{render_toolbar(state)}
{render_grid(notes)}
</section>
</div>
{render_dialog(state)}
</div>"""


# PUBLIC_INTERFACE
def render_page(state: NotesState, notes: List[Note]) -> str:
    """Render the full HTML document for ``state`` showing ``notes``."""
    return (
        HTML_SHELL.replace("__DESCRIPTION__", esc(PAGE_DESCRIPTION))
        .replace("__TITLE__", esc(PAGE_TITLE))
        .replace("__CSS_BLOCK__", CSS_BLOCK)
        .replace("__BODY_MARKUP__", render_body(state, notes))
    )
