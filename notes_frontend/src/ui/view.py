"""Derived view: which notes the grid shows, and in what order."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List

from src.ui.models import Note


def matches(note: Note, query: str) -> bool:
    """Case-insensitive substring match on title or content."""
    if not query:
        return True
    q = query.lower()
    return q in note.title.lower() or q in note.content.lower()


# PUBLIC_INTERFACE
def filter_notes(notes: Iterable[Note], query: str) -> List[Note]:
    """Return the notes matching ``query``, most recently updated first.

    The input is never mutated; a new list is returned on every call.
    """
    visible = [n for n in notes if matches(n, query)]
    visible.sort(key=lambda n: n.updated_at, reverse=True)
    return visible


def format_updated(ts_ms: int) -> str:
    """Local, human-readable rendering of an epoch-milliseconds timestamp."""
    return datetime.fromtimestamp(ts_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")
