"""Loading markdown notes into searchable records."""

from jot.notes.loader import iter_notes, load_note, load_notebook
from jot.notes.models import NoteRecord

__all__ = [
    "NoteRecord",
    "iter_notes",
    "load_note",
    "load_notebook",
]
