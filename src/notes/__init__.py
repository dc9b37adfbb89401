"""Mentee meeting notes and journal entries."""

from .models import JournalEntry, MeetingNote, avatar_fallback
from .repository import NotesRepository, normalize_tag

__all__ = [
    "JournalEntry",
    "MeetingNote",
    "NotesRepository",
    "avatar_fallback",
    "normalize_tag",
]
