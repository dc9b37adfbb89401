"""In-memory notes repository seeded with mock data."""

import logging
import re
import threading
from dataclasses import fields, replace
from typing import Optional

from src.errors import InvalidArgumentError, NotFoundError

from .models import JournalEntry, MeetingNote
from .sample_data import sample_journal_entries, sample_meeting_notes

logger = logging.getLogger(__name__)

MEETING_NOTE_FIELDS = {f.name for f in fields(MeetingNote)} - {"id"}
JOURNAL_ENTRY_FIELDS = {f.name for f in fields(JournalEntry)} - {"id"}


def normalize_tag(tag: str) -> str:
    """'Career Development ' -> 'career-development'."""
    normalized = re.sub(r"\s+", "-", tag.strip()).lower()
    if not normalized:
        raise InvalidArgumentError("Tag must not be empty")
    return normalized


def _matches(text: str, query: Optional[str]) -> bool:
    return not query or query.lower() in text.lower()


def _check_title(changes: dict) -> None:
    if "title" in changes and not str(changes["title"] or "").strip():
        raise InvalidArgumentError("Title must not be empty")


class NotesRepository:
    """Meeting notes and journal entries for one mentee."""

    def __init__(
        self,
        meeting_notes: Optional[list[MeetingNote]] = None,
        journal_entries: Optional[list[JournalEntry]] = None,
    ):
        notes = sample_meeting_notes() if meeting_notes is None else meeting_notes
        entries = sample_journal_entries() if journal_entries is None else journal_entries
        self._meeting_notes: dict[int, MeetingNote] = {n.id: n for n in notes}
        self._journal_entries: dict[int, JournalEntry] = {e.id: e for e in entries}
        self._lock = threading.Lock()

    # ========================================================================
    # Meeting notes
    # ========================================================================

    def list_meeting_notes(self, query: Optional[str] = None, tag: Optional[str] = None) -> list[MeetingNote]:
        """Notes matching a free-text query and/or tag, in insertion order."""
        notes = [n for n in self._meeting_notes.values() if _matches(n.search_text(), query)]
        if tag:
            wanted = normalize_tag(tag)
            notes = [n for n in notes if wanted in n.tags]
        return notes

    def get_meeting_note(self, note_id: int) -> MeetingNote:
        note = self._meeting_notes.get(note_id)
        if note is None:
            raise NotFoundError(f"Meeting note {note_id} not found")
        return note

    def create_meeting_note(
        self,
        title: str,
        date: str,
        partner: str,
        content: str,
        reflections: str = "",
        tags: Optional[list[str]] = None,
    ) -> MeetingNote:
        if not title.strip():
            raise InvalidArgumentError("Title must not be empty")
        with self._lock:
            note = MeetingNote(
                id=max(self._meeting_notes, default=0) + 1,
                title=title,
                date=date,
                partner=partner,
                content=content,
                reflections=reflections,
                tags=list(dict.fromkeys(normalize_tag(t) for t in tags or [])),
            )
            self._meeting_notes[note.id] = note
        logger.info(f"Created meeting note {note.id}: {note.title!r}")
        return note

    def update_meeting_note(self, note_id: int, **changes) -> MeetingNote:
        """Apply the given field changes and return the saved note."""
        unknown = set(changes) - MEETING_NOTE_FIELDS
        if unknown:
            raise InvalidArgumentError(f"Unknown meeting note fields: {sorted(unknown)}")
        _check_title(changes)
        if "tags" in changes:
            changes["tags"] = list(dict.fromkeys(normalize_tag(t) for t in changes["tags"]))
        with self._lock:
            note = replace(self.get_meeting_note(note_id), **changes)
            self._meeting_notes[note_id] = note
        logger.info(f"Saved changes for meeting note {note_id}: {note.title!r}")
        return note

    def add_tag(self, note_id: int, tag: str) -> MeetingNote:
        """Append a tag to a meeting note unless it is already present."""
        normalized = normalize_tag(tag)
        with self._lock:
            note = self.get_meeting_note(note_id)
            if normalized not in note.tags:
                note = replace(note, tags=[*note.tags, normalized])
                self._meeting_notes[note_id] = note
        return note

    # ========================================================================
    # Journal entries
    # ========================================================================

    def list_journal_entries(self, query: Optional[str] = None) -> list[JournalEntry]:
        return [e for e in self._journal_entries.values() if _matches(e.search_text(), query)]

    def get_journal_entry(self, entry_id: int) -> JournalEntry:
        entry = self._journal_entries.get(entry_id)
        if entry is None:
            raise NotFoundError(f"Journal entry {entry_id} not found")
        return entry

    def create_journal_entry(self, title: str, date: str, content: str, mood: str = "") -> JournalEntry:
        if not title.strip():
            raise InvalidArgumentError("Title must not be empty")
        with self._lock:
            entry = JournalEntry(
                id=max(self._journal_entries, default=0) + 1,
                title=title,
                date=date,
                content=content,
                mood=mood,
            )
            self._journal_entries[entry.id] = entry
        logger.info(f"Created journal entry {entry.id}: {entry.title!r}")
        return entry

    def update_journal_entry(self, entry_id: int, **changes) -> JournalEntry:
        unknown = set(changes) - JOURNAL_ENTRY_FIELDS
        if unknown:
            raise InvalidArgumentError(f"Unknown journal entry fields: {sorted(unknown)}")
        _check_title(changes)
        with self._lock:
            entry = replace(self.get_journal_entry(entry_id), **changes)
            self._journal_entries[entry_id] = entry
        logger.info(f"Saved changes for journal entry {entry_id}: {entry.title!r}")
        return entry
