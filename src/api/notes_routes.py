"""FastAPI route handlers for meeting notes and journal entries."""

from fastapi import APIRouter, Depends

from src.notes import JournalEntry, MeetingNote, NotesRepository, avatar_fallback

from .dependencies import get_notes
from .schemas import (
    JournalEntryCreate,
    JournalEntryItem,
    JournalEntryUpdate,
    MeetingNoteCreate,
    MeetingNoteItem,
    MeetingNoteUpdate,
    TagRequest,
)

router = APIRouter(prefix="/notes", tags=["notes"])


def _meeting_item(note: MeetingNote) -> MeetingNoteItem:
    return MeetingNoteItem(
        id=note.id,
        title=note.title,
        date=note.date,
        partner=note.partner,
        partner_initials=avatar_fallback(note.partner),
        content=note.content,
        reflections=note.reflections,
        tags=note.tags,
    )


def _journal_item(entry: JournalEntry) -> JournalEntryItem:
    return JournalEntryItem(
        id=entry.id,
        title=entry.title,
        date=entry.date,
        content=entry.content,
        mood=entry.mood,
    )


# ---------------------------------------------------------------------------
# /notes/meetings
# ---------------------------------------------------------------------------

@router.get("/meetings", response_model=list[MeetingNoteItem])
def list_meeting_notes(
    q: str | None = None,
    tag: str | None = None,
    notes: NotesRepository = Depends(get_notes),
):
    """List meeting notes, optionally filtered by search text and tag."""
    return [_meeting_item(n) for n in notes.list_meeting_notes(query=q, tag=tag)]


@router.post("/meetings", response_model=MeetingNoteItem, status_code=201)
def create_meeting_note(request: MeetingNoteCreate, notes: NotesRepository = Depends(get_notes)):
    return _meeting_item(notes.create_meeting_note(**request.model_dump()))


@router.get("/meetings/{note_id}", response_model=MeetingNoteItem)
def get_meeting_note(note_id: int, notes: NotesRepository = Depends(get_notes)):
    return _meeting_item(notes.get_meeting_note(note_id))


@router.patch("/meetings/{note_id}", response_model=MeetingNoteItem)
def update_meeting_note(
    note_id: int,
    request: MeetingNoteUpdate,
    notes: NotesRepository = Depends(get_notes),
):
    """Save edits to a meeting note. Omitted fields are left unchanged."""
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    return _meeting_item(notes.update_meeting_note(note_id, **changes))


@router.post("/meetings/{note_id}/tags", response_model=MeetingNoteItem)
def add_meeting_note_tag(
    note_id: int,
    request: TagRequest,
    notes: NotesRepository = Depends(get_notes),
):
    return _meeting_item(notes.add_tag(note_id, request.tag))


# ---------------------------------------------------------------------------
# /notes/journal
# ---------------------------------------------------------------------------

@router.get("/journal", response_model=list[JournalEntryItem])
def list_journal_entries(q: str | None = None, notes: NotesRepository = Depends(get_notes)):
    return [_journal_item(e) for e in notes.list_journal_entries(query=q)]


@router.post("/journal", response_model=JournalEntryItem, status_code=201)
def create_journal_entry(request: JournalEntryCreate, notes: NotesRepository = Depends(get_notes)):
    return _journal_item(notes.create_journal_entry(**request.model_dump()))


@router.get("/journal/{entry_id}", response_model=JournalEntryItem)
def get_journal_entry(entry_id: int, notes: NotesRepository = Depends(get_notes)):
    return _journal_item(notes.get_journal_entry(entry_id))


@router.patch("/journal/{entry_id}", response_model=JournalEntryItem)
def update_journal_entry(
    entry_id: int,
    request: JournalEntryUpdate,
    notes: NotesRepository = Depends(get_notes),
):
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    return _journal_item(notes.update_journal_entry(entry_id, **changes))
