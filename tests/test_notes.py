"""
Unit tests for the notes repository.
"""

import pytest

from src.errors import InvalidArgumentError, NotFoundError
from src.notes import NotesRepository, avatar_fallback, normalize_tag


@pytest.fixture
def notes():
    return NotesRepository()


class TestAvatarFallback:
    """Tests for avatar_fallback."""

    @pytest.mark.parametrize("name, expected", [
        ("Alex Johnson", "AJ"),
        ("alex johnson smith", "AJ"),
        ("Alex", "AL"),
        ("A", "A"),
        ("", "P"),
        (None, "P"),
        ("   ", "P"),
    ])
    def test_initials(self, name, expected):
        assert avatar_fallback(name) == expected


class TestMeetingNotes:
    """Tests for meeting note operations."""

    def test_seeded(self, notes):
        titles = [n.title for n in notes.list_meeting_notes()]
        assert titles == ["Career Planning Session", "Resume Review", "Interview Preparation"]

    def test_search_is_case_insensitive(self, notes):
        assert [n.id for n in notes.list_meeting_notes(query="TOASTMASTERS")] == [1]

    def test_search_matches_reflections_and_tags(self, notes):
        assert [n.id for n in notes.list_meeting_notes(query="compelling story")] == [3]
        assert [n.id for n in notes.list_meeting_notes(query="job-search")] == [2, 3]

    def test_filter_by_tag(self, notes):
        assert [n.id for n in notes.list_meeting_notes(tag="Job Search")] == [2, 3]

    def test_get_missing(self, notes):
        with pytest.raises(NotFoundError):
            notes.get_meeting_note(99)

    def test_create_assigns_next_id(self, notes):
        note = notes.create_meeting_note(
            title="Networking Strategy",
            date="May 22, 2025",
            partner="Alex Johnson",
            content="Mapped target contacts.",
            tags=["Networking", "networking"],
        )
        assert note.id == 4
        assert note.tags == ["networking"]
        assert notes.get_meeting_note(4) == note

    def test_create_requires_title(self, notes):
        with pytest.raises(InvalidArgumentError):
            notes.create_meeting_note(title=" ", date="", partner="", content="")

    def test_update_changes_only_given_fields(self, notes):
        before = notes.get_meeting_note(2)
        updated = notes.update_meeting_note(2, title="Resume Review (v2)")

        assert updated.title == "Resume Review (v2)"
        assert updated.content == before.content
        assert notes.get_meeting_note(2).title == "Resume Review (v2)"

    def test_update_unknown_field(self, notes):
        with pytest.raises(InvalidArgumentError):
            notes.update_meeting_note(1, mood="Happy")

    def test_update_missing(self, notes):
        with pytest.raises(NotFoundError):
            notes.update_meeting_note(42, title="x")

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_update_rejects_blank_title(self, notes, title):
        with pytest.raises(InvalidArgumentError):
            notes.update_meeting_note(1, title=title)
        assert notes.get_meeting_note(1).title == "Career Planning Session"

    def test_add_tag(self, notes):
        note = notes.add_tag(2, "  Follow Up ")
        assert note.tags == ["resume", "job-search", "follow-up"]

    def test_add_existing_tag_is_noop(self, notes):
        note = notes.add_tag(1, "Goals")
        assert note.tags == ["career-development", "skills", "goals"]

    def test_add_empty_tag(self, notes):
        with pytest.raises(InvalidArgumentError):
            notes.add_tag(1, "   ")


class TestJournalEntries:
    """Tests for journal entry operations."""

    def test_seeded(self, notes):
        assert [e.mood for e in notes.list_journal_entries()] == ["Motivated", "Focused"]

    def test_search_by_mood(self, notes):
        assert [e.id for e in notes.list_journal_entries(query="focused")] == [2]

    def test_create_and_update(self, notes):
        entry = notes.create_journal_entry("First PM module", "May 20, 2025", "Done.", mood="Proud")
        assert entry.id == 3

        updated = notes.update_journal_entry(3, mood="Relieved")
        assert updated.mood == "Relieved"
        assert updated.content == "Done."

    def test_get_missing(self, notes):
        with pytest.raises(NotFoundError):
            notes.get_journal_entry(7)

    def test_update_rejects_blank_title(self, notes):
        with pytest.raises(InvalidArgumentError):
            notes.update_journal_entry(1, title="  ")
        assert notes.get_journal_entry(1).title == "Weekly Reflection"


class TestNormalizeTag:

    def test_normalize(self):
        assert normalize_tag(" Career  Development ") == "career-development"

    def test_empty(self):
        with pytest.raises(InvalidArgumentError):
            normalize_tag("")
