"""
Unit tests for the notes page HTML snippets.
"""

from src.notes import JournalEntry, MeetingNote
from src.ui.render import journal_meta_html, meeting_meta_html, tags_html


class TestRender:
    """User-entered values must not become markup."""

    def test_tags_are_escaped(self):
        html = tags_html(["<script>alert(1)</script>", "goals"])
        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert '<span class="note-tag">goals</span>' in html

    def test_meeting_meta_is_escaped(self):
        note = MeetingNote(
            id=1,
            title="t",
            date="May 1, 2025",
            partner='Alex <img src=x onerror="x()">',
            content="",
        )
        html = meeting_meta_html(note)
        assert "<img" not in html
        assert "&lt;img src=x onerror=&quot;x()&quot;&gt;" in html
        assert html.startswith('<div class="note-meta">May 1, 2025 · With ')

    def test_journal_meta_is_escaped(self):
        entry = JournalEntry(id=1, title="t", date="June 1", content="", mood="<b>Happy</b>")
        assert journal_meta_html(entry) == '<div class="note-meta">June 1 · &lt;b&gt;Happy&lt;/b&gt;</div>'
