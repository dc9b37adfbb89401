"""HTML snippets for the notes page. Every user-entered value is escaped."""

from html import escape

from src.notes import JournalEntry, MeetingNote, avatar_fallback


def tags_html(tags: list[str]) -> str:
    return "".join(f'<span class="note-tag">{escape(tag)}</span>' for tag in tags)


def meeting_meta_html(note: MeetingNote) -> str:
    return (
        f'<div class="note-meta">{escape(note.date)} · With {escape(note.partner)} '
        f"({escape(avatar_fallback(note.partner))})</div>"
    )


def journal_meta_html(entry: JournalEntry) -> str:
    return f'<div class="note-meta">{escape(entry.date)} · {escape(entry.mood)}</div>'
