"""Meeting note and journal entry models."""

from dataclasses import dataclass, field


@dataclass
class MeetingNote:
    """Notes from a session with a mentoring partner."""

    id: int
    title: str
    date: str
    partner: str
    content: str
    reflections: str = ""
    tags: list[str] = field(default_factory=list)

    def search_text(self) -> str:
        return " ".join([self.title, self.partner, self.content, self.reflections, *self.tags])


@dataclass
class JournalEntry:
    """A private journal entry with the writer's mood."""

    id: int
    title: str
    date: str
    content: str
    mood: str = ""

    def search_text(self) -> str:
        return " ".join([self.title, self.content, self.mood])


def avatar_fallback(name: str | None) -> str:
    """Initials shown when a partner has no avatar image.

    "Alex Johnson" -> "AJ", "Alex" -> "AL", "" -> "P" (partner).
    """
    if not name or not name.strip():
        return "P"
    parts = name.split()
    if len(parts) > 1:
        return (parts[0][0] + parts[1][0]).upper()
    return parts[0][:2].upper()
