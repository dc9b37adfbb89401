"""Seed data for the notes repository."""

from .models import JournalEntry, MeetingNote


def sample_meeting_notes() -> list[MeetingNote]:
    return [
        MeetingNote(
            id=1,
            title="Career Planning Session",
            date="May 15, 2025",
            partner="Alex Johnson",
            content=(
                "Discussed short-term goals and identified key skills to develop. Alex suggested "
                "focusing on project management certification and improving public speaking skills.\n\n"
                "Key takeaways:\n"
                "- Research PMI certification requirements\n"
                "- Join Toastmasters for public speaking practice\n"
                "- Read 'The Effective Executive' by Peter Drucker\n\n"
                "Next steps:\n"
                "1. Create a study plan for PM certification\n"
                "2. Schedule first Toastmasters visit\n"
                "3. Set up bi-weekly check-ins on progress"
            ),
            reflections=(
                "I feel much more confident about my career direction after this meeting. Having "
                "concrete steps makes the big goals seem more achievable."
            ),
            tags=["career-development", "skills", "goals"],
        ),
        MeetingNote(
            id=2,
            title="Resume Review",
            date="May 8, 2025",
            partner="Alex Johnson",
            content=(
                "Reviewed current resume and identified areas for improvement. Alex suggested "
                "reorganizing experience section to highlight achievements rather than responsibilities.\n\n"
                "Key feedback:\n"
                "- Add metrics to quantify impact in previous roles\n"
                "- Remove outdated skills section\n"
                "- Expand on leadership experience\n\n"
                "Next steps:\n"
                "1. Rewrite experience bullets with achievement focus\n"
                "2. Update skills section\n"
                "3. Send revised version for follow-up review"
            ),
            reflections=(
                "The feedback was very constructive. I hadn't realized how much my resume focused "
                "on tasks rather than accomplishments."
            ),
            tags=["resume", "job-search"],
        ),
        MeetingNote(
            id=3,
            title="Interview Preparation",
            date="May 1, 2025",
            partner="Alex Johnson",
            content=(
                "Practiced common interview questions and received feedback on responses. Focused "
                "particularly on behavioral questions and the STAR method.\n\n"
                "Key points:\n"
                "- Need to be more concise in responses\n"
                "- Good use of specific examples\n"
                "- Work on body language and confidence\n\n"
                "Next steps:\n"
                "1. Practice 5 more behavioral questions\n"
                "2. Record a mock interview for self-review\n"
                "3. Research common technical questions for target roles"
            ),
            reflections=(
                "The mock interview was harder than I expected, but very helpful. I need to work "
                "on being more concise while still telling a compelling story."
            ),
            tags=["interviews", "job-search"],
        ),
    ]


def sample_journal_entries() -> list[JournalEntry]:
    return [
        JournalEntry(
            id=1,
            title="Weekly Reflection",
            date="May 14, 2025",
            content=(
                "This week I made significant progress on my public speaking goals. I attended my "
                "first Toastmasters meeting and, while nervous, I participated in the table topics "
                "session. The feedback was encouraging.\n\n"
                "I also started studying for the PM certification and completed the first module. "
                "The content is challenging but interesting.\n\n"
                "Things I'm proud of this week:\n"
                "- Stepping out of my comfort zone at Toastmasters\n"
                "- Maintaining my study schedule\n"
                "- Reaching out to two new contacts on LinkedIn\n\n"
                "Areas to improve:\n"
                "- Need to better manage my time between work and study\n"
                "- Should practice more technical interview questions"
            ),
            mood="Motivated",
        ),
        JournalEntry(
            id=2,
            title="Goal Progress Check-in",
            date="May 10, 2025",
            content=(
                "Checking in on my quarterly goals:\n\n"
                "1. PM Certification: 15% complete - on track\n"
                "2. Networking: Connected with 5/10 target contacts - on track\n"
                "3. Public Speaking: Joined Toastmasters - on track\n"
                "4. Technical Skills: Completed 1/3 planned courses - falling behind\n\n"
                "I need to allocate more time to the technical skills portion of my development "
                "plan. Will adjust my schedule to dedicate two evenings per week specifically to "
                "this area."
            ),
            mood="Focused",
        ),
    ]
