"""Streamlit UI for MentorMatch notes and form connections."""

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[2]))

import streamlit as st

from config.settings import configure_logging, get_settings
from src.bootstrap import build_response_services
from src.errors import MentorMatchError
from src.notes import NotesRepository, avatar_fallback
from src.ui.render import journal_meta_html, meeting_meta_html, tags_html


configure_logging()

st.set_page_config(
    page_title="MentorMatch",
    page_icon="🤝",
    layout="wide",
)

st.markdown("""
<style>
.note-tag {
    border-radius: 9999px;
    background: #fce7f3;
    color: #9d174d;
    padding: 2px 10px;
    margin-right: 4px;
    font-size: 0.8rem;
}
.note-meta {
    font-size: 0.85rem;
    color: #666;
}
</style>
""", unsafe_allow_html=True)

st.title("🤝 MentorMatch")
st.caption("Meeting notes, journal entries and response connections")


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

if "notes" not in st.session_state:
    st.session_state.notes = NotesRepository()

if "selected_note" not in st.session_state:
    st.session_state.selected_note = None

if "is_editing" not in st.session_state:
    st.session_state.is_editing = False

notes: NotesRepository = st.session_state.notes


@st.cache_resource
def _response_services():
    """One store client and embedder per Streamlit process."""
    return build_response_services(get_settings())


def _select(kind: str, item_id: int) -> None:
    st.session_state.selected_note = (kind, item_id)
    st.session_state.is_editing = False


# ---------------------------------------------------------------------------
# Sidebar: note lists
# ---------------------------------------------------------------------------

with st.sidebar:
    query = st.text_input("Search notes...", key="notes_query")
    tab_meetings, tab_journal = st.tabs(["Meeting Notes", "Journal"])

    with tab_meetings:
        for note in notes.list_meeting_notes(query=query or None):
            label = f"{note.title} · {note.date} · {avatar_fallback(note.partner)}"
            st.button(label, key=f"meeting-{note.id}", on_click=_select, args=("meeting", note.id))

    with tab_journal:
        for entry in notes.list_journal_entries(query=query or None):
            label = f"{entry.title} · {entry.date} · {entry.mood}"
            st.button(label, key=f"journal-{entry.id}", on_click=_select, args=("journal", entry.id))

    with st.expander("➕ New Entry"):
        kind = st.radio("Kind", ["Meeting Note", "Journal Entry"], horizontal=True)
        new_title = st.text_input("Title", key="new_title")
        new_date = st.text_input("Date", key="new_date")
        if kind == "Meeting Note":
            new_partner = st.text_input("Partner", key="new_partner")
        else:
            new_mood = st.text_input("Mood", key="new_mood")
        new_content = st.text_area("Content", key="new_content")
        if st.button("Create"):
            try:
                if kind == "Meeting Note":
                    created = notes.create_meeting_note(new_title, new_date, new_partner, new_content)
                    _select("meeting", created.id)
                else:
                    created = notes.create_journal_entry(new_title, new_date, new_content, new_mood)
                    _select("journal", created.id)
                st.rerun()
            except MentorMatchError as e:
                st.error(str(e))


# ---------------------------------------------------------------------------
# Main panel: selected note
# ---------------------------------------------------------------------------

notes_tab, connections_tab = st.tabs(["Notes", "Form Connections"])

with notes_tab:
    selected = st.session_state.selected_note
    if selected is None:
        st.info("Select a note from the list to view its contents, or create a new one.")
    else:
        kind, item_id = selected
        item = notes.get_meeting_note(item_id) if kind == "meeting" else notes.get_journal_entry(item_id)

        if st.session_state.is_editing:
            title = st.text_input("Title", value=item.title)
            content = st.text_area("Content", value=item.content, height=240)
            if kind == "meeting":
                reflections = st.text_area("Reflections", value=item.reflections)
            col_save, col_cancel = st.columns(2)
            if col_save.button("Save Changes"):
                if kind == "meeting":
                    notes.update_meeting_note(item_id, title=title, content=content, reflections=reflections)
                else:
                    notes.update_journal_entry(item_id, title=title, content=content)
                st.session_state.is_editing = False
                st.rerun()
            if col_cancel.button("Cancel"):
                st.session_state.is_editing = False
                st.rerun()
        else:
            st.subheader(item.title)
            if kind == "meeting":
                st.markdown(meeting_meta_html(item), unsafe_allow_html=True)
            else:
                st.markdown(journal_meta_html(item), unsafe_allow_html=True)
            st.markdown(item.content)

            if kind == "meeting":
                st.markdown("#### Reflections")
                st.markdown(item.reflections or "_No reflections yet._")
                st.markdown("#### Tags")
                st.markdown(tags_html(item.tags), unsafe_allow_html=True)
                new_tag = st.text_input("Add Tag", key=f"tag-{item_id}")
                if st.button("Add Tag") and new_tag:
                    try:
                        notes.add_tag(item_id, new_tag)
                        st.rerun()
                    except MentorMatchError as e:
                        st.error(str(e))

            if st.button("Edit"):
                st.session_state.is_editing = True
                st.rerun()


# ---------------------------------------------------------------------------
# Form connections
# ---------------------------------------------------------------------------

with connections_tab:
    form_id = st.text_input("Form ID")
    if st.button("Generate Connections") and form_id:
        try:
            with st.spinner("Comparing responses..."):
                connections = _response_services().connections.generate_connections(form_id)
        except MentorMatchError as e:
            st.error(f"Could not generate connections: {e}")
        else:
            if not connections:
                st.info("No connections found for this form.")
            st.dataframe(
                [
                    {
                        "Respondent 1": c.response1_name,
                        "Respondent 2": c.response2_name,
                        "Similarity": round(c.similarity_score, 4),
                        "Response 1": c.response1_id,
                        "Response 2": c.response2_id,
                    }
                    for c in connections
                ],
                use_container_width=True,
            )
