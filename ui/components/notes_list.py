"""Notes list page: search, category filters, pinned and other notes."""

from __future__ import annotations

import time

import streamlit as st

from notes_app.models import Note
from ui.controller import DELETE_PROMPT, NotesApp
from ui.navigation import Route, Screen
from ui.render import EmptyState, ListView, render_empty_state, render_note_card

_SEARCH_KEY = "search_input"
_PENDING_DELETE_KEY = "pending_delete"


def _on_search(app: NotesApp) -> None:
    app.search_input(st.session_state[_SEARCH_KEY])


def _clear_search(app: NotesApp) -> None:
    st.session_state[_SEARCH_KEY] = ""
    app.clear_search()


def _request_delete(note_id: str) -> None:
    st.session_state[_PENDING_DELETE_KEY] = note_id


def _answer_delete(app: NotesApp, note_id: str, answer: bool) -> None:
    """Resolve the confirmation gate with the user's yes/no."""
    st.session_state.pop(_PENDING_DELETE_KEY, None)
    app.delete_note(note_id, confirm=lambda _prompt: answer)


def render(app: NotesApp, route: Route) -> None:
    """Render the notes list page."""
    app.flush_search()
    view = app.list_view()

    col_title, col_search, col_new = st.columns([2, 3, 1])
    with col_title:
        st.title("📝 My Notes")
    with col_search:
        st.text_input(
            "Search notes",
            key=_SEARCH_KEY,
            placeholder="Search notes...",
            on_change=_on_search,
            args=(app,),
        )
    with col_new:
        st.button(
            "＋ New Note",
            type="primary",
            use_container_width=True,
            key="new_note",
            on_click=app.navigate,
            args=(Screen.CREATE,),
        )

    if view.has_notes:
        _render_filters(app, view)

    if view.empty_state is not None:
        _render_empty(app, view.empty_state)
    else:
        if view.pinned:
            _render_section(app, "📌 Pinned Notes", view.pinned)
        if view.others:
            _render_section(app, view.others_title, view.others)

    # Let a pending debounced search settle, then re-run with the new term
    if app.search_pending:
        time.sleep(app.search_remaining)
        st.rerun()


def _render_filters(app: NotesApp, view: ListView) -> None:
    cols = st.columns(len(view.filters))
    for col, f in zip(cols, view.filters):
        with col:
            st.button(
                f"{f.label} · {f.count}",
                key=f"filter_{f.id}",
                type="primary" if f.active else "secondary",
                use_container_width=True,
                on_click=app.set_category,
                args=(f.id,),
            )


def _render_empty(app: NotesApp, kind: EmptyState) -> None:
    st.markdown(render_empty_state(kind), unsafe_allow_html=True)
    _, col, _ = st.columns([2, 1, 2])
    with col:
        if kind is EmptyState.NO_NOTES:
            st.button(
                "Create Note",
                type="primary",
                use_container_width=True,
                key="create_first_note",
                on_click=app.navigate,
                args=(Screen.CREATE,),
            )
        else:
            st.button(
                "Clear Search",
                use_container_width=True,
                key="clear_search",
                on_click=_clear_search,
                args=(app,),
            )


def _render_section(app: NotesApp, title: str, notes: list[Note]) -> None:
    st.subheader(title)
    cols = st.columns(2)
    for i, note in enumerate(notes):
        with cols[i % 2]:
            _render_card(app, note)


def _render_card(app: NotesApp, note: Note) -> None:
    st.markdown(render_note_card(note), unsafe_allow_html=True)
    pin_col, edit_col, delete_col = st.columns(3)
    pin_col.button(
        "Unpin" if note.is_pinned else "Pin",
        key=f"pin_{note.id}",
        use_container_width=True,
        on_click=app.toggle_pin,
        args=(note.id,),
    )
    edit_col.button(
        "Edit",
        key=f"edit_{note.id}",
        use_container_width=True,
        on_click=app.navigate,
        args=(Screen.CREATE, note.id),
    )
    delete_col.button(
        "Delete",
        key=f"delete_{note.id}",
        use_container_width=True,
        on_click=_request_delete,
        args=(note.id,),
    )

    if st.session_state.get(_PENDING_DELETE_KEY) == note.id:
        st.warning(DELETE_PROMPT)
        yes_col, no_col = st.columns(2)
        yes_col.button(
            "Yes, delete",
            key=f"confirm_delete_{note.id}",
            type="primary",
            use_container_width=True,
            on_click=_answer_delete,
            args=(app, note.id, True),
        )
        no_col.button(
            "No, keep it",
            key=f"cancel_delete_{note.id}",
            use_container_width=True,
            on_click=_answer_delete,
            args=(app, note.id, False),
        )
    st.write("")
