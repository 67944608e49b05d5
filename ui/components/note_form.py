"""Create / edit note form."""

from __future__ import annotations

import streamlit as st

from ui.controller import NotesApp
from ui.navigation import Route, Screen
from ui.render import FormView


def _submit(app: NotesApp, view: FormView, key: str) -> None:
    """Form callback: read widget values from session state and save."""
    state = st.session_state
    app.submit_note(
        title=state[f"{key}_title"],
        content=state[f"{key}_content"],
        category=str(state[f"{key}_category"]),
        note_id=view.note_id,
    )


def render(app: NotesApp, route: Route) -> None:
    """Render the form, pre-populated when the route names an existing note."""
    view = app.form_view(route.note_id)
    key = f"note_form_{view.note_id or 'new'}"

    st.title(f"✏️ {view.heading}")

    with st.form(key):
        st.text_input(
            "Title",
            value=view.title,
            max_chars=view.title_max_length,
            key=f"{key}_title",
            help=f"Maximum {view.title_max_length} characters",
        )
        st.text_area(
            "Content",
            value=view.content,
            height=220,
            key=f"{key}_content",
            help="Supports **bold**, *italic* and `code`",
        )
        st.selectbox(
            "Category",
            options=list(view.categories),
            index=view.categories.index(view.category),
            format_func=str,
            key=f"{key}_category",
        )
        st.form_submit_button(
            view.submit_label,
            type="primary",
            on_click=_submit,
            args=(app, view, key),
        )

    st.button("Cancel", key=f"{key}_cancel", on_click=app.navigate, args=(Screen.VIEW,))
