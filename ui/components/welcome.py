"""Welcome screen."""

from __future__ import annotations

import streamlit as st

from ui.controller import NotesApp
from ui.navigation import Route, Screen
from ui.render import render_welcome


def render(app: NotesApp, route: Route) -> None:
    """Render the welcome screen with a Get Started button."""
    st.markdown(render_welcome(), unsafe_allow_html=True)
    _, col, _ = st.columns([2, 1, 2])
    with col:
        st.button(
            "Get Started",
            type="primary",
            use_container_width=True,
            key="get_started",
            on_click=app.navigate,
            args=(Screen.CREATE,),
        )
