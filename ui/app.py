"""Notes App — Streamlit single-page interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `ui.*` and `notes_app.*` imports
# resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="Notes App",
    page_icon="📝",
    layout="wide",
    initial_sidebar_state="expanded",
)

from notes_app.config import settings  # noqa: E402
from ui.announcer import AlertKind, Announcer  # noqa: E402
from ui.components import note_form, notes_list, sidebar, welcome  # noqa: E402
from ui.controller import NotesApp  # noqa: E402
from ui.navigation import Screen  # noqa: E402
from ui.render import render_live_region, render_theme_css  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

_ALERTS = {
    AlertKind.SUCCESS: st.success,
    AlertKind.ERROR: st.error,
    AlertKind.INFO: st.info,
}


def _get_app() -> NotesApp:
    """One controller per browser session, loaded from local storage once."""
    if "notes_app" not in st.session_state:
        app = NotesApp.from_settings(settings, query_params=st.query_params)
        app.start()
        st.session_state.notes_app = app
    app: NotesApp = st.session_state.notes_app
    app.navigator.bind(st.query_params)
    return app


def _render_alert(announcer: Announcer) -> None:
    """Show the current alert once; it is gone on the next interaction."""
    if announcer.alert is None:
        return
    _ALERTS[announcer.alert.kind](announcer.alert.message)
    announcer.clear()


app = _get_app()

# Follow the browser's light/dark preference until the user picks a theme
if st.context.theme.type:
    app.theme.follow_system(st.context.theme.type == "dark")

app.navigator.register(Screen.WELCOME, lambda route: welcome.render(app, route))
app.navigator.register(Screen.CREATE, lambda route: note_form.render(app, route))
app.navigator.register(Screen.VIEW, lambda route: notes_list.render(app, route))

st.markdown(render_theme_css(app.theme.theme), unsafe_allow_html=True)
sidebar.render(app)
_render_alert(app.announcer)

# Render the screen named in the address bar
app.navigator.render()

st.markdown(render_live_region(app.announcer.live), unsafe_allow_html=True)
