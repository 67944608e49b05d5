"""Sidebar: navigation, export, theme toggle and data reset."""

from __future__ import annotations

import streamlit as st

from ui.controller import NotesApp
from ui.navigation import Screen

_EXPORT_KEY = "export_file"


def _prepare_export(app: NotesApp) -> None:
    st.session_state[_EXPORT_KEY] = app.export()


def _clear_data(app: NotesApp) -> None:
    st.session_state.pop(_EXPORT_KEY, None)
    app.clear_data()


def render(app: NotesApp) -> None:
    """Render the sidebar shared by every screen."""
    with st.sidebar:
        st.header("📝 Notes App")
        st.caption(f"{app.store.count} notes")

        st.button(
            "Create Note",
            use_container_width=True,
            key="nav_create",
            on_click=app.navigate,
            args=(Screen.CREATE,),
        )
        st.button(
            "View Notes",
            use_container_width=True,
            key="nav_view",
            on_click=app.navigate,
            args=(Screen.VIEW,),
        )

        st.divider()

        st.button(
            "Export Notes",
            use_container_width=True,
            key="export_notes",
            on_click=_prepare_export,
            args=(app,),
        )
        export = st.session_state.get(_EXPORT_KEY)
        if export is not None:
            st.download_button(
                f"Download {export.filename}",
                data=export.payload,
                file_name=export.filename,
                mime=export.mime_type,
                use_container_width=True,
            )

        theme_label = "🌞 Switch to light mode" if app.theme.is_dark else "🌙 Switch to dark mode"
        st.button(
            theme_label,
            use_container_width=True,
            key="theme_toggle",
            on_click=app.toggle_theme,
        )

        with st.expander("Danger zone"):
            confirmed = st.checkbox("I understand this removes every note", key="confirm_clear")
            st.button(
                "Clear all data",
                use_container_width=True,
                key="clear_data",
                disabled=not confirmed,
                on_click=_clear_data,
                args=(app,),
            )
