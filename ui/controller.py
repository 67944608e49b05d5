"""Application controller: the user actions of the notes page.

``NotesApp`` owns the note store, the theme, the current search/filter state,
the navigator and the announcer. It is framework-agnostic; the Streamlit page
keeps one instance per browser session and calls into it from widget
callbacks. Store failures are turned into user-visible messages here and
nowhere else.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from datetime import datetime

from notes_app.config import Settings
from notes_app.export import export_filename, export_json
from notes_app.models import TITLE_MAX_LENGTH, Theme, utcnow
from notes_app.query import ALL_CATEGORIES
from notes_app.store import ErrorKind, NoteStore, StoreResult
from notes_app.storage import NoteStorage
from notes_app.theme import ThemeManager
from ui.announcer import Announcer
from ui.debounce import Debouncer
from ui.navigation import Navigator, Route, Screen
from ui.render import FormView, ListView, build_form_view, build_list_view

logger = logging.getLogger("notes_app.ui.controller")

DELETE_PROMPT = "Are you sure you want to delete this note? This action cannot be undone."
REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"

ConfirmFn = Callable[[str], bool]


@dataclass(frozen=True)
class ExportFile:
    filename: str
    payload: str
    total_notes: int

    mime_type: str = "application/json"


class NotesApp:
    """User-facing operations over one explicitly owned ``NoteStore``."""

    def __init__(
        self,
        store: NoteStore,
        theme: ThemeManager,
        navigator: Navigator | None = None,
        announcer: Announcer | None = None,
        debounce_delay: float = 0.3,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.theme = theme
        self.navigator = navigator or Navigator()
        self.announcer = announcer or Announcer()
        self.search_term = ""
        self.category = ALL_CATEGORIES
        self._search = Debouncer(self._apply_search, debounce_delay, clock)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        query_params: MutableMapping[str, str] | None = None,
    ) -> NotesApp:
        storage = NoteStorage.from_settings(settings)
        return cls(
            store=NoteStore(storage),
            theme=ThemeManager(storage, prefers_dark=settings.prefers_dark_scheme),
            navigator=Navigator(query_params),
            debounce_delay=settings.debounce_delay,
        )

    # ------------------------------------------------------------------
    # Startup and navigation
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Load notes and theme. Corrupt storage degrades to an empty list."""
        result = self.store.load()
        if not result.ok:
            self.announcer.error(result.message)
        self.theme.start()
        logger.info("Notes app started with %d notes", self.store.count)
        self.announcer.announce("Application initialized")

    def navigate(self, screen: Screen | str, note_id: str | None = None) -> Route:
        self.announcer.clear()
        route = self.navigator.navigate(screen, note_id)
        self.announcer.announce(f"Navigated to {route.screen} view")
        return route

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def list_view(self) -> ListView:
        return build_list_view(self.store.notes, self.search_term, self.category)

    def form_view(self, note_id: str | None = None) -> FormView:
        """Edit form for an existing note, else a blank create form."""
        note = self.store.get(note_id) if note_id else None
        return build_form_view(note)

    # ------------------------------------------------------------------
    # Note actions
    # ------------------------------------------------------------------

    def _report_failure(self, result: StoreResult) -> None:
        if result.error is ErrorKind.NOT_FOUND:
            self.announcer.error("Note not found")
        else:
            self.announcer.error(result.message)

    def submit_note(
        self,
        title: str,
        content: str,
        category: str | None = None,
        note_id: str | None = None,
    ) -> bool:
        """Handle the create/edit form. Navigates to the list on success."""
        title = (title or "").strip()
        content = (content or "").strip()
        if not title or not content:
            self.announcer.error(REQUIRED_FIELDS_MESSAGE)
            return False

        if len(title) > TITLE_MAX_LENGTH:
            self.announcer.error(f"Title must be at most {TITLE_MAX_LENGTH} characters")
            return False

        fields = {"title": title, "content": content, "category": category}
        if note_id:
            result = self.store.update(note_id, fields)
            done = "Note updated successfully!"
        else:
            result = self.store.create(fields)
            done = "Note created successfully!"

        if not result.ok:
            self._report_failure(result)
            return False
        self.navigate(Screen.VIEW)
        self.announcer.success(done)
        return True

    def delete_note(self, note_id: str, confirm: ConfirmFn) -> bool:
        """Delete after an explicit yes from ``confirm``; "no" changes nothing."""
        if not confirm(DELETE_PROMPT):
            return False
        result = self.store.delete(note_id)
        if not result.ok:
            self._report_failure(result)
            return False
        self.announcer.announce("Note deleted successfully")
        return True

    def toggle_pin(self, note_id: str) -> bool:
        result = self.store.toggle_pin(note_id)
        if not result.ok:
            self._report_failure(result)
            return False
        state = "pinned" if result.note and result.note.is_pinned else "unpinned"
        self.announcer.announce(f"Note {state}")
        return True

    # ------------------------------------------------------------------
    # Search and filters
    # ------------------------------------------------------------------

    def search_input(self, term: str) -> None:
        """Debounced: only the last term inside the window is applied."""
        self._search(term)

    @property
    def search_pending(self) -> bool:
        return self._search.pending

    @property
    def search_remaining(self) -> float:
        return self._search.remaining

    def flush_search(self) -> bool:
        return self._search.fire_due()

    def _apply_search(self, term: str) -> None:
        self.search_term = term.strip().lower()
        self.announcer.announce("Notes list loaded")

    def set_category(self, category: str) -> None:
        self.category = category.lower() if category else ALL_CATEGORIES
        self.announcer.announce("Notes list loaded")

    def clear_search(self) -> None:
        self._search.cancel()
        self.search_term = ""
        self.category = ALL_CATEGORIES
        self.announcer.announce("Notes list loaded")

    # ------------------------------------------------------------------
    # Export, theme, data reset
    # ------------------------------------------------------------------

    def export(self, now: datetime | None = None) -> ExportFile | None:
        notes = self.store.notes
        if not notes:
            self.announcer.info("No notes to export")
            return None
        now = now or utcnow()
        export = ExportFile(
            filename=export_filename(now),
            payload=export_json(notes, now),
            total_notes=len(notes),
        )
        self.announcer.success(f"Exported {export.total_notes} notes successfully")
        return export

    def toggle_theme(self) -> Theme:
        if not self.theme.toggle():
            self.announcer.error("Failed to save theme preference")
        else:
            self.announcer.info(f"Switched to {self.theme.theme} mode")
        return self.theme.theme

    def clear_data(self) -> None:
        """Remove every note and the theme preference, then go to welcome."""
        result = self.store.clear()
        if not result.ok:
            self._report_failure(result)
            return
        self.theme.reset()
        self.clear_search()
        self.navigate(Screen.WELCOME)
        self.announcer.success("All app data has been cleared")
