"""Light/dark theme preference."""

from __future__ import annotations

import logging

from .exceptions import PersistenceError, StorageError
from .models import Theme
from .storage import NoteStorage

logger = logging.getLogger("notes_app.theme")


class ThemeManager:
    """Resolves, toggles and persists the theme preference."""

    def __init__(self, storage: NoteStorage, prefers_dark: bool = False) -> None:
        self._storage = storage
        self._prefers_dark = prefers_dark
        self._theme = Theme.LIGHT

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def is_dark(self) -> bool:
        return self._theme is Theme.DARK

    def saved_theme(self) -> Theme | None:
        try:
            return self._storage.load_theme()
        except StorageError as exc:
            logger.warning("Could not read theme preference: %s", exc)
            return None

    def initial_theme(self) -> Theme:
        """Saved preference, else the system preference."""
        saved = self.saved_theme()
        if saved is not None:
            return saved
        return Theme.DARK if self._prefers_dark else Theme.LIGHT

    def start(self) -> Theme:
        """Apply the initial theme without writing it back."""
        self._theme = self.initial_theme()
        return self._theme

    def set_theme(self, theme: Theme) -> bool:
        """Apply and persist a theme. Returns False if it could not be saved."""
        self._theme = Theme(theme)
        try:
            self._storage.save_theme(self._theme)
        except PersistenceError as exc:
            logger.error("Error saving theme: %s", exc)
            return False
        return True

    def toggle(self) -> bool:
        return self.set_theme(Theme.LIGHT if self.is_dark else Theme.DARK)

    def follow_system(self, prefers_dark: bool) -> None:
        """React to a system preference change unless the user picked a theme."""
        self._prefers_dark = prefers_dark
        if self.saved_theme() is None:
            self._theme = Theme.DARK if prefers_dark else Theme.LIGHT

    def reset(self) -> bool:
        """Drop the saved preference and fall back to the system preference."""
        self._theme = Theme.DARK if self._prefers_dark else Theme.LIGHT
        try:
            self._storage.clear_theme()
        except PersistenceError as exc:
            logger.error("Error clearing theme preference: %s", exc)
            return False
        return True
