"""Screen routing kept in sync with the address bar's query parameters.

The query-parameter mapping is ``st.query_params`` in the running app and a
plain dict in tests. Because the route is always written there, browser
back/forward reloads reproduce the same screen and parameters.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

logger = logging.getLogger("notes_app.ui.navigation")

VIEW_PARAM = "view"
NOTE_ID_PARAM = "noteId"


class Screen(StrEnum):
    WELCOME = "welcome"
    CREATE = "create"
    VIEW = "view"

    @classmethod
    def coerce(cls, value: Any) -> Screen:
        try:
            return cls(value)
        except ValueError:
            return cls.WELCOME


@dataclass(frozen=True)
class Route:
    screen: Screen = Screen.WELCOME
    note_id: str | None = None

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> Route:
        screen = Screen.coerce(params.get(VIEW_PARAM, Screen.WELCOME))
        note_id = params.get(NOTE_ID_PARAM) or None
        if screen is not Screen.CREATE:
            note_id = None
        return cls(screen, note_id)

    def to_query_params(self) -> dict[str, str]:
        params = {VIEW_PARAM: self.screen.value}
        if self.note_id:
            params[NOTE_ID_PARAM] = self.note_id
        return params


Renderer = Callable[[Route], Any]


class Navigator:
    """Maps a route to the renderer registered for its screen."""

    def __init__(self, query_params: MutableMapping[str, str] | None = None) -> None:
        self._query_params: MutableMapping[str, str] = (
            query_params if query_params is not None else {}
        )
        self._renderers: dict[Screen, Renderer] = {}

    @property
    def query_params(self) -> MutableMapping[str, str]:
        return self._query_params

    def bind(self, query_params: MutableMapping[str, str]) -> None:
        """Point the navigator at a new address bar (e.g. a fresh page session)."""
        self._query_params = query_params

    def register(self, screen: Screen, renderer: Renderer) -> None:
        self._renderers[Screen(screen)] = renderer

    def current(self) -> Route:
        return Route.from_query_params(self._query_params)

    def navigate(self, screen: Screen | str, note_id: str | None = None) -> Route:
        """Record a new route in the address bar and return it."""
        screen = Screen.coerce(screen)
        route = Route(screen, note_id if note_id and screen is Screen.CREATE else None)
        self._query_params.clear()
        for key, value in route.to_query_params().items():
            self._query_params[key] = value
        logger.debug("Navigated to %s", route)
        return route

    def resolve(self, route: Route | None = None) -> Renderer:
        """Renderer for the route's screen; unknown screens fall back to welcome."""
        route = route or self.current()
        renderer = self._renderers.get(route.screen) or self._renderers.get(Screen.WELCOME)
        if renderer is None:
            raise LookupError(f"no renderer registered for {route.screen!s}")
        return renderer

    def render(self, route: Route | None = None) -> Any:
        route = route or self.current()
        return self.resolve(route)(route)
