"""User feedback: one visible alert plus a screen-reader live region."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger("notes_app.ui.announcer")

_HISTORY_SIZE = 50


class Politeness(StrEnum):
    POLITE = "polite"
    ASSERTIVE = "assertive"


class AlertKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Alert:
    kind: AlertKind
    message: str


@dataclass(frozen=True)
class Announcement:
    message: str
    politeness: Politeness = Politeness.POLITE


class Announcer:
    """Tracks the current alert and the latest live-region announcement."""

    def __init__(self) -> None:
        self.alert: Alert | None = None
        self.live: Announcement | None = None
        self.history: deque[Announcement] = deque(maxlen=_HISTORY_SIZE)

    def announce(self, message: str, politeness: Politeness = Politeness.POLITE) -> None:
        """Update only the live region."""
        self.live = Announcement(message, politeness)
        self.history.append(self.live)

    def success(self, message: str) -> None:
        self.alert = Alert(AlertKind.SUCCESS, message)
        self.announce(f"Success: {message}")

    def error(self, message: str) -> None:
        self.alert = Alert(AlertKind.ERROR, message)
        logger.error(message)
        self.announce(f"Error: {message}", Politeness.ASSERTIVE)

    def info(self, message: str) -> None:
        self.alert = Alert(AlertKind.INFO, message)
        self.announce(f"Info: {message}")

    def clear(self) -> None:
        """Dismiss the visible alert; the live region is left alone."""
        self.alert = None
