"""Clock-driven debouncing for search-as-you-type."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any


class Debouncer:
    """Coalesce calls so that only the last one inside the window runs.

    Each call replaces the pending arguments and restarts the window.
    ``fire_due`` runs the pending call once the window has elapsed and
    ``cancel`` drops it. The owner decides when to poll, so everything runs on
    the caller's thread.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        delay: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fn = fn
        self._delay = delay
        self._clock = clock
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._deadline = 0.0

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self._pending = (args, kwargs)
        self._deadline = self._clock() + self._delay

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def remaining(self) -> float:
        """Seconds until the pending call is due (0 when due or idle)."""
        if self._pending is None:
            return 0.0
        return max(0.0, self._deadline - self._clock())

    def fire_due(self) -> bool:
        """Run the pending call if its window has elapsed."""
        if self._pending is None or self._clock() < self._deadline:
            return False
        args, kwargs = self._pending
        self._pending = None
        self._fn(*args, **kwargs)
        return True

    def cancel(self) -> None:
        self._pending = None
