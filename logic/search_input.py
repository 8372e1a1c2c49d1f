"""
Debounced search input with IME composition support.

Keystrokes update the displayed value straight away but only reach the
filter after a quiet period. While an input method is composing (e.g. CJK
text) nothing is propagated; the composed value is sent shortly after the
composition ends.

Author: Food Map maintainers
Date: 2026-10-19
"""

from typing import Callable, Optional

from .config import SEARCH_DEBOUNCE, COMPOSE_DEBOUNCE
from .timers import Scheduler, TimerHandle


class SearchInput:
    """Owns the displayed search text and the single debounce timer.

    Attributes:
        value: Text currently shown in the input.
        composing: True between composition start and end.
    """

    def __init__(
            self,
            on_search: Callable[[str], None],
            scheduler: Scheduler,
            debounce: float = SEARCH_DEBOUNCE,
            compose_debounce: float = COMPOSE_DEBOUNCE,
            initial: str = "",
    ):
        self._on_search = on_search
        self._scheduler = scheduler
        self.debounce = debounce
        self.compose_debounce = compose_debounce
        self.value = initial
        self.composing = False
        self._timer: Optional[TimerHandle] = None

    @property
    def has_pending(self) -> bool:
        return self._timer is not None

    def on_input(self, value: str) -> None:
        """Handle a change of the input's text."""
        self.value = value
        if self.composing:
            return
        self._arm(value, self.debounce)

    def on_composition_start(self) -> None:
        self.composing = True
        self._cancel()

    def on_composition_end(self, value: str) -> None:
        """Leave composition and propagate the final composed text."""
        self.composing = False
        self.value = value
        self._arm(value, self.compose_debounce)

    def dispose(self) -> None:
        self._cancel()

    def _arm(self, value: str, delay: float) -> None:
        # One owned handle: a new event replaces the previous timer
        self._cancel()
        self._timer = self._scheduler.call_later(delay, lambda: self._fire(value))

    def _fire(self, value: str) -> None:
        self._timer = None
        self._on_search(value)

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
