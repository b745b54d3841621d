from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Tuple, TypeVar

from table_studio.core.view_state import ViewState

T = TypeVar("T")


class ViewStateStore:
    """
    Owns the current ViewState.

    Transitions are pure functions (state, *args) -> state; the store applies
    them one at a time under a lock so two callbacks can never interleave
    halfway through a transition.
    """

    def __init__(self, initial: Optional[ViewState] = None):
        self._state = initial if initial is not None else ViewState()
        self._revision = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> ViewState:
        with self._lock:
            return self._state

    @property
    def revision(self) -> int:
        """Number of transitions applied so far; the UI re-renders when it changes."""
        with self._lock:
            return self._revision

    def dispatch(self, transition: Callable[..., ViewState], *args: Any) -> ViewState:
        with self._lock:
            self._state = transition(self._state, *args)
            self._revision += 1
            return self._state

    def begin(self, transition: Callable[[ViewState], Tuple[ViewState, T]]) -> T:
        """Apply a transition that also issues something (a RequestTag) and return it."""
        with self._lock:
            self._state, issued = transition(self._state)
            self._revision += 1
            return issued
