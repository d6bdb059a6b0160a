"""
Grade-change notification channel with owned subscriptions.
"""

import itertools
import threading
from typing import Callable, Dict, Optional, Union

from .interfaces import GradeObserver

__all__ = ["GradeListener", "Subscription", "GradeChangeNotifier"]

GradeListener = Callable[[str, str, Optional[float], float], None]


class Subscription:
    """Handle for a single listener registration.

    Cancelling removes exactly this registration, even when the same
    listener was registered more than once.
    """

    def __init__(self, notifier: 'GradeChangeNotifier', token: int):
        self._notifier = notifier
        self._token = token

    @property
    def active(self) -> bool:
        return self._notifier._is_registered(self._token)

    def cancel(self) -> None:
        """Remove the registration. Safe to call more than once."""
        self._notifier._remove(self._token)

    def __enter__(self) -> 'Subscription':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()

    def __repr__(self) -> str:
        return f"Subscription(token={self._token}, active={self.active})"


class GradeChangeNotifier:
    """Thread-safe listener list for grade changes of one student."""

    def __init__(self):
        self._listeners: Dict[int, GradeListener] = {}
        self._tokens = itertools.count()
        self._lock = threading.RLock()

    def subscribe(self, listener: Union[GradeListener, GradeObserver]) -> Subscription:
        """Register a listener. Duplicates are not checked."""
        if isinstance(listener, GradeObserver):
            listener = listener.update
        if not callable(listener):
            raise TypeError(f"Grade listener must be callable, got {type(listener).__name__}")
        with self._lock:
            token = next(self._tokens)
            self._listeners[token] = listener
        return Subscription(self, token)

    def notify(self, student_id: str, course_id: str,
               previous: Optional[float], new: float) -> None:
        """Call every listener in registration order.

        Listener exceptions propagate to the caller.
        """
        with self._lock:
            listeners = list(self._listeners.values())
        for listener in listeners:
            listener(student_id, course_id, previous, new)

    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def _is_registered(self, token: int) -> bool:
        with self._lock:
            return token in self._listeners

    def _remove(self, token: int) -> None:
        with self._lock:
            self._listeners.pop(token, None)
