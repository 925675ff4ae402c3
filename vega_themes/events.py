"""Change notifications and deferred refresh.

:class:`ChangeBroadcaster` is a plain observer list carrying the three
event kinds emitted when presentation state changes.  Listeners are the
independently mounted chart renderers; each one re-resolves and
re-annotates its spec when notified, so handling the same event twice
must be harmless.

:class:`DeferredCallbacks` holds callbacks that should run a short time
from now (the "please re-render" refresh sent after a color-set change).
The host loop calls :meth:`DeferredCallbacks.run_due` on every tick, the
same way a render loop flushes a pending resize.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

logger = logging.getLogger(__name__)

THEME_CHANGED = "theme-changed"
COLOR_SET_CHANGED = "color-set-changed"
REFRESH_REQUESTED = "vega-color-set-changed"

EVENT_KINDS = (THEME_CHANGED, COLOR_SET_CHANGED, REFRESH_REQUESTED)

# Delay before the deferred refresh fires, in seconds.
DEFAULT_REFRESH_DELAY = 0.05


@dataclass(frozen=True)
class ChangeEvent:
    """A broadcast notification.

    Attributes:
        kind: One of :data:`EVENT_KINDS`.
        detail: Event payload, always including ``timestamp`` (epoch ms).
    """

    kind: str
    detail: Dict[str, Any] = field(default_factory=dict)

    @property
    def timestamp(self) -> int:
        return self.detail["timestamp"]


Listener = Callable[[ChangeEvent], None]


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class ChangeBroadcaster:
    """Process-wide publish/subscribe channel for state changes.

    Args:
        clock: Optional callable returning the current time in epoch
            milliseconds, used for event timestamps.  Useful for testing.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or _epoch_millis
        self._listeners: List[Tuple[Listener, Optional[FrozenSet[str]]]] = []

    def subscribe(
        self,
        listener: Listener,
        kinds: Optional[Tuple[str, ...]] = None,
    ) -> Callable[[], None]:
        """Register *listener* for *kinds* (all kinds when ``None``).

        Returns a callable that removes the subscription.
        """
        if kinds is not None:
            unknown = [k for k in kinds if k not in EVENT_KINDS]
            if unknown:
                raise ValueError(f"Unknown event kind(s): {', '.join(unknown)}")
        entry = (listener, frozenset(kinds) if kinds is not None else None)
        self._listeners.append(entry)

        def unsubscribe() -> None:
            if entry in self._listeners:
                self._listeners.remove(entry)

        return unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        """Remove every subscription of *listener*."""
        self._listeners = [e for e in self._listeners if e[0] is not listener]

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, kind: str, **detail: Any) -> ChangeEvent:
        """Deliver a *kind* event to matching listeners and return it.

        A listener that raises is logged; the remaining listeners still
        receive the event.
        """
        if kind not in EVENT_KINDS:
            raise ValueError(f"Unknown event kind: {kind}")
        event = ChangeEvent(kind, {**detail, "timestamp": self._clock()})
        logger.debug("Broadcasting %s %s", kind, event.detail)
        for listener, kinds in list(self._listeners):
            if kinds is not None and kind not in kinds:
                continue
            try:
                listener(event)
            except Exception:
                logger.exception("Listener %r failed on %s", listener, kind)
        return event


class DeferredCallbacks:
    """Callbacks scheduled to run after a delay.

    There is no cancellation: scheduling again while a callback is still
    waiting simply queues another one.

    Args:
        clock: Optional callable returning the current time in seconds
            (defaults to :func:`time.monotonic`).  Useful for testing.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.monotonic
        self._queue: List[Tuple[float, Callable[[], None]]] = []

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to run."""
        return len(self._queue)

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        """Run *callback* once at least *delay* seconds have elapsed."""
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self._queue.append((self._clock() + delay, callback))

    def run_due(self) -> int:
        """Run every callback whose time has come; return how many ran."""
        now = self._clock()
        due = [entry for entry in self._queue if entry[0] <= now]
        self._queue = [entry for entry in self._queue if entry[0] > now]
        self._run(due)
        return len(due)

    def run_all(self) -> int:
        """Run every waiting callback regardless of its due time."""
        queued, self._queue = self._queue, []
        self._run(queued)
        return len(queued)

    @staticmethod
    def _run(entries: List[Tuple[float, Callable[[], None]]]) -> None:
        # A failing callback is logged; the rest of the batch still runs.
        for _, callback in sorted(entries, key=lambda entry: entry[0]):
            try:
                callback()
            except Exception:
                logger.exception("Deferred callback %r failed", callback)
