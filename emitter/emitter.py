"""emitter/emitter.py
Synchronous listener registry with reentrancy-safe delivery.

Usage
-----
>>> em = create_emitter()
>>> unsubscribe = em.subscribe(lambda: print("changed"))
>>> em.notify()
changed
>>> unsubscribe()
>>> em.notify()

Listeners may subscribe, unsubscribe or call `notify()` from inside a
delivery.  Each pass delivers to the list as it stood when the pass began;
mutations made meanwhile land in a pending copy that replaces the current
list once the outermost pass finishes.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .logger import get_logger

Listener = Callable[[], None]

log = get_logger(__name__)


class Subscription:
    """Unsubscribe handle bound to exactly one registry entry.

    Calling the handle removes the entry.  Further calls do nothing.
    Entries compare by identity, so the same listener registered twice
    yields two independent subscriptions.
    """

    __slots__ = ("listener", "active", "_emitter")

    def __init__(self, emitter: "Emitter", listener: Listener):
        self.listener = listener
        self.active = True
        self._emitter = emitter

    def __call__(self) -> None:
        if not self.active:
            self._emitter.log.debug("unsubscribe ignored: %r already removed", self.listener)
            return
        self.active = False
        self._emitter._remove(self)

    def __repr__(self):
        state = "active" if self.active else "removed"
        return f"Subscription({self.listener!r}, {state})"


class Emitter:
    """Registry of zero-argument listeners notified in registration order.

    State is a current list, a pending next list that only exists while a
    pass is running and something has mutated the registry, and the number
    of passes in progress.
    """

    def __init__(self, name: Optional[str] = None, logger: Optional[logging.Logger] = None):
        self.name = name
        if logger is None:
            logger = get_logger(f"emitter.{name}") if name else log
        self.log = logger
        self._current: List[Subscription] = []
        self._next: Optional[List[Subscription]] = None
        self._depth: int = 0

    # ------------------------------------------------------------------
    # API
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Subscription:
        """Register *listener* and return its unsubscribe handle.

        A listener added while a pass is running is first called on the
        following pass.
        """
        if not callable(listener):
            raise TypeError(f"listener must be callable, got {type(listener).__name__}")
        entry = Subscription(self, listener)
        self._writable().append(entry)
        self.log.debug("subscribed %r (depth=%d)", listener, self._depth)
        return entry

    def notify(self) -> None:
        """Call every listener registered when this pass starts, in order.

        Exceptions raised by a listener propagate to the caller and end
        the pass; the registry is left consistent either way.
        """
        if self._next is not None:
            # nested pass: deliver to the latest registry state
            self._current, self._next = self._next, None
        snapshot = self._current
        self._depth += 1
        if self._depth > 1:
            self.log.debug("nested notify at depth %d", self._depth)
        try:
            for entry in snapshot:
                entry.listener()
        except Exception:
            self.log.debug("listener failed at depth %d", self._depth, exc_info=True)
            raise
        finally:
            self._depth -= 1
            if self._depth == 0 and self._next is not None:
                self._current, self._next = self._next, None
                self.log.debug("promoted pending listeners (%d)", len(self._current))

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def listener_count(self) -> int:
        """Return the number of live subscriptions."""
        return len(self._next if self._next is not None else self._current)

    def is_notifying(self) -> bool:
        """Return True while a `notify()` pass is in progress."""
        return self._depth > 0

    def __repr__(self):
        label = f"{self.name!r}, " if self.name else ""
        return f"Emitter({label}listeners={self.listener_count()})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _writable(self) -> List[Subscription]:
        """Return the list mutations must go to, copying current on first write in a pass."""
        if self._depth == 0:
            return self._current
        if self._next is None:
            self._next = list(self._current)
        return self._next

    def _remove(self, entry: Subscription) -> None:
        entries = self._writable()
        for i, other in enumerate(entries):
            if other is entry:
                del entries[i]
                self.log.debug("unsubscribed %r (depth=%d)", entry.listener, self._depth)
                return


def create_emitter(name: Optional[str] = None) -> Emitter:
    """Return a fresh, empty Emitter."""
    return Emitter(name)
