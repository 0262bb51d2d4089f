"""Keyboard notification registry: fans keyboard events out to listeners."""

import atexit
import logging
import threading
from typing import Any

from keyboard_notifications.core import (
    KeyboardEventKind,
    KeyboardNotification,
    Settings,
)
from keyboard_notifications.observers import Observer, make_observer
from keyboard_notifications.sources.base import KeyboardEventSource, KeyboardHandler
from keyboard_notifications.sources.center import default_center

logger = logging.getLogger(__name__)


class KeyboardNotificationRegistry:
    """Subscribes once to the four keyboard events and multicasts them.

    Listeners are kept in registration order, at most one handle per
    listener identity. Weakly held listeners that have died are dropped
    before each "will" event is dispatched, or before every event when
    ``Settings.compact_on_every_dispatch`` is set.
    """

    def __init__(
        self,
        source: KeyboardEventSource | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._source = source if source is not None else default_center()
        self._observers: list[Observer] = []
        self._lock = threading.RLock()
        self._subscribed = False
        self._subscribe()

    @property
    def is_subscribed(self) -> bool:
        return self._subscribed

    @property
    def observers(self) -> tuple[Observer, ...]:
        """Snapshot of the current handles in dispatch order."""
        with self._lock:
            return tuple(self._observers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)

    def _handlers(self) -> dict[KeyboardEventKind, KeyboardHandler]:
        return {
            KeyboardEventKind.WILL_SHOW: self.on_will_show,
            KeyboardEventKind.DID_SHOW: self.on_did_show,
            KeyboardEventKind.WILL_HIDE: self.on_will_hide,
            KeyboardEventKind.DID_HIDE: self.on_did_hide,
        }

    def _subscribe(self) -> None:
        for kind, handler in self._handlers().items():
            self._source.add_observer(kind, handler)
        self._subscribed = True
        logger.debug("Keyboard registry subscribed to keyboard events")

    def close(self) -> None:
        """Unsubscribe from the event source. Safe to call more than once."""
        if not self._subscribed:
            return
        for kind, handler in self._handlers().items():
            self._source.remove_observer(kind, handler)
        self._subscribed = False
        logger.debug("Keyboard registry unsubscribed from keyboard events")

    def register(self, listener: Any, keep_alive: bool = False) -> None:
        """Track ``listener``, replacing any earlier registration of it."""
        observer = make_observer(listener, keep_alive)
        with self._lock:
            self._remove(listener)
            self._observers.append(observer)
        logger.debug(f"Registered {observer!r}")

    def deregister(self, listener: Any) -> None:
        """Stop tracking ``listener``. Unknown listeners are ignored."""
        with self._lock:
            removed = self._remove(listener)
        if removed is not None:
            logger.debug(f"Deregistered {removed!r}")

    def is_registered(self, listener: Any) -> bool:
        with self._lock:
            return any(o.refers_to(listener) for o in self._observers)

    def _remove(self, listener: Any) -> Observer | None:
        for index, observer in enumerate(self._observers):
            if observer.refers_to(listener):
                return self._observers.pop(index)
        return None

    def compact(self) -> int:
        """Drop handles whose listener has died.

        Returns:
            Number of handles removed.
        """
        with self._lock:
            alive = [o for o in self._observers if o.is_alive()]
            removed = len(self._observers) - len(alive)
            self._observers = alive
        if removed:
            logger.debug(f"Compacted {removed} dead keyboard observer(s)")
        return removed

    def on_will_show(self, event: KeyboardNotification) -> None:
        self._dispatch(KeyboardEventKind.WILL_SHOW, event)

    def on_did_show(self, event: KeyboardNotification) -> None:
        self._dispatch(KeyboardEventKind.DID_SHOW, event)

    def on_will_hide(self, event: KeyboardNotification) -> None:
        self._dispatch(KeyboardEventKind.WILL_HIDE, event)

    def on_did_hide(self, event: KeyboardNotification) -> None:
        self._dispatch(KeyboardEventKind.DID_HIDE, event)

    def dispatch(self, event: KeyboardNotification) -> None:
        """Route ``event`` to the entry point for its kind."""
        self._handlers()[event.kind](event)

    def _dispatch(self, kind: KeyboardEventKind, event: KeyboardNotification) -> None:
        if kind.is_will or self.settings.compact_on_every_dispatch:
            self.compact()
        # Callbacks run outside the lock and may (de)register listeners;
        # such changes take effect from the next event.
        for observer in self.observers:
            try:
                observer.invoke(kind, event)
            except Exception as e:
                logger.exception(
                    f"Keyboard listener {observer.value!r} failed on {kind.value}: {e}"
                )
                if self.settings.raise_listener_errors:
                    raise


_registry: KeyboardNotificationRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> KeyboardNotificationRegistry:
    """Return the process-wide registry, creating and subscribing it on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = KeyboardNotificationRegistry()
        return _registry


def shutdown_registry() -> None:
    """Unsubscribe and forget the process-wide registry, if one exists."""
    global _registry
    with _registry_lock:
        registry, _registry = _registry, None
    if registry is not None:
        registry.close()


atexit.register(shutdown_registry)


def register_for_keyboard_events(
    listener: Any,
    keep_alive: bool = False,
    registry: KeyboardNotificationRegistry | None = None,
) -> None:
    """Deliver keyboard events to ``listener``.

    Args:
        listener: Object implementing any of ``will_show_keyboard``,
            ``did_show_keyboard``, ``will_hide_keyboard`` or
            ``did_hide_keyboard``.
        keep_alive: Hold a strong reference so the registry keeps the
            listener alive. By default the listener is held weakly.
        registry: Registry to use instead of the process-wide one.
    """
    if registry is None:
        registry = get_registry()
    registry.register(listener, keep_alive=keep_alive)


def deregister_from_keyboard_events(
    listener: Any, registry: KeyboardNotificationRegistry | None = None
) -> None:
    """Stop delivering keyboard events to ``listener``."""
    if registry is None:
        registry = get_registry()
    registry.deregister(listener)
