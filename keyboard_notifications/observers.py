"""Observer handles: weak or strong references to registered listeners."""

import weakref
from abc import ABC, abstractmethod
from typing import Any

from keyboard_notifications.core import KeyboardEventKind, KeyboardNotification


class Observer(ABC):
    """Registry-side wrapper around a listener.

    Subclasses decide how the listener is held. ``keep_alive`` tags the
    variant: True for a strong reference, False for a weak one.
    """

    keep_alive: bool = False

    @property
    @abstractmethod
    def value(self) -> Any | None:
        """The listener, or None once a weak reference has died."""

    @abstractmethod
    def is_alive(self) -> bool:
        """Whether the handle still resolves to its listener."""

    def refers_to(self, listener: Any) -> bool:
        """Whether this handle wraps exactly ``listener`` (identity, not equality).

        A dead handle refers to nothing, not even None.
        """
        value = self.value
        return self.is_alive() and value is listener

    def invoke(self, kind: KeyboardEventKind, event: KeyboardNotification) -> None:
        """Call the listener's callback for ``kind`` if it has one.

        Dead listeners and listeners without the callback are skipped.
        """
        listener = self.value
        if listener is None and not self.is_alive():
            return
        callback = getattr(listener, kind.callback_name, None)
        if callable(callback):
            callback(event)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class WeakObserver(Observer):
    """Holds a listener without keeping it alive."""

    keep_alive = False

    def __init__(self, listener: Any) -> None:
        try:
            self._ref = weakref.ref(listener)
        except TypeError as e:
            raise TypeError(
                f"Cannot weakly reference {type(listener).__name__!r}; "
                "register it with keep_alive=True instead"
            ) from e

    @property
    def value(self) -> Any | None:
        return self._ref()

    def is_alive(self) -> bool:
        return self._ref() is not None


class StrongObserver(Observer):
    """Holds a listener alive until it is deregistered."""

    keep_alive = True

    def __init__(self, listener: Any) -> None:
        self._listener = listener

    @property
    def value(self) -> Any | None:
        return self._listener

    def is_alive(self) -> bool:
        return True


def make_observer(listener: Any, keep_alive: bool) -> Observer:
    """Wrap ``listener`` in the handle matching ``keep_alive``."""
    if keep_alive:
        return StrongObserver(listener)
    return WeakObserver(listener)
