"""Event source and bridge protocol definitions."""

from typing import Any, Callable, Protocol

from keyboard_notifications.core import KeyboardEventKind, KeyboardNotification

# Type alias for a handler subscribed to one event kind
KeyboardHandler = Callable[[KeyboardNotification], None]

# Type alias for the sink a bridge posts raw platform events to
KeyboardCallback = Callable[[KeyboardEventKind, dict[str, Any]], Any]


class KeyboardEventSource(Protocol):
    """Anything the registry can subscribe its dispatch entry points to."""

    def add_observer(self, kind: KeyboardEventKind, handler: KeyboardHandler) -> None:
        """Call ``handler`` each time an event of ``kind`` fires."""
        ...

    def remove_observer(
        self, kind: KeyboardEventKind, handler: KeyboardHandler
    ) -> None:
        """Stop calling ``handler`` for ``kind``."""
        ...


class KeyboardBridge(Protocol):
    """Platform-specific adapter that turns system keyboard changes into events."""

    async def start(self, callback: KeyboardCallback) -> None:
        """Start watching the keyboard.

        Args:
            callback: Function called with the event kind and raw user info.
        """
        ...

    async def stop(self) -> None:
        """Stop watching and clean up resources."""
        ...

    @property
    def is_running(self) -> bool:
        """Whether the bridge is currently active."""
        ...
