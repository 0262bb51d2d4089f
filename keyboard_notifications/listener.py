"""Base class for objects that react to keyboard visibility changes."""

from keyboard_notifications.core import KeyboardNotification
from keyboard_notifications.registry import (
    KeyboardNotificationRegistry,
    deregister_from_keyboard_events,
    register_for_keyboard_events,
)


class KeyboardListener:
    """Optional callbacks for keyboard events, each a no-op by default.

    Subclasses override only the callbacks they care about. Any object with
    one or more of these methods can be registered; inheriting from this
    class just adds the registration helpers.
    """

    def will_show_keyboard(self, event: KeyboardNotification) -> None:
        pass

    def did_show_keyboard(self, event: KeyboardNotification) -> None:
        pass

    def will_hide_keyboard(self, event: KeyboardNotification) -> None:
        pass

    def did_hide_keyboard(self, event: KeyboardNotification) -> None:
        pass

    def register_keyboard_notifications(
        self,
        keep_alive: bool = False,
        registry: KeyboardNotificationRegistry | None = None,
    ) -> None:
        register_for_keyboard_events(self, keep_alive=keep_alive, registry=registry)

    def deregister_keyboard_notifications(
        self, registry: KeyboardNotificationRegistry | None = None
    ) -> None:
        deregister_from_keyboard_events(self, registry=registry)
