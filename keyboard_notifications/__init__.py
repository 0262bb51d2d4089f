"""Keyboard show/hide notification fan-out with weak or strong listener retention."""

from keyboard_notifications.core import (
    KeyboardEventKind,
    KeyboardNotification,
    Point,
    Rect,
    Settings,
    Size,
)
from keyboard_notifications.listener import KeyboardListener
from keyboard_notifications.observers import (
    Observer,
    StrongObserver,
    WeakObserver,
    make_observer,
)
from keyboard_notifications.registry import (
    KeyboardNotificationRegistry,
    deregister_from_keyboard_events,
    get_registry,
    register_for_keyboard_events,
    shutdown_registry,
)

__all__ = [
    "KeyboardEventKind",
    "KeyboardListener",
    "KeyboardNotification",
    "KeyboardNotificationRegistry",
    "Observer",
    "Point",
    "Rect",
    "Settings",
    "Size",
    "StrongObserver",
    "WeakObserver",
    "deregister_from_keyboard_events",
    "get_registry",
    "make_observer",
    "register_for_keyboard_events",
    "shutdown_registry",
]
