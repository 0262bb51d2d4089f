"""Keyboard event sources and platform bridges."""

import sys

from keyboard_notifications.sources.base import (
    KeyboardBridge,
    KeyboardCallback,
    KeyboardEventSource,
    KeyboardHandler,
)
from keyboard_notifications.sources.center import NotificationCenter, default_center


def get_bridge() -> KeyboardBridge:
    """Return the appropriate keyboard bridge for the current platform."""
    if sys.platform == "linux":
        from keyboard_notifications.sources.linux import LinuxKeyboardBridge

        return LinuxKeyboardBridge()
    else:
        raise RuntimeError(f"Unsupported platform: {sys.platform}")


__all__ = [
    "KeyboardBridge",
    "KeyboardCallback",
    "KeyboardEventSource",
    "KeyboardHandler",
    "NotificationCenter",
    "default_center",
    "get_bridge",
]
