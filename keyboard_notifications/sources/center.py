"""In-process notification center for keyboard events."""

import logging
import threading
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any

from keyboard_notifications.core import KeyboardEventKind, KeyboardNotification
from keyboard_notifications.sources.base import KeyboardHandler

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Delivers posted keyboard events to the handlers subscribed to their kind.

    Delivery is synchronous, on the posting thread, in subscription order.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[KeyboardEventKind, list[KeyboardHandler]] = (
            defaultdict(list)
        )

    def add_observer(self, kind: KeyboardEventKind, handler: KeyboardHandler) -> None:
        self._handlers[KeyboardEventKind(kind)].append(handler)

    def remove_observer(
        self, kind: KeyboardEventKind, handler: KeyboardHandler
    ) -> None:
        handlers = self._handlers.get(KeyboardEventKind(kind))
        if handlers and handler in handlers:
            handlers.remove(handler)

    def observer_count(self, kind: KeyboardEventKind) -> int:
        return len(self._handlers.get(KeyboardEventKind(kind), ()))

    def post(
        self, kind: KeyboardEventKind | str, user_info: dict[str, Any] | None = None
    ) -> KeyboardNotification:
        """Build a notification for ``kind`` and hand it to every handler.

        Returns:
            The notification that was delivered.
        """
        notification = KeyboardNotification(
            kind=KeyboardEventKind(kind),
            user_info=user_info or {},
            received_at=datetime.now(timezone.utc).isoformat(),
        )
        handlers = list(self._handlers.get(notification.kind, ()))
        logger.debug(
            f"Posting {notification.kind.value} to {len(handlers)} handler(s)"
        )
        for handler in handlers:
            handler(notification)
        return notification


_default_center: NotificationCenter | None = None
_default_center_lock = threading.Lock()


def default_center() -> NotificationCenter:
    """Return the process-wide notification center, creating it on first use."""
    global _default_center
    with _default_center_lock:
        if _default_center is None:
            _default_center = NotificationCenter()
        return _default_center
