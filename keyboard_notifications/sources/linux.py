"""Linux D-Bus on-screen keyboard bridge."""

import logging

from dbus_fast import BusType, Message, MessageType
from dbus_fast.aio import MessageBus

from keyboard_notifications.core import KeyboardEventKind
from keyboard_notifications.sources.base import KeyboardCallback

logger = logging.getLogger(__name__)

OSK_INTERFACE = "sm.puri.OSK0"
OSK_PATH = "/sm/puri/OSK0"
PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"


class LinuxKeyboardBridge:
    """Watches the on-screen keyboard's ``Visible`` property over D-Bus.

    The compositor only reports the final state, so each change is posted
    as a will/did pair.
    """

    def __init__(self) -> None:
        self._bus: MessageBus | None = None
        self._running = False
        self._callback: KeyboardCallback | None = None
        self._visible: bool | None = None

    @property
    def is_running(self) -> bool:
        """Whether the bridge is currently active."""
        return self._running

    async def start(self, callback: KeyboardCallback) -> None:
        """Start watching the keyboard on the D-Bus session bus."""
        self._callback = callback
        self._bus = await MessageBus(bus_type=BusType.SESSION).connect()
        self._running = True

        match_rule = (
            "type='signal',"
            f"interface='{PROPERTIES_INTERFACE}',"
            "member='PropertiesChanged',"
            f"path='{OSK_PATH}'"
        )

        assert self._bus is not None
        reply = await self._bus.call(
            Message(
                destination="org.freedesktop.DBus",
                path="/org/freedesktop/DBus",
                interface="org.freedesktop.DBus",
                member="AddMatch",
                signature="s",
                body=[match_rule],
            )
        )

        if reply.message_type == MessageType.ERROR:
            logger.error(f"Failed to add match rule: {reply.body}")
            return

        logger.info("Successfully subscribed to on-screen keyboard changes")

        self._bus.add_message_handler(self._handle_message)

    async def stop(self) -> None:
        """Stop watching and disconnect from D-Bus."""
        self._running = False
        if self._bus:
            self._bus.disconnect()
            logger.info("Disconnected from D-Bus")

    def _handle_message(self, msg: Message) -> bool:
        """Handle incoming D-Bus messages."""
        if (
            msg.message_type == MessageType.SIGNAL
            and msg.interface == PROPERTIES_INTERFACE
            and msg.member == "PropertiesChanged"
            and msg.path == OSK_PATH
        ):
            self._process_change(msg)
        return False  # Don't consume the message

    def _process_change(self, msg: Message) -> None:
        """Translate a ``Visible`` change into will/did keyboard events."""
        try:
            # Signature: sa{sv}as
            # interface_name, changed_properties, invalidated_properties
            args = msg.body
            if len(args) < 2:
                logger.warning(f"Malformed PropertiesChanged message: {args}")
                return

            interface_name, changed = args[0], args[1]
            if interface_name != OSK_INTERFACE or "Visible" not in changed:
                return

            variant = changed["Visible"]
            visible = bool(variant.value if hasattr(variant, "value") else variant)
            if visible == self._visible:
                return
            self._visible = visible

            if visible:
                kinds = (KeyboardEventKind.WILL_SHOW, KeyboardEventKind.DID_SHOW)
            else:
                kinds = (KeyboardEventKind.WILL_HIDE, KeyboardEventKind.DID_HIDE)

            logger.info(f"On-screen keyboard visible={visible}")

            if self._callback:
                for kind in kinds:
                    self._callback(kind, {"visible": visible})

        except Exception as e:
            logger.exception(f"Error processing keyboard change: {e}")
