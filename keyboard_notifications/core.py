"""Core module: Settings, KeyboardEventKind, geometry and KeyboardNotification."""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Well-known user_info key carrying the keyboard's final on-screen frame
KEYBOARD_FRAME_END_KEY = "keyboard_frame_end"


class Settings(BaseSettings):
    """Application configuration with environment variable support."""

    compact_on_every_dispatch: bool = False
    raise_listener_errors: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 9002

    model_config = {"env_file": ".env", "extra": "ignore"}


class KeyboardEventKind(str, Enum):
    """The four keyboard visibility events."""

    WILL_SHOW = "keyboard_will_show"
    DID_SHOW = "keyboard_did_show"
    WILL_HIDE = "keyboard_will_hide"
    DID_HIDE = "keyboard_did_hide"

    @property
    def callback_name(self) -> str:
        """Name of the listener method this event is delivered to."""
        return _CALLBACK_NAMES[self]

    @property
    def is_will(self) -> bool:
        return self in (KeyboardEventKind.WILL_SHOW, KeyboardEventKind.WILL_HIDE)


_CALLBACK_NAMES = {
    KeyboardEventKind.WILL_SHOW: "will_show_keyboard",
    KeyboardEventKind.DID_SHOW: "did_show_keyboard",
    KeyboardEventKind.WILL_HIDE: "will_hide_keyboard",
    KeyboardEventKind.DID_HIDE: "did_hide_keyboard",
}


class Point(BaseModel):
    x: float
    y: float


class Size(BaseModel):
    width: float
    height: float


class Rect(BaseModel):
    """Axis-aligned rectangle in screen coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> Point:
        return Point(x=self.x, y=self.y)

    @property
    def size(self) -> Size:
        return Size(width=self.width, height=self.height)


class KeyboardNotification(BaseModel):
    """A keyboard event as delivered to listeners."""

    kind: KeyboardEventKind
    user_info: dict[str, Any] = {}
    received_at: str

    @property
    def keyboard_frame(self) -> Rect | None:
        """Final keyboard frame, or None if the payload lacks a usable one."""
        value = self.user_info.get(KEYBOARD_FRAME_END_KEY)
        if isinstance(value, Rect):
            return value
        if isinstance(value, Mapping):
            try:
                return Rect.model_validate(dict(value), strict=True)
            except ValidationError:
                logger.debug(f"Ignoring malformed keyboard frame: {value!r}")
        return None

    @property
    def keyboard_size(self) -> Size | None:
        frame = self.keyboard_frame
        return frame.size if frame is not None else None
