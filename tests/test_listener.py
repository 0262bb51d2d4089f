"""Tests for the KeyboardListener base class."""

import pytest

from keyboard_notifications.core import KeyboardEventKind
from keyboard_notifications.listener import KeyboardListener
from keyboard_notifications.registry import KeyboardNotificationRegistry, get_registry
from keyboard_notifications.sources.center import NotificationCenter


class ResizingView(KeyboardListener):
    """Listener that tracks how much room the keyboard takes."""

    def __init__(self):
        self.bottom_inset = 0.0

    def will_show_keyboard(self, event):
        size = event.keyboard_size
        self.bottom_inset = size.height if size else 0.0

    def will_hide_keyboard(self, event):
        self.bottom_inset = 0.0


class TestKeyboardListener:
    """Tests for default callbacks and registration helpers."""

    @pytest.fixture
    def center(self):
        return NotificationCenter()

    @pytest.fixture
    def registry(self, center):
        registry = KeyboardNotificationRegistry(source=center)
        yield registry
        registry.close()

    def test_default_callbacks_are_noops(self, center):
        """Test an unmodified listener accepts every event kind."""
        listener = KeyboardListener()
        for kind in KeyboardEventKind:
            getattr(listener, kind.callback_name)(center.post(kind))

    def test_register_helpers_with_injected_registry(self, registry, center):
        """Test the helpers register and deregister self."""
        view = ResizingView()

        view.register_keyboard_notifications(registry=registry)
        assert registry.is_registered(view)

        center.post(
            KeyboardEventKind.WILL_SHOW,
            {"keyboard_frame_end": {"x": 0, "y": 400, "width": 320, "height": 260}},
        )
        assert view.bottom_inset == 260

        center.post(KeyboardEventKind.WILL_HIDE)
        assert view.bottom_inset == 0.0

        view.deregister_keyboard_notifications(registry=registry)
        assert not registry.is_registered(view)

    def test_register_helpers_keep_alive(self, registry):
        """Test keep_alive is passed through."""
        view = ResizingView()
        view.register_keyboard_notifications(keep_alive=True, registry=registry)

        assert registry.observers[0].keep_alive is True

    def test_register_helpers_default_to_process_registry(self):
        """Test the helpers use the process registry when none is given."""
        view = ResizingView()

        view.register_keyboard_notifications()
        assert get_registry().is_registered(view)

        view.deregister_keyboard_notifications()
        assert not get_registry().is_registered(view)
