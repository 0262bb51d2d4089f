"""
Keyboard Notifications - Entry point.

Watches the on-screen keyboard and fans its show/hide events out to
registered listeners. Supports Linux (D-Bus).
"""

from keyboard_notifications.core import Settings
from keyboard_notifications.server import app

__all__ = ["app"]


def main() -> None:
    """Run the server."""
    import uvicorn

    settings = Settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
