"""FastAPI server module."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from keyboard_notifications.core import Settings
from keyboard_notifications.registry import get_registry, shutdown_registry
from keyboard_notifications.sources import default_center, get_bridge
from keyboard_notifications.sources.base import KeyboardBridge

settings = Settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Global state
bridge: KeyboardBridge | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    global bridge

    # Subscribe the registry before the bridge starts posting
    get_registry()
    bridge = get_bridge()

    await bridge.start(default_center().post)
    yield
    await bridge.stop()
    shutdown_registry()


app = FastAPI(
    title="Keyboard Notifications",
    description="Fans on-screen keyboard show/hide events out to registered listeners.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "bridge_running": str(bridge is not None and bridge.is_running),
    }


@app.get("/status")
async def status() -> dict[str, Any]:
    """Get registry status."""
    registry = get_registry()
    observers = registry.observers
    strong = sum(1 for o in observers if o.keep_alive)
    return {
        "running": bridge is not None and bridge.is_running,
        "subscribed": registry.is_subscribed,
        "observers": len(observers),
        "strong_observers": strong,
        "weak_observers": len(observers) - strong,
        "compact_on_every_dispatch": registry.settings.compact_on_every_dispatch,
    }
