# src/tasktrack/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The remote-call simulation depends on Protocols instead of concrete
implementations, so tests can swap in a recording bus or an instant sleeper.
"""

from datetime import datetime
from typing import Any, Awaitable, Callable, Protocol

EventHandler = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class EventPublisher(Protocol):
    """Publish/subscribe channel for task notifications."""

    def subscribe(self, channel: str, handler: EventHandler) -> Unsubscribe: ...
    def publish(self, channel: str, payload: Any) -> int: ...


class Sleeper(Protocol):
    """Awaitable delay (asyncio.sleep-compatible) used to simulate latency."""

    def __call__(self, delay: float) -> Awaitable[None]: ...


class Clock(Protocol):
    """Returns "now" as a timezone-aware datetime."""

    def __call__(self) -> datetime: ...


class TransportFailureHook(Protocol):
    """Fault-injection seam: return True to make the simulated call fail."""

    def __call__(self) -> bool: ...
