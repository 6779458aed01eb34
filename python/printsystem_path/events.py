"""In-process event bus for resolution outcomes.

This module provides the ResolutionEvents class that wraps pyee's
EventEmitter so the hosting print subsystem can observe which transport
each PathResolver chose.

Example:
    >>> from printsystem_path import EventNames, PathResolver, ResolutionEvents
    >>>
    >>> events = ResolutionEvents.instance()
    >>> events.start()
    >>> events.subscribe(EventNames.PROTOCOL_RESOLVED, lambda result: print(result.path))
    >>>
    >>> PathResolver.default(properties, events=events).resolve()
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyee.base import EventEmitter

from .logging import log_debug, log_info, log_warn


class EventNames:
    """Constants for event names published during resolution.

    Attributes:
        PROTOCOL_RESOLVED: A chain produced a non-UNKNOWN result (ProtocolResult).
        PROTOCOL_UNRESOLVED: A chain fell through to UNKNOWN (ProtocolResult).
    """

    PROTOCOL_RESOLVED = "protocol.resolved"
    PROTOCOL_UNRESOLVED = "protocol.unresolved"


class ResolutionEvents:
    """Pub/sub bus for resolution outcomes.

    Events are only delivered while the bus is active. A process-wide
    instance is available through instance(); independent buses can be
    constructed directly.
    """

    _instance: ResolutionEvents | None = None

    def __init__(self) -> None:
        """Create an inactive bus backed by a fresh pyee EventEmitter."""
        self._emitter = EventEmitter()
        self._active = False

    @classmethod
    def instance(cls) -> ResolutionEvents:
        """Get the process-wide ResolutionEvents instance.

        Returns:
            The shared instance.
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Stop and discard the shared instance (primarily for tests)."""
        if cls._instance is not None:
            cls._instance.stop()
        cls._instance = None

    @property
    def is_active(self) -> bool:
        """Check whether events are being delivered."""
        return self._active

    def start(self) -> None:
        """Activate the bus. No-op if already active."""
        if self._active:
            return
        self._active = True
        log_info("ResolutionEvents started")

    def stop(self) -> None:
        """Deactivate the bus and remove all listeners. No-op if inactive."""
        if not self._active:
            return
        self._active = False
        self._emitter.remove_all_listeners()
        log_info("ResolutionEvents stopped")

    def subscribe(self, event: str, handler: Callable[..., Any]) -> None:
        """Subscribe to an event.

        Args:
            event: Event name to subscribe to.
            handler: Callback invoked with the published arguments.
        """
        self._emitter.on(event, handler)
        handler_name = getattr(handler, "__name__", str(handler))
        log_debug(f"Subscribed to {event}: {handler_name}")

    def subscribe_once(self, event: str, handler: Callable[..., Any]) -> None:
        """Subscribe to an event for a single invocation.

        Args:
            event: Event name to subscribe to.
            handler: Callback invoked once.
        """
        self._emitter.once(event, handler)
        handler_name = getattr(handler, "__name__", str(handler))
        log_debug(f"Subscribed once to {event}: {handler_name}")

    def unsubscribe(self, event: str, handler: Callable[..., Any]) -> None:
        """Unsubscribe from an event.

        Args:
            event: Event name to unsubscribe from.
            handler: The handler callback to remove.
        """
        self._emitter.remove_listener(event, handler)
        handler_name = getattr(handler, "__name__", str(handler))
        log_debug(f"Unsubscribed from {event}: {handler_name}")

    def publish(self, event: str, *args: Any, **kwargs: Any) -> None:
        """Publish an event to all subscribers.

        Dropped with a warning when the bus is not active.

        Args:
            event: Event name to publish.
            *args: Positional arguments passed to handlers.
            **kwargs: Keyword arguments passed to handlers.
        """
        if not self._active:
            log_warn(f"ResolutionEvents not active, dropping event: {event}")
            return

        log_debug(f"Publishing event: {event}")
        self._emitter.emit(event, *args, **kwargs)

    def listener_count(self, event: str) -> int:
        """Get the number of listeners for an event."""
        return len(self._emitter.listeners(event))


__all__ = [
    "EventNames",
    "ResolutionEvents",
]
