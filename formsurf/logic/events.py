"""Synchronous event dispatch between forms and whoever navigates them."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from anystore.logging import get_logger

log = get_logger(__name__)

Handler = Callable[..., Any]


class Event(str, Enum):
    SUBMIT = "submit"


def _key(event: Event | str) -> str:
    if isinstance(event, Event):
        return event.value
    return event


class Dispatcher:
    """Registry of event handlers.

    Handlers are called in registration order with the event source as
    their first argument. An exception raised by a handler propagates to
    the caller of ``do`` untouched and stops the remaining handlers.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def on(self, event: Event | str, handler: Handler) -> Handler:
        """Register a handler for an event. Returns the handler."""
        self._handlers.setdefault(_key(event), []).append(handler)
        return handler

    def off(self, event: Event | str, handler: Handler | None = None) -> None:
        """Remove one handler, or all handlers when none is given."""
        if handler is None:
            self._handlers.pop(_key(event), None)
            return
        handlers = self._handlers.get(_key(event), [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers(self, event: Event | str) -> list[Handler]:
        return list(self._handlers.get(_key(event), []))

    def do(self, event: Event | str, source: Any, *args: Any) -> Any:
        """Invoke the handlers of an event.

        Returns:
            The return value of the last handler, or None when no handler
            is registered.
        """
        handlers = self.handlers(event)
        if not handlers:
            log.debug("No handlers registered", event=_key(event))
        result = None
        for handler in handlers:
            result = handler(source, *args)
        return result

    def __repr__(self) -> str:
        return "<Dispatcher(%s)>" % ", ".join(sorted(self._handlers))
