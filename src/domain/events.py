"""
Field-change events raised by invoice entities.

Each observable field owns a ChangeEvent. Handlers are plain callables taking
``(sender, change)`` and are invoked synchronously, in registration order,
before the entity stores the new value.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldChanged:
    """Payload describing a pending field change."""

    field_name: str
    old_value: Any
    new_value: Any


ChangeHandler = Callable[[Any, FieldChanged], None]


class ChangeEvent:
    """Ordered list of handlers for a single observable field."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        self._handlers: list[ChangeHandler] = []

    def subscribe(self, handler: ChangeHandler) -> None:
        """Register a handler. Registering the same handler twice calls it twice."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: ChangeHandler) -> None:
        """Remove the most recent registration of handler; unknown handlers are ignored."""
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return

    def emit(self, sender: Any, old_value: Any, new_value: Any) -> None:
        """Notify every handler registered at the moment of the call.

        Exceptions raised by a handler propagate to the caller and stop dispatch.
        """
        change = FieldChanged(self.field_name, old_value, new_value)
        logger.debug(f"{self.field_name} changing from {old_value} to {new_value}")
        for handler in list(self._handlers):
            handler(sender, change)

    def __len__(self) -> int:
        return len(self._handlers)
