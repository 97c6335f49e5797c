"""Diagnostics channel for localization.

Subscribers register per event type ("warning" or "error") and are called
synchronously, in registration order, whenever a DiagnosticEvent is emitted.
"""

from typing import Any, Callable, Dict, List

from localization.logging import get_module_logger
from localization.models import DiagnosticEvent

logger = get_module_logger()

DiagnosticHandler = Callable[[DiagnosticEvent], Any]

EVENT_TYPES = ("warning", "error")


class DiagnosticsEmitter:
    """In-process registry of diagnostic subscribers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, List[DiagnosticHandler]] = {}

    def on(self, event_type: str, handler: DiagnosticHandler) -> DiagnosticHandler:
        """Register a handler for an event type.

        Args:
            event_type: "warning" or "error".
            handler: Callable receiving the DiagnosticEvent.

        Returns:
            The registered handler.

        Raises:
            ValueError: If event_type is not a known diagnostic type.
        """
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown diagnostic event type: {event_type}")

        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "registered_diagnostic_handler",
            handler=getattr(handler, "__name__", "unknown"),
            event_type=event_type,
            total_handlers=len(self._handlers[event_type]),
        )
        return handler

    def off(self, event_type: str, handler: DiagnosticHandler) -> None:
        """Remove a previously registered handler, if present."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def clear(self) -> None:
        """Remove every registered handler."""
        self._handlers.clear()

    def handler_count(self, event_type: str) -> int:
        return len(self._handlers.get(event_type, []))

    def emit(self, event: DiagnosticEvent) -> List[Any]:
        """Log the event and dispatch it to the handlers of its type.

        A handler that raises is logged and skipped; the remaining handlers
        still receive the event.

        Args:
            event: The diagnostic to publish.

        Returns:
            List of return values from the handlers that succeeded.
        """
        if event.event == "error":
            logger.error("localization_error", message=event.message)
        else:
            logger.warning("localization_warning", message=event.message)

        results = []
        for handler in list(self._handlers.get(event.event, [])):
            try:
                results.append(handler(event))
            except Exception as e:  # pylint: disable=broad-except
                logger.error(
                    "diagnostic_handler_failed",
                    handler=getattr(handler, "__name__", "unknown"),
                    event_type=event.event,
                    error=str(e),
                )
        return results
