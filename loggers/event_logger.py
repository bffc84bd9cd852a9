import logging

logger = logging.getLogger(__name__)


class EventLogger:
    """Handles logging for the table observer channel."""

    @staticmethod
    def log_handler_error(event_type: str, error: Exception) -> None:
        """Log a listener that raised while handling an event."""
        logger.error(f"Event handler failed for {event_type}: {error}", exc_info=True)
