"""Structlog logger factory for jpackwrap."""

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The logger name, usually __name__

    Returns:
        A bound structlog logger instance

    Note: For exception logging with debug stack traces, use this pattern:
        try:
            # some operation
        except Exception as e:
            exc_info = logger.isEnabledFor(logging.DEBUG)
            logger.error("operation_failed", error=str(e), exc_info=exc_info)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


class StructlogMixin:
    """Mixin class to add structured logging capabilities to services.

    The logger is created lazily and bound with the service class name, plus
    ``service_name`` when the class defines one.
    """

    _logger: structlog.stdlib.BoundLogger | None = None

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        """Get or create a logger for this service with bound context."""
        if self._logger is None:
            context = {"service": self.__class__.__name__}
            if hasattr(self, "service_name"):
                context["service_name"] = self.service_name
            self._logger = get_struct_logger(self.__class__.__module__).bind(**context)
        return self._logger
