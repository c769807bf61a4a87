"""
Logging adapter that implements LoggingPort protocol.

This adapter wraps structlog to provide a clean interface for the application layer.
"""
from typing import Any
from domain.interfaces import BoundLogger
from infrastructure.logging.structlog_logs import logger as structlog_logger


class StructlogBoundLogger:
    """
    Wrapper for structlog bound logger that implements BoundLogger protocol.
    """
    
    def __init__(self, bound_logger):
        self._logger = bound_logger
    
    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, **kwargs)
    
    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, **kwargs)
    
    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.error(event, exc_info=exc_info, **kwargs)


class LoggingAdapter:
    """
    Adapter that implements LoggingPort for structured JSON logging.

    Context given at construction (e.g. the request id) is attached to every
    logger handed out by ``bind``.
    """

    def __init__(self, **base_context: Any):
        self._base_context = base_context
    
    def bind(self, **kwargs: Any) -> BoundLogger:
        """
        Create a bound logger with context.
        
        Args:
            **kwargs: Context fields to bind to all log messages
            
        Returns:
            A bound logger with the base context plus the given fields
        """
        bound_logger = structlog_logger.bind(**self._base_context, **kwargs)
        return StructlogBoundLogger(bound_logger)
