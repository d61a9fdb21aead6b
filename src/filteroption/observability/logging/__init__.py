"""Observability – structlog configuration and logger access."""
from filteroption.observability.logging.factory import JsonLoggerFactory
from filteroption.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
