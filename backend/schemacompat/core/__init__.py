"""Core functionality for property compatibility checks."""

from .logging import bind_context, clear_context, configure_logging, get_logger
from .schema import JSONValue, Property, PropertyLoadError

__all__ = [
    "JSONValue",
    "Property",
    "PropertyLoadError",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
