"""Request accounting for the permission service."""

from .events import AccessEvent, PermissionRejection, outcome_for
from .middleware import LoggingMiddleware, record_rejection
from .sinks import CompositeLogSink, FileLogSink, LogSink, build_default_sink

__all__ = [
    "AccessEvent",
    "CompositeLogSink",
    "FileLogSink",
    "LogSink",
    "LoggingMiddleware",
    "PermissionRejection",
    "build_default_sink",
    "outcome_for",
    "record_rejection",
]
