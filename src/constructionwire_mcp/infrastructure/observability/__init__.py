from .lifecycle_event_logger import LifecycleEventLogger
from .logger_factory_service import configure_logging, get_logger
from .redaction_service import redact_dict, redact_text
from .tracing_setup import configure_tracing, get_tracer

__all__ = [
    "LifecycleEventLogger",
    "configure_logging",
    "configure_tracing",
    "get_logger",
    "get_tracer",
    "redact_dict",
    "redact_text",
]
