import logging

import orjson
import structlog
from structlog.types import FilteringBoundLogger


def _orjson_serializer(*args, **kwargs) -> str:
    return orjson.dumps(*args, **kwargs).decode('utf-8')


def _create_log_handler(json_output: bool) -> logging.Handler:
    """Create the stream handler rendering structlog events."""
    if json_output:
        renderer = structlog.processors.JSONRenderer(serializer=_orjson_serializer)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, structlog.processors.format_exc_info, renderer]
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger backed by the standard library logger ``name``.

    Until :func:`configure_logging` runs, events go through the stdlib logger
    untouched by any handler, so importing the library stays silent.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: str = 'INFO', json_output: bool = False) -> None:
    """Configure structlog with standard library integration.

    The library itself never calls this; applications embedding it decide
    whether and how its debug events are rendered.
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        handlers=[_create_log_handler(json_output)],
        format='%(message)s',  # structlog will handle formatting
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt='ISO', utc=True),
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
