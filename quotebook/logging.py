import logging
import sys
from typing import List, Optional

import structlog
from quotebook.core.config import settings

def _renderers(env: str) -> List:
    # Loader failures (translations, quotes, fragments) and request lines end
    # up here; tracebacks are kept structured in JSON output.
    if env == "development":
        return [structlog.dev.ConsoleRenderer()]
    return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]

def configure_logging(env: Optional[str] = None, level: Optional[str] = None):
    """
    Configure structlog for the quotes site.

    Events carry the request context bound by LoggingMiddleware and the
    callsite, so a `quotes_load_failed` line points at the loader that
    degraded to empty data. `env` and `level` default to ENV and LOG_LEVEL.
    """
    env = (env or settings.ENV).lower()
    level_no = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.CallsiteParameterAdder(
            {
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            }
        ),
    ] + _renderers(env)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # main.py logs startup through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level_no)

    # Serve-time uvicorn records go to the same stdout stream
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True
