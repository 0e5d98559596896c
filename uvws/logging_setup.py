# uvws/logging_setup.py
"""
structlog configuration for the uvws command line.

Log records go to stderr on the "uvws" stdlib logger, so stdout only ever
carries the computed paths.
"""
import logging
import sys
from typing import List

import structlog
from structlog.typing import Processor

VERBOSITY_TO_LEVEL = {0: "warning", 1: "info", 2: "debug"}

def level_for_verbosity(verbosity: int) -> str:
    # -v is info, -vv and beyond is debug.
    return VERBOSITY_TO_LEVEL[min(max(verbosity, 0), 2)]

def _processors(json_logs: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]
    if json_logs:
        # machine consumers get timestamps and flattened tracebacks.
        processors += [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
        ]
    else:
        processors.append(structlog.dev.set_exc_info)
    processors.append(structlog.stdlib.ProcessorFormatter.wrap_for_formatter)
    return processors

def configure_logging(log_level_str: str = "warning", force_json_logs: bool = False):
    log_level = getattr(logging, log_level_str.upper(), logging.WARNING)

    structlog.configure(
        processors=_processors(force_json_logs),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if force_json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[structlog.stdlib.add_log_level],
    ))

    uvws_logger = logging.getLogger("uvws")
    uvws_logger.handlers.clear()
    uvws_logger.addHandler(handler)
    uvws_logger.setLevel(log_level)
    uvws_logger.propagate = False

    structlog.get_logger(__name__).debug("logging_configured", level=log_level_str, json=force_json_logs)
