import logging
import re
import sys
from typing import Any, List, MutableMapping

import structlog
from structlog.types import Processor

LOGGER_NAME = "ratelimit_statsd"

_SENSITIVE_PATTERNS = [
    # API keys and tokens
    (re.compile(r'(["\']?(?:api[_-]?)?(?:key|token|secret|password|passwd|pwd)["\']?\s*[:=]\s*["\']?)([^"\'\s]+)(["\']?)',
                re.IGNORECASE),
     r'\1***API_KEY_OR_TOKEN_REDACTED***\3'),
    # Bearer tokens
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-_]+)', re.IGNORECASE), r'\1***BEARER_TOKEN_REDACTED***'),
    # Generic URLs with credentials
    (re.compile(r'(https?://[^:/\s]+:)([^@\s]+)(@)', re.IGNORECASE), r'\1***URL_CREDS_REDACTED***\3'),
]


def sanitize_sensitive_data(data: str) -> str:
    """Mask credentials that may end up in log messages."""
    for pattern, replacement in _SENSITIVE_PATTERNS:
        data = pattern.sub(replacement, data)
    return data


def redact_event(
        logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = sanitize_sensitive_data(value)
    return event_dict


PROCESSORS: List[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.format_exc_info,
    redact_event,
    structlog.processors.JSONRenderer(ensure_ascii=False),
]


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Logger over the stdlib logger ``name``, independent of global structlog config.

    Output only goes where stdlib logging sends it, so nothing is written until
    ``setup_logger`` (or the embedding application) installs a handler.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
    return logger


def setup_logger(log_level: str = "INFO") -> structlog.stdlib.BoundLogger:
    """Route structlog through the stdlib ``ratelimit_statsd`` logger as JSON on stderr.

    stdout is left alone so generated configuration can be piped.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.handlers.clear()
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(level)
    stdlib_logger.propagate = False

    structlog.configure(
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return get_logger(LOGGER_NAME)
