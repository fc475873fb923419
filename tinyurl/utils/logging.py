"""JSON logging for the tiny URL lambdas

Every lambda package calls `initialize_logging()` on import, so the root logger
writes one JSON object per line to stdout (CloudWatch picks it up from there).
The level comes from `LOG_LEVEL` (default INFO).

Fields:
    timestamp   UTC, millisecond precision, 'Z' suffix.
    level       Record level name.
    logger      Dotted module logger (e.g. 'tinyurl.services.resolver').
    message     Rendered message.
    exception   Formatted traceback; only when logged with exc_info.
    <extras>    Keys passed through `extra={...}`. The services tag records with
                `urlKey` (plus `attempt`, `base10Id`, `liveForever` on generation);
                the handlers add `event`, the response event code
                (e.g. 'TINY_URL_NOT_FOUND'). Values that are not JSON
                serializable (datetimes) are written with str().

Example (redirect of an unknown key):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "tinyurl.lambdas.redirect_url.app",
    "message": "Tiny URL not found. Responding with 404.",
    "urlKey": "27qMi57J",
    "event": "TINY_URL_NOT_FOUND"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from tinyurl.utils.constants import ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        # Extras may carry datetimes and other non-JSON values
        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
