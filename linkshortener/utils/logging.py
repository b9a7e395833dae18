"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at process start (the CLI does this
in `main()`) before any other logging is done.

Logging format (one JSON object per line):
{
    "timestamp": "2026-10-17T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkshortener.store",
    "message": "Link added.",
    "shortId": "k3x9q0"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkshortener.utils.constants import LOG_LEVEL_ENV


class JsonFormatter(logging.Formatter):
    """One JSON object per record

    Besides the base fields every `extra={...}` key is copied in. Values that
    aren't JSON serializable are rendered with `str()`, and a record logged
    with `exc_info` gets its formatted traceback under `exception`.
    """

    # Attributes every LogRecord carries, i.e. everything that is not an extra
    RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec='milliseconds') \
                            .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and key not in log:
                log[key] = value

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    log_level = (level or os.getenv(LOG_LEVEL_ENV, 'INFO')).upper()
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
