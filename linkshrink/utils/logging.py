"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` before any other logging is done.
The handlers package does this on import.

Logging format:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkshrink.services.link_service",
    "message": "Created short link."
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkshrink.constants import ENV
from linkshrink.utils.helpers import format_timestamp


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras (`extra={...}` fields)"""

    # Attributes every LogRecord carries; anything else came in through `extra`
    RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', None, None))) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': format_timestamp(datetime.fromtimestamp(record.created, tz=UTC)),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Extras never override the standard fields
        for key, value in vars(record).items():
            if key not in self.RESERVED_ATTRS:
                log.setdefault(key, value)

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
