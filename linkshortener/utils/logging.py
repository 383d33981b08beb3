"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once in the entry point (the CLI does
this in `main()`) before any other logging is done.

Records are written to stderr, one JSON object per line:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkshortener.services.link_engine",
    "message": "Link created.",
    "linkId": "aB3dE6gH"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from linkshortener.constants import ENV


DEFAULT_LOG_LEVEL = 'WARNING'


class JsonFormatter(logging.Formatter):
    """Render a LogRecord as one JSON object, `extra` fields included.

    Link and user identifiers are passed as `extra` (`linkId`, `ownerId`,
    `userId`, ...) and end up as top-level keys, next to the standard
    timestamp, level, logger and message fields.
    """

    # Attributes every LogRecord carries; anything else came in through `extra`
    STANDARD_ATTRS = frozenset(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None).__dict__) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update((key, value) for key, value in record.__dict__.items() if key not in self.STANDARD_ATTRS)

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # datetimes and other non-JSON extras are stringified
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Configure the root logger with the JSON formatter

    The handler writes to stderr: stdout belongs to the interactive shell,
    whose prompts, command output and notifications must stay readable.

    Args:
        level (str | None):
            Log level name. Falls back to `LOG_LEVEL`, then to WARNING.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper()
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
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stderr'],
            },
        }
    )
