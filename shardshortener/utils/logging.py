"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at process start, before any
other logging is done. The level comes from `LOG_LEVEL`, then the
`log_level` key of the YAML config file, then `INFO`.

Logging format (one JSON object per line on stdout):
{
    "timestamp": "2026-10-17T12:00:00.000Z",
    "level": "INFO",
    "logger": "shardshortener.service",
    "message": "Created short URL.",
    "shortcode": "A0aaaaab",
    "event": "SHORT_URL_CREATED"
}
"""

import json
import logging
import logging.config
from datetime import datetime, UTC

from shardshortener.utils.config import load_config, log_level


# Attributes every LogRecord carries; anything else was passed via `extra`
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.INFO, '', 0, '', None, None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render log records, including their `extra` fields, as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        payload = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)

        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        for key, value in extras.items():
            payload.setdefault(key, value)

        return json.dumps(payload, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Route the root logger through JsonFormatter to stdout.

    Args:
        level (str | None):
            Explicit log level. Defaults to the configured one (see module docstring).
    """
    level = (level or log_level(load_config())).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {'level': level, 'handlers': ['stdout']},
        }
    )
