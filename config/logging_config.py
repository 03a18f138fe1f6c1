import json
import logging
import sys
from datetime import date, datetime
from decimal import Decimal
from typing import Any

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RECORD_ATTRS = frozenset(logging.LogRecord('', 0, '', 0, '', (), None).__dict__) | {
    'message',
    'asctime',
}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Fields attached to a record with ``logger.info(..., extra={...})``."""
    return {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRS}


class RateJSONEncoder(json.JSONEncoder):
    """Keeps rates exact: Decimal goes out as a string, never as a float."""

    def default(self, o):
        if isinstance(o, Decimal):
            return str(o)
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        return super().default(o)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        context = record_context(record)
        if context:
            entry['context'] = context

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, cls=RateJSONEncoder)


class ConsoleFormatter(logging.Formatter):
    """Pipe-separated line with any ``extra`` context appended as key=value pairs."""

    FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'

    def __init__(self):
        super().__init__(self.FORMAT, datefmt='%H:%M:%S')

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = record_context(record)
        if context:
            line += ' | ' + ' '.join(f'{key}={value}' for key, value in context.items())
        return line


def configure_logging(level: str = 'INFO', json_logs: bool = False) -> None:
    """Install a single stdout handler on the root logger."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    logging.getLogger('httpx').setLevel(logging.WARNING)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if json_logs else ConsoleFormatter())
    root_logger.addHandler(handler)
