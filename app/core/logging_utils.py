import logging
import json
import datetime as dt
from typing import Dict, Any, Optional, Set

# Attributes from LogRecord that are often included by default or are special
LOG_RECORD_BUILTIN_ATTRS: Set[str] = {
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module", "msecs",
    "message", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "taskName", "thread", "threadName",
}

class JSONLogFormatter(logging.Formatter):
    """
    Renders each record as a single JSON object.

    `fmt_keys` maps output keys to LogRecord attribute names, e.g.
    {"level": "levelname", "logger": "name"}. The message and timestamp are
    always present, and anything passed through `extra=` is appended as-is.
    """

    def __init__(self, *, fmt_keys: Optional[Dict[str, str]] = None, datefmt: Optional[str] = None):
        super().__init__(datefmt=datefmt)
        self.fmt_keys = fmt_keys if fmt_keys is not None else {}

    def format(self, record: logging.LogRecord) -> str:
        message = self._prepare_log_dict(record)
        return json.dumps(message, default=str)

    def _prepare_log_dict(self, record: logging.LogRecord) -> Dict[str, Any]:
        always_fields = {"message": record.getMessage()}

        if self.datefmt:
            always_fields["timestamp"] = self.formatTime(record, self.datefmt)
        else:  # ISO 8601 in UTC
            always_fields["timestamp"] = dt.datetime.fromtimestamp(
                record.created, tz=dt.timezone.utc
            ).isoformat()

        if record.exc_info:
            always_fields["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            always_fields["stack_info"] = self.formatStack(record.stack_info)

        message_dict = {}
        for key, attr_name in self.fmt_keys.items():
            if attr_name in always_fields:
                message_dict[key] = always_fields[attr_name]
            else:
                val = getattr(record, attr_name, None)
                if val is not None:
                    message_dict[key] = val

        # Keep message/timestamp even when fmt_keys did not ask for them
        for key, value in always_fields.items():
            if key not in self.fmt_keys.values() and key not in message_dict:
                message_dict[key] = value

        # Fields passed via `extra=`
        for key, val in record.__dict__.items():
            if key not in LOG_RECORD_BUILTIN_ATTRS and key not in message_dict and key not in self.fmt_keys.values():
                message_dict[key] = val

        return message_dict
