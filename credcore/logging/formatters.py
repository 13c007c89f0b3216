"""
Custom log formatters.

This module contains formatters that determine how log records are formatted.
Currently supports JSON formatting for structured logging.
"""

import json
import logging
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.

    Each record carries timestamp, level, logger name and message. When the
    record holds exception info, the formatted traceback is added under
    ``exc_info``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the specified record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string containing the formatted log record
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_data)
