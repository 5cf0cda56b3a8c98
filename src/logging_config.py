"""
Logging setup for challan reconciliation runs.

Console output is structured JSON by default; every record carries a
timestamp, level, logger name, message and the service it came from.
"""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "challan-recon"


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter that stamps the standard fields onto every record."""

    def __init__(self, *args, service: str = SERVICE_NAME, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["name"] = record.name
        log_record["service"] = self.service

        if "message" not in log_record:
            log_record["message"] = record.getMessage()


def setup_logging(level=logging.INFO, format_as_json=True, service=SERVICE_NAME):
    """
    Route all loggers to stdout.

    Args:
        level: Logging level (default: INFO)
        format_as_json: If True, emit JSON lines; if False, plain text
        service: Value of the ``service`` field in JSON output
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace handlers so repeated calls don't duplicate output
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if format_as_json:
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
            service=service,
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
