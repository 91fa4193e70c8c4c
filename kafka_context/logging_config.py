"""Logging configuration and setup."""

import logging
import logging.handlers
import json
from typing import Dict, Any
from datetime import datetime, timezone
from kafka_context.config import config


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        # Add extra fields if present
        if hasattr(record, 'context'):
            log_entry['context'] = record.context
        if hasattr(record, 'operation'):
            log_entry['operation'] = record.operation

        return json.dumps(log_entry)


class AuditLogger:
    """Specialized logger for context changes."""

    def __init__(self):
        self.logger = logging.getLogger('kafka_context.audit')

    def log_context_operation(self, context_name: str, operation: str,
                              details: Dict[str, Any] = None):
        """Log a change to a stored context."""
        extra = {
            'context': context_name,
            'operation': operation
        }

        message = f"Context operation: {operation} on context {context_name}"
        if details:
            message += f" - Details: {json.dumps(details)}"

        self.logger.info(message, extra=extra)


def setup_logging():
    """Set up logging configuration."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.logging.level.upper()))

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    if config.logging.file_path:
        file_handler = logging.handlers.RotatingFileHandler(
            config.logging.file_path,
            maxBytes=config.logging.max_file_size,
            backupCount=config.logging.backup_count
        )
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logging.getLogger('kafka_context').setLevel(logging.DEBUG)
    # kafka-python is noisy on failed bootstrap attempts
    logging.getLogger('kafka').setLevel(logging.WARNING)


audit_logger = AuditLogger()
