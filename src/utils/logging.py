"""
JSON-lines logging for the product Lambda.

Every record is a single JSON object on stdout (CloudWatch keeps one line per
event) carrying the correlation id of the AppSync request.
"""

import json
import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_LEVELS = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARNING": logging.WARNING, "ERROR": logging.ERROR}


class StructuredLogger:
    """
    Emits structured records tagged with a correlation id.

    The threshold comes from ``LOG_LEVEL`` (default INFO). Extra keyword
    arguments become top-level keys; keys whose value is None are dropped.

    Example:
        logger = StructuredLogger(__name__)
        logger.info("Created product", productId="3f2c...", category="books")
    """

    def __init__(self, name: str, correlation_id: Optional[str] = None) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
        self.correlation_id = correlation_id or str(uuid.uuid4())

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(_LEVELS[level]):
            return

        record: Dict[str, Any] = dict(
            timestamp=datetime.now(timezone.utc).isoformat(),
            level=level,
            logger=self.logger.name,
            message=message,
            correlationId=self.correlation_id,
        )
        record.update(kwargs)

        print(json.dumps({key: value for key, value in record.items() if value is not None}, default=str))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)


def get_logger(name: str, correlation_id: Optional[str] = None) -> StructuredLogger:
    """Create a structured logger, optionally bound to a correlation ID."""
    return StructuredLogger(name, correlation_id)


def get_correlation_id(event: Dict[str, Any]) -> str:
    """
    Correlation id for an invocation.

    Uses the AppSync ``requestContext.requestId`` when present, then an
    ``x-correlation-id`` request header, otherwise a fresh UUID.
    """
    request_id = (event.get("requestContext") or {}).get("requestId")
    if request_id is not None:
        return str(request_id)

    headers = (event.get("request") or {}).get("headers") or {}
    header_id = headers.get("x-correlation-id")
    if header_id is not None:
        return str(header_id)

    return str(uuid.uuid4())
