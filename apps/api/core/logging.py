"""Structured logging with structlog.

JSON lines in production, colorized console in development. Forwarded
notifications carry phone numbers and UPI handles, so every event passes
through ``mask_pii`` before it is rendered.

Usage:
    import structlog
    logger = structlog.get_logger()
    logger.info("sync_saved", amount=250.0, merchant="ZOMATO")
"""

import logging
import re
import sys

import structlog


PII_PATTERNS = {
    "UPI": re.compile(r"[a-zA-Z0-9.\-_]{2,}@[a-zA-Z]{2,}"),
    "PHONE": re.compile(r"(?<!\d)(?:\+?91|0)?[6-9]\d{9}(?!\d)"),
    "ACCOUNT": re.compile(r"[Xx]{2,}\d{3,6}"),
}


def _mask(value: str) -> str:
    for label, pattern in PII_PATTERNS.items():
        value = pattern.sub(f"<{label}>", value)
    return value


def mask_pii(logger, method_name: str, event_dict: dict) -> dict:
    """structlog processor replacing phone numbers, UPI handles and masked
    account numbers in string values with placeholders."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _mask(value)
    return event_dict


def setup_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Configure structured logging for the application.

    Args:
        log_level: Python log level string (DEBUG, INFO, WARNING, ERROR).
        json_output: If True, use JSON renderer (production). If False,
                     use colorized console renderer (development).
    """
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        mask_pii,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )
