"""Structured logging configuration using structlog."""

import logging
import re
import sys
from pathlib import Path
from typing import Optional

import structlog

_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Event keys whose values are journal prose; only the length is logged
_PRIVATE_KEYS = frozenset({"text", "entry_text"})


def _redact_sensitive(_, __, event_dict: dict) -> dict:
    """Structlog processor that masks emails and journal text."""
    for key, value in event_dict.items():
        if not isinstance(value, str):
            continue
        if key in _PRIVATE_KEYS:
            event_dict[key] = f"<{len(value)} chars>"
        else:
            event_dict[key] = _EMAIL_RE.sub("REDACTED@email", value)
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            [
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _redact_sensitive,
    ]


def _handler(handler: logging.Handler, renderer, level: int) -> logging.Handler:
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    handler.setLevel(level)
    return handler


def setup_logging(
    json_mode: bool = False,
    level: str = "INFO",
    log_file: Optional[Path] = None,
    file_level: str = "DEBUG",
) -> None:
    """Route stdlib and structlog output through one set of handlers.

    Args:
        json_mode: JSON lines on stderr (API server) instead of the
                   coloured console renderer (CLI).
        level: stderr level name.
        log_file: Optional path that also receives JSON lines.
        file_level: Level name for ``log_file``.
    """
    console_level = getattr(logging, level.upper(), logging.INFO)
    renderer = structlog.processors.JSONRenderer() if json_mode else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_handler(logging.StreamHandler(sys.stderr), renderer, console_level))
    root.setLevel(console_level)

    if log_file:
        file_log_level = getattr(logging, file_level.upper(), logging.DEBUG)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(
            _handler(logging.FileHandler(log_file), structlog.processors.JSONRenderer(), file_log_level)
        )
        root.setLevel(min(console_level, file_log_level))
