"""Structured logging for Imaginify, built on structlog.

Every module logs through ``get_logger(__name__)`` with snake_case event
names (``token_fallback``, ``theme_mode_changed``, ``presence_transition``,
``external_call_failed``) and keyword context. ``configure_logging`` picks
the renderer from settings:

- console: colored, human-readable lines for development
- json: one JSON object per event, tagged with app name, version and
  environment, for production
"""

import logging
import sys
from collections.abc import Mapping
from contextvars import Token
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from imaginify.config import Settings, get_settings

# Loggers of the NiceGUI stack that flood the output at DEBUG.
_NOISY_LOGGERS = ("nicegui", "uvicorn.access", "uvicorn.error", "watchfiles", "asyncio")


def _add_log_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Upper-case level name under ``level`` for JSON consumers."""
    event_dict["level"] = ("warning" if method_name == "warn" else method_name).upper()
    return event_dict


def _add_app_context(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment.value
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def get_console_processors() -> list[Processor]:
    """Processors for colored development output."""
    return [
        structlog.stdlib.add_log_level,
        *_shared_processors(),
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def get_json_processors() -> list[Processor]:
    """Processors for JSON production output."""
    return [
        _add_log_level,
        _add_app_context,
        *_shared_processors(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the stdlib root logger from settings.

    Call once at startup, before the first log event. Loggers are cached
    on first use, so later reconfiguration does not reach loggers that
    have already logged.
    """
    if settings is None:
        settings = get_settings()

    level = getattr(logging, settings.log_level.value)
    processors = get_json_processors() if settings.log_format == "json" else get_console_processors()

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    if settings.log_file:
        _add_file_handler(settings.log_file, level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))


def _add_file_handler(log_file: Path, level: int) -> None:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logging.getLogger().addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Example:
        logger = get_logger(__name__)
        logger.info("theme_mode_changed", previous="light", current="dark")
    """
    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> Mapping[str, Token[Any]]:
    """Bind values to every later log event in the current context.

    Returns the contextvar tokens, which ``LogContext`` uses to restore
    the previous bindings.

    Example:
        bind_context(user_id="user_123")
        logger.info("credits_charged", fee=1)  # includes user_id
    """
    return structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Bind log context for a block, restoring outer bindings afterwards.

    Example:
        with LogContext(user_id=user_id):
            with LogContext(image_id=image_id):
                save_transformation(repository, transformer, record)
            logger.info("credits_charged", fee=1)  # user_id only
    """

    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs
        self._tokens: Mapping[str, Token[Any]] = {}

    def __enter__(self) -> "LogContext":
        self._tokens = bind_context(**self.kwargs)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.reset_contextvars(**self._tokens)
