"""Tests for structured logging configuration."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from imaginify.config import Settings
from imaginify.logging_config import (
    _add_app_context,
    _add_log_level,
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    structlog.reset_defaults()
    clear_context()


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    def test_production_renders_json(self) -> None:
        configure_logging(Settings(environment="production"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self) -> None:
        configure_logging(Settings(environment="development"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_log_file_handler(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "imaginify.log"

        configure_logging(Settings(log_file=log_file))

        assert log_file.exists()
        assert any(
            isinstance(handler, logging.FileHandler) for handler in logging.getLogger().handlers
        )

    def test_quiets_third_party_loggers(self) -> None:
        configure_logging(Settings(log_level="DEBUG"))

        assert logging.getLogger("uvicorn.access").level == logging.INFO


@pytest.mark.usefixtures("restore_logging")
class TestLogContext:
    def test_binds_and_unbinds(self) -> None:
        with LogContext(image_id="img_1"):
            assert structlog.contextvars.get_contextvars() == {"image_id": "img_1"}

        assert structlog.contextvars.get_contextvars() == {}

    def test_bind_helpers(self) -> None:
        bind_context(user_id="user_1", image_id="img_1")
        unbind_context("image_id")

        assert structlog.contextvars.get_contextvars() == {"user_id": "user_1"}

    def test_get_logger_emits_events(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("imaginify.test").info("theme_mode_changed", current="dark")

        assert logs == [{"event": "theme_mode_changed", "log_level": "info", "current": "dark"}]

    def test_nested_context_restores_outer_binding(self) -> None:
        bind_context(image_id="outer")

        with LogContext(image_id="inner", user_id="user_1"):
            assert structlog.contextvars.get_contextvars() == {
                "image_id": "inner",
                "user_id": "user_1",
            }

        assert structlog.contextvars.get_contextvars() == {"image_id": "outer"}


class TestJsonProcessors:
    def test_app_context(self) -> None:
        event = _add_app_context(None, "info", {"event": "theme_mode_changed"})

        assert event == {
            "event": "theme_mode_changed",
            "app": "Imaginify",
            "version": "0.1.0",
            "environment": "development",
        }

    def test_level_is_upper_case(self) -> None:
        assert _add_log_level(None, "warn", {})["level"] == "WARNING"
