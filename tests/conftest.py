from collections.abc import Iterator

import pytest

from imaginify.config import get_settings
from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.themes import ThemeContext
from imaginify.integrations.interfaces import Toast, ToastSink


class RecordingToastSink(ToastSink):
    def __init__(self) -> None:
        self.toasts: list[Toast] = []

    def show(self, toast: Toast) -> None:
        self.toasts.append(toast)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from IMG_* variables and cached settings."""
    for key in ("IMG_TOKEN_LOOKUP_POLICY", "IMG_DEFAULT_THEME_MODE", "IMG_FALLBACK_COLOR"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def toast_sink() -> RecordingToastSink:
    return RecordingToastSink()


@pytest.fixture
def light_theme() -> ThemeContext:
    return ThemeContext(ThemeMode.LIGHT)


@pytest.fixture
def dark_theme() -> ThemeContext:
    return ThemeContext(ThemeMode.DARK)
