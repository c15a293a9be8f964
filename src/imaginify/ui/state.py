"""Showcase UI state.

NiceGUI apps are typically single-process; state here is process-global.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from imaginify.config import get_settings
from imaginify.design_system.themes import ThemeContext

TABS: tuple[tuple[str, str], ...] = (
    ("overview", "Overview"),
    ("components", "Components"),
    ("typography", "Typography"),
    ("colors", "Colors"),
)


def _default_theme() -> ThemeContext:
    return ThemeContext(get_settings().default_theme_mode)


@dataclass(slots=True)
class AppState:
    """Every value the showcase page renders from."""

    theme: ThemeContext = field(default_factory=_default_theme)
    active_tab: str = "overview"

    # Controls
    text_input: str = ""
    search: str = ""
    checkbox: bool = False
    radio_value: str = "option1"
    select_value: str = "option1"
    stepper_value: int = 0
    date_value: str = ""

    # Overlays
    show_modal: bool = False
    show_sheet: bool = False
    show_tooltip: bool = False

    sidebar_collapsed: bool = False

    def close_overlays(self) -> None:
        self.show_modal = False
        self.show_sheet = False
        self.show_tooltip = False


state = AppState()
