from __future__ import annotations

import pytest

from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.elements import Element
from imaginify.ui.showcase import ShowcaseBuilder
from imaginify.ui.state import AppState


class Harness:
    """Rebuilds the showcase the way a refreshable page would."""

    def __init__(self) -> None:
        self.state = AppState()
        self.changes = 0
        self.messages: list[str] = []
        self.builder = ShowcaseBuilder(self.state, self._changed, self.messages.append)
        self.page = self.builder.build()

    def _changed(self) -> None:
        self.changes += 1
        self.page = self.builder.build()

    def button(self, text: str, root: Element | None = None) -> Element:
        found = (root or self.page).find(lambda el: el.tag == "button" and el.text_content() == text)
        assert found is not None, f"no button labelled {text!r}"
        return found


@pytest.fixture
def harness() -> Harness:
    return Harness()


class TestShowcaseLayout:
    def test_window_with_sidebar_and_toolbar(self, harness) -> None:
        page = harness.page

        assert page.props["data-role"] == "showcase"
        assert page.find_by_role("window").props["data-theme"] == "light"
        assert page.find_by_role("sidebar") is not None
        assert page.find_by_role("toolbar") is not None
        assert page.find_by_role("modal") is None

    def test_sidebar_lists_tabs(self, harness) -> None:
        items = harness.page.find_all(lambda el: el.props.get("data-role") == "sidebar-item")

        assert [item.text_content() for item in items] == [
            "Overview",
            "Components",
            "Typography",
            "Colors",
        ]
        assert items[0].props["aria-current"] == "page"


class TestShowcaseInteraction:
    def test_switch_tab(self, harness) -> None:
        items = harness.page.find_all(lambda el: el.props.get("data-role") == "sidebar-item")

        items[3].trigger("click")

        assert harness.state.active_tab == "colors"
        assert harness.changes == 1
        assert harness.page.find(lambda el: el.props.get("data-color-role") == "label") is not None

    def test_typography_tab(self, harness) -> None:
        harness.state.active_tab = "typography"
        page = harness.builder.build()

        assert page.find(lambda el: el.props.get("data-text-style") == "title1") is not None

    def test_toggle_theme(self, harness) -> None:
        harness.button("🌙 Dark").trigger("click")

        assert harness.state.theme.mode is ThemeMode.DARK
        assert harness.page.find_by_role("window").props["data-theme"] == "dark"
        assert harness.button("☀️ Light") is not None

    def test_button_notifies(self, harness) -> None:
        harness.button("Push Button").trigger("click")

        assert harness.messages == ["Push button clicked!"]

    def test_open_and_close_modal(self, harness) -> None:
        harness.button("Open Modal").trigger("click")

        modal = harness.page.find_by_role("modal")
        assert harness.state.show_modal is True
        assert modal is not None
        assert "Modal Example" in modal.text_content()

        harness.button("Close", modal).trigger("click")

        assert harness.state.show_modal is False
        assert harness.page.find_by_role("modal") is None

    def test_sheet_backdrop_closes(self, harness) -> None:
        harness.button("Open Sheet").trigger("click")
        sheet_root = harness.page.find_by_role("sheet-root")

        assert sheet_root is not None
        sheet_root.find_by_role("backdrop").trigger("click")

        assert harness.state.show_sheet is False

    def test_text_input_updates_state(self, harness) -> None:
        field = harness.page.find(lambda el: el.props.get("placeholder") == "Enter text...")

        field.trigger("input", "hello")

        assert harness.state.text_input == "hello"

    def test_search_updates_state(self, harness) -> None:
        harness.page.find_by_role("search-field").trigger("input", "blue")

        assert harness.state.search == "blue"

    def test_stepper_updates_state(self, harness) -> None:
        harness.page.find_by_role("increment").trigger("click")
        harness.page.find_by_role("increment").trigger("click")

        assert harness.state.stepper_value == 2
        assert harness.page.find_by_role("value").text_content() == "2"

    def test_tooltip_follows_hover(self, harness) -> None:
        def tooltip_wrapper() -> Element:
            target = harness.button("Hover for Tooltip")
            return harness.page.find(
                lambda el: "mouseenter" in el.handlers
                and any(child is target for child in el.children)
            )

        tooltip_wrapper().trigger("mouseenter")
        assert harness.page.find_by_role("tooltip") is not None

        tooltip_wrapper().trigger("mouseleave")
        assert harness.page.find_by_role("tooltip") is None


class TestAppState:
    def test_close_overlays(self) -> None:
        state = AppState(show_modal=True, show_sheet=True, show_tooltip=True)

        state.close_overlays()

        assert (state.show_modal, state.show_sheet, state.show_tooltip) == (False, False, False)
