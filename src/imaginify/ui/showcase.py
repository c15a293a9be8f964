"""Design-system showcase page, built as an Element tree.

The page is a window with a sidebar of tabs, a toolbar holding the theme
toggle and a search field, and material panels demonstrating the
controls and overlays. Every handler mutates ``AppState`` and then calls
``on_change`` so the front end can re-render.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from imaginify.design_system.colors import ACCENT_COLORS, SEMANTIC_COLORS, ThemeMode
from imaginify.design_system.controls import (
    SelectOption,
    render_button,
    render_checkbox,
    render_date_picker,
    render_popup_button,
    render_radio_button,
    render_search_input,
    render_stepper,
    render_text_input,
)
from imaginify.design_system.elements import Child, Element
from imaginify.design_system.layout import SPACING
from imaginify.design_system.materials import render_material
from imaginify.design_system.motion import (
    render_modal,
    render_motion_div,
    render_sheet,
    render_tooltip,
)
from imaginify.design_system.themes import resolve_color
from imaginify.design_system.typography import TEXT_STYLES
from imaginify.design_system.window import render_sidebar_item, render_window
from imaginify.ui.state import TABS, AppState

SELECT_OPTIONS: tuple[SelectOption, ...] = (
    SelectOption("Option 1", "option1"),
    SelectOption("Option 2", "option2"),
    SelectOption("Option 3", "option3"),
)

Notify = Callable[[str], None]


def _heading(text: str, style: str, tag: str = "h2") -> Element:
    return Element(
        tag,
        style={**TEXT_STYLES[style].to_style(), "margin-bottom": SPACING["4"]},
        children=[text],
    )


def _paragraph(text: str) -> Element:
    return Element(
        "p",
        style={**TEXT_STYLES["body"].to_style(), "margin-bottom": SPACING["4"]},
        children=[text],
    )


def _field(label: str, control: Element) -> Element:
    caption = Element(
        "label",
        style={**TEXT_STYLES["subhead"].to_style(), "display": "block", "margin-bottom": SPACING["2"]},
        children=[label],
    )
    return Element("div", children=[caption, control])


def _panel(mode: ThemeMode, *children: Child) -> Element:
    return render_material(list(children), mode, "sheet", padding="6", radius="lg")


class ShowcaseBuilder:
    """Builds the showcase from state; rebuild after every change."""

    def __init__(
        self,
        state: AppState,
        on_change: Callable[[], None],
        notify: Notify | None = None,
    ) -> None:
        self.state = state
        self.on_change = on_change
        self.notify = notify or (lambda _message: None)

    def _update(self, **values: Any) -> None:
        for name, value in values.items():
            setattr(self.state, name, value)
        self.on_change()

    def _setter(self, name: str) -> Callable[[Any], None]:
        return lambda value: self._update(**{name: value})

    @property
    def mode(self) -> ThemeMode:
        return self.state.theme.mode

    def toggle_theme(self) -> None:
        self.state.theme.toggle()
        self.on_change()

    # -------------------------------------------------------------------------
    # Chrome
    # -------------------------------------------------------------------------

    def sidebar(self) -> list[Child]:
        return [
            render_sidebar_item(
                label,
                self.mode,
                active=self.state.active_tab == key,
                on_click=lambda key=key: self._update(active_tab=key),
            )
            for key, label in TABS
        ]

    def toolbar(self) -> Element:
        toggle_label = "🌙 Dark" if self.mode is ThemeMode.LIGHT else "☀️ Light"
        return Element(
            "div",
            classes=["flex", "items-center", "space-x-4"],
            children=[
                render_button(toggle_label, self.mode, "text", on_click=self.toggle_theme),
                render_search_input(
                    self.state.search,
                    self._setter("search"),
                    self.mode,
                    placeholder="Search...",
                ),
            ],
        )

    # -------------------------------------------------------------------------
    # Panels
    # -------------------------------------------------------------------------

    def buttons_panel(self) -> Element:
        def clicked(name: str) -> Callable[[], None]:
            return lambda: self.notify(f"{name} clicked!")

        buttons = [
            render_button("Push Button", self.mode, "push", on_click=clicked("Push button")),
            render_button("Rounded Button", self.mode, "rounded", on_click=clicked("Rounded button")),
            render_button("Bezel Button", self.mode, "bezel", on_click=clicked("Bezel button")),
            render_button("✨", self.mode, "icon", on_click=clicked("Icon button")),
        ]
        return _panel(
            self.mode,
            _heading("macOS Design System", "title1", "h1"),
            _paragraph(
                "A comprehensive design system implementing Apple's design "
                "principles and Human Interface Guidelines."
            ),
            Element("div", classes=["grid", "grid-cols-1", "md:grid-cols-2", "gap-4"], children=buttons),
        )

    def forms_panel(self) -> Element:
        state = self.state
        toggles = Element(
            "div",
            classes=["flex", "space-x-4"],
            children=[
                render_checkbox(state.checkbox, self._setter("checkbox"), self.mode, label="Checkbox"),
                *(
                    render_radio_button(
                        state.radio_value == value,
                        lambda value=value: self._update(radio_value=value),
                        self.mode,
                        label=label,
                        name="radio-group",
                    )
                    for value, label in (("option1", "Radio 1"), ("option2", "Radio 2"))
                ),
            ],
        )
        pickers = Element(
            "div",
            classes=["flex", "space-x-4"],
            children=[
                _field(
                    "Select",
                    render_popup_button(
                        state.select_value, self._setter("select_value"), SELECT_OPTIONS, self.mode
                    ),
                ),
                _field(
                    "Stepper",
                    render_stepper(state.stepper_value, self._setter("stepper_value"), self.mode),
                ),
                _field(
                    "Date",
                    render_date_picker(state.date_value, self._setter("date_value"), self.mode),
                ),
            ],
        )
        text = _field(
            "Text Input",
            render_text_input(
                state.text_input, self._setter("text_input"), self.mode, placeholder="Enter text..."
            ),
        )
        return _panel(
            self.mode,
            _heading("Form Components", "title2"),
            Element("div", classes=["space-y-4"], children=[text, toggles, pickers]),
        )

    def overlays_panel(self) -> Element:
        hover_target = render_button("Hover for Tooltip", self.mode, "text")
        tooltip = render_tooltip(hover_target, "This is a tooltip!", self.state.show_tooltip)
        tooltip.on("mouseenter", lambda: self._update(show_tooltip=True))
        tooltip.on("mouseleave", lambda: self._update(show_tooltip=False))
        return _panel(
            self.mode,
            _heading("Modals & Sheets", "title2"),
            Element(
                "div",
                classes=["flex", "space-x-4"],
                children=[
                    render_button("Open Modal", self.mode, on_click=lambda: self._update(show_modal=True)),
                    render_button("Open Sheet", self.mode, on_click=lambda: self._update(show_sheet=True)),
                    tooltip,
                ],
            ),
        )

    def typography_panel(self) -> Element:
        samples = [
            Element(
                "div",
                style={**style.to_style(), "color": resolve_color("label", self.mode)},
                props={"data-text-style": name},
                children=[f"{name} {style.font_size}/{style.line_height}"],
            )
            for name, style in TEXT_STYLES.items()
        ]
        return _panel(self.mode, _heading("Typography", "title2"), *samples)

    def colors_panel(self) -> Element:
        swatches: list[Child] = []
        entries = [
            (role, semantic.for_mode(self.mode))
            for table in SEMANTIC_COLORS.values()
            for role, semantic in table.items()
        ]
        for role, color in [*entries, *ACCENT_COLORS.items()]:
            swatches.append(
                Element(
                    "div",
                    classes=["flex", "items-center", "space-x-2"],
                    props={"data-color-role": role},
                    children=[
                        Element(
                            "span",
                            style={"background-color": color},
                            classes=["w-4", "h-4", "rounded", "border"],
                        ),
                        Element("span", style=TEXT_STYLES["caption1"].to_style(), children=[f"{role} {color}"]),
                    ],
                )
            )
        return _panel(
            self.mode,
            _heading("Colors", "title2"),
            Element("div", classes=["grid", "grid-cols-2", "gap-2"], children=swatches),
        )

    def content(self) -> list[Child]:
        match self.state.active_tab:
            case "components":
                return [self.forms_panel(), self.overlays_panel()]
            case "typography":
                return [self.typography_panel()]
            case "colors":
                return [self.colors_panel()]
            case _:
                return [self.buttons_panel(), self.forms_panel(), self.overlays_panel()]

    # -------------------------------------------------------------------------
    # Overlays
    # -------------------------------------------------------------------------

    def _overlay_body(self, material: str, title: str, text: str, close: Callable[[], None]) -> Element:
        return render_material(
            [
                _heading(title, "headline", "h3"),
                _paragraph(text),
                Element(
                    "div",
                    classes=["flex", "justify-end"],
                    children=[render_button("Close", self.mode, "text", on_click=close)],
                ),
            ],
            self.mode,
            material,
            padding="6",
            radius="lg",
        )

    def modal(self) -> Element | None:
        close = lambda: self._update(show_modal=False)  # noqa: E731
        return render_modal(
            self.state.show_modal,
            close,
            self._overlay_body(
                "popover",
                "Modal Example",
                "This is a modal dialog with slide-in animation from the top.",
                close,
            ),
        )

    def sheet(self) -> Element | None:
        close = lambda: self._update(show_sheet=False)  # noqa: E731
        return render_sheet(
            self.state.show_sheet,
            close,
            self._overlay_body(
                "sheet",
                "Sheet Example",
                "This is a sheet that slides up from the bottom.",
                close,
            ),
            position="bottom",
        )

    def build(self) -> Element:
        window = render_window(
            Element("div", classes=["space-y-6"], children=self.content()),
            self.mode,
            title="MacOS Design System Demo",
            show_sidebar=True,
            sidebar_content=self.sidebar(),
            sidebar_collapsed=self.state.sidebar_collapsed,
            show_toolbar=True,
            toolbar_content=self.toolbar(),
        )
        children: list[Child] = [render_motion_div(window)]
        for overlay in (self.modal(), self.sheet()):
            if overlay is not None:
                children.append(overlay)
        return Element(
            "div",
            style={"height": "100vh", "padding": SPACING["4"]},
            props={"data-role": "showcase"},
            children=children,
        )
