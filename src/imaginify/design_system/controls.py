"""Control library: buttons, inputs, pickers and the stepper.

Controls hold no state. The owner passes the current value in and gets
new values back through a change callback; the next render reflects
whatever the owner decided to keep. Disabled controls never call back.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, assert_never

from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.elements import Child, Element, Handler
from imaginify.design_system.layout import BORDER_RADIUS, SPACING
from imaginify.design_system.themes import coerce_mode, resolve_color
from imaginify.design_system.typography import TEXT_STYLES
from imaginify.logging_config import get_logger

logger = get_logger(__name__)

DISABLED_OPACITY: Final[str] = "0.6"
STEPPER_INERT_OPACITY: Final[str] = "0.5"


class ButtonVariant(str, Enum):
    """Button style variants."""

    PUSH = "push"
    BEZEL = "bezel"
    TEXT = "text"
    ICON = "icon"
    ROUNDED = "rounded"


class ButtonSize(str, Enum):
    """Button size variants."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class _SizeMetrics:
    padding: str
    font_size: str
    radius: str
    icon_box: str


_SIZE_METRICS: Final[dict[ButtonSize, _SizeMetrics]] = {
    ButtonSize.SMALL: _SizeMetrics(
        f"6px {SPACING['3']}", TEXT_STYLES["footnote"].font_size, BORDER_RADIUS["sm"], "24px"
    ),
    ButtonSize.MEDIUM: _SizeMetrics(
        f"8px {SPACING['4']}", TEXT_STYLES["subhead"].font_size, BORDER_RADIUS["md"], "32px"
    ),
    ButtonSize.LARGE: _SizeMetrics(
        f"10px {SPACING['5']}", TEXT_STYLES["body"].font_size, BORDER_RADIUS["md"], "36px"
    ),
}

_VARIANT_CLASSES: Final[dict[ButtonVariant, str]] = {
    ButtonVariant.PUSH: "hover:bg-opacity-80 active:scale-[0.98]",
    ButtonVariant.BEZEL: "hover:bg-gray-100 dark:hover:bg-gray-700 active:bg-gray-200 dark:active:bg-gray-600",
    ButtonVariant.TEXT: "hover:underline",
    ButtonVariant.ICON: "hover:bg-gray-100 dark:hover:bg-gray-700",
    ButtonVariant.ROUNDED: "hover:bg-opacity-80 active:scale-[0.98]",
}


def interaction_style(disabled: bool, inert_opacity: str = DISABLED_OPACITY) -> dict[str, str]:
    """Cursor and opacity shared by every control."""
    return {
        "cursor": "not-allowed" if disabled else "pointer",
        "opacity": inert_opacity if disabled else "1",
    }


def _filled_colors(mode: ThemeMode, *, disabled: bool, active: bool) -> dict[str, str]:
    # active wins over disabled for colors; opacity and cursor still follow disabled
    if active:
        background = resolve_color("controlAccent", mode)
        text = resolve_color("controlAccentText", mode)
    elif disabled:
        background = resolve_color("disabledControlBackground", mode)
        text = resolve_color("disabledControlText", mode)
    else:
        background = resolve_color("contentBackground", mode)
        text = resolve_color("label", mode)
    return {"background-color": background, "color": text}


def button_style(
    variant: ButtonVariant | str = ButtonVariant.PUSH,
    size: ButtonSize | str = ButtonSize.MEDIUM,
    mode: ThemeMode | str = ThemeMode.LIGHT,
    *,
    disabled: bool = False,
    active: bool = False,
) -> dict[str, str]:
    """Compute a button's inline style for a variant, size and state."""
    variant = ButtonVariant(variant)
    size = ButtonSize(size)
    mode = coerce_mode(mode)
    metrics = _SIZE_METRICS[size]
    label = resolve_color("label", mode)
    muted = resolve_color("secondaryLabel", mode)
    border = resolve_color("controlBorder", mode)
    weight = TEXT_STYLES["subhead"].font_weight

    match variant:
        case ButtonVariant.PUSH:
            accent_border = resolve_color("controlAccent", mode) if active else border
            style = {
                **_filled_colors(mode, disabled=disabled, active=active),
                "border": f"1px solid {accent_border}",
                "padding": metrics.padding,
                "border-radius": metrics.radius,
                "font-size": metrics.font_size,
                "font-weight": weight,
            }
        case ButtonVariant.BEZEL:
            style = {
                "background-color": "transparent",
                "color": muted if disabled else label,
                "border": f"1px solid {border}",
                "padding": metrics.padding,
                "border-radius": metrics.radius,
                "font-size": metrics.font_size,
                "font-weight": weight,
            }
        case ButtonVariant.TEXT:
            style = {
                "background-color": "transparent",
                "color": muted if disabled else resolve_color("link", mode),
                "padding": f"6px {SPACING['2']}",
                "border-radius": BORDER_RADIUS["md"],
                "font-size": metrics.font_size,
                "font-weight": weight,
            }
        case ButtonVariant.ICON:
            style = {
                "background-color": "transparent",
                "color": muted if disabled else label,
                "width": metrics.icon_box,
                "height": metrics.icon_box,
                "display": "flex",
                "align-items": "center",
                "justify-content": "center",
                "border-radius": BORDER_RADIUS["md"],
            }
        case ButtonVariant.ROUNDED:
            style = {
                **_filled_colors(mode, disabled=disabled, active=active),
                "padding": f"6px {SPACING['4']}",
                "border-radius": BORDER_RADIUS["full"],
                "font-size": metrics.font_size,
                "font-weight": weight,
            }
        case _:
            assert_never(variant)

    style.update(interaction_style(disabled))
    return style


def render_button(
    label: Child | Iterable[Child],
    mode: ThemeMode | str,
    variant: ButtonVariant | str = ButtonVariant.PUSH,
    size: ButtonSize | str = ButtonSize.MEDIUM,
    *,
    on_click: Callable[[], None] | None = None,
    disabled: bool = False,
    active: bool = False,
    icon: Child | None = None,
    classes: Iterable[str] = (),
) -> Element:
    """Render a button. Clicks reach ``on_click`` only while enabled."""
    variant = ButtonVariant(variant)
    children: list[Child] = []
    if icon is not None:
        children.append(Element("span", classes=["mr-2"], children=[icon]))
    children.extend([label] if isinstance(label, (str, Element)) else label)

    button = Element(
        "button",
        style=button_style(variant, size, mode, disabled=disabled, active=active),
        classes=[_VARIANT_CLASSES[variant], "transition-all", "duration-150", *classes],
        props={
            "type": "button",
            "disabled": disabled,
            "data-variant": variant.value,
            "data-size": ButtonSize(size).value,
        },
        children=children,
    )
    if not disabled:
        button.on("click", on_click)
    return button


# =============================================================================
# Text Inputs
# =============================================================================


def _field_style(mode: ThemeMode, disabled: bool) -> dict[str, str]:
    return {
        "background-color": resolve_color("contentBackground", mode),
        "color": resolve_color("label", mode),
        "border-color": resolve_color("controlBorder", mode),
        "font-size": TEXT_STYLES["subhead"].font_size,
        "opacity": DISABLED_OPACITY if disabled else "1",
    }


def _value_handler(on_change: Callable[[str], None] | None) -> Handler | None:
    if on_change is None:
        return None

    def handle(value: object) -> None:
        on_change("" if value is None else str(value))

    return handle


def render_text_input(
    value: str,
    on_change: Callable[[str], None] | None,
    mode: ThemeMode | str,
    *,
    placeholder: str | None = None,
    input_type: str = "text",
    disabled: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Controlled text input; every keystroke emits the full new value."""
    mode = coerce_mode(mode)
    field = Element(
        "input",
        style=_field_style(mode, disabled),
        classes=["px-3", "py-2", "border", "rounded-md", *classes],
        props={
            "type": input_type,
            "value": value,
            "placeholder": placeholder,
            "disabled": disabled,
        },
    )
    if not disabled:
        field.on("input", _value_handler(on_change))
    return field


def render_search_input(
    value: str,
    on_change: Callable[[str], None] | None,
    mode: ThemeMode | str,
    *,
    placeholder: str | None = None,
    disabled: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Pill-shaped text input with a leading search glyph."""
    mode = coerce_mode(mode)
    field = render_text_input(
        value, on_change, mode, placeholder=placeholder, disabled=disabled
    )
    field.classes = ["pl-10", "pr-3", "py-2", "border", "rounded-full", "w-full"]
    field.props["data-role"] = "search-field"
    icon = Element(
        "span",
        style={"color": resolve_color("searchIcon", mode)},
        classes=["absolute", "left-3"],
        props={"aria-hidden": "true"},
        children=["\U0001F50D"],
    )
    return Element(
        "div",
        classes=["relative", "flex", "items-center", *classes],
        children=[icon, field],
    )


# =============================================================================
# Toggles
# =============================================================================


def _toggle_input(
    input_type: str, checked: bool, mode: ThemeMode, disabled: bool, name: str | None
) -> Element:
    return Element(
        "input",
        style={
            "background-color": resolve_color("contentBackground", mode),
            "border-color": resolve_color("controlBorder", mode),
            "color": resolve_color("controlAccent", mode),
            "opacity": DISABLED_OPACITY if disabled else "1",
        },
        classes=["w-4", "h-4", "mr-2", "text-blue-600", "focus:ring-blue-500"]
        + (["rounded"] if input_type == "checkbox" else []),
        props={"type": input_type, "checked": checked, "disabled": disabled, "name": name},
    )


def _toggle_label(label: str, mode: ThemeMode, disabled: bool) -> Element:
    color = resolve_color("secondaryLabel" if disabled else "label", mode)
    return Element(
        "span",
        style={"color": color, **TEXT_STYLES["subhead"].to_style()},
        children=[label],
    )


def render_checkbox(
    checked: bool,
    on_change: Callable[[bool], None] | None,
    mode: ThemeMode | str,
    *,
    label: str | None = None,
    disabled: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Controlled checkbox; emits the new checked flag."""
    mode = coerce_mode(mode)
    box = _toggle_input("checkbox", checked, mode, disabled, None)
    if not disabled and on_change is not None:
        box.on("change", lambda new_checked: on_change(bool(new_checked)))
    children: list[Child] = [box]
    if label:
        children.append(_toggle_label(label, mode, disabled))
    return Element("div", classes=["flex", "items-center", *classes], children=children)


def render_radio_button(
    checked: bool,
    on_change: Callable[[], None] | None,
    mode: ThemeMode | str,
    *,
    label: str | None = None,
    name: str | None = None,
    disabled: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Controlled radio button.

    Radios sharing a ``name`` are a group only by convention: the owner
    keeps one selected value and passes ``checked`` accordingly.
    """
    mode = coerce_mode(mode)
    radio = _toggle_input("radio", checked, mode, disabled, name)
    if not disabled and on_change is not None:
        radio.on("change", lambda *_: on_change())
    children: list[Child] = [radio]
    if label:
        children.append(_toggle_label(label, mode, disabled))
    return Element("div", classes=["flex", "items-center", *classes], children=children)


# =============================================================================
# Popup Button (Select)
# =============================================================================


@dataclass(frozen=True)
class SelectOption:
    label: str
    value: str


def chevron_image(mode: ThemeMode | str) -> str:
    """Inline SVG chevron as a CSS url(), tinted for the mode."""
    fill = resolve_color("chevron", mode).replace("#", "%23")
    svg = (
        f"<svg fill='{fill}' height='20' viewBox='0 0 24 24' width='20' "
        "xmlns='http://www.w3.org/2000/svg'><path d='M7 10l5 5 5-5z'/></svg>"
    )
    return f'url("data:image/svg+xml;utf8,{svg}")'


def render_popup_button(
    value: str,
    on_change: Callable[[str], None] | None,
    options: Sequence[SelectOption],
    mode: ThemeMode | str,
    *,
    disabled: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Controlled select over a fixed option list."""
    mode = coerce_mode(mode)
    background = resolve_color("contentBackground", mode)
    label_color = resolve_color("label", mode)
    style = {
        **_field_style(mode, disabled),
        "background-image": chevron_image(mode),
        "background-position": "right 8px center",
        "background-repeat": "no-repeat",
        "background-size": "16px",
        "padding-right": "30px",
    }
    option_elements: list[Child] = [
        Element(
            "option",
            style={"background-color": background, "color": label_color},
            props={"value": option.value, "selected": option.value == value},
            children=[option.label],
        )
        for option in options
    ]
    select = Element(
        "select",
        style=style,
        classes=["px-3", "py-2", "border", "rounded-md", "appearance-none", *classes],
        props={"value": value, "disabled": disabled},
        children=option_elements,
    )
    if not disabled:
        select.on("change", _value_handler(on_change))
    return select


def selected_option(select: Element) -> str | None:
    """Value of the option marked selected in a rendered popup button."""
    chosen = select.find(lambda el: el.tag == "option" and el.props.get("selected"))
    return None if chosen is None else chosen.props["value"]


# =============================================================================
# Stepper
# =============================================================================


@dataclass(frozen=True)
class Stepper:
    """Integer value bounded by [minimum, maximum], moved by ``step``.

    Stepping past a bound is a silent no-op: the value is neither clamped
    nor wrapped.
    """

    value: int
    minimum: int = 0
    maximum: int = 100
    step: int = 1

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"minimum {self.minimum} exceeds maximum {self.maximum}")
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")

    @property
    def can_increment(self) -> bool:
        return self.value + self.step <= self.maximum

    @property
    def can_decrement(self) -> bool:
        return self.value - self.step >= self.minimum

    @property
    def at_maximum(self) -> bool:
        return self.value >= self.maximum

    @property
    def at_minimum(self) -> bool:
        return self.value <= self.minimum

    def increment(self) -> "Stepper":
        if not self.can_increment:
            logger.debug("stepper_bound_reached", bound="maximum", value=self.value)
            return self
        return replace(self, value=self.value + self.step)

    def decrement(self) -> "Stepper":
        if not self.can_decrement:
            logger.debug("stepper_bound_reached", bound="minimum", value=self.value)
            return self
        return replace(self, value=self.value - self.step)


def _stepper_button(
    glyph: str, inert: bool, mode: ThemeMode, action: Callable[[], None], border_side: str
) -> Element:
    button = Element(
        "button",
        style={
            "background-color": resolve_color("contentBackground", mode),
            "color": resolve_color("label", mode),
            "border-color": resolve_color("controlBorder", mode),
            **interaction_style(inert, STEPPER_INERT_OPACITY),
        },
        classes=["px-3", "py-2", border_side],
        props={"type": "button", "disabled": inert},
        children=[glyph],
    )
    if not inert:
        button.on("click", action)
    return button


def render_stepper(
    value: int,
    on_change: Callable[[int], None] | None,
    mode: ThemeMode | str,
    *,
    minimum: int = 0,
    maximum: int = 100,
    step: int = 1,
    disabled: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Render -/value/+ with buttons that go inert at the bounds."""
    mode = coerce_mode(mode)
    stepper = Stepper(value, minimum, maximum, step)

    def emit(next_state: Stepper) -> None:
        if not disabled and on_change is not None and next_state.value != stepper.value:
            on_change(next_state.value)

    decrement = _stepper_button(
        "-", disabled or stepper.at_minimum, mode, lambda: emit(stepper.decrement()), "border-r"
    )
    decrement.props["data-role"] = "decrement"
    increment = _stepper_button(
        "+", disabled or stepper.at_maximum, mode, lambda: emit(stepper.increment()), "border-l"
    )
    increment.props["data-role"] = "increment"
    display = Element(
        "span",
        style={
            "background-color": resolve_color("contentBackground", mode),
            "color": resolve_color("label", mode),
            "min-width": "40px",
        },
        classes=["px-3", "py-2", "flex", "items-center", "justify-center"],
        props={"data-role": "value"},
        children=[str(value)],
    )
    return Element(
        "div",
        classes=["flex", "border", "rounded-md", "overflow-hidden", *classes],
        children=[decrement, display, increment],
    )


# =============================================================================
# Date Picker
# =============================================================================


def render_date_picker(
    value: str,
    on_change: Callable[[str], None] | None,
    mode: ThemeMode | str,
    *,
    disabled: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Native date input; the ISO date string passes through unvalidated."""
    mode = coerce_mode(mode)
    picker = Element(
        "input",
        style=_field_style(mode, disabled),
        classes=["px-3", "py-2", "border", "rounded-md", *classes],
        props={"type": "date", "value": value, "disabled": disabled},
    )
    if not disabled:
        picker.on("change", _value_handler(on_change))
    return picker
