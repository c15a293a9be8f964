"""Window chrome: titlebar, toolbar, sidebar and the window frame.

These components are structural. Which parts appear is decided by the
caller's flags; the sidebar's collapsed state is passed in, never kept.
"""

from collections.abc import Callable, Iterable
from typing import Final

from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.elements import Child, Element, as_children
from imaginify.design_system.themes import coerce_mode, resolve_color
from imaginify.design_system.typography import TEXT_STYLES

TITLEBAR_MIN_HEIGHT: Final[str] = "28px"
TOOLBAR_MIN_HEIGHT: Final[str] = "44px"
SIDEBAR_WIDTH: Final[str] = "240px"
SIDEBAR_COLLAPSED_WIDTH: Final[str] = "48px"
SIDEBAR_TRANSITION: Final[str] = "width 200ms ease-in-out"
TRAFFIC_LIGHT_SPACER: Final[str] = "44px"
WINDOW_MIN_HEIGHT: Final[str] = "400px"
WINDOW_MIN_WIDTH: Final[str] = "600px"

_TRAFFIC_LIGHTS: Final[tuple[tuple[str, str], ...]] = (
    ("close", "bg-red-500 hover:bg-red-400"),
    ("minimize", "bg-yellow-500 hover:bg-yellow-400"),
    ("maximize", "bg-green-500 hover:bg-green-400"),
)


def render_titlebar(
    mode: ThemeMode | str,
    title: str = "",
    *,
    traffic_lights: bool = True,
    on_close: Callable[[], None] | None = None,
    on_minimize: Callable[[], None] | None = None,
    on_maximize: Callable[[], None] | None = None,
    classes: Iterable[str] = (),
) -> Element:
    mode = coerce_mode(mode)
    label_color = resolve_color("label", mode)
    children: list[Child] = []

    if traffic_lights:
        callbacks = {"close": on_close, "minimize": on_minimize, "maximize": on_maximize}
        lights = [
            Element(
                "button",
                style={"-webkit-app-region": "no-drag"},
                classes=["w-3", "h-3", "rounded-full", *colors.split(), "focus:outline-none"],
                props={"type": "button", "aria-label": action, "data-role": action},
            ).on("click", callbacks[action])
            for action, colors in _TRAFFIC_LIGHTS
        ]
        children.append(Element("div", classes=["flex", "space-x-2"], children=lights))

    if title:
        children.append(
            Element(
                "div",
                style={**TEXT_STYLES["subhead"].to_style(), "color": label_color},
                classes=["text-center", "flex-grow"],
                props={"data-role": "title"},
                children=[title],
            )
        )
    else:
        children.append(Element("div", classes=["flex-grow"]))

    # balances the traffic lights so the title stays centered
    children.append(
        Element("div", style={"width": TRAFFIC_LIGHT_SPACER if traffic_lights else "0px"})
    )

    return Element(
        "div",
        style={
            "background-color": resolve_color("contentBackground", mode),
            "color": label_color,
            "min-height": TITLEBAR_MIN_HEIGHT,
            "-webkit-app-region": "drag",
        },
        classes=["flex", "items-center", "justify-between", "px-4", "py-2", *classes],
        props={"data-role": "titlebar"},
        children=children,
    )


def render_toolbar(
    children: Child | Iterable[Child] | None,
    mode: ThemeMode | str,
    *,
    classes: Iterable[str] = (),
) -> Element:
    mode = coerce_mode(mode)
    return Element(
        "div",
        style={
            "background-color": resolve_color("contentBackground", mode),
            "border-bottom-color": resolve_color("separator", mode),
            "min-height": TOOLBAR_MIN_HEIGHT,
        },
        classes=["flex", "items-center", "px-3", "py-2", "border-b", *classes],
        props={"data-role": "toolbar"},
        children=as_children(children),
    )


def sidebar_width(collapsed: bool, width: str = SIDEBAR_WIDTH) -> str:
    return SIDEBAR_COLLAPSED_WIDTH if collapsed else width


def render_sidebar(
    children: Child | Iterable[Child] | None,
    mode: ThemeMode | str,
    *,
    width: str = SIDEBAR_WIDTH,
    collapsed: bool = False,
    classes: Iterable[str] = (),
) -> Element:
    """Sidebar whose width animates between expanded and collapsed."""
    mode = coerce_mode(mode)
    return Element(
        "aside",
        style={
            "background-color": resolve_color("sidebarBackground", mode),
            "width": sidebar_width(collapsed, width),
            "border-right-color": resolve_color("separator", mode),
            "transition": SIDEBAR_TRANSITION,
        },
        classes=["border-r", *classes],
        props={"data-role": "sidebar", "data-collapsed": "true" if collapsed else "false"},
        children=[Element("div", classes=["p-3"], children=as_children(children))],
    )


def render_sidebar_item(
    label: str,
    mode: ThemeMode | str,
    *,
    active: bool = False,
    on_click: Callable[[], None] | None = None,
    icon: Child | None = None,
    classes: Iterable[str] = (),
) -> Element:
    mode = coerce_mode(mode)
    children: list[Child] = []
    if icon is not None:
        children.append(Element("span", classes=["mr-2"], children=[icon]))
    children.append(Element("span", style=TEXT_STYLES["subhead"].to_style(), children=[label]))

    return Element(
        "div",
        style={
            "background-color": resolve_color("contentBackground", mode) if active else "transparent",
            "color": resolve_color("label" if active else "secondaryLabel", mode),
        },
        classes=["flex", "items-center", "p-2", "rounded-lg", "cursor-pointer", *classes],
        props={"data-role": "sidebar-item", "aria-current": "page" if active else None},
        children=children,
    ).on("click", on_click)


def render_window(
    content: Child | Iterable[Child] | None,
    mode: ThemeMode | str,
    *,
    title: str = "",
    show_titlebar: bool = True,
    sidebar_content: Child | Iterable[Child] | None = None,
    show_sidebar: bool = False,
    sidebar_collapsed: bool = False,
    toolbar_content: Child | Iterable[Child] | None = None,
    show_toolbar: bool = False,
    on_close: Callable[[], None] | None = None,
    on_minimize: Callable[[], None] | None = None,
    on_maximize: Callable[[], None] | None = None,
    classes: Iterable[str] = (),
) -> Element:
    """Compose a desktop-style window.

    The sidebar and toolbar appear only when their flag is set and they
    have content.
    """
    mode = coerce_mode(mode)
    children: list[Child] = []

    if show_titlebar:
        children.append(
            render_titlebar(
                mode,
                title,
                on_close=on_close,
                on_minimize=on_minimize,
                on_maximize=on_maximize,
            )
        )

    body: list[Child] = []
    sidebar_children = as_children(sidebar_content)
    if show_sidebar and sidebar_children:
        body.append(render_sidebar(sidebar_children, mode, collapsed=sidebar_collapsed))

    column: list[Child] = []
    toolbar_children = as_children(toolbar_content)
    if show_toolbar and toolbar_children:
        column.append(render_toolbar(toolbar_children, mode))
    column.append(
        Element(
            "main",
            classes=["flex-1", "overflow-auto", "p-4"],
            props={"data-role": "content"},
            children=as_children(content),
        )
    )
    body.append(
        Element("div", classes=["flex", "flex-col", "flex-1", "overflow-hidden"], children=column)
    )
    children.append(Element("div", classes=["flex", "flex-1", "overflow-hidden"], children=body))

    return Element(
        "div",
        style={
            "background-color": resolve_color("windowBackground", mode),
            "border-color": resolve_color("separator", mode),
            "min-height": WINDOW_MIN_HEIGHT,
            "min-width": WINDOW_MIN_WIDTH,
        },
        classes=[
            "flex",
            "flex-col",
            "h-full",
            "w-full",
            "overflow-hidden",
            "rounded-lg",
            "border",
            *classes,
        ],
        props={"data-role": "window", "data-theme": mode.value},
        children=children,
    )
