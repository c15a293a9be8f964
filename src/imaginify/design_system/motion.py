"""Motion presets and animated overlays.

Presets are named enter/exit keyframe bundles. Overlays (modal, sheet,
popover, tooltip) are driven by an ``is_open`` flag from their owner; a
``Presence`` tracks the closed -> entering -> open -> exiting -> closed
lifecycle so the end of an animation is observable without a renderer.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Final, Literal, assert_never

from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.elements import Child, Element, as_children
from imaginify.design_system.layout import get_z_index
from imaginify.design_system.themes import resolve_color
from imaginify.exceptions import PresenceTransitionError
from imaginify.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Transitions
# =============================================================================

_EASINGS: Final[Mapping[str, str]] = MappingProxyType({
    "linear": "linear",
    "easeIn": "cubic-bezier(0.42, 0, 1, 1)",
    "easeOut": "cubic-bezier(0, 0, 0.58, 1)",
    "easeInOut": "cubic-bezier(0.42, 0, 0.58, 1)",
})

# CSS has no springs; an overshooting bezier is the closest static curve.
_SPRING_EASING: Final[str] = "cubic-bezier(0.34, 1.56, 0.64, 1)"


@dataclass(frozen=True)
class Transition:
    """Timing for a keyframe change. Durations are in seconds."""

    kind: Literal["spring", "tween"]
    duration: float
    ease: str | None = None
    damping: float | None = None
    stiffness: float | None = None

    def css_timing_function(self) -> str:
        if self.kind == "spring":
            return _SPRING_EASING
        return _EASINGS.get(self.ease or "easeOut", _EASINGS["easeOut"])

    def to_css(self, properties: str = "all") -> str:
        return f"{properties} {round(self.duration * 1000)}ms {self.css_timing_function()}"


TRANSITIONS: Final[Mapping[str, Transition]] = MappingProxyType({
    "gentle": Transition("spring", 0.2, damping=25, stiffness=300),
    "quick": Transition("tween", 0.15, ease="easeOut"),
    "slow": Transition("tween", 0.3, ease="easeOut"),
})

TOOLTIP_TRANSITION: Final[Transition] = Transition("tween", 0.1, ease="easeOut")


# =============================================================================
# Keyframes & Presets
# =============================================================================


@dataclass(frozen=True)
class Keyframe:
    """Sparse set of animatable properties. x/y are pixel offsets."""

    opacity: float | None = None
    x: float | None = None
    y: float | None = None
    scale: float | None = None

    def as_dict(self) -> dict[str, float]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def to_style(self) -> dict[str, str]:
        style: dict[str, str] = {}
        if self.opacity is not None:
            style["opacity"] = f"{self.opacity:g}"
        transforms = []
        if self.x is not None:
            transforms.append(f"translateX({self.x:g}px)")
        if self.y is not None:
            transforms.append(f"translateY({self.y:g}px)")
        if self.scale is not None:
            transforms.append(f"scale({self.scale:g})")
        if transforms:
            style["transform"] = " ".join(transforms)
        return style

    def interpolate(self, target: "Keyframe", progress: float) -> "Keyframe":
        """Linear blend toward target; properties missing on either side keep their value."""
        t = min(max(progress, 0.0), 1.0)
        values = {}
        for f in fields(self):
            start, end = getattr(self, f.name), getattr(target, f.name)
            if start is None or end is None:
                values[f.name] = end if start is None else start
            else:
                values[f.name] = start + (end - start) * t
        return Keyframe(**values)


@dataclass(frozen=True)
class TransitionPreset:
    name: str
    initial: Keyframe
    animate: Keyframe
    exit: Keyframe
    transition: Transition


def _slide(name: str, *, x: float | None = None, y: float | None = None) -> TransitionPreset:
    hidden = Keyframe(opacity=0, x=x, y=y)
    shown = Keyframe(opacity=1, x=0 if x is not None else None, y=0 if y is not None else None)
    return TransitionPreset(name, hidden, shown, hidden, TRANSITIONS["gentle"])


FADE: Final = TransitionPreset(
    "fade", Keyframe(opacity=0), Keyframe(opacity=1), Keyframe(opacity=0), TRANSITIONS["quick"]
)
SLIDE_FROM_TOP: Final = _slide("slide_from_top", y=-20)
SLIDE_FROM_BOTTOM: Final = _slide("slide_from_bottom", y=20)
SLIDE_FROM_LEFT: Final = _slide("slide_from_left", x=-20)
SLIDE_FROM_RIGHT: Final = _slide("slide_from_right", x=20)
SCALE: Final = TransitionPreset(
    "scale",
    Keyframe(opacity=0, scale=0.95),
    Keyframe(opacity=1, scale=1),
    Keyframe(opacity=0, scale=0.95),
    TRANSITIONS["quick"],
)
POP: Final = TransitionPreset(
    "pop",
    Keyframe(opacity=0, scale=0.8),
    Keyframe(opacity=1, scale=1),
    Keyframe(opacity=0, scale=0.8),
    replace(TRANSITIONS["quick"], kind="spring", stiffness=500),
)

PRESETS: Final[Mapping[str, TransitionPreset]] = MappingProxyType({
    preset.name: preset
    for preset in (
        FADE,
        SLIDE_FROM_TOP,
        SLIDE_FROM_BOTTOM,
        SLIDE_FROM_LEFT,
        SLIDE_FROM_RIGHT,
        SCALE,
        POP,
    )
})

BUTTON_HOVER: Final[Keyframe] = Keyframe(scale=1.03)
BUTTON_TAP: Final[Keyframe] = Keyframe(scale=0.98)


@dataclass(frozen=True)
class MotionSpec:
    """Animation attached to a rendered element."""

    preset: TransitionPreset
    transition: Transition
    state: "PresenceState | None" = None
    while_hover: Keyframe | None = None
    while_tap: Keyframe | None = None


# =============================================================================
# Presence state machine
# =============================================================================


class PresenceState(str, Enum):
    CLOSED = "closed"
    ENTERING = "entering"
    OPEN = "open"
    EXITING = "exiting"


class Presence:
    """Enter/exit lifecycle of one overlay.

    ``show``/``hide`` start the animations, ``advance`` moves the clock and
    ``finish`` completes the running animation immediately. Reversing
    mid-animation keeps the visual position: an overlay hidden 30% into
    its entrance starts its exit 70% of the way through.
    """

    def __init__(
        self,
        preset: TransitionPreset = FADE,
        *,
        duration: float | None = None,
        on_enter_complete: Callable[[], None] | None = None,
        on_exit_complete: Callable[[], None] | None = None,
    ) -> None:
        self.preset = preset
        self.transition = preset.transition
        self._duration = duration
        self.on_enter_complete = on_enter_complete
        self.on_exit_complete = on_exit_complete
        self._state = PresenceState.CLOSED
        self._elapsed = 0.0

    def __repr__(self) -> str:
        return f"Presence(preset={self.preset.name!r}, state={self._state.value!r})"

    @property
    def duration(self) -> float:
        """Seconds per animation; an explicit ``duration`` overrides the transition's."""
        return self.transition.duration if self._duration is None else self._duration

    @property
    def state(self) -> PresenceState:
        return self._state

    @property
    def is_mounted(self) -> bool:
        return self._state is not PresenceState.CLOSED

    @property
    def is_animating(self) -> bool:
        return self._state in (PresenceState.ENTERING, PresenceState.EXITING)

    @property
    def progress(self) -> float:
        """Fraction of the running animation completed (1.0 when settled)."""
        if not self.is_animating or self.duration <= 0:
            return 1.0
        return min(self._elapsed / self.duration, 1.0)

    def attach(self, preset: TransitionPreset, transition: Transition) -> None:
        """Animate with an overlay's preset and timing from now on."""
        self.preset = preset
        self.transition = transition

    def _move(self, state: PresenceState, trigger: str) -> None:
        logger.debug(
            "presence_transition",
            preset=self.preset.name,
            trigger=trigger,
            previous=self._state.value,
            current=state.value,
        )
        self._state = state

    def show(self) -> None:
        if self._state is PresenceState.CLOSED:
            self._elapsed = 0.0
        elif self._state is PresenceState.EXITING:
            self._elapsed = self.duration - self._elapsed
        else:
            return
        self._move(PresenceState.ENTERING, "show")
        if self.duration <= 0:
            self.finish()

    def hide(self) -> None:
        if self._state is PresenceState.OPEN:
            self._elapsed = 0.0
        elif self._state is PresenceState.ENTERING:
            self._elapsed = self.duration - self._elapsed
        else:
            return
        self._move(PresenceState.EXITING, "hide")
        if self.duration <= 0:
            self.finish()

    def sync(self, is_open: bool) -> PresenceState:
        """Follow the owner's visibility flag."""
        if is_open:
            self.show()
        else:
            self.hide()
        return self._state

    def advance(self, seconds: float) -> PresenceState:
        if seconds < 0:
            raise ValueError("cannot advance by a negative duration")
        if self.is_animating:
            self._elapsed += seconds
            if self._elapsed >= self.duration:
                self.finish()
        return self._state

    def finish(self) -> None:
        """Complete the running animation now.

        Raises:
            PresenceTransitionError: If nothing is animating.
        """
        if self._state is PresenceState.ENTERING:
            self._elapsed = 0.0
            self._move(PresenceState.OPEN, "finish")
            if self.on_enter_complete is not None:
                self.on_enter_complete()
        elif self._state is PresenceState.EXITING:
            self._elapsed = 0.0
            self._move(PresenceState.CLOSED, "finish")
            if self.on_exit_complete is not None:
                self.on_exit_complete()
        else:
            raise PresenceTransitionError(self._state.value, "finish")

    def current_keyframe(self) -> Keyframe:
        return self.keyframe_for(self.preset)

    def keyframe_for(self, preset: TransitionPreset) -> Keyframe:
        """Where ``preset`` stands at the current state and progress."""
        match self._state:
            case PresenceState.CLOSED:
                return preset.initial
            case PresenceState.ENTERING:
                return preset.initial.interpolate(preset.animate, self.progress)
            case PresenceState.OPEN:
                return preset.animate
            case PresenceState.EXITING:
                return preset.animate.interpolate(preset.exit, self.progress)
            case _:
                assert_never(self._state)


# =============================================================================
# Anchoring
# =============================================================================


class SheetPosition(str, Enum):
    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


def sheet_preset(position: SheetPosition | str) -> TransitionPreset:
    match SheetPosition(position):
        case SheetPosition.TOP:
            return SLIDE_FROM_TOP
        case SheetPosition.LEFT:
            return SLIDE_FROM_LEFT
        case SheetPosition.RIGHT:
            return SLIDE_FROM_RIGHT
        case SheetPosition.BOTTOM:
            return SLIDE_FROM_BOTTOM
        case _ as unreachable:
            assert_never(unreachable)


_SHEET_ANCHORS: Final[Mapping[SheetPosition, tuple[str, ...]]] = MappingProxyType({
    SheetPosition.BOTTOM: ("bottom-0", "left-0", "right-0"),
    SheetPosition.TOP: ("top-0", "left-0", "right-0"),
    SheetPosition.LEFT: ("top-0", "bottom-0", "left-0"),
    SheetPosition.RIGHT: ("top-0", "bottom-0", "right-0"),
})


@dataclass(frozen=True)
class AnchorRect:
    """Viewport-relative bounding box of the element a popover points at."""

    top: float
    left: float
    width: float = 0.0
    height: float = 0.0

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width


def popover_position(
    anchor: AnchorRect | None, scroll: tuple[float, float] = (0.0, 0.0)
) -> tuple[float, float]:
    """Document (top, left) just below the anchor; read once, not tracked."""
    if anchor is None:
        return 0.0, 0.0
    scroll_x, scroll_y = scroll
    return anchor.bottom + scroll_y, anchor.left + scroll_x


# =============================================================================
# Overlay components
# =============================================================================


def _mounted(
    is_open: bool,
    presence: Presence | None,
    preset: TransitionPreset,
    transition: Transition,
) -> tuple[bool, PresenceState | None]:
    if presence is None:
        return is_open, None
    presence.attach(preset, transition)
    state = presence.sync(is_open)
    return presence.is_mounted, state


def _animated(
    element: Element,
    preset: TransitionPreset,
    transition: Transition,
    state: PresenceState | None,
    presence: Presence | None = None,
) -> Element:
    if presence is None:
        keyframe = preset.animate
    else:
        keyframe = presence.keyframe_for(preset)
        if presence.duration != transition.duration:
            transition = replace(transition, duration=presence.duration)
    element.style.update(keyframe.to_style())
    element.style["transition"] = transition.to_css()
    element.motion = MotionSpec(preset=preset, transition=transition, state=state)
    return element


def _backdrop(
    on_close: Callable[[], None] | None,
    *,
    dimmed: bool,
    transition: Transition,
    state: PresenceState | None,
    presence: Presence | None,
) -> Element:
    """Full-screen click catcher that fades with its overlay."""
    style = {"z-index": get_z_index("overlay")}
    if dimmed:
        style["background-color"] = resolve_color("modalBackdrop", ThemeMode.LIGHT)
    backdrop = Element(
        "div",
        style=style,
        classes=["fixed", "inset-0"],
        props={"data-role": "backdrop"},
    )
    _animated(backdrop, FADE, transition, state, presence)
    return backdrop.on("click", on_close)


def render_modal(
    is_open: bool,
    on_close: Callable[[], None] | None,
    children: Child | Iterable[Child] | None,
    *,
    presence: Presence | None = None,
    classes: Iterable[str] = (),
) -> Element | None:
    """Centered dialog over a dimmed backdrop. Returns None when unmounted."""
    transition = TRANSITIONS["gentle"]
    mounted, state = _mounted(is_open, presence, SLIDE_FROM_TOP, transition)
    if not mounted:
        return None

    content = Element(
        "div",
        style={"z-index": get_z_index("modalOverlay")},
        classes=[
            "fixed",
            "top-1/2",
            "left-1/2",
            "-translate-x-1/2",
            "-translate-y-1/2",
            "rounded-lg",
            "shadow-xl",
            *classes,
        ],
        props={"data-role": "modal", "role": "dialog", "aria-modal": "true"},
        children=as_children(children),
    )
    _animated(content, SLIDE_FROM_TOP, transition, state, presence)
    backdrop = _backdrop(
        on_close, dimmed=True, transition=transition, state=state, presence=presence
    )
    return Element("div", props={"data-role": "modal-root"}, children=[backdrop, content])


def render_sheet(
    is_open: bool,
    on_close: Callable[[], None] | None,
    children: Child | Iterable[Child] | None,
    *,
    position: SheetPosition | str = SheetPosition.BOTTOM,
    presence: Presence | None = None,
    classes: Iterable[str] = (),
) -> Element | None:
    """Panel anchored to a screen edge, sliding in from that edge."""
    position = SheetPosition(position)
    preset = sheet_preset(position)
    transition = TRANSITIONS["gentle"]
    mounted, state = _mounted(is_open, presence, preset, transition)
    if not mounted:
        return None

    content = Element(
        "div",
        style={"z-index": get_z_index("drawer")},
        classes=["fixed", *_SHEET_ANCHORS[position], *classes],
        props={"data-role": "sheet", "data-position": position.value},
        children=as_children(children),
    )
    _animated(content, preset, transition, state, presence)
    backdrop = _backdrop(
        on_close, dimmed=True, transition=transition, state=state, presence=presence
    )
    return Element("div", props={"data-role": "sheet-root"}, children=[backdrop, content])


def render_popover(
    is_open: bool,
    on_close: Callable[[], None] | None,
    children: Child | Iterable[Child] | None,
    *,
    anchor: AnchorRect | None = None,
    scroll: tuple[float, float] = (0.0, 0.0),
    presence: Presence | None = None,
    classes: Iterable[str] = (),
) -> Element | None:
    """Floating panel below its anchor; clicking outside calls ``on_close``."""
    transition = TRANSITIONS["quick"]
    mounted, state = _mounted(is_open, presence, SLIDE_FROM_RIGHT, transition)
    if not mounted:
        return None

    top, left = popover_position(anchor, scroll)
    content = Element(
        "div",
        style={"top": f"{top:g}px", "left": f"{left:g}px", "z-index": get_z_index("popover")},
        classes=["fixed", "rounded-md", "shadow-lg", *classes],
        props={"data-role": "popover"},
        children=as_children(children),
    )
    _animated(content, SLIDE_FROM_RIGHT, transition, state, presence)
    backdrop = _backdrop(
        on_close, dimmed=False, transition=transition, state=state, presence=presence
    )
    return Element("div", props={"data-role": "popover-root"}, children=[backdrop, content])


def render_tooltip(
    children: Child | Iterable[Child] | None,
    content: Child | Iterable[Child],
    is_visible: bool,
    *,
    presence: Presence | None = None,
    classes: Iterable[str] = (),
) -> Element:
    """Wrap children; the tooltip bubble appears above them while visible."""
    wrapped = as_children(children)
    mounted, state = _mounted(is_visible, presence, FADE, TOOLTIP_TRANSITION)
    if mounted:
        background = resolve_color("tooltipBackground", ThemeMode.LIGHT)
        arrow = Element(
            "div",
            style={"border-top-color": background},
            classes=[
                "absolute",
                "top-full",
                "left-1/2",
                "-translate-x-1/2",
                "w-0",
                "h-0",
                "border-l-4",
                "border-r-4",
                "border-t-4",
                "border-l-transparent",
                "border-r-transparent",
            ],
        )
        bubble = Element(
            "div",
            style={"background-color": background, "z-index": get_z_index("tooltip")},
            classes=[
                "absolute",
                "bottom-full",
                "left-1/2",
                "-translate-x-1/2",
                "-translate-y-2",
                "mb-2",
                "px-2",
                "py-1",
                "rounded",
                "text-xs",
                "text-white",
                *classes,
            ],
            props={"data-role": "tooltip", "role": "tooltip"},
            children=[*as_children(content), arrow],
        )
        wrapped.append(_animated(bubble, FADE, TOOLTIP_TRANSITION, state, presence))
    return Element("div", classes=["relative", "inline-block"], children=wrapped)


def render_motion_div(
    children: Child | Iterable[Child] | None,
    preset: TransitionPreset = FADE,
    *,
    classes: Iterable[str] = (),
) -> Element:
    """Container that plays ``preset`` when it mounts."""
    element = Element("div", classes=list(classes), children=as_children(children))
    return _animated(element, preset, preset.transition, None)


def render_motion_button(
    children: Child | Iterable[Child] | None,
    *,
    on_click: Callable[[], None] | None = None,
    classes: Iterable[str] = (),
) -> Element:
    """Button that grows slightly on hover and shrinks when pressed."""
    quick = TRANSITIONS["quick"]
    button = Element(
        "button",
        style={"transition": quick.to_css("transform")},
        classes=list(classes),
        props={"type": "button"},
        children=as_children(children),
    )
    button.motion = MotionSpec(
        preset=SCALE,
        transition=quick,
        while_hover=BUTTON_HOVER,
        while_tap=BUTTON_TAP,
    )
    return button.on("click", on_click)
