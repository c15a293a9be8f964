"""Theme resolution and the theme context.

Resolving a color is a pure function of (role, mode). The only mutable
theme state is the current mode, held by an explicit ThemeContext object
that callers pass down the render tree. ``theme_provider()`` additionally
binds a context to the current execution context for code that cannot
receive it as an argument; ``use_theme()`` reads it back.
"""

import re
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Final

from imaginify.config import get_settings
from imaginify.design_system.colors import (
    ACCENT_COLORS,
    BACKGROUND_COLORS,
    RESOLUTION_ORDER,
    SEMANTIC_COLORS,
    ColorCategory,
    SemanticColor,
    ThemeMode,
)
from imaginify.design_system.layout import BORDER_RADIUS, SHADOWS, SPACING
from imaginify.design_system.tokens import TokenLookupPolicy, lookup
from imaginify.design_system.typography import FONT_FAMILY, TextStyle, get_text_style
from imaginify.exceptions import ThemeContextError
from imaginify.logging_config import get_logger

logger = get_logger(__name__)

ThemeListener = Callable[[ThemeMode], None]

_NO_COLORS: Final = MappingProxyType({})


def coerce_mode(mode: ThemeMode | str) -> ThemeMode:
    """Accept a ThemeMode or its (case-insensitive) name."""
    if isinstance(mode, ThemeMode):
        return mode
    return ThemeMode(str(mode).strip().lower())


def toggle_mode(mode: ThemeMode | str) -> ThemeMode:
    return coerce_mode(mode).toggled()


def is_dark_theme(mode: ThemeMode | str) -> bool:
    return coerce_mode(mode) is ThemeMode.DARK


def _find_color(role: str, category: ColorCategory | None) -> SemanticColor | str | None:
    categories = (category,) if category is not None else RESOLUTION_ORDER
    for candidate in categories:
        if candidate is ColorCategory.ACCENT:
            accent = ACCENT_COLORS.get(role)
            if accent is not None:
                return accent
            continue
        color = SEMANTIC_COLORS[candidate].get(role)
        if color is not None:
            return color
    return None


def resolve_color(
    role: str,
    mode: ThemeMode | str,
    category: ColorCategory | str | None = None,
    *,
    policy: TokenLookupPolicy | str | None = None,
) -> str:
    """Resolve a semantic color role to a concrete value for a mode.

    Args:
        role: Role name, e.g. "label" or "windowBackground".
        mode: Light or dark.
        category: Restrict the search to one category. None searches
            content, background, fill, separator, control and accent roles
            in that order.
        policy: Lookup policy for this call; None uses the active policy.

    Returns:
        The hex or rgba color string. Accent colors are the same in both
        modes. Unknown roles resolve to the configured fallback color
        under the fallback policy.

    Raises:
        UnknownTokenError: If the role is unknown and the policy is strict.
    """
    resolved_mode = coerce_mode(mode)
    resolved_category = ColorCategory(category) if category is not None else None

    color = _find_color(role, resolved_category)
    if isinstance(color, SemanticColor):
        return color.for_mode(resolved_mode)
    if isinstance(color, str):
        return color
    return lookup("color", _NO_COLORS, role, get_settings().fallback_color, policy)


def get_semantic_color(
    category: ColorCategory | str,
    role: str,
    mode: ThemeMode | str,
    *,
    policy: TokenLookupPolicy | str | None = None,
) -> str:
    """Category-first spelling of ``resolve_color``."""
    return resolve_color(role, mode, category, policy=policy)


# =============================================================================
# Theme Context
# =============================================================================


class ThemeContext:
    """Holds the current mode and notifies listeners when it changes.

    ``set_mode``/``toggle`` are the only writers. The switch is a single
    assignment, so readers see either the old mode or the new one, and
    listeners run after the new mode is in place.
    """

    def __init__(self, initial_mode: ThemeMode | str | None = None) -> None:
        if initial_mode is None:
            initial_mode = get_settings().default_theme_mode
        self._mode = coerce_mode(initial_mode)
        self._listeners: list[ThemeListener] = []

    def __repr__(self) -> str:
        return f"ThemeContext(mode={self._mode.value!r})"

    @property
    def mode(self) -> ThemeMode:
        return self._mode

    @property
    def is_dark(self) -> bool:
        return self._mode is ThemeMode.DARK

    def set_mode(self, mode: ThemeMode | str) -> ThemeMode:
        new_mode = coerce_mode(mode)
        if new_mode is self._mode:
            return new_mode

        previous = self._mode
        self._mode = new_mode
        logger.info(
            "theme_mode_changed", previous=previous.value, current=new_mode.value
        )
        for listener in list(self._listeners):
            listener(new_mode)
        return new_mode

    def toggle(self) -> ThemeMode:
        return self.set_mode(self._mode.toggled())

    def color(self, role: str, category: ColorCategory | str | None = None) -> str:
        return resolve_color(role, self._mode, category)

    def text_style(self, name: str) -> TextStyle:
        return get_text_style(name)

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


_current_context: ContextVar[ThemeContext | None] = ContextVar(
    "theme_context", default=None
)


@contextmanager
def theme_provider(
    initial_mode: ThemeMode | str | None = None,
    *,
    context: ThemeContext | None = None,
) -> Iterator[ThemeContext]:
    """Bind a ThemeContext for the duration of the block.

    Args:
        initial_mode: Starting mode for a new context (settings default if None).
        context: Reuse an existing context instead of creating one.
    """
    ctx = context if context is not None else ThemeContext(initial_mode)
    token = _current_context.set(ctx)
    try:
        yield ctx
    finally:
        _current_context.reset(token)


def use_theme() -> ThemeContext:
    """Get the ThemeContext bound by the nearest ``theme_provider``.

    Raises:
        ThemeContextError: If no provider is active.
    """
    ctx = _current_context.get()
    if ctx is None:
        raise ThemeContextError()
    return ctx


# =============================================================================
# CSS Generation
# =============================================================================


def _kebab(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


def generate_css_variables(mode: ThemeMode | str) -> list[str]:
    """CSS custom property declarations for every semantic token in a mode."""
    resolved_mode = coerce_mode(mode)
    css_vars: list[str] = []

    for table in SEMANTIC_COLORS.values():
        for role, color in table.items():
            css_vars.append(f"--color-{_kebab(role)}: {color.for_mode(resolved_mode)};")

    for role, value in ACCENT_COLORS.items():
        css_vars.append(f"--accent-{role}: {value};")

    for name, family in FONT_FAMILY.items():
        css_vars.append(f"--font-{name}: {family};")

    for key, value in BORDER_RADIUS.items():
        css_vars.append(f"--radius-{key}: {value};")

    for key, value in SHADOWS.items():
        css_vars.append(f"--shadow-{key}: {value};")

    for key, value in SPACING.items():
        css_vars.append(f"--spacing-{key}: {value};")

    return css_vars


def generate_css_root(mode: ThemeMode | str = ThemeMode.LIGHT) -> str:
    """Generate a CSS :root block with the variables for one mode."""
    declarations = "\n    ".join(generate_css_variables(mode))
    return f"""
:root {{
    {declarations}
}}
"""


def generate_full_css(include_dark: bool = True) -> str:
    """Generate CSS with light variables and, optionally, dark overrides.

    Dark values apply both under ``prefers-color-scheme: dark`` and to any
    subtree marked ``data-theme="dark"``.
    """
    css_parts = [
        "/* Imaginify Design System - Generated CSS Variables */",
        generate_css_root(ThemeMode.LIGHT),
    ]

    if include_dark:
        dark = "\n        ".join(generate_css_variables(ThemeMode.DARK))
        dark_scoped = "\n    ".join(generate_css_variables(ThemeMode.DARK))
        css_parts.append(f"""
@media (prefers-color-scheme: dark) {{
    :root {{
        {dark}
    }}
}}

[data-theme="dark"] {{
    {dark_scoped}
}}
""")

    return "\n".join(css_parts)


def theme_gradient(mode: ThemeMode | str) -> str:
    """Diagonal gradient from the window background to the content background."""
    resolved_mode = coerce_mode(mode)
    start = BACKGROUND_COLORS["windowBackground"].for_mode(resolved_mode)
    end = BACKGROUND_COLORS["contentBackground"].for_mode(resolved_mode)
    return f"linear-gradient(135deg, {start} 0%, {end} 100%)"
