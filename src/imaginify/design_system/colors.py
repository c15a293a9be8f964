"""Semantic color tokens that adapt to light and dark mode.

Each semantic role maps to a light and a dark value. Values are hex
(#rrggbb or #rrggbbaa) or rgb(a) strings. Tables are validated when this
module is imported: a role without a usable value for both modes is a
definition error, never a runtime one.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final

from imaginify.exceptions import TokenDefinitionError
from imaginify.design_system.utils import is_color


class ThemeMode(str, Enum):
    """Presentation mode."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "ThemeMode":
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT


DEFAULT_MODE: Final[ThemeMode] = ThemeMode.LIGHT


@dataclass(frozen=True)
class SemanticColor:
    """A color role's value in each mode."""

    light: str
    dark: str

    def for_mode(self, mode: ThemeMode | str) -> str:
        return self.light if ThemeMode(mode) is ThemeMode.LIGHT else self.dark


class ColorCategory(str, Enum):
    """Groups of semantic color roles."""

    CONTENT = "content"
    BACKGROUND = "background"
    ACCENT = "accent"
    FILL = "fill"
    SEPARATOR = "separator"
    CONTROL = "control"


# =============================================================================
# Content Colors
# =============================================================================

CONTENT_COLORS: Final[Mapping[str, SemanticColor]] = MappingProxyType({
    "label": SemanticColor(light="#000000", dark="#ffffff"),
    "secondaryLabel": SemanticColor(light="#3c3c4399", dark="#ffffff99"),
    "tertiaryLabel": SemanticColor(light="#3c3c434d", dark="#ffffff4d"),
    "quaternaryLabel": SemanticColor(light="#3c3c432e", dark="#ffffff2e"),
    "link": SemanticColor(light="#007AFF", dark="#0A84FF"),
    "placeholderText": SemanticColor(light="#8e8e93", dark="#8e8e93"),
})

# =============================================================================
# Background Colors
# =============================================================================

BACKGROUND_COLORS: Final[Mapping[str, SemanticColor]] = MappingProxyType({
    "windowBackground": SemanticColor(light="#ffffff", dark="#1d1d1f"),
    "contentBackground": SemanticColor(light="#ffffff", dark="#2c2c2e"),
    "underWindowBackground": SemanticColor(light="#f2f2f7", dark="#121214"),
    "alternatingContentBackground": SemanticColor(light="#ffffff", dark="#1e1e1f"),
    "sidebarBackground": SemanticColor(light="#f2f2f7", dark="#2c2c2e"),
    "menuBackground": SemanticColor(light="#ffffffcc", dark="#2c2c2ecc"),
})

# =============================================================================
# System Accents (mode independent, user-selectable)
# =============================================================================

ACCENT_COLORS: Final[Mapping[str, str]] = MappingProxyType({
    "blue": "#007AFF",
    "purple": "#AF52DE",
    "pink": "#FF375F",
    "red": "#FF453A",
    "orange": "#FF9500",
    "yellow": "#FFCC00",
    "green": "#30D158",
    "graphite": "#8E8E93",
})

# =============================================================================
# System Fills (soft layers for cards and controls)
# =============================================================================

FILL_COLORS: Final[Mapping[str, SemanticColor]] = MappingProxyType({
    "primaryFill": SemanticColor(light="#78788033", dark="#78788033"),
    "secondaryFill": SemanticColor(light="#78788029", dark="#78788029"),
    "tertiaryFill": SemanticColor(light="#7878801a", dark="#7878801a"),
    "quaternaryFill": SemanticColor(light="#7878800f", dark="#7878800f"),
})

# =============================================================================
# Separators
# =============================================================================

SEPARATOR_COLORS: Final[Mapping[str, SemanticColor]] = MappingProxyType({
    "separator": SemanticColor(light="#c6c6c833", dark="#54545880"),
    "opaqueSeparator": SemanticColor(light="#c6c6c8", dark="#545458"),
})

# =============================================================================
# Control Palette (borders and states shared by the control library)
# =============================================================================

CONTROL_COLORS: Final[Mapping[str, SemanticColor]] = MappingProxyType({
    "controlBorder": SemanticColor(light="#d2d2d7", dark="#545458"),
    "controlAccent": SemanticColor(light="#007AFF", dark="#0A84FF"),
    "controlAccentText": SemanticColor(light="#ffffff", dark="#ffffff"),
    "disabledControlBackground": SemanticColor(light="#f0f0f0", dark="#3a3a3c"),
    "disabledControlText": SemanticColor(light="#c0c0c0", dark="#5a5a5c"),
    "searchIcon": SemanticColor(light="#8e8e93", dark="#a0a0a0"),
    "chevron": SemanticColor(light="#000000", dark="#FFFFFF"),
    "tooltipBackground": SemanticColor(light="#1f2937", dark="#1f2937"),
    "modalBackdrop": SemanticColor(light="rgba(0, 0, 0, 0.3)", dark="rgba(0, 0, 0, 0.3)"),
})

SEMANTIC_COLORS: Final[Mapping[ColorCategory, Mapping[str, SemanticColor]]] = MappingProxyType({
    ColorCategory.CONTENT: CONTENT_COLORS,
    ColorCategory.BACKGROUND: BACKGROUND_COLORS,
    ColorCategory.FILL: FILL_COLORS,
    ColorCategory.SEPARATOR: SEPARATOR_COLORS,
    ColorCategory.CONTROL: CONTROL_COLORS,
})

# Search order when a role is resolved without a category.
RESOLUTION_ORDER: Final[tuple[ColorCategory, ...]] = (
    ColorCategory.CONTENT,
    ColorCategory.BACKGROUND,
    ColorCategory.FILL,
    ColorCategory.SEPARATOR,
    ColorCategory.CONTROL,
    ColorCategory.ACCENT,
)


def get_color(color: SemanticColor, mode: ThemeMode | str) -> str:
    """Pick a semantic color's value for a mode."""
    return color.for_mode(mode)


def _validate_tables() -> None:
    seen: dict[str, ColorCategory] = {}
    for category, table in SEMANTIC_COLORS.items():
        for role, color in table.items():
            if role in seen:
                raise TokenDefinitionError(
                    "color", role, f"defined in both {seen[role].value} and {category.value}"
                )
            seen[role] = category
            for mode in ThemeMode:
                value = color.for_mode(mode)
                if not value or not is_color(value):
                    raise TokenDefinitionError(
                        "color", role, f"{mode.value} value {value!r} is not a color"
                    )
    for role, value in ACCENT_COLORS.items():
        if role in seen:
            raise TokenDefinitionError("color", role, "accent role shadows a semantic role")
        if not is_color(value):
            raise TokenDefinitionError("color", role, f"value {value!r} is not a color")


_validate_tables()
