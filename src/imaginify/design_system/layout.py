"""Layout tokens on an 8-unit grid.

Spacing, breakpoints, container widths, radii, shadows and z-index layers.
Lookups go through the shared token policy: unknown keys either resolve to
a neutral default or raise, see ``tokens.lookup``.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from imaginify.design_system.tokens import TokenLookupPolicy, lookup

# =============================================================================
# Spacing Scale (8pt grid)
# =============================================================================

SPACING: Final[Mapping[str, str]] = MappingProxyType({
    "0": "0px",
    "1": "2px",  # 1/4 grid
    "2": "4px",  # 1/2 grid
    "3": "6px",
    "4": "8px",  # 1 grid unit
    "5": "10px",
    "6": "12px",
    "7": "14px",
    "8": "16px",  # 2 grid units
    "10": "20px",
    "12": "24px",
    "14": "28px",
    "16": "32px",
    "20": "40px",
    "24": "48px",
    "32": "64px",
    "40": "80px",
    "48": "96px",
    "56": "112px",
    "64": "128px",
})

# =============================================================================
# Breakpoints (Responsive Design)
# =============================================================================

BREAKPOINTS: Final[Mapping[str, str]] = MappingProxyType({
    "xs": "0px",
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
})

CONTAINER: Final[Mapping[str, str]] = MappingProxyType({
    "sm": "540px",
    "md": "720px",
    "lg": "960px",
    "xl": "1140px",
    "2xl": "1320px",
})

# =============================================================================
# Border Radius
# =============================================================================

BORDER_RADIUS: Final[Mapping[str, str]] = MappingProxyType({
    "none": "0px",
    "sm": "4px",
    "md": "6px",
    "lg": "8px",
    "xl": "12px",
    "2xl": "16px",
    "3xl": "24px",
    "full": "9999px",  # pill
})

# =============================================================================
# Shadows (Elevation)
# =============================================================================

SHADOWS: Final[Mapping[str, str]] = MappingProxyType({
    "none": "none",
    "xs": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
    "sm": "0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px -1px rgba(0, 0, 0, 0.1)",
    "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -2px rgba(0, 0, 0, 0.1)",
    "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -4px rgba(0, 0, 0, 0.1)",
    "xl": "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 8px 10px -6px rgba(0, 0, 0, 0.1)",
    "2xl": "0 25px 50px -12px rgba(0, 0, 0, 0.25)",
    "inner": "inset 0 2px 4px 0 rgba(0, 0, 0, 0.05)",
})

# =============================================================================
# Z-Index Scale
# =============================================================================

Z_INDEX: Final[Mapping[str, str]] = MappingProxyType({
    "auto": "auto",
    "0": "0",
    "10": "10",
    "20": "20",
    "30": "30",
    "40": "40",
    "50": "50",
    "modal": "1000",
    "dropdown": "1000",
    "sticky": "1100",
    "fixed": "1200",
    "overlay": "1300",
    "drawer": "1400",
    "modalOverlay": "1500",
    "popover": "1600",
    "skipLink": "1700",
    "toast": "1800",
    "tooltip": "1900",
})

SAFE_AREA: Final[Mapping[str, str]] = MappingProxyType({
    "top": "env(titlebar-area-height, 28px)",
    "left": "0px",
    "right": "0px",
    "bottom": "0px",
})

GRID: Final[Mapping[str, int | str]] = MappingProxyType({
    "columns": 12,
    "gap": SPACING["4"],
    "gapSm": SPACING["2"],
    "gapLg": SPACING["8"],
})


def get_spacing(key: str, policy: TokenLookupPolicy | str | None = None) -> str:
    return lookup("spacing", SPACING, str(key), "0px", policy)


def get_breakpoint(key: str, policy: TokenLookupPolicy | str | None = None) -> str:
    return lookup("breakpoint", BREAKPOINTS, key, "0px", policy)


def get_container(key: str, policy: TokenLookupPolicy | str | None = None) -> str:
    return lookup("container", CONTAINER, key, "100%", policy)


def get_radius(key: str, policy: TokenLookupPolicy | str | None = None) -> str:
    return lookup("radius", BORDER_RADIUS, key, "0px", policy)


def get_shadow(key: str, policy: TokenLookupPolicy | str | None = None) -> str:
    return lookup("shadow", SHADOWS, key, "none", policy)


def get_z_index(key: str, policy: TokenLookupPolicy | str | None = None) -> str:
    return lookup("z_index", Z_INDEX, str(key), "auto", policy)


def media_query(breakpoint: str) -> str:
    """Build a min-width media query for a breakpoint key."""
    return f"@media (min-width: {get_breakpoint(breakpoint)})"


def responsive_style(
    base: str, md: str | None = None, lg: str | None = None
) -> dict[str, str | dict[str, str]]:
    """Width that steps up at the md and lg breakpoints.

    Media-query entries stay nested; ``elements.style_to_rules`` turns the
    whole mapping into a stylesheet.
    """
    style: dict[str, str | dict[str, str]] = {"width": base}
    if md:
        style[media_query("md")] = {"width": md}
    if lg:
        style[media_query("lg")] = {"width": lg}
    return style
