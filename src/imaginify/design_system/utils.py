"""Color parsing and small formatting helpers for the design system.

Everything here is pure and synchronous; nothing reads the theme state.
"""

import re
import uuid
from dataclasses import dataclass
from typing import Final

from imaginify.exceptions import InvalidColorError

_HEX_PATTERN: Final = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_PATTERN: Final = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([\d.]+)\s*)?\)$"
)

BASE_FONT_SIZE_PX: Final[int] = 16


@dataclass(frozen=True)
class RGBA:
    """A parsed color. Channels are 0-255, alpha is 0.0-1.0."""

    r: int
    g: int
    b: int
    a: float = 1.0

    @property
    def brightness(self) -> float:
        """Perceived brightness on the 0-255 scale."""
        return (self.r * 299 + self.g * 587 + self.b * 114) / 1000


def parse_color(value: str) -> RGBA:
    """Parse a hex (#rgb, #rrggbb, #rrggbbaa) or rgb()/rgba() color.

    Raises:
        InvalidColorError: If the value matches neither syntax or a channel
            is out of range.
    """
    text = value.strip()

    match = _HEX_PATTERN.match(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return RGBA(r, g, b, a)

    match = _RGB_PATTERN.match(text)
    if match:
        r, g, b = (int(match.group(i)) for i in (1, 2, 3))
        a = float(match.group(4)) if match.group(4) is not None else 1.0
        if max(r, g, b) > 255 or not 0.0 <= a <= 1.0:
            raise InvalidColorError(value)
        return RGBA(r, g, b, a)

    raise InvalidColorError(value)


def is_color(value: str) -> bool:
    """Check whether a string is a color this module can parse."""
    try:
        parse_color(value)
    except InvalidColorError:
        return False
    return True


def _format_alpha(alpha: float) -> str:
    return f"{round(alpha, 4):g}"


def format_rgba(color: RGBA) -> str:
    """Format a parsed color as an rgba() string."""
    return f"rgba({color.r}, {color.g}, {color.b}, {_format_alpha(color.a)})"


def with_alpha(value: str, alpha: float) -> str:
    """Return the color with its alpha replaced, clamped to [0, 1]."""
    color = parse_color(value)
    clamped = min(max(alpha, 0.0), 1.0)
    return format_rgba(RGBA(color.r, color.g, color.b, clamped))


def scale_alpha(value: str, factor: float) -> str:
    """Return the color with its alpha multiplied by factor, clamped to [0, 1]."""
    color = parse_color(value)
    return with_alpha(value, color.a * factor)


def is_light_color(value: str) -> bool:
    """Check whether a background color needs dark text.

    Formats that cannot be parsed count as light.
    """
    try:
        color = parse_color(value)
    except InvalidColorError:
        return True
    return color.brightness > 150


def text_color_for_background(background: str) -> str:
    """Pick black or white text for the given background color."""
    return "#000000" if is_light_color(background) else "#FFFFFF"


def rem_to_px(rem: float) -> float:
    return rem * BASE_FONT_SIZE_PX


def format_number(num: float, decimals: int = 2) -> str:
    return f"{num:.{decimals}f}"


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def generate_id(prefix: str = "macos") -> str:
    """Generate a short unique id for elements that need one (labels, anchors)."""
    return f"{prefix}-{uuid.uuid4().hex[:9]}"
