"""Typography tokens: font families and the named text-style hierarchy."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Final

from imaginify.design_system.tokens import TokenLookupPolicy, lookup

FONT_FAMILY: Final[Mapping[str, str]] = MappingProxyType({
    "text": "'SF Pro Text', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif",
    "display": "'SF Pro Display', -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif",
    "mono": "'SF Mono', 'SFMono-Regular', 'Consolas', 'Liberation Mono', 'Menlo', monospace",
    "serif": "'New York', 'Times New Roman', serif",
})


@dataclass(frozen=True)
class TextStyle:
    """A complete text style record."""

    font_size: str
    font_weight: str
    line_height: str
    letter_spacing: str
    font_family: str

    def to_style(self) -> dict[str, str]:
        """CSS declarations for this text style."""
        return {
            "font-size": self.font_size,
            "font-weight": self.font_weight,
            "line-height": self.line_height,
            "letter-spacing": self.letter_spacing,
            "font-family": self.font_family,
        }

    def as_dict(self) -> dict[str, str]:
        return asdict(self)


def _display(size: str, weight: str, line_height: str, tracking: str) -> TextStyle:
    return TextStyle(size, weight, line_height, tracking, FONT_FAMILY["display"])


def _text(size: str, weight: str, line_height: str, tracking: str) -> TextStyle:
    return TextStyle(size, weight, line_height, tracking, FONT_FAMILY["text"])


TEXT_STYLES: Final[Mapping[str, TextStyle]] = MappingProxyType({
    "title1": _display("28px", "bold", "1.2", "-0.005em"),
    "title2": _display("22px", "500", "1.2", "0.008em"),
    "title3": _display("20px", "500", "1.2", "0.006em"),
    "headline": _text("17px", "600", "1.2", "0.003em"),
    "body": _text("17px", "400", "1.4", "0.003em"),
    "callout": _text("16px", "400", "1.4", "0.003em"),
    "subhead": _text("15px", "400", "1.3", "0.003em"),
    "footnote": _text("13px", "400", "1.3", "-0.001em"),
    "caption1": _text("12px", "400", "1.3", "0.008em"),
    "caption2": _text("11px", "400", "1.2", "0.01em"),
    "code": TextStyle("14px", "400", "1.4", "0", FONT_FAMILY["mono"]),
})


def get_text_style(
    name: str, policy: TokenLookupPolicy | str | None = None
) -> TextStyle:
    """Get a named text style; unknown names fall back to ``body``."""
    return lookup("text_style", TEXT_STYLES, name, TEXT_STYLES["body"], policy)
