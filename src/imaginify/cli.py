"""Command-line interface for the Imaginify design system."""

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from imaginify import __version__
from imaginify.config import get_settings
from imaginify.design_system.colors import ACCENT_COLORS, SEMANTIC_COLORS, ThemeMode
from imaginify.design_system.layout import (
    BORDER_RADIUS,
    BREAKPOINTS,
    CONTAINER,
    GRID,
    SAFE_AREA,
    SHADOWS,
    SPACING,
    Z_INDEX,
)
from imaginify.design_system.materials import INTENSITY_SCALES, MATERIALS
from imaginify.design_system.motion import PRESETS, TRANSITIONS
from imaginify.design_system.themes import generate_css_root, generate_full_css
from imaginify.design_system.typography import FONT_FAMILY, TEXT_STYLES
from imaginify.logging_config import configure_logging

TOKEN_CATEGORIES = ("colors", "layout", "typography", "materials", "motion")


def _color_tokens() -> dict[str, Any]:
    tokens: dict[str, Any] = {
        category.value: {role: asdict(color) for role, color in table.items()}
        for category, table in SEMANTIC_COLORS.items()
    }
    tokens["accent"] = dict(ACCENT_COLORS)
    return tokens


def _layout_tokens() -> dict[str, Any]:
    return {
        "spacing": dict(SPACING),
        "breakpoints": dict(BREAKPOINTS),
        "container": dict(CONTAINER),
        "borderRadius": dict(BORDER_RADIUS),
        "shadows": dict(SHADOWS),
        "zIndex": dict(Z_INDEX),
        "safeArea": dict(SAFE_AREA),
        "grid": dict(GRID),
    }


def _typography_tokens() -> dict[str, Any]:
    return {
        "fontFamily": dict(FONT_FAMILY),
        "textStyles": {name: style.as_dict() for name, style in TEXT_STYLES.items()},
    }


def _material_tokens() -> dict[str, Any]:
    return {
        "materials": {material.value: asdict(spec) for material, spec in MATERIALS.items()},
        "intensity": {intensity.value: asdict(scale) for intensity, scale in INTENSITY_SCALES.items()},
    }


def _motion_tokens() -> dict[str, Any]:
    return {
        "transitions": {name: asdict(transition) for name, transition in TRANSITIONS.items()},
        "presets": {
            name: {
                "initial": preset.initial.as_dict(),
                "animate": preset.animate.as_dict(),
                "exit": preset.exit.as_dict(),
                "transition": asdict(preset.transition),
            }
            for name, preset in PRESETS.items()
        },
    }


_TOKEN_DUMPERS = {
    "colors": _color_tokens,
    "layout": _layout_tokens,
    "typography": _typography_tokens,
    "materials": _material_tokens,
    "motion": _motion_tokens,
}


def _write_output(text: str, output: str | None) -> None:
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        print(f"Wrote {path}")
    else:
        print(text)


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"{get_settings().app_name} v{__version__}")
    return 0


def cmd_css(args: argparse.Namespace) -> int:
    """Emit CSS custom properties for the theme tokens."""
    if args.mode:
        css = generate_css_root(ThemeMode(args.mode))
    else:
        css = generate_full_css(include_dark=not args.light_only)
    _write_output(css.strip() + "\n", args.output)
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Dump token tables as JSON."""
    if args.category:
        data = _TOKEN_DUMPERS[args.category]()
    else:
        data = {category: dump() for category, dump in _TOKEN_DUMPERS.items()}
    _write_output(json.dumps(data, indent=2), args.output)
    return 0


def cmd_ui(args: argparse.Namespace) -> int:
    """Launch the NiceGUI design-system showcase."""
    try:
        import nicegui  # noqa: F401
    except ImportError:
        print("Frontend dependencies are not installed.")
        print("Install with: pip install 'imaginify[frontend]'")
        return 1

    from imaginify.ui.main import run

    configure_logging(get_settings())
    run(host=args.host, port=args.port, reload=not args.no_reload)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="imaginify",
        description="Imaginify - macOS-style design system tokens and components",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # css command
    css_parser = subparsers.add_parser("css", help="Generate CSS custom properties")
    css_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ThemeMode],
        default=None,
        help="Emit a single :root block for one mode",
    )
    css_parser.add_argument(
        "--light-only",
        action="store_true",
        help="Omit the dark-mode overrides",
    )
    css_parser.add_argument("--output", "-o", default=None, help="Write to a file")
    css_parser.set_defaults(func=cmd_css)

    # tokens command
    tokens_parser = subparsers.add_parser("tokens", help="Dump design tokens as JSON")
    tokens_parser.add_argument(
        "--category",
        "-c",
        choices=TOKEN_CATEGORIES,
        default=None,
        help="Only dump one token category",
    )
    tokens_parser.add_argument("--output", "-o", default=None, help="Write to a file")
    tokens_parser.set_defaults(func=cmd_tokens)

    # ui command
    ui_parser = subparsers.add_parser("ui", help="Launch the NiceGUI showcase")
    ui_parser.add_argument("--host", default=None, help="Host to bind (default: from settings)")
    ui_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to run frontend (default: from settings)",
    )
    ui_parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable hot reload",
    )
    ui_parser.set_defaults(func=cmd_ui)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
