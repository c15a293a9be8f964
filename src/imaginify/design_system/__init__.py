"""macOS-style design system for Imaginify.

Token stores (colors, layout, typography), a theme resolver, translucent
materials, a control library, window chrome and a motion layer. Every
component returns an ``Element`` tree, so the same output can be mounted
in NiceGUI, exported as HTML or inspected in tests.

Usage:
    from imaginify.design_system import (
        ThemeMode, resolve_color, render_button, render_window,
    )

    print(resolve_color("label", ThemeMode.DARK))  # #ffffff

    window = render_window(
        render_button("Save", ThemeMode.LIGHT, on_click=save),
        ThemeMode.LIGHT,
        title="Settings",
    )
    print(window.to_html())
"""

from imaginify.design_system.colors import (
    ACCENT_COLORS,
    BACKGROUND_COLORS,
    CONTENT_COLORS,
    CONTROL_COLORS,
    FILL_COLORS,
    SEMANTIC_COLORS,
    SEPARATOR_COLORS,
    ColorCategory,
    SemanticColor,
    ThemeMode,
    get_color,
)
from imaginify.design_system.layout import (
    BORDER_RADIUS,
    BREAKPOINTS,
    CONTAINER,
    GRID,
    SAFE_AREA,
    SHADOWS,
    SPACING,
    Z_INDEX,
    get_breakpoint,
    get_container,
    get_radius,
    get_shadow,
    get_spacing,
    get_z_index,
    media_query,
    responsive_style,
)
from imaginify.design_system.typography import (
    FONT_FAMILY,
    TEXT_STYLES,
    TextStyle,
    get_text_style,
)
from imaginify.design_system.tokens import TokenLookupPolicy, lookup_policy
from imaginify.design_system.themes import (
    ThemeContext,
    generate_css_root,
    generate_css_variables,
    generate_full_css,
    get_semantic_color,
    is_dark_theme,
    resolve_color,
    theme_gradient,
    theme_provider,
    toggle_mode,
    use_theme,
)
from imaginify.design_system.elements import Element
from imaginify.design_system.materials import (
    MATERIALS,
    Intensity,
    MaterialType,
    material_style,
    render_background_material,
    render_material,
    render_vibrant_view,
    vibrant_style,
)
from imaginify.design_system.controls import (
    ButtonSize,
    ButtonVariant,
    SelectOption,
    Stepper,
    button_style,
    render_button,
    render_checkbox,
    render_date_picker,
    render_popup_button,
    render_radio_button,
    render_search_input,
    render_stepper,
    render_text_input,
)
from imaginify.design_system.window import (
    render_sidebar,
    render_sidebar_item,
    render_titlebar,
    render_toolbar,
    render_window,
)
from imaginify.design_system.motion import (
    BUTTON_HOVER,
    BUTTON_TAP,
    PRESETS,
    TRANSITIONS,
    AnchorRect,
    Keyframe,
    Presence,
    PresenceState,
    SheetPosition,
    Transition,
    TransitionPreset,
    popover_position,
    render_modal,
    render_motion_button,
    render_motion_div,
    render_popover,
    render_sheet,
    render_tooltip,
)
from imaginify.design_system.utils import (
    format_number,
    generate_id,
    is_light_color,
    parse_color,
    rem_to_px,
    text_color_for_background,
    with_alpha,
)

__all__ = [
    # Colors
    "ThemeMode",
    "SemanticColor",
    "ColorCategory",
    "CONTENT_COLORS",
    "BACKGROUND_COLORS",
    "ACCENT_COLORS",
    "FILL_COLORS",
    "SEPARATOR_COLORS",
    "CONTROL_COLORS",
    "SEMANTIC_COLORS",
    "get_color",
    # Layout
    "SPACING",
    "BREAKPOINTS",
    "CONTAINER",
    "BORDER_RADIUS",
    "SHADOWS",
    "Z_INDEX",
    "SAFE_AREA",
    "GRID",
    "get_spacing",
    "get_breakpoint",
    "get_container",
    "get_radius",
    "get_shadow",
    "get_z_index",
    "media_query",
    "responsive_style",
    # Typography
    "FONT_FAMILY",
    "TEXT_STYLES",
    "TextStyle",
    "get_text_style",
    # Themes
    "TokenLookupPolicy",
    "lookup_policy",
    "ThemeContext",
    "theme_provider",
    "use_theme",
    "resolve_color",
    "get_semantic_color",
    "toggle_mode",
    "is_dark_theme",
    "theme_gradient",
    "generate_css_variables",
    "generate_css_root",
    "generate_full_css",
    # Materials
    "MaterialType",
    "Intensity",
    "MATERIALS",
    "material_style",
    "vibrant_style",
    "render_material",
    "render_vibrant_view",
    "render_background_material",
    # Controls
    "Element",
    "ButtonVariant",
    "ButtonSize",
    "SelectOption",
    "Stepper",
    "button_style",
    "render_button",
    "render_text_input",
    "render_search_input",
    "render_checkbox",
    "render_radio_button",
    "render_popup_button",
    "render_stepper",
    "render_date_picker",
    # Window
    "render_titlebar",
    "render_toolbar",
    "render_sidebar",
    "render_sidebar_item",
    "render_window",
    # Motion
    "Transition",
    "TRANSITIONS",
    "Keyframe",
    "TransitionPreset",
    "PRESETS",
    "BUTTON_HOVER",
    "BUTTON_TAP",
    "Presence",
    "PresenceState",
    "SheetPosition",
    "AnchorRect",
    "popover_position",
    "render_modal",
    "render_sheet",
    "render_popover",
    "render_tooltip",
    "render_motion_div",
    "render_motion_button",
    # Utilities
    "parse_color",
    "with_alpha",
    "is_light_color",
    "text_color_for_background",
    "rem_to_px",
    "format_number",
    "generate_id",
]
