"""Materials: translucent, blurred surfaces.

A material is a backdrop color per mode plus a blur radius. Rendering one
applies ``backdrop-filter`` and the label color so any content placed on
the surface stays readable.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final

from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.elements import Child, Element, Handler, as_children
from imaginify.design_system.layout import get_radius, get_spacing
from imaginify.design_system.themes import coerce_mode, resolve_color
from imaginify.design_system.utils import is_color, scale_alpha
from imaginify.exceptions import TokenDefinitionError


class MaterialType(str, Enum):
    """Named surface materials."""

    TITLEBAR = "titlebar"
    SIDEBAR = "sidebar"
    POPOVER = "popover"
    MENU = "menu"
    HUD = "hud"
    HEADER_VIEW = "headerView"
    SHEET = "sheet"
    TOOLTIP = "tooltip"


class Intensity(str, Enum):
    """Vibrancy strength for ``render_vibrant_view``."""

    THIN = "thin"
    REGULAR = "regular"
    THICK = "thick"


@dataclass(frozen=True)
class MaterialSpec:
    light: str
    dark: str
    blur_px: int

    def backdrop(self, mode: ThemeMode | str) -> str:
        return self.light if coerce_mode(mode) is ThemeMode.LIGHT else self.dark


@dataclass(frozen=True)
class IntensityScale:
    alpha: float
    blur: float


MATERIALS: Final[Mapping[MaterialType, MaterialSpec]] = MappingProxyType({
    MaterialType.TITLEBAR: MaterialSpec("rgba(245, 245, 245, 0.7)", "rgba(40, 40, 40, 0.6)", 20),
    MaterialType.SIDEBAR: MaterialSpec("rgba(245, 245, 245, 0.6)", "rgba(40, 40, 40, 0.5)", 20),
    MaterialType.POPOVER: MaterialSpec("rgba(255, 255, 255, 0.8)", "rgba(55, 55, 55, 0.8)", 24),
    MaterialType.MENU: MaterialSpec("rgba(255, 255, 255, 0.8)", "rgba(55, 55, 55, 0.8)", 18),
    MaterialType.HUD: MaterialSpec("rgba(70, 70, 72, 0.8)", "rgba(30, 30, 32, 0.8)", 16),
    MaterialType.HEADER_VIEW: MaterialSpec("rgba(245, 245, 245, 0.6)", "rgba(40, 40, 40, 0.5)", 10),
    MaterialType.SHEET: MaterialSpec("rgba(255, 255, 255, 0.9)", "rgba(55, 55, 55, 0.9)", 22),
    MaterialType.TOOLTIP: MaterialSpec("rgba(70, 70, 72, 0.9)", "rgba(30, 30, 32, 0.9)", 12),
})

INTENSITY_SCALES: Final[Mapping[Intensity, IntensityScale]] = MappingProxyType({
    Intensity.THIN: IntensityScale(alpha=0.625, blur=0.5),
    Intensity.REGULAR: IntensityScale(alpha=1.0, blur=1.0),
    Intensity.THICK: IntensityScale(alpha=1.125, blur=1.5),
})


def _validate_materials() -> None:
    for material in MaterialType:
        spec = MATERIALS.get(material)
        if spec is None:
            raise TokenDefinitionError("material", material.value, "missing definition")
        if not (is_color(spec.light) and is_color(spec.dark)):
            raise TokenDefinitionError("material", material.value, "backdrop is not a color")
        if spec.light == spec.dark:
            raise TokenDefinitionError("material", material.value, "light and dark backdrops are identical")
        if spec.blur_px <= 0:
            raise TokenDefinitionError("material", material.value, "blur radius must be positive")
    for intensity in Intensity:
        if intensity not in INTENSITY_SCALES:
            raise TokenDefinitionError("intensity", intensity.value, "missing multipliers")


_validate_materials()


def blur_filter(radius_px: int) -> str:
    return f"blur({radius_px}px)"


def material_style(
    material: MaterialType | str,
    mode: ThemeMode | str,
    *,
    padding: str | None = "4",
    margin: str | None = "0",
    radius: str | None = "lg",
) -> dict[str, str]:
    """Inline style for a material surface.

    Args:
        material: Material name.
        mode: Light or dark.
        padding: Spacing token for padding (None to omit).
        margin: Spacing token for margin (None to omit).
        radius: Border-radius token (None to omit).
    """
    spec = MATERIALS[MaterialType(material)]
    blur = blur_filter(spec.blur_px)
    style = {
        "background-color": spec.backdrop(mode),
        "backdrop-filter": blur,
        "-webkit-backdrop-filter": blur,
        "color": resolve_color("label", mode),
    }
    if padding is not None:
        style["padding"] = get_spacing(padding)
    if margin is not None:
        style["margin"] = get_spacing(margin)
    if radius is not None:
        style["border-radius"] = get_radius(radius)
    return style


def vibrant_style(
    material: MaterialType | str,
    mode: ThemeMode | str,
    intensity: Intensity | str = Intensity.REGULAR,
) -> dict[str, str]:
    """Material style with alpha and blur scaled by intensity."""
    spec = MATERIALS[MaterialType(material)]
    scale = INTENSITY_SCALES[Intensity(intensity)]
    blur = blur_filter(max(1, round(spec.blur_px * scale.blur)))
    return {
        "background-color": scale_alpha(spec.backdrop(mode), scale.alpha),
        "backdrop-filter": blur,
        "-webkit-backdrop-filter": blur,
        "color": resolve_color("label", mode),
    }


def render_material(
    children: Child | Iterable[Child] | None,
    mode: ThemeMode | str,
    material: MaterialType | str = MaterialType.POPOVER,
    *,
    padding: str = "4",
    margin: str = "0",
    radius: str = "lg",
    classes: Iterable[str] = (),
) -> Element:
    """Render a material surface around arbitrary content."""
    return Element(
        "div",
        style=material_style(material, mode, padding=padding, margin=margin, radius=radius),
        classes=["backdrop-blur-md", *classes],
        props={"data-material": MaterialType(material).value},
        children=as_children(children),
    )


def render_vibrant_view(
    children: Child | Iterable[Child] | None,
    mode: ThemeMode | str,
    material: MaterialType | str = MaterialType.POPOVER,
    intensity: Intensity | str = Intensity.REGULAR,
    *,
    classes: Iterable[str] = (),
) -> Element:
    return Element(
        "div",
        style=vibrant_style(material, mode, intensity),
        classes=["backdrop-blur", *classes],
        props={
            "data-material": MaterialType(material).value,
            "data-intensity": Intensity(intensity).value,
        },
        children=as_children(children),
    )


def render_background_material(
    mode: ThemeMode | str,
    material: MaterialType | str = MaterialType.POPOVER,
    *,
    on_click: Handler | None = None,
    classes: Iterable[str] = (),
) -> Element:
    """Full-screen blurred overlay; clicks go to ``on_click``."""
    style = material_style(material, mode, padding=None, margin=None, radius=None)
    del style["color"]
    return Element(
        "div",
        style=style,
        classes=[
            "fixed",
            "inset-0",
            "backdrop-blur-md",
            "flex",
            "items-center",
            "justify-center",
            *classes,
        ],
        props={"data-material": MaterialType(material).value},
    ).on("click", on_click)
