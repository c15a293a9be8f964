import pytest

from imaginify.design_system.colors import ThemeMode
from imaginify.design_system.materials import (
    INTENSITY_SCALES,
    MATERIALS,
    Intensity,
    MaterialType,
    blur_filter,
    material_style,
    render_background_material,
    render_material,
    render_vibrant_view,
    vibrant_style,
)
from imaginify.design_system.utils import is_color, parse_color


class TestMaterialTable:
    @pytest.mark.parametrize("material", list(MaterialType))
    def test_backdrops_are_distinct_colors(self, material: MaterialType) -> None:
        spec = MATERIALS[material]

        assert is_color(spec.light)
        assert is_color(spec.dark)
        assert spec.light != spec.dark

    @pytest.mark.parametrize("material", list(MaterialType))
    def test_blur_is_positive(self, material: MaterialType) -> None:
        assert MATERIALS[material].blur_px > 0

    def test_every_intensity_has_multipliers(self) -> None:
        assert set(INTENSITY_SCALES) == set(Intensity)
        assert INTENSITY_SCALES[Intensity.REGULAR].alpha == 1.0


class TestMaterialStyle:
    def test_sheet_light(self) -> None:
        style = material_style("sheet", "light")

        assert style == {
            "background-color": "rgba(255, 255, 255, 0.9)",
            "backdrop-filter": "blur(22px)",
            "-webkit-backdrop-filter": "blur(22px)",
            "color": "#000000",
            "padding": "8px",
            "margin": "0px",
            "border-radius": "8px",
        }

    def test_dark_mode_uses_dark_backdrop_and_label(self) -> None:
        style = material_style(MaterialType.POPOVER, ThemeMode.DARK)

        assert style["background-color"] == "rgba(55, 55, 55, 0.8)"
        assert style["color"] == "#ffffff"

    def test_header_view_by_name(self) -> None:
        assert material_style("headerView", "light")["backdrop-filter"] == blur_filter(10)

    def test_omitted_box_properties(self) -> None:
        style = material_style("menu", "light", padding=None, margin=None, radius=None)

        assert not {"padding", "margin", "border-radius"} & style.keys()

    def test_unknown_material(self) -> None:
        with pytest.raises(ValueError):
            material_style("glass", "light")


class TestVibrancy:
    def test_regular_matches_material(self) -> None:
        style = vibrant_style("popover", "light")

        assert style["background-color"] == "rgba(255, 255, 255, 0.8)"
        assert style["backdrop-filter"] == "blur(24px)"

    def test_thin_reduces_alpha_and_blur(self) -> None:
        style = vibrant_style("popover", "light", "thin")

        assert style["background-color"] == "rgba(255, 255, 255, 0.5)"
        assert style["backdrop-filter"] == "blur(12px)"

    def test_thick_increases_alpha_and_blur(self) -> None:
        style = vibrant_style("popover", "dark", Intensity.THICK)

        assert parse_color(style["background-color"]).a == pytest.approx(0.9)
        assert style["backdrop-filter"] == "blur(36px)"

    def test_alpha_never_exceeds_opaque(self) -> None:
        style = vibrant_style("sheet", "light", "thick")

        assert parse_color(style["background-color"]).a <= 1.0


class TestRenderMaterial:
    def test_wraps_children(self) -> None:
        surface = render_material(["Hello"], "dark", "sheet", padding="6")

        assert surface.text_content() == "Hello"
        assert surface.props["data-material"] == "sheet"
        assert surface.style["padding"] == "12px"
        assert surface.style["color"] == "#ffffff"

    def test_vibrant_view(self) -> None:
        view = render_vibrant_view("x", "light", "hud", "thin")

        assert view.props == {"data-material": "hud", "data-intensity": "thin"}

    def test_background_material_click(self) -> None:
        clicks: list[bool] = []
        overlay = render_background_material("light", on_click=lambda: clicks.append(True))

        overlay.trigger("click")

        assert clicks == [True]
        assert "color" not in overlay.style
        assert "fixed" in overlay.classes
