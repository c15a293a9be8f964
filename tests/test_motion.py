import pytest
from structlog.testing import capture_logs

from imaginify.design_system.motion import (
    BUTTON_HOVER,
    BUTTON_TAP,
    FADE,
    POP,
    PRESETS,
    SLIDE_FROM_LEFT,
    SLIDE_FROM_TOP,
    TRANSITIONS,
    AnchorRect,
    Keyframe,
    Presence,
    PresenceState,
    SheetPosition,
    popover_position,
    render_modal,
    render_motion_button,
    render_motion_div,
    render_popover,
    render_sheet,
    render_tooltip,
    sheet_preset,
)
from imaginify.exceptions import PresenceTransitionError


class TestPresets:
    def test_catalog(self) -> None:
        assert set(PRESETS) == {
            "fade",
            "slide_from_top",
            "slide_from_bottom",
            "slide_from_left",
            "slide_from_right",
            "scale",
            "pop",
        }

    def test_slide_from_left(self) -> None:
        assert SLIDE_FROM_LEFT.initial == Keyframe(opacity=0, x=-20)
        assert SLIDE_FROM_LEFT.animate == Keyframe(opacity=1, x=0)
        assert SLIDE_FROM_LEFT.exit == SLIDE_FROM_LEFT.initial

    def test_slides_are_gentle_springs(self) -> None:
        gentle = TRANSITIONS["gentle"]

        assert SLIDE_FROM_TOP.transition is gentle
        assert (gentle.kind, gentle.damping, gentle.stiffness, gentle.duration) == ("spring", 25, 300, 0.2)

    def test_pop_is_stiff_spring(self) -> None:
        assert POP.initial.scale == 0.8
        assert POP.transition.kind == "spring"
        assert POP.transition.stiffness == 500
        assert POP.transition.duration == 0.15

    def test_button_feedback(self) -> None:
        assert BUTTON_HOVER.scale == 1.03
        assert BUTTON_TAP.scale == 0.98


class TestKeyframe:
    def test_sparse_dict(self) -> None:
        assert Keyframe(opacity=0, y=-20).as_dict() == {"opacity": 0, "y": -20}

    def test_to_style(self) -> None:
        assert Keyframe(opacity=0.5, x=-20, scale=0.95).to_style() == {
            "opacity": "0.5",
            "transform": "translateX(-20px) scale(0.95)",
        }

    def test_interpolate(self) -> None:
        halfway = Keyframe(opacity=0, x=-20).interpolate(Keyframe(opacity=1, x=0), 0.5)

        assert halfway == Keyframe(opacity=0.5, x=-10)

    def test_interpolate_clamps_progress(self) -> None:
        assert Keyframe(opacity=0).interpolate(Keyframe(opacity=1), 3) == Keyframe(opacity=1)

    def test_transition_css(self) -> None:
        assert TRANSITIONS["quick"].to_css("opacity") == "opacity 150ms cubic-bezier(0, 0, 0.58, 1)"


class TestPresence:
    def test_full_lifecycle(self) -> None:
        events: list[str] = []
        presence = Presence(
            FADE,
            on_enter_complete=lambda: events.append("entered"),
            on_exit_complete=lambda: events.append("exited"),
        )
        assert presence.state is PresenceState.CLOSED
        assert not presence.is_mounted

        presence.show()
        assert presence.state is PresenceState.ENTERING
        assert presence.advance(0.1) is PresenceState.ENTERING
        assert presence.advance(0.1) is PresenceState.OPEN

        presence.hide()
        assert presence.state is PresenceState.EXITING
        assert presence.is_mounted
        presence.finish()

        assert presence.state is PresenceState.CLOSED
        assert events == ["entered", "exited"]

    def test_show_and_hide_are_idempotent(self) -> None:
        presence = Presence(FADE)
        presence.hide()
        assert presence.state is PresenceState.CLOSED

        presence.show()
        presence.finish()
        presence.show()
        assert presence.state is PresenceState.OPEN

    def test_hide_mid_entrance_reverses_from_current_position(self) -> None:
        presence = Presence(FADE, duration=1.0)
        presence.show()
        presence.advance(0.3)
        entering = presence.current_keyframe()

        presence.hide()

        assert presence.state is PresenceState.EXITING
        assert presence.progress == pytest.approx(0.7)
        assert presence.current_keyframe().opacity == pytest.approx(entering.opacity)

    def test_reverse_exit_back_to_open(self) -> None:
        entered: list[bool] = []
        presence = Presence(FADE, duration=1.0, on_enter_complete=lambda: entered.append(True))
        presence.sync(True)
        presence.finish()
        presence.sync(False)
        presence.advance(0.25)

        assert presence.sync(True) is PresenceState.ENTERING
        assert presence.advance(0.25) is PresenceState.OPEN
        assert entered == [True, True]

    def test_zero_duration_settles_immediately(self) -> None:
        presence = Presence(FADE, duration=0)

        presence.show()
        assert presence.state is PresenceState.OPEN
        presence.hide()
        assert presence.state is PresenceState.CLOSED

    def test_finish_when_settled_is_an_error(self) -> None:
        with pytest.raises(PresenceTransitionError) as exc:
            Presence().finish()

        assert exc.value.context == {"state": "closed", "event": "finish"}

    def test_negative_advance(self) -> None:
        with pytest.raises(ValueError):
            Presence().advance(-1)

    def test_keyframes_by_state(self) -> None:
        presence = Presence(SLIDE_FROM_LEFT)
        assert presence.current_keyframe() == SLIDE_FROM_LEFT.initial

        presence.show()
        presence.finish()
        assert presence.current_keyframe() == SLIDE_FROM_LEFT.animate

    def test_transitions_are_logged(self) -> None:
        presence = Presence(FADE)
        with capture_logs() as logs:
            presence.show()
            presence.finish()

        assert [(log["event"], log["trigger"], log["current"]) for log in logs] == [
            ("presence_transition", "show", "entering"),
            ("presence_transition", "finish", "open"),
        ]


class TestModal:
    def test_closed_renders_nothing(self) -> None:
        assert render_modal(False, None, "Body") is None

    def test_open_modal(self) -> None:
        closed: list[bool] = []
        modal = render_modal(True, lambda: closed.append(True), "Body")

        assert modal is not None
        content = modal.find_by_role("modal")
        assert content is not None
        assert content.text_content() == "Body"
        assert content.motion.preset is SLIDE_FROM_TOP
        assert content.motion.transition is TRANSITIONS["gentle"]

        modal.find_by_role("backdrop").trigger("click")  # type: ignore[union-attr]
        assert closed == [True]

    def test_content_stacks_above_backdrop(self) -> None:
        modal = render_modal(True, None, "Body")

        assert modal is not None
        backdrop = modal.find_by_role("backdrop")
        content = modal.find_by_role("modal")
        assert int(content.style["z-index"]) > int(backdrop.style["z-index"])  # type: ignore[union-attr]

    def test_modal_stays_mounted_while_exiting(self) -> None:
        presence = Presence(SLIDE_FROM_TOP)
        render_modal(True, None, "Body", presence=presence)
        presence.finish()

        exiting = render_modal(False, None, "Body", presence=presence)
        assert exiting is not None
        assert exiting.find_by_role("modal").motion.state is PresenceState.EXITING  # type: ignore[union-attr]

        presence.finish()
        assert render_modal(False, None, "Body", presence=presence) is None

    def test_backdrop_fades_out_with_content(self) -> None:
        presence = Presence()
        render_modal(True, None, "Body", presence=presence)
        presence.finish()
        render_modal(False, None, "Body", presence=presence)
        presence.advance(0.1)

        modal = render_modal(False, None, "Body", presence=presence)

        assert modal is not None
        backdrop = modal.find_by_role("backdrop")
        content = modal.find_by_role("modal")
        assert backdrop.style["opacity"] == "0.5"  # type: ignore[union-attr]
        assert content.style["opacity"] == "0.5"  # type: ignore[union-attr]
        assert content.style["transform"] == "translateY(-10px)"  # type: ignore[union-attr]
        assert backdrop.motion.state is PresenceState.EXITING  # type: ignore[union-attr]


class TestSheet:
    def test_left_sheet_slides_from_left(self) -> None:
        sheet = render_sheet(True, lambda: None, "Panel", position="left")

        assert sheet is not None
        content = sheet.find_by_role("sheet")
        assert content is not None
        preset = content.motion.preset
        assert preset is SLIDE_FROM_LEFT
        assert (preset.initial.x, preset.initial.opacity) == (-20, 0)
        assert (preset.animate.x, preset.animate.opacity) == (0, 1)
        assert "left-0" in content.classes

    def test_left_sheet_presence_follows_sheet_preset(self) -> None:
        presence = Presence()

        sheet = render_sheet(True, None, "Panel", position="left", presence=presence)

        assert sheet is not None
        content = sheet.find_by_role("sheet")
        assert content is not None
        assert content.style["transform"] == "translateX(-20px)"
        assert content.style["opacity"] == "0"
        assert content.style["transition"].startswith("all 200ms")
        assert presence.preset is SLIDE_FROM_LEFT
        assert presence.duration == TRANSITIONS["gentle"].duration

        presence.advance(0.1)
        halfway = render_sheet(True, None, "Panel", position="left", presence=presence)
        assert halfway.find_by_role("sheet").style["transform"] == "translateX(-10px)"  # type: ignore[union-attr]

        presence.advance(0.1)
        settled = render_sheet(True, None, "Panel", position="left", presence=presence)
        assert presence.state is PresenceState.OPEN
        assert settled.find_by_role("sheet").style["transform"] == "translateX(0px)"  # type: ignore[union-attr]

    @pytest.mark.parametrize(
        ("position", "preset_name"),
        [("bottom", "slide_from_bottom"), ("top", "slide_from_top"), ("right", "slide_from_right")],
    )
    def test_position_selects_preset(self, position: str, preset_name: str) -> None:
        assert sheet_preset(position).name == preset_name

    def test_closed_sheet(self) -> None:
        assert render_sheet(False, None, "Panel", position=SheetPosition.TOP) is None

    def test_unknown_position(self) -> None:
        with pytest.raises(ValueError):
            render_sheet(True, None, "Panel", position="center")


class TestPopover:
    def test_position_below_anchor(self) -> None:
        anchor = AnchorRect(top=100, left=40, width=80, height=24)

        assert popover_position(anchor) == (124, 40)
        assert popover_position(anchor, scroll=(10, 200)) == (324, 50)
        assert popover_position(None) == (0, 0)

    def test_render(self) -> None:
        closed: list[bool] = []
        popover = render_popover(
            True, lambda: closed.append(True), "Menu", anchor=AnchorRect(top=10, left=20, height=30)
        )

        assert popover is not None
        content = popover.find_by_role("popover")
        assert content is not None
        assert content.style["top"] == "40px"
        assert content.style["left"] == "20px"
        assert content.motion.preset.name == "slide_from_right"

        popover.find_by_role("backdrop").trigger("click")  # type: ignore[union-attr]
        assert closed == [True]

    def test_closed(self) -> None:
        assert render_popover(False, None, "Menu") is None


class TestTooltip:
    def test_hidden_tooltip_only_wraps_children(self) -> None:
        tooltip = render_tooltip("Target", "Tip", False)

        assert tooltip.find_by_role("tooltip") is None
        assert tooltip.text_content() == "Target"

    def test_visible_tooltip(self) -> None:
        tooltip = render_tooltip("Target", "Tip", True)
        bubble = tooltip.find_by_role("tooltip")

        assert bubble is not None
        assert bubble.text_content() == "Tip"
        assert bubble.motion.preset is FADE
        assert bubble.motion.transition.duration == 0.1
        assert bubble.style["background-color"] == "#1f2937"

    def test_explicit_presence_duration_sets_css_timing(self) -> None:
        presence = Presence(duration=1.0)

        tooltip = render_tooltip("Target", "Tip", True, presence=presence)
        bubble = tooltip.find_by_role("tooltip")

        assert bubble is not None
        assert bubble.motion.transition.duration == 1.0
        assert bubble.style["transition"].startswith("all 1000ms")
        assert bubble.style["opacity"] == "0"


class TestMotionWrappers:
    def test_motion_div_fades_in(self) -> None:
        div = render_motion_div("Content")

        assert div.motion.preset is FADE
        assert div.style["opacity"] == "1"

    def test_motion_button(self) -> None:
        clicks: list[bool] = []
        button = render_motion_button("Go", on_click=lambda: clicks.append(True))

        button.trigger("click")

        assert clicks == [True]
        assert button.motion.while_hover is BUTTON_HOVER
        assert button.motion.while_tap is BUTTON_TAP
