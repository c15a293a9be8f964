# pyright: reportMissingImports=false

"""NiceGUI entry point for the design-system showcase."""

from __future__ import annotations

from typing import Any

from imaginify.config import get_settings
from imaginify.design_system.themes import generate_full_css
from imaginify.integrations.interfaces import Toast


def _require_nicegui() -> Any:
    try:
        from nicegui import ui
    except ImportError as e:  # pragma: no cover
        raise ImportError(
            "NiceGUI is required for the frontend. Install with 'imaginify[frontend]'."
        ) from e
    return ui


def add_global_styles() -> None:
    ui = _require_nicegui()
    ui.add_head_html(f"<style>\n{generate_full_css()}\n</style>")


def create_ui() -> None:
    ui = _require_nicegui()

    from imaginify.ui.notifications import NiceGUIToastSink
    from imaginify.ui.render import mount
    from imaginify.ui.showcase import ShowcaseBuilder
    from imaginify.ui.state import state

    toasts = NiceGUIToastSink()

    @ui.page("/")  # type: ignore[untyped-decorator]
    def index() -> None:
        add_global_styles()

        @ui.refreshable  # type: ignore[untyped-decorator]
        def page() -> None:
            builder = ShowcaseBuilder(
                state,
                on_change=page.refresh,
                notify=lambda message: toasts.show(Toast(title=message)),
            )
            mount(builder.build())

        page()


def run(*, host: str | None = None, port: int | None = None, reload: bool | None = None) -> None:
    ui = _require_nicegui()
    settings = get_settings()

    create_ui()
    ui.run(
        title=settings.app_name,
        host=host or settings.ui_host,
        port=port or settings.ui_port,
        reload=settings.ui_reload if reload is None else reload,
    )
