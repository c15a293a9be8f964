# pyright: reportMissingImports=false

"""Toast sink backed by ``ui.notify``."""

from __future__ import annotations

from nicegui import ui  # pyright: ignore[reportMissingImports]

from imaginify.integrations.interfaces import Toast, ToastSink

_NOTIFY_TYPES = {
    "default": "info",
    "success": "positive",
    "destructive": "negative",
}


class NiceGUIToastSink(ToastSink):
    def __init__(self, position: str = "top") -> None:
        self.position = position

    def show(self, toast: Toast) -> None:
        message = f"{toast.title}: {toast.description}" if toast.description else toast.title
        ui.notify(
            message,
            type=_NOTIFY_TYPES[toast.variant],
            position=self.position,
            timeout=toast.duration,
        )
