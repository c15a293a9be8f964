from __future__ import annotations

import pytest


class TestComponents:
    def test_can_import_frontend_when_installed(self) -> None:
        pytest.importorskip("nicegui")

        from imaginify.ui import main, notifications, render

        assert callable(render.mount)
        assert callable(main.create_ui)
        assert callable(main.run)
        assert notifications.NiceGUIToastSink().position == "top"

    def test_toast_variants_map_to_notify_types(self) -> None:
        pytest.importorskip("nicegui")

        from imaginify.ui.notifications import _NOTIFY_TYPES

        assert _NOTIFY_TYPES == {
            "default": "info",
            "success": "positive",
            "destructive": "negative",
        }
