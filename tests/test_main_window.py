import logging

import pytest

pytest.importorskip("tkinter")

from uking_mod_manager import main as app  # noqa: E402
from uking_mod_manager.core import (  # noqa: E402
    CatalogError,
    Mod,
    ModMeta,
    ModStateController,
    OfflineCatalogAPI,
    StaticCatalogAPI,
)
from uking_mod_manager.core.commands import Apply, Reload  # noqa: E402
from uking_mod_manager.ui.main_window import MainWindow  # noqa: E402
from uking_mod_manager.utils import Config  # noqa: E402


class _FakeRoot:
    def __init__(self):
        self.callbacks = []

    def after(self, ms, callback):
        self.callbacks.append(callback)

    def run_pending(self):
        callbacks, self.callbacks = self.callbacks, []
        for callback in callbacks:
            callback()


class _RefusingCatalog(StaticCatalogAPI):
    def apply(self, mods):
        raise CatalogError("host refused", error_type="server_error", status_code=500)


class _BrokenCatalog(StaticCatalogAPI):
    def apply(self, mods):
        raise RuntimeError("boom")


def _window(catalog) -> MainWindow:
    window = MainWindow.__new__(MainWindow)
    window.root = _FakeRoot()
    window.controller = ModStateController(catalog)
    window.logger = logging.getLogger("uking_test.window")
    window.busy = True
    window.statuses = []
    window.update_status = lambda message, status_type="info": window.statuses.append((message, status_type))
    window.refresh = lambda: None
    return window


def _mods():
    return [Mod(hash="hash-A", meta=ModMeta(name="A"))]


def test_catalog_error_finishes_task_with_error_status():
    window = _window(_RefusingCatalog(_mods()))
    window.controller.toggle("hash-A")

    window._task_thread(Apply())
    window.root.run_pending()

    assert window.busy is False
    assert window.statuses == [("host refused", "error")]
    assert window.controller.dirty is True


def test_unexpected_error_still_clears_busy():
    window = _window(_BrokenCatalog(_mods()))
    window.controller.toggle("hash-A")

    window._task_thread(Apply())
    window.root.run_pending()

    assert window.busy is False
    message, status_type = window.statuses[-1]
    assert status_type == "error"
    assert "boom" in message


def test_successful_reload_reports_success():
    window = _window(StaticCatalogAPI(_mods()))

    window._task_thread(Reload())
    window.root.run_pending()

    assert window.busy is False
    assert window.statuses == [("Mod list reloaded", "success")]


def test_offline_fallback_cannot_report_applied_changes(tmp_path, monkeypatch):
    monkeypatch.setattr(app, "check_host_status", lambda url, timeout=5: (False, "Cannot connect to host"))
    controller = app.build_controller(Config(config_dir=tmp_path), logging.getLogger("uking_test.main"))
    assert isinstance(controller.catalog, OfflineCatalogAPI)

    window = _window(controller.catalog)
    window.controller = controller
    window._task_thread(Apply())
    window.root.run_pending()

    assert window.busy is False
    assert window.statuses == [("Offline: changes cannot be applied", "error")]
