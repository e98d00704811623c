# tests/test_gui.py
import os

import pytest

# Widgets are built without a display on CI machines.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from gitcrypt_demo.core.config_manager import AppSettings
from gitcrypt_demo.core.content_resolver import FileContentResolver
from gitcrypt_demo.core.decoding import GITCRYPT_MARKER
from gitcrypt_demo.core.resource_store import MappingResourceStore
from gitcrypt_demo.gui.content_view import APP_STYLE, PREVIEW_STYLE, ContentView, style_by_name
from gitcrypt_demo.gui.main_window import MainWindow
from gitcrypt_demo.gui.resources import validate_assets


@pytest.fixture(scope="session")
def qapp():
    """Creates a QApplication instance for the test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


@pytest.fixture
def store():
    return MappingResourceStore({
        "Secret.txt": GITCRYPT_MARKER + b"\x01\x02\x03",
        "Unsecret.txt": b"hello world\nsecond line\n",
    })


def test_content_view_shows_resolved_payload(qapp, store):
    view = ContentView(FileContentResolver(store), "Secret.txt", "Unsecret.txt")
    assert view.payload == "hello world"
    assert view.payload_label.text() == "hello world"
    assert not view.icon_label.pixmap().isNull()


def test_content_view_applies_style(qapp, store):
    view = ContentView(FileContentResolver(store), "Unsecret.txt", "Unsecret.txt", style=PREVIEW_STYLE)
    assert view.width() == PREVIEW_STYLE.width
    assert view.height() == PREVIEW_STYLE.height
    assert view.payload_label.font().pointSize() == PREVIEW_STYLE.font_point_size


def test_style_by_name_defaults_to_app_style():
    assert style_by_name("preview") is PREVIEW_STYLE
    assert style_by_name("something-else") is APP_STYLE


def test_main_window_creation(qapp, store):
    window = MainWindow(AppSettings(), store=store)
    assert window.windowTitle() == "GitCrypt Demo"
    assert window.content_view.payload == "hello world"


def test_main_window_with_empty_bundle(qapp):
    window = MainWindow(AppSettings(), store=MappingResourceStore({}))
    assert window.content_view.payload == "File missing!"


def test_validate_assets_checks_the_configured_directory(tmp_path, caplog):
    assert validate_assets(tmp_path) is True
    with caplog.at_level("WARNING"):
        assert validate_assets(tmp_path / "elsewhere") is False
    assert str(tmp_path / "elsewhere") in caplog.text
