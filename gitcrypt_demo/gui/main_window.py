# gitcrypt_demo/gui/main_window.py

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication, QMainWindow

from gitcrypt_demo.core.config_manager import AppSettings, load_settings
from gitcrypt_demo.core.content_resolver import FileContentResolver
from gitcrypt_demo.core.resource_store import DirectoryResourceStore, ResourceStore
from gitcrypt_demo.utils.logger import setup_logging
from .content_view import ContentView, style_by_name
from .resources import get_icon, validate_assets

logger = logging.getLogger(__name__)

WINDOW_TITLE = "GitCrypt Demo"


class MainWindow(QMainWindow):
    """
    The application shell. It builds the resolver from the settings and hosts a
    single ContentView; there is nothing else to manage.
    """

    def __init__(self, settings: AppSettings, store: Optional[ResourceStore] = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setWindowIcon(get_icon("app_icon"))

        # A store can be injected (tests, embedding); otherwise the bundled directory is used.
        if store is None:
            store = DirectoryResourceStore(settings.resources_dir)
        resolver = FileContentResolver(store, encoding=settings.encoding)

        self.content_view = ContentView(
            resolver,
            settings.primary_file,
            settings.fallback_file,
            style=style_by_name(settings.style),
        )
        self.setCentralWidget(self.content_view)
        self.setFixedSize(self.content_view.size())


def run_gui(settings: Optional[AppSettings] = None):
    """Entry point for the GUI: configure, build the window, run the event loop."""
    setup_logging()

    if settings is None:
        settings = load_settings()
    validate_assets(settings.resources_dir)
    logger.info(f"Resolving '{settings.primary_file}' with fallback '{settings.fallback_file}' "
                f"from {settings.resources_dir}")

    app = QApplication.instance() or QApplication(sys.argv)

    window = MainWindow(settings)
    window.show()

    sys.exit(app.exec())
