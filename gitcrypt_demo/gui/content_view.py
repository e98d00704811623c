# gitcrypt_demo/gui/content_view.py

import logging
from dataclasses import dataclass
from typing import Dict

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from gitcrypt_demo.core.content_resolver import FileContentResolver
from .resources import tinted_pixmap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewStyle:
    """Purely cosmetic settings for a ContentView."""
    name: str
    background: str = "#d3d3d3"
    foreground: str = "#000000"
    icon_color: str = "#0000ff"
    icon_size: int = 50
    font_point_size: int = 22
    width: int = 300
    height: int = 300
    border_color: str = "#ffffff"


APP_STYLE = ViewStyle(name="app")
# The preview harness shows the same layout, slightly smaller, so it fits beside an editor.
PREVIEW_STYLE = ViewStyle(name="preview", icon_size=40, font_point_size=18, width=260, height=260)

STYLES: Dict[str, ViewStyle] = {style.name: style for style in (APP_STYLE, PREVIEW_STYLE)}


def style_by_name(name: str) -> ViewStyle:
    """Looks up a style preset, defaulting to APP_STYLE for unknown names."""
    return STYLES.get(name, APP_STYLE)


class ContentView(QWidget):
    """
    A globe icon above one line of text: the first line of the secret file if it
    can be read, otherwise whatever the resolver falls back to.

    The payload is resolved exactly once, when the view is built.
    """

    def __init__(self, resolver: FileContentResolver, primary_file: str, fallback_file: str,
                 style: ViewStyle = APP_STYLE, parent=None):
        super().__init__(parent)
        self.style_preset = style
        self._payload = resolver.resolve(primary_file, fallback_file)
        logger.info(f"Displaying payload: {self._payload!r}")

        outer_layout = QVBoxLayout(self)
        outer_layout.setContentsMargins(0, 0, 0, 0)

        # The frame carries the background and border; the widget itself stays transparent.
        self.panel = QFrame()
        self.panel.setObjectName("contentPanel")
        self.panel.setFixedSize(style.width, style.height)
        self.panel.setStyleSheet(
            f"#contentPanel {{ background-color: {style.background}; border: 1px solid {style.border_color}; }}"
        )
        outer_layout.addWidget(self.panel)

        panel_layout = QVBoxLayout(self.panel)
        panel_layout.setAlignment(Qt.AlignCenter)

        self.icon_label = QLabel()
        self.icon_label.setAlignment(Qt.AlignCenter)
        self.icon_label.setPixmap(tinted_pixmap("globe", style.icon_color, style.icon_size))

        self.payload_label = QLabel(self._payload)
        self.payload_label.setAlignment(Qt.AlignCenter)
        self.payload_label.setWordWrap(True)
        font = QFont()
        font.setPointSize(style.font_point_size)
        self.payload_label.setFont(font)
        self.payload_label.setStyleSheet(f"color: {style.foreground}; background: transparent;")

        panel_layout.addWidget(self.icon_label)
        panel_layout.addWidget(self.payload_label)

        self.setFixedSize(style.width, style.height)

    @property
    def payload(self) -> str:
        """The resolved line of text shown in the view."""
        return self._payload
