"""Visual theme constants and QSS styles for Masterchess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal quiet targets
    highlight_capture: QColor  # legal capture targets (ring)
    highlight_check: QColor  # king in check
    last_move: QColor  # last move origin and destination
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(203, 213, 225),  # slate-300
            dark_square=QColor(71, 85, 105),  # slate-600
            highlight_from=QColor(250, 204, 21, 170),  # yellow
            highlight_to=QColor(34, 197, 94, 128),  # green dot
            highlight_capture=QColor(239, 68, 68, 102),  # red ring
            highlight_check=QColor(239, 68, 68, 170),
            last_move=QColor(148, 163, 184, 110),
            coord_light=QColor(148, 163, 184),
            coord_dark=QColor(100, 116, 139),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_capture=QColor(0, 0, 0, 60),
            highlight_check=QColor(255, 0, 0, 120),
            last_move=QColor(155, 199, 0, 105),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )


THEMES: dict[str, BoardTheme] = {
    "Slate": BoardTheme.default(),
    "Classic": BoardTheme.classic(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #171717;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #262626;
    color: #d4d4d4;
    border: 1px solid #404040;
    font-family: "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #404040;
    color: #e0e0e0;
    border: 1px solid #525252;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #525252;
}

QMenuBar {
    background: #171717;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #404040;
}
QMenu {
    background: #262626;
    color: #e0e0e0;
    border: 1px solid #404040;
}
QMenu::item:selected {
    background: #264f78;
}
"""
