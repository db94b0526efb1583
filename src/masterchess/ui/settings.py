"""User-configurable settings and how they reach the widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from masterchess.ui.i18n import set_language
from masterchess.ui.styles.theme import THEMES, BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Slate"
    show_coordinates: bool = True
    show_legal_moves: bool = True


def apply_settings(host: Any) -> None:
    s = host._settings

    # Language must come first so all retranslate calls use the new locale
    set_language(s.language)
    host.retranslate_ui()

    scene = host._board_view.board_scene
    scene.set_theme(THEMES.get(s.board_theme, BoardTheme.default()))
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_show_legal_moves(s.show_legal_moves)
