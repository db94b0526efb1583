"""Internationalisation strings for the Masterchess UI.

Usage::

    from masterchess.ui.i18n import t, set_language

    set_language("Portuguese")
    print(t().btn_reset)            # "Reiniciar"
    print(t().wins.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass

from masterchess.core.enums import Color


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    window_subtitle: str
    menu_game: str
    menu_new_game: str
    menu_quit: str
    menu_settings: str
    menu_show_coords: str
    menu_show_legal: str
    menu_language: str
    menu_theme: str
    btn_reset: str

    status_ready: str

    # ── StatusPanel ──────────────────────────────────────────────────────
    color_white: str
    color_black: str
    your_turn: str
    check_banner: str
    wins: str  # "{color} wins!"
    stalemate: str

    # ── CapturedPanel ────────────────────────────────────────────────────
    captured_header: str
    no_white_captured: str
    no_black_captured: str

    # ── MovePanel ────────────────────────────────────────────────────────
    moves_header: str
    moves_empty: str

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Masterchess",
    window_subtitle="Local PvP",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    menu_settings="&Settings",
    menu_show_coords="Show &coordinates",
    menu_show_legal="Show &legal moves",
    menu_language="&Language",
    menu_theme="Board &theme",
    btn_reset="Restart",
    status_ready="Ready",
    color_white="White",
    color_black="Black",
    your_turn="Your move",
    check_banner="CHECK!",
    wins="{color} wins!",
    stalemate="Draw (stalemate)",
    captured_header="Captured",
    no_white_captured="No white pieces captured",
    no_black_captured="No black pieces captured",
    moves_header="Move History",
    moves_empty="The game has not started yet",
)

_PT = Strings(
    window_title="Masterchess",
    window_subtitle="PvP Local",
    menu_game="&Jogo",
    menu_new_game="&Novo jogo",
    menu_quit="&Sair",
    menu_settings="&Configurações",
    menu_show_coords="Mostrar &coordenadas",
    menu_show_legal="Mostrar &lances possíveis",
    menu_language="&Idioma",
    menu_theme="&Tema do tabuleiro",
    btn_reset="Reiniciar",
    status_ready="Pronto",
    color_white="Brancas",
    color_black="Pretas",
    your_turn="Sua vez",
    check_banner="XEQUE!",
    wins="Vitória {color}!",
    stalemate="Empate (Afogamento)",
    captured_header="Capturadas",
    no_white_captured="Nenhuma peça branca capturada",
    no_black_captured="Nenhuma peça preta capturada",
    moves_header="Histórico de Movimentos",
    moves_empty="O jogo ainda não começou",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Portuguese": _PT,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
