"""Locate files shipped under ``masterchess/assets``."""

from __future__ import annotations

from pathlib import Path

from masterchess.core.enums import Color, PieceType

ASSETS_DIR = Path(__file__).resolve().parent / "assets"

_COLOR_CODES = {Color.WHITE: "w", Color.BLACK: "b"}


def asset_path(*parts: str) -> Path:
    """Absolute path of *parts* below the package assets directory."""
    return ASSETS_DIR.joinpath(*parts)


def piece_svg_path(color: Color, piece_type: PieceType) -> Path:
    """Path of the SVG drawing for a piece, e.g. ``pieces/knight-b.svg``."""
    return asset_path("pieces", f"{piece_type.name.lower()}-{_COLOR_CODES[color]}.svg")
