"""Visual theme constants for the board."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # available destinations
    highlight_check: QColor  # king in check
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    glyph: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(239, 218, 180),  # light brown
            dark_square=QColor(178, 134, 101),  # dark brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark overlay
            highlight_check=QColor(255, 0, 0, 120),  # red transparent
            coord_light=QColor(178, 134, 101),
            coord_dark=QColor(239, 218, 180),
            glyph=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            glyph=QColor(20, 20, 20),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            highlight_check=QColor(255, 0, 0, 120),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
            glyph=QColor(20, 20, 20),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Green": BoardTheme.green(),
}
