# -*- coding: utf-8 -*-
"""
Configuration of the game window and of the launcher.
"""
import logging
from dataclasses import dataclass, field


@dataclass
class WindowConfiguration:
    """Look of the game window."""

    # ##>: Window.
    title: str = '2048'
    background_color: str = '#FAF8EF'
    board_color: str = '#BBADA0'
    banner_color: str = '#8F7A66'
    button_hover_color: str = '#A89584'

    # ##>: Text.
    dark_text_color: str = '#776E65'
    light_text_color: str = '#F9F6F2'
    status_color: str = '#C0392B'
    title_fontsize: int = 48
    tile_fontsizes: tuple[str, str, str] = ('xx-large', 'x-large', 'large')
    banner_fontsize: int = 20

    # ##>: Tile colors, by value. Values above the table use the last color.
    tile_colors: dict[int, str] = field(
        default_factory=lambda: {
            0: '#CDC1B4',
            2: '#EEE4DA',
            4: '#EDE0C8',
            8: '#F2B179',
            16: '#F59563',
            32: '#F67C5F',
            64: '#F65E3B',
            128: '#EDCF72',
            256: '#EDCC61',
            512: '#EDC850',
            1024: '#EDC53F',
            2048: '#EDC22E',
        }
    )

    def tile_color(self, value: int) -> str:
        """Get the background color of a tile."""
        if value in self.tile_colors:
            return self.tile_colors[value]
        return self.tile_colors[max(self.tile_colors)]

    def text_color(self, value: int) -> str:
        """Get the text color of a tile: dark on light tiles, light on dark ones."""
        return self.dark_text_color if value <= 4 else self.light_text_color

    def tile_fontsize(self, value: int) -> str:
        """Get the font size of a tile: smaller for longer numbers."""
        large, medium, small = self.tile_fontsizes
        if value < 100:
            return large
        if value < 1000:
            return medium
        return small


@dataclass
class LaunchConfiguration:
    """Options of the game launcher."""

    seed: int | None = None
    log_level: int = logging.WARNING
    window: WindowConfiguration = field(default_factory=WindowConfiguration)
