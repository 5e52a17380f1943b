# -*- coding: utf-8 -*-
"""
Display the game in a window: a menu screen and a game screen.
"""
import logging

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.widgets import Button

from twentyfortyeight.config import WindowConfiguration
from twentyfortyeight.controller.listener import ViewListener
from twentyfortyeight.core.gamemove import Move

_logger = logging.getLogger(__name__)

# ##>: Screens of the window.
MENU = 'menu'
GAME = 'game'


def _hide_ticks(axe: Axes) -> None:
    """Remove ticks and labels from an axe."""
    axe.xaxis.set_ticks_position('none')
    axe.yaxis.set_ticks_position('none')
    _ = axe.set_xticks([])
    _ = axe.set_yticks([])


def _release_arrow_keys() -> None:
    """Stop the navigation toolbar from reacting to the arrow keys."""
    for keymap in ('keymap.back', 'keymap.forward'):
        plt.rcParams[keymap] = [key for key in plt.rcParams[keymap] if key not in ('left', 'right')]


class WindowBoard:
    """
    Window to play 2048 using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).

    The menu shows the title and a "Play" button. The game screen shows the score, the board,
    a status line and a "Menu" button. Both live in the same figure; switching screens toggles
    the visibility of their artists.
    """

    WON_MESSAGE = 'Congratulations, you win!'
    LOST_MESSAGE = 'Game Over! Try again.'

    def __init__(self, config: WindowConfiguration | None = None, size: int = 4):
        self.config = config if config is not None else WindowConfiguration()
        self.size = size
        self.screen: str | None = None
        self._listener: ViewListener | None = None
        _release_arrow_keys()

        # ## ----> Create support.
        self.fig = plt.figure(figsize=(5, 6))
        self.fig.patch.set_facecolor(self.config.background_color)
        self.fig.canvas.manager.set_window_title(self.config.title)

        self._build_menu()
        self._build_game()

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect('close_event', close_handler)
        self.fig.canvas.mpl_connect('key_press_event', self._on_key_press)

    def _build_menu(self):
        """Create the title and the "Play" button."""
        self.title_text = self.fig.text(
            0.5,
            0.65,
            self.config.title,
            horizontalalignment='center',
            verticalalignment='center',
            fontsize=self.config.title_fontsize,
            fontweight='bold',
            color=self.config.dark_text_color,
        )
        self.play_axe = self.fig.add_axes([0.3, 0.35, 0.4, 0.1])
        self.play_button = Button(
            self.play_axe, 'Play', color=self.config.banner_color, hovercolor=self.config.button_hover_color
        )
        self.play_button.label.set_fontsize(self.config.banner_fontsize)
        self.play_button.on_clicked(self._on_play_clicked)

    def _build_game(self):
        """Create the score banner, the board, the status line and the "Menu" button."""
        cfg = self.config

        # ## ----> Score and status.
        self.score_text = self.fig.text(
            0.5,
            0.94,
            'Score: 0',
            horizontalalignment='center',
            verticalalignment='center',
            fontsize=cfg.banner_fontsize,
            fontweight='bold',
            color=cfg.light_text_color,
            bbox={'facecolor': cfg.banner_color, 'edgecolor': 'none', 'pad': 8},
        )
        self.status_text = self.fig.text(
            0.5,
            0.875,
            '',
            horizontalalignment='center',
            verticalalignment='center',
            fontsize='large',
            fontweight='demibold',
            color=cfg.status_color,
        )

        # ## ----> Board background.
        left, bottom, width = 0.05, 0.13, 0.9
        height = 0.72
        self.board_axe = self.fig.add_axes([left, bottom, width, height])
        self.board_axe.set_facecolor(cfg.board_color)
        _hide_ticks(self.board_axe)

        # ## ----> Add cell for board.
        margin = 0.01
        cell_width, cell_height = width / self.size, height / self.size
        self.axes = []
        self.textes = []
        for r in range(self.size):
            for c in range(self.size):
                _ax = self.fig.add_axes(
                    [
                        left + c * cell_width + margin,
                        bottom + (self.size - 1 - r) * cell_height + margin,
                        cell_width - 2 * margin,
                        cell_height - 2 * margin,
                    ]
                )
                _ax.set_facecolor(cfg.tile_color(0))
                _hide_ticks(_ax)
                text = _ax.text(
                    0.5,
                    0.5,
                    '',
                    horizontalalignment='center',
                    verticalalignment='center',
                    fontsize=cfg.tile_fontsize(0),
                    fontweight='demibold',
                )
                self.axes.append(_ax)
                self.textes.append(text)

        # ## ----> Back to the menu.
        self.menu_axe = self.fig.add_axes([0.35, 0.02, 0.3, 0.08])
        self.menu_button = Button(self.menu_axe, 'Menu', color=cfg.banner_color, hovercolor=cfg.button_hover_color)
        self.menu_button.label.set_fontsize(cfg.banner_fontsize)
        self.menu_button.on_clicked(self._on_menu_clicked)

    def _menu_artists(self) -> list:
        return [self.title_text, self.play_axe]

    def _game_artists(self) -> list:
        return [self.score_text, self.status_text, self.board_axe, *self.axes, self.menu_axe]

    def _switch(self, screen: str):
        """Show one screen and hide the other."""
        for artist in self._menu_artists():
            artist.set_visible(screen == MENU)
        for artist in self._game_artists():
            artist.set_visible(screen == GAME)
        self.play_button.set_active(screen == MENU)
        self.menu_button.set_active(screen == GAME)
        self.screen = screen
        self.redraw()

    def redraw(self):
        """Request the window to be redrawn."""
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def set_view_listener(self, listener: ViewListener):
        """
        Register the object notified of the user interactions.

        Parameters
        ----------
        listener: ViewListener
            Receives moves and button presses
        """
        self._listener = listener

    def switch_to_menu(self):
        """Show the menu."""
        self._switch(MENU)

    def switch_to_game(self):
        """Show the game screen."""
        self._switch(GAME)

    def is_displaying(self) -> bool:
        """Whether the window is still open."""
        return not self.closed

    def update_game_ui(self):
        """Clear the game screen before a new game."""
        self.status_text.set_text('')
        self.update_grid(np.zeros((self.size, self.size), dtype=np.int64), 0)

    def update_grid(self, board: np.ndarray, score: int):
        """
        Draw the tiles and the score.

        Parameters
        ----------
        board: np.ndarray
            Game board to draw
        score: int
            Current score
        """
        values = np.reshape(board, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            value = int(value)
            text.set_text(str(value) if value else '')
            text.set_color(self.config.text_color(value))
            text.set_fontsize(self.config.tile_fontsize(value))
            _ax.set_facecolor(self.config.tile_color(value))
        self.score_text.set_text(f'Score: {score}')
        self.redraw()

    def display_won_message(self):
        """Tell the user the game is won."""
        _logger.info(self.WON_MESSAGE)
        self.status_text.set_text(self.WON_MESSAGE)
        self.redraw()

    def display_lost_message(self):
        """Tell the user the game is lost."""
        _logger.info(self.LOST_MESSAGE)
        self.status_text.set_text(self.LOST_MESSAGE)
        self.redraw()

    def _on_key_press(self, event):
        """
        Handle the keyboard.

        Parameters
        ----------
        event: Any
            Key event; arrow keys move the tiles, escape closes the window
        """
        _logger.debug('Pressed %s', event.key)

        if event.key == 'escape':
            self.close()
            return

        if self._listener is None or self.screen != GAME:
            return

        move = Move.from_key(event.key)
        if move is not None:
            self._listener.on_move(move)

    def _on_play_clicked(self, _event):
        if self._listener is not None and self.screen == MENU:
            self._listener.on_play()

    def _on_menu_clicked(self, _event):
        if self._listener is not None and self.screen == GAME:
            self._listener.on_back_to_menu()

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
