# -*- coding: utf-8 -*-
"""
Controller linking the board and the game window.
"""
import logging

from numpy.random import Generator, default_rng

from twentyfortyeight.controller.listener import GameView
from twentyfortyeight.core.gamemove import Move
from twentyfortyeight.envs.board import Board

_logger = logging.getLogger(__name__)


class Controller:
    """
    Handle the events of the game window and keep the board and the window in sync.

    Implements the ``ViewListener`` protocol: ``on_move``, ``on_play`` and ``on_back_to_menu``.
    """

    def __init__(self, model: Board, view: GameView, rng: Generator | None = None):
        """
        Parameters
        ----------
        model : Board
            The board of the current game.
        view : GameView
            The game window.
        rng : Generator, optional
            Source of randomness shared by every new board (default is a fresh ``default_rng()``).
        """
        self.model = model
        self.view = view
        self._rng = rng if rng is not None else default_rng()

    def initialize_game(self) -> None:
        """Start over with an empty board."""
        self.model = Board(rng=self._rng)

    def display_menu(self) -> None:
        """Show the menu."""
        self.view.switch_to_menu()

    def display_game(self) -> None:
        """Show the game screen."""
        self.view.switch_to_game()

    def update_grid(self) -> None:
        """Draw the current board and score."""
        self.view.update_grid(self.model.grid, self.model.score)

    def populate_random_cell(self) -> None:
        """Put a random tile in a random empty cell."""
        row, col = self.model.random_empty_cell()
        tile = self.model.random_value()
        self.model.set_cell(row, col, tile)
        _logger.debug('Spawned %d at (%d, %d).', tile, row, col)

    def on_move(self, move: Move) -> None:
        """
        Play a move: slide and merge, spawn a tile, update the status and redraw.

        Parameters
        ----------
        move : Move
            Direction chosen by the user.

        Notes
        -----
        Nothing happens when the game is over or when the move would not change the board.
        """
        if not self.model.alive:
            return
        if not self.model.would_change(move):
            _logger.debug('Move %s changes nothing, ignored.', Move(move).value)
            return

        self.model.apply_move(move)
        self.populate_random_cell()
        self.model.update_status()
        self.update_grid()
        _logger.debug('Board after %s:\n%s', Move(move).value, self.model.render())

        # ##: The game just ended.
        if not self.model.alive and self.view.is_displaying():
            if self.model.is_winner():
                self.view.display_won_message()
            else:
                self.view.display_lost_message()

    def on_play(self) -> None:
        """Start a new game with two random tiles and show it."""
        self.initialize_game()
        self.view.update_game_ui()
        self.display_game()
        self.populate_random_cell()
        self.populate_random_cell()
        self.update_grid()
        _logger.info('New game started.')

    def on_back_to_menu(self) -> None:
        """Go back to the menu."""
        self.display_menu()
