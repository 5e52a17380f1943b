# -*- coding: utf-8 -*-
"""
Interfaces between the game window and the controller.
"""
from typing import Protocol

from numpy import ndarray

from twentyfortyeight.core.gamemove import Move


class ViewListener(Protocol):
    """Receives the user interactions of a game window."""

    def on_move(self, move: Move) -> None:
        """The user pushed the tiles in a direction."""
        ...

    def on_play(self) -> None:
        """The user pressed the "Play" button of the menu."""
        ...

    def on_back_to_menu(self) -> None:
        """The user pressed the "Menu" button of the game screen."""
        ...


class GameView(Protocol):
    """What the controller needs from a game window."""

    def switch_to_menu(self) -> None:
        """Show the menu screen."""
        ...

    def switch_to_game(self) -> None:
        """Show the game screen."""
        ...

    def is_displaying(self) -> bool:
        """Whether the window is still open."""
        ...

    def update_game_ui(self) -> None:
        """Reset the game screen for a new game."""
        ...

    def update_grid(self, board: ndarray, score: int) -> None:
        """Draw the tiles and the score."""
        ...

    def display_won_message(self) -> None:
        """Tell the user the game is won."""
        ...

    def display_lost_message(self) -> None:
        """Tell the user the game is lost."""
        ...
