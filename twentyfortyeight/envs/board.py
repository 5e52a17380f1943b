"""Stateful 2048 board: the grid, the score and whether the game is still being played."""

import logging

from numpy import int64, ndarray, zeros
from numpy.random import Generator, default_rng

from twentyfortyeight.core.exceptions import InvalidTileError, OutOfRangeError
from twentyfortyeight.core.gameboard import (
    has_valid_move,
    is_full,
    is_winner,
    play_move,
    random_empty_cell,
    random_value,
    would_change,
)
from twentyfortyeight.core.gamemove import Move

_logger = logging.getLogger(__name__)


def _is_tile(value: int) -> bool:
    """Check that a value is empty (0) or a power of two greater or equal to 2."""
    return value == 0 or (value >= 2 and value & (value - 1) == 0)


class Board:
    """
    Board of the 2048 game.

    This class holds the 4x4 grid of tiles, the cumulative score and the ``alive`` flag. It answers
    win / full / stuck queries and applies the four directional moves. Spawning tiles and deciding
    when to check the status are left to the caller.
    """

    # ##: The board is always 4x4.
    SIZE = 4

    def __init__(self, rng: Generator | None = None):
        """
        Create an empty board.

        Parameters
        ----------
        rng : Generator, optional
            Source of randomness for tile spawning (default is a fresh ``default_rng()``).
        """
        self._grid = zeros((self.SIZE, self.SIZE), dtype=int64)
        self._score = 0
        self._alive = True
        self._rng = rng if rng is not None else default_rng()

    @classmethod
    def from_grid(cls, grid, rng: Generator | None = None) -> 'Board':
        """
        Create a board with a given layout.

        Parameters
        ----------
        grid : array_like
            A 4x4 layout of tiles (0 for an empty cell).
        rng : Generator, optional
            Source of randomness for tile spawning.

        Returns
        -------
        Board
            A live board with a score of 0.

        Raises
        ------
        InvalidTileError
            If the layout is not 4x4 or holds a value that is not a tile.
        """
        board = cls(rng=rng)
        rows = [list(row) for row in grid]
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise InvalidTileError(f'Expected a {cls.SIZE}x{cls.SIZE} grid.')
        for i, row in enumerate(rows):
            for j, tile in enumerate(row):
                board.set_cell(i, j, int(tile))
        return board

    @property
    def grid(self) -> ndarray:
        """
        Get the current grid.

        Returns
        -------
        ndarray
            A read-only view of the 4x4 grid.
        """
        view = self._grid.view()
        view.flags.writeable = False
        return view

    @property
    def score(self) -> int:
        """Get the cumulative score."""
        return self._score

    @property
    def alive(self) -> bool:
        """Whether the game still accepts moves."""
        return self._alive

    @property
    def max_tile(self) -> int:
        """Get the highest tile on the board."""
        return int(self._grid.max())

    def set_cell(self, row: int, col: int, tile: int) -> None:
        """
        Put a tile in a cell.

        Parameters
        ----------
        row : int
            Row of the cell.
        col : int
            Column of the cell.
        tile : int
            Tile value, 0 to empty the cell.

        Raises
        ------
        OutOfRangeError
            If the cell lies outside the board.
        InvalidTileError
            If the value is neither 0 nor a power of two.
        """
        if not (0 <= row < self.SIZE and 0 <= col < self.SIZE):
            raise OutOfRangeError('Trying to set a cell beyond the board boundaries.')
        if not _is_tile(tile):
            raise InvalidTileError(f'{tile} is not a valid tile value.')
        self._grid[row, col] = tile

    def is_winner(self) -> bool:
        """Check whether the board holds a 2048 tile."""
        return is_winner(self._grid)

    def is_full(self) -> bool:
        """Check whether the board has no empty cell."""
        return is_full(self._grid)

    def has_valid_move(self) -> bool:
        """Check whether two adjacent cells hold the same value (empty cells included)."""
        return has_valid_move(self._grid)

    def would_change(self, move: Move) -> bool:
        """
        Check whether a move would modify the grid.

        Parameters
        ----------
        move : Move
            Direction of the move.

        Returns
        -------
        bool
            True if applying the move changes at least one cell.

        Notes
        -----
        The move is played on a scratch copy; neither the grid nor the score is touched.
        """
        return would_change(self._grid, Move(move))

    def apply_move(self, move: Move) -> int:
        """
        Slide and merge the tiles in a direction.

        Parameters
        ----------
        move : Move
            Direction of the move.

        Returns
        -------
        int
            Points gained by this move (0 on a finished game).

        Notes
        -----
        - Every merge adds the value of the merged tile to the score.
        - No tile is spawned and the status is not updated.
        - A finished game is left untouched.
        """
        if not self._alive:
            _logger.debug('Ignoring move %s on a finished game.', move)
            return 0

        move = Move(move)
        points = play_move(self._grid, move)
        self._score += points
        _logger.debug('Moved %s, gained %d points (score=%d).', move.value, points, self._score)
        return points

    def update_status(self) -> bool:
        """
        Update the ``alive`` flag.

        Returns
        -------
        bool
            The new value of ``alive``.

        Notes
        -----
        The game ends when a 2048 tile is on the board, or when the board is full and no adjacent
        pair is equal. A finished game never comes back to life.
        """
        if self._alive and (self.is_winner() or (self.is_full() and not self.has_valid_move())):
            self._alive = False
            _logger.info('Game finished with a score of %d (best tile %d).', self._score, self.max_tile)
        return self._alive

    def random_value(self) -> int:
        """Draw the value of a new tile: 2, 4 or 8."""
        return random_value(self._rng, size=self.SIZE)

    def random_empty_cell(self) -> tuple[int, int]:
        """
        Pick a random empty cell.

        Raises
        ------
        UnsupportedOperationError
            If the board is full; check :meth:`is_full` first.
        """
        return random_empty_cell(self._grid, self._rng)

    def render(self) -> str:
        """
        Render the board as text.

        Returns
        -------
        str
            One line per row, cells separated by tabulations, followed by the score.
        """
        lines = [' \t'.join(map(str, row)) for row in self._grid.tolist()]
        lines.append(f'score={self._score}')
        return '\n'.join(lines)
