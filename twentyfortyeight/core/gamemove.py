"""
Moves of the 2048 game and the orientation transforms that reduce every move to a left move.
"""

from enum import Enum

from numpy import ndarray


class Move(str, Enum):
    """
    The four directions a player can push the tiles.

    The value is the matplotlib key name of the matching arrow key.
    """

    LEFT = 'left'
    RIGHT = 'right'
    UP = 'up'
    DOWN = 'down'

    @classmethod
    def from_key(cls, key: str | None) -> 'Move | None':
        """
        Translate a keyboard key into a move.

        Parameters
        ----------
        key : str or None
            Key name as reported by the GUI event.

        Returns
        -------
        Move or None
            The matching move, or None if the key is not an arrow key.
        """
        try:
            return cls(key)
        except ValueError:
            return None


def reverse(board: ndarray) -> ndarray:
    """Mirror every row of the board, in place."""
    board[:] = board[:, ::-1].copy()
    return board


def transpose(board: ndarray) -> ndarray:
    """Transpose the (square) board, in place."""
    board[:] = board.T.copy()
    return board


def normalize(board: ndarray, move: Move) -> ndarray:
    """
    Re-orient the board so that the given move becomes a left move.

    Parameters
    ----------
    board : ndarray
        Square game board. **Modified in-place.**
    move : Move
        Direction of the move.

    Returns
    -------
    ndarray
        The same array reference, re-oriented.

    Notes
    -----
    - right: mirror each row.
    - up: transpose.
    - down: transpose, then mirror each row.
    """
    if move is Move.RIGHT:
        reverse(board)
    elif move is Move.UP:
        transpose(board)
    elif move is Move.DOWN:
        transpose(board)
        reverse(board)
    return board


def denormalize(board: ndarray, move: Move) -> ndarray:
    """
    Undo :func:`normalize` and restore the true orientation of the board.

    Parameters
    ----------
    board : ndarray
        Square game board. **Modified in-place.**
    move : Move
        Direction passed to :func:`normalize`.

    Returns
    -------
    ndarray
        The same array reference, in its original orientation.
    """
    if move is Move.RIGHT:
        reverse(board)
    elif move is Move.UP:
        transpose(board)
    elif move is Move.DOWN:
        reverse(board)
        transpose(board)
    return board
