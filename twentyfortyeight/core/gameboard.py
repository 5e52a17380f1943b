"""
Core functionality of the 2048 board: compress, merge, moves, status queries and tile spawning.

Every function works on a square NumPy board of ``int64`` values where 0 is an empty cell.
"""

from numpy import any as np_any
from numpy import array_equal, ndarray
from numpy.random import Generator

from twentyfortyeight.core.exceptions import UnsupportedOperationError
from twentyfortyeight.core.gamemove import Move, denormalize, normalize

# ##>: Tile that wins the game.
WINNING_TILE = 2048


def compress_left(board: ndarray) -> ndarray:
    """
    Slide all non-zero values of every row to the left edge.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**

    Returns
    -------
    ndarray
        The same array reference, compressed.

    Notes
    -----
    - The relative order of the tiles is preserved.
    - Vacated trailing positions are filled with 0.

    Examples
    --------
    >>> compress_left(array([[0, 2, 0, 4]]))
    array([[2, 4, 0, 0]])
    """
    for row in board:
        non_zero = row[row != 0]
        row[: len(non_zero)] = non_zero
        row[len(non_zero) :] = 0
    return board


def merge_left(board: ndarray) -> int:
    """
    Merge adjacent equal tiles of every row, scanning left to right.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**

    Returns
    -------
    int
        The sum of the values of the merged tiles.

    Notes
    -----
    - The left cell of an equal non-zero pair is doubled and the right cell emptied.
    - An emptied cell never matches its right neighbour, so a tile merges at most once per pass:
      ``[2, 2, 2, 0]`` becomes ``[4, 0, 2, 0]``.
    - Gaps are left behind; call :func:`compress_left` afterwards.
    """
    score = 0
    size = board.shape[1]
    for row in board:
        for j in range(size - 1):
            if row[j] != 0 and row[j] == row[j + 1]:
                row[j] *= 2
                row[j + 1] = 0
                score += int(row[j])
    return score


def slide_and_merge(board: ndarray) -> int:
    """
    Play a left move on the board: compress, merge, compress.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**

    Returns
    -------
    int
        Points gained by the merges.
    """
    compress_left(board)
    score = merge_left(board)
    compress_left(board)
    return score


def play_move(board: ndarray, move: Move) -> int:
    """
    Play a move on the board, in any direction.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    move : Move
        Direction of the move.

    Returns
    -------
    int
        Points gained by the merges.

    Notes
    -----
    The board is re-oriented so that the move becomes a left move, slid and merged,
    then restored to its true orientation. No tile is spawned.
    """
    normalize(board, move)
    score = slide_and_merge(board)
    denormalize(board, move)
    return score


def latent_state(state: ndarray, move: Move) -> tuple[ndarray, int]:
    """
    Compute the board after a move without touching the given state.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    move : Move
        Direction of the move.

    Returns
    -------
    new_state : ndarray
        A new board after the move (no tile spawned).
    score : int
        Points the move would gain.
    """
    new_state = state.copy()
    score = play_move(new_state, move)
    return new_state, score


def would_change(state: ndarray, move: Move) -> bool:
    """Check whether a move would modify the board."""
    new_state, _ = latent_state(state, move)
    return not array_equal(new_state, state)


def is_winner(state: ndarray) -> bool:
    """Check whether the board holds the winning tile."""
    return bool(np_any(state == WINNING_TILE))


def is_full(state: ndarray) -> bool:
    """Check whether the board has no empty cell."""
    return bool(state.all())


def has_valid_move(state: ndarray) -> bool:
    """
    Check whether two horizontally or vertically adjacent cells hold the same value.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if at least one adjacent pair is equal, False otherwise.

    Notes
    -----
    - Empty cells are not treated specially: two adjacent zeros count as a valid move.
    - This is only a proxy for "stuck"; it is meant to be combined with :func:`is_full`.
    """
    return bool(np_any(state[:-1] == state[1:]) or np_any(state[:, :-1] == state[:, 1:]))


def is_done(state: ndarray) -> bool:
    """
    Check whether the game has ended.

    Notes
    -----
    The game ends when the winning tile is on the board, or when the board is full and no
    adjacent pair is equal.
    """
    return is_winner(state) or (is_full(state) and not has_valid_move(state))


def random_value(rng: Generator, size: int = 4) -> int:
    """
    Draw the value of a new tile.

    Parameters
    ----------
    rng : Generator
        Source of randomness.
    size : int, optional
        Side of the board (default is 4).

    Returns
    -------
    int
        2, 4 or 8.

    Notes
    -----
    An integer is drawn uniformly from ``[0, size - 2]``: 0 and 1 give 2, 2 and 3 give 4,
    anything else gives 8. On a 4x4 board this means 2 with probability 2/3 and 4 with
    probability 1/3.
    """
    draw = int(rng.integers(0, size - 1))
    if draw in (0, 1):
        return 2
    if draw in (2, 3):
        return 4
    return 8


def random_empty_cell(state: ndarray, rng: Generator) -> tuple[int, int]:
    """
    Pick a random empty cell.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.
    rng : Generator
        Source of randomness.

    Returns
    -------
    tuple[int, int]
        Coordinates ``(row, col)`` of an empty cell.

    Raises
    ------
    UnsupportedOperationError
        If the board has no empty cell.

    Notes
    -----
    Coordinates are drawn uniformly over the whole board until an empty cell is hit.
    """
    if is_full(state):
        raise UnsupportedOperationError('Random free cell cannot be generated since the board is full.')

    rows, cols = state.shape
    while True:
        row, col = int(rng.integers(rows)), int(rng.integers(cols))
        if state[row, col] == 0:
            return row, col
