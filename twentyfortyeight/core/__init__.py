"""
Board logic of the 2048 game.

It includes the moves and their orientation transforms, sliding and merging tiles,
win / full / stuck queries, random tile spawning and the errors raised on misuse.
"""

from .exceptions import BoardError, InvalidTileError, OutOfRangeError, UnsupportedOperationError
from .gameboard import (
    WINNING_TILE,
    compress_left,
    has_valid_move,
    is_done,
    is_full,
    is_winner,
    latent_state,
    merge_left,
    play_move,
    random_empty_cell,
    random_value,
    slide_and_merge,
    would_change,
)
from .gamemove import Move

__all__ = [
    'Move',
    'WINNING_TILE',
    'compress_left',
    'merge_left',
    'slide_and_merge',
    'play_move',
    'latent_state',
    'would_change',
    'is_winner',
    'is_full',
    'has_valid_move',
    'is_done',
    'random_value',
    'random_empty_cell',
    'BoardError',
    'OutOfRangeError',
    'UnsupportedOperationError',
    'InvalidTileError',
]
