"""Errors raised by the 2048 board engine. All of them signal a caller bug."""


class BoardError(Exception):
    """Base class for board precondition violations."""


class OutOfRangeError(BoardError, IndexError):
    """A cell coordinate lies outside the grid."""


class UnsupportedOperationError(BoardError, RuntimeError):
    """The operation is not possible on the current grid (e.g. no empty cell left)."""


class InvalidTileError(BoardError, ValueError):
    """A tile value is neither empty nor a power of two, or a grid has the wrong shape."""
