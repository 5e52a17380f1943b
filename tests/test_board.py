# -*-  coding: utf-8 -*-
"""
Set of test for Board.
"""
from unittest import TestCase, main

import numpy as np

from twentyfortyeight.core.exceptions import (
    InvalidTileError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from twentyfortyeight.core.gamemove import Move
from twentyfortyeight.envs.board import Board

EMPTY = [[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]
STUCK = [[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2, 4], [8, 16, 32, 64]]


class TestBoard(TestCase):
    """
    Test for the Board class.
    This class tests the state of a game and its moves.
    """

    def setUp(self):
        """Initialize a new board before each test."""
        self.board = Board(rng=np.random.default_rng(42))

    def test_init(self):
        """Test if the board starts empty, alive and with a score of 0."""
        self.assertEqual(self.board.grid.shape, (4, 4))
        self.assertEqual(np.count_nonzero(self.board.grid), 0)
        self.assertEqual(self.board.score, 0)
        self.assertTrue(self.board.alive)

    def test_grid_is_read_only(self):
        """Test if the grid can not be modified from outside."""
        with self.assertRaises(ValueError):
            self.board.grid[0, 0] = 2

    def test_set_cell(self):
        """Test if a tile is placed in a cell."""
        self.board.set_cell(1, 2, 8)
        self.assertEqual(self.board.grid[1, 2], 8)

    def test_set_cell_out_of_range(self):
        """Test if setting a cell beyond the board fails."""
        for row, col in [(4, 0), (0, 4), (-1, 0), (0, -1)]:
            with self.assertRaises(OutOfRangeError):
                self.board.set_cell(row, col, 2)

    def test_out_of_range_is_index_error(self):
        """Test if the error can be caught as an IndexError."""
        with self.assertRaises(IndexError):
            self.board.set_cell(5, 5, 2)

    def test_set_cell_invalid_tile(self):
        """Test if values that are not powers of two are rejected."""
        for tile in [1, 3, 6, -2]:
            with self.assertRaises(InvalidTileError):
                self.board.set_cell(0, 0, tile)

    def test_from_grid(self):
        """Test if a board is built from a layout."""
        board = Board.from_grid(STUCK)
        self.assertEqual(board.grid.tolist(), STUCK)
        self.assertEqual(board.score, 0)
        self.assertTrue(board.alive)

    def test_from_grid_wrong_shape(self):
        """Test if a layout that is not 4x4 is rejected."""
        with self.assertRaises(InvalidTileError):
            Board.from_grid([[2, 4], [8, 16]])

    def test_end_to_end_move_right(self):
        """Test if moving right merges the two tiles of the first row."""
        board = Board.from_grid([[2, 0, 0, 2], *EMPTY[1:]])
        points = board.apply_move(Move.RIGHT)
        self.assertEqual(board.grid[0].tolist(), [0, 0, 0, 4])
        self.assertEqual(points, 4)
        self.assertEqual(board.score, 4)

    def test_apply_move_accepts_names(self):
        """Test if moves can be given by name."""
        board = Board.from_grid([[2, 2, 2, 2], *EMPTY[1:]])
        board.apply_move('left')
        self.assertEqual(board.grid[0].tolist(), [4, 4, 0, 0])
        self.assertEqual(board.score, 8)

    def test_apply_move_does_not_spawn(self):
        """Test if a move only slides and merges."""
        board = Board.from_grid([[2, 0, 0, 0], *EMPTY[1:]])
        board.apply_move(Move.DOWN)
        self.assertEqual(np.count_nonzero(board.grid), 1)
        self.assertEqual(board.grid[3, 0], 2)

    def test_would_change_does_not_move(self):
        """Test if checking a move leaves the grid and the score untouched."""
        board = Board.from_grid([[2, 2, 0, 0], *EMPTY[1:]])
        self.assertTrue(board.would_change(Move.LEFT))
        self.assertEqual(board.grid[0].tolist(), [2, 2, 0, 0])
        self.assertEqual(board.score, 0)

    def test_would_change_on_blocked_row(self):
        """Test if a blocked move is detected."""
        board = Board.from_grid([[2, 4, 8, 16], *EMPTY[1:]])
        self.assertFalse(board.would_change(Move.LEFT))
        self.assertTrue(board.would_change(Move.DOWN))

    def test_score_never_decreases(self):
        """Test if the score is monotonic over a random game."""
        board = self.board
        rng = np.random.default_rng(0)
        board.set_cell(*board.random_empty_cell(), board.random_value())
        board.set_cell(*board.random_empty_cell(), board.random_value())
        previous = board.score
        for _ in range(300):
            move = list(Move)[rng.integers(4)]
            if not board.would_change(move):
                continue
            board.apply_move(move)
            board.set_cell(*board.random_empty_cell(), board.random_value())
            board.update_status()
            self.assertGreaterEqual(board.score, previous)
            previous = board.score
            if not board.alive:
                break

    def test_update_status_winner(self):
        """Test if a 2048 tile ends the game."""
        board = Board.from_grid([[2048, 0, 0, 0], *EMPTY[1:]])
        self.assertTrue(board.is_winner())
        self.assertFalse(board.update_status())
        self.assertFalse(board.alive)

    def test_update_status_stuck(self):
        """Test if a full board without equal neighbours ends the game."""
        board = Board.from_grid(STUCK)
        self.assertTrue(board.is_full())
        self.assertFalse(board.has_valid_move())
        self.assertFalse(board.update_status())

    def test_update_status_full_with_pair(self):
        """Test if a full board with equal neighbours keeps going."""
        layout = [row[:] for row in STUCK]
        layout[3][3] = 4
        board = Board.from_grid(layout)
        self.assertTrue(board.update_status())
        self.assertTrue(board.alive)

    def test_update_status_with_empty_cells(self):
        """Test if a board with empty cells keeps going."""
        self.assertTrue(self.board.update_status())

    def test_no_move_after_game_over(self):
        """Test if a finished game ignores moves."""
        board = Board.from_grid([[2048, 2, 2, 0], *EMPTY[1:]])
        board.update_status()
        self.assertEqual(board.apply_move(Move.LEFT), 0)
        self.assertEqual(board.grid[0].tolist(), [2048, 2, 2, 0])
        self.assertEqual(board.score, 0)

    def test_random_value(self):
        """Test if new tiles are 2 or 4."""
        values = {self.board.random_value() for _ in range(100)}
        self.assertTrue(values <= {2, 4})

    def test_random_empty_cell_on_full_board(self):
        """Test if a full board refuses to give an empty cell."""
        board = Board.from_grid(STUCK)
        with self.assertRaises(UnsupportedOperationError):
            board.random_empty_cell()

    def test_random_empty_cell_single(self):
        """Test if the only empty cell is found."""
        layout = [row[:] for row in STUCK]
        layout[2][3] = 0
        board = Board.from_grid(layout, rng=np.random.default_rng(1))
        for _ in range(10):
            self.assertEqual(board.random_empty_cell(), (2, 3))

    def test_seeded_boards_agree(self):
        """Test if two boards with the same seed spawn the same tiles."""
        first = Board(rng=np.random.default_rng(9))
        second = Board(rng=np.random.default_rng(9))
        draws_first = [(first.random_empty_cell(), first.random_value()) for _ in range(5)]
        draws_second = [(second.random_empty_cell(), second.random_value()) for _ in range(5)]
        self.assertEqual(draws_first, draws_second)

    def test_render(self):
        """Test if the text rendering shows rows and score."""
        board = Board.from_grid([[2, 0, 0, 2], *EMPTY[1:]])
        lines = board.render().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[-1], 'score=0')
        self.assertIn('2', lines[0])


if __name__ == "__main__":
    main()
