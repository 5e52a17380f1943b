# -*- coding: utf-8 -*-
"""
Stateful model of the 2048 game.

This module provides the `Board` class, which holds the grid, the score and the status of a game.
"""

from .board import Board

__all__ = ["Board"]
