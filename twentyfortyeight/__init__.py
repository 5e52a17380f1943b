# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 puzzle game.

The `Board` holds the state of a game, the `Controller` reacts to the user and the `WindowBoard` draws it.
"""

from .core import Move
from .envs import Board

__all__ = ["Board", "Move"]
