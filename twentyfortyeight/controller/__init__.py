# -*- coding: utf-8 -*-
"""
Glue between the board and the game window.

It includes the `ViewListener` and `GameView` protocols and the `Controller` that implements the former.
"""

from .controller import Controller
from .listener import GameView, ViewListener

__all__ = ["Controller", "GameView", "ViewListener"]
