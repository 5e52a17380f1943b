# -*- coding: utf-8 -*-
"""
This module provides the `WindowBoard` class, a Matplotlib window with a menu screen and a game screen.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
