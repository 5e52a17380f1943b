# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import argparse
import logging

from numpy.random import default_rng

from twentyfortyeight.config import LaunchConfiguration
from twentyfortyeight.controller import Controller
from twentyfortyeight.envs import Board
from twentyfortyeight.utils import WindowBoard


def parse_arguments(argv: list[str] | None = None) -> LaunchConfiguration:
    """
    Read the launcher options.

    Parameters
    ----------
    argv: list[str], optional
        Command line arguments (default is ``sys.argv[1:]``)

    Returns
    -------
    LaunchConfiguration
        Options of the launcher
    """
    parser = argparse.ArgumentParser(description="Play 2048 with the arrow keys.")
    parser.add_argument("--seed", help="Seed of the tile generator", required=False, type=int, default=None)
    parser.add_argument(
        "--log-level",
        help="Logging level",
        required=False,
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)
    return LaunchConfiguration(seed=args.seed, log_level=getattr(logging, args.log_level))


def build(config: LaunchConfiguration) -> tuple[Controller, WindowBoard]:
    """
    Create the board, the window and the controller, and wire them together.

    Parameters
    ----------
    config: LaunchConfiguration
        Options of the launcher

    Returns
    -------
    tuple[Controller, WindowBoard]
        The controller, showing the menu, and its window
    """
    rng = default_rng(config.seed)
    window = WindowBoard(config=config.window, size=Board.SIZE)
    controller = Controller(Board(rng=rng), window, rng=rng)
    window.set_view_listener(controller)
    controller.display_menu()
    return controller, window


def main(argv: list[str] | None = None):
    """Launch the game."""
    config = parse_arguments(argv)
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    _, window = build(config)

    # Blocking event loop
    window.show(block=True)


if __name__ == "__main__":
    main()
