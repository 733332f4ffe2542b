"""
Snake Arcade

Manual play, self-play and player-vs-bot snake in one pygame window.
"""

import argparse
import logging
import sys

from .config import GameConfig
from .display import GameWindow
from .game.arcade import ArcadeController

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Grid snake with manual, self-play and competitive modes")
    parser.add_argument("--grid-width", type=int, default=defaults.grid_width)
    parser.add_argument("--grid-height", type=int, default=defaults.grid_height)
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size,
                        help="Pixels per cell in windowed mode")
    parser.add_argument("--move-interval", type=float, default=defaults.move_interval,
                        help="Seconds between snake moves")
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food and hazard placement")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def config_from_args(args):
    return GameConfig(
        grid_width=args.grid_width,
        grid_height=args.grid_height,
        cell_size=args.cell_size,
        move_interval=args.move_interval,
        fps=args.fps,
        seed=args.seed,
    )


def run(config):
    """Run the arcade until the player quits"""
    controller = ArcadeController(config)
    window = GameWindow(config)

    try:
        while not window.closed and not controller.quit_requested:
            dt = window.tick()
            for event in window.poll_events():
                controller.handle(event)
            controller.update(dt)
            window.draw(controller.snapshot())
    finally:
        window.close()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 2

    print("Snake Arcade")
    print("=" * 30)
    print(f"Grid {config.grid_width}x{config.grid_height}, one move every {config.move_interval}s")

    try:
        run(config)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
    except Exception:
        logger.exception("Game loop crashed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
