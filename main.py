from __future__ import annotations

import argparse
import logging

from ui.cli import gameloop


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Mastermind in the terminal.")
    ap.add_argument(
        "--emoji", action="store_true", help="Render pegs as colored emoji"
    )
    ap.add_argument(
        "--plot-dir",
        default=None,
        help="Save a chart of the session's attempts per game to this directory",
    )
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    gameloop(emoji=args.emoji, plot_dir=args.plot_dir)


if __name__ == "__main__":
    main()
