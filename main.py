import argparse
import logging

import numpy as np

import config as cfg
from console import ConsoleBoundary
from decisions import SeasonAbandoned
from season import play_sessions


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Lemonade Stand in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="random seed (default: fresh entropy)")
    parser.add_argument("--log-level", default=cfg.LOG_LEVEL)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    boundary = ConsoleBoundary()
    boundary.write("HI! WELCOME TO LEMONSVILLE, CALIFORNIA!")
    try:
        play_sessions(boundary, rng=np.random.default_rng(args.seed))
    except SeasonAbandoned:
        boundary.write("")
        boundary.write("SEASON ABANDONED.")
        return 1
    boundary.write("THANKS FOR PLAYING LEMONADE STAND!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
