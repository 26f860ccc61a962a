"""
main.py
-------
Console entry point: `stressfall [--config FILE] [--fps N] [--mute] [--seed N]`.
"""

import argparse
import sys

from stressfall.core.debug.debug_logger import DebugLogger, LoggerConfig
from stressfall.core.runtime.game_config import DEFAULT_CONFIG_FILE, GameConfig
from stressfall.core.runtime.game_loop import GameLoop
from stressfall.core.services.config_manager import ConfigError


def build_parser():
    parser = argparse.ArgumentParser(description="Avoid the Finals Stress")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help="Game tuning file (.yaml, .json or .py)")
    parser.add_argument("--fps", type=int, default=None,
                        help="Target frame rate (difficulty is frame-coupled)")
    parser.add_argument("--mute", action="store_true", help="Run without audio")
    parser.add_argument("--seed", type=int, default=None, help="Seed spawn randomness")
    parser.add_argument("--log-level", default=None,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.log_level:
        LoggerConfig.configure(level=args.log_level)

    try:
        config = GameConfig.load(args.config, strict=args.config != DEFAULT_CONFIG_FILE)
    except ConfigError as e:
        DebugLogger.fail(f"Invalid configuration: {e}")
        return 2

    kwargs = {"audio": not args.mute, "seed": args.seed}
    if args.fps:
        kwargs["fps"] = args.fps
    GameLoop(config, **kwargs).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
