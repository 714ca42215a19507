"""
toy_robot/cli.py

Interactive command loop.

Run: python -m toy_robot [--width 5] [--height 5] [--config table.yaml]

Place the robot first. Then drive it. EXIT to leave.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional, TextIO

import yaml

from toy_robot.commands.interpreter import CommandInterpreter, PLACE
from toy_robot.core.robot import NOT_PLACED_REPORT, Robot
from toy_robot.environments.table import TableConfig

logger = logging.getLogger(__name__)

BANNER = "Toy Robot"
PROMPT = "> "
EXIT = "EXIT"
PLACE_FIRST_HINT = "Place the robot on the table (use PLACE X,Y,FACING) or type EXIT to quit"
PLACE_REQUIRED = "Use the PLACE command first to place the robot on the table"
PLACED_OK = "Robot placed successfully!"
COMMAND_SUMMARY = "Commands: PLACE X,Y,FACING | MOVE | LEFT | RIGHT | REPORT | EXIT"


def load_config(config_path: Optional[str] = None) -> TableConfig:
    """Load the table configuration from a YAML file, or the defaults."""
    if config_path is None:
        return TableConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    config = TableConfig.from_dict(data)
    logger.info(f"Loaded {config} from {config_path}")
    return config


def run_session(
    interpreter: CommandInterpreter,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Drive the interpreter from a text stream.

    Two phases:
    1. Placement - only PLACE is accepted until the robot is on the table
    2. Commands - every line goes to the interpreter

    EXIT or end of input ends the session.

    Returns: number of lines read (EXIT included)
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    lines_read = 0

    def say(text: str) -> None:
        stdout.write(text + "\n")

    def read() -> Optional[str]:
        nonlocal lines_read
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        lines_read += 1
        line = line.rstrip("\r\n")
        if line.strip().upper() == EXIT:
            return None
        return line

    say(BANNER)
    say(PLACE_FIRST_HINT)

    # Phase 1: placement
    while not interpreter.robot.is_placed:
        line = read()
        if line is None:
            return lines_read

        if not line.strip().upper().startswith(PLACE):
            say(PLACE_REQUIRED)
            continue

        result = interpreter.process(line)
        if result:
            say(result)
        elif interpreter.robot.is_placed:
            say(PLACED_OK)
        else:
            say(NOT_PLACED_REPORT)

    # Phase 2: commands
    say(COMMAND_SUMMARY)
    while True:
        line = read()
        if line is None:
            return lines_read

        result = interpreter.process(line)
        if result:
            say(result)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toy-robot",
        description="Drive a toy robot around a table top",
    )
    parser.add_argument("--config", type=str, default=None,
                        help="YAML file with table width/height")
    parser.add_argument("--width", type=int, default=None,
                        help="Table width (overrides --config)")
    parser.add_argument("--height", type=int, default=None,
                        help="Table height (overrides --config)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )

    try:
        table = load_config(args.config)
        overrides = {}
        if args.width is not None:
            overrides["width"] = args.width
        if args.height is not None:
            overrides["height"] = args.height
        if overrides:
            table = replace(table, **overrides)
    except (OSError, yaml.YAMLError, ValueError) as e:
        parser.error(f"Invalid table configuration: {e}")

    logger.info(f"Starting with {table}")
    interpreter = CommandInterpreter(Robot(table))
    run_session(interpreter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
