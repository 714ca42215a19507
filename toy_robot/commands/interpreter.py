"""
commands/interpreter.py

One line in, one string out.

The interpreter reads; the robot decides. Whether the robot
accepted a command is its own business: only lines that
cannot be read produce text here.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import re

from toy_robot.core.robot import Heading, Robot

logger = logging.getLogger(__name__)

PLACE = "PLACE"
MOVE = "MOVE"
LEFT = "LEFT"
RIGHT = "RIGHT"
REPORT = "REPORT"

COMMANDS = (PLACE, MOVE, LEFT, RIGHT, REPORT)

UNKNOWN_COMMAND = "Unknown command"
INVALID_PLACE_COMMAND = "Invalid PLACE command"
INVALID_PLACE_PARAMETERS = "Invalid PLACE parameters"
INVALID_PLACE_COORDINATES = "Invalid PLACE coordinates"
INVALID_PLACE_HEADING = "Invalid PLACE heading"

# ASCII digits only, optional sign
COORDINATE = re.compile(r"[+-]?[0-9]+")


class CommandError(ValueError):
    """A line that could not be parsed. The message is shown to the operator."""


@dataclass(frozen=True)
class Command:
    """A parsed command. Coordinates and heading are set for PLACE only."""
    name: str
    x: Optional[int] = None
    y: Optional[int] = None
    heading: Optional[Heading] = None


class CommandInterpreter:
    """
    Parses text commands and drives a Robot with them.

    Syntax (keyword is case-insensitive):
        PLACE X,Y,HEADING
        MOVE | LEFT | RIGHT | REPORT
    """

    def __init__(self, robot: Robot):
        if robot is None:
            raise ValueError("robot must not be None")
        self.robot = robot

    def process(self, line: Optional[str]) -> str:
        """
        Execute one line against the robot.

        Returns "" when there is nothing to show, otherwise the
        report text or a parse error message.
        """
        try:
            command = self.parse(line)
        except CommandError as e:
            logger.info(f"Rejected {line!r}: {e}")
            return str(e)

        if command is None:
            return ""

        return self.execute(command)

    def parse(self, line: Optional[str]) -> Optional[Command]:
        """
        Read one line into a Command.

        Returns None for blank input. Raises CommandError if the
        line is not a valid command.
        """
        if line is None or not line.strip():
            return None

        parts = line.strip().split(None, 1)
        name = parts[0].upper()

        if name not in COMMANDS:
            raise CommandError(UNKNOWN_COMMAND)

        if name == PLACE:
            if len(parts) != 2:
                raise CommandError(INVALID_PLACE_COMMAND)
            return self._parse_place(parts[1])

        # Trailing text after MOVE/LEFT/RIGHT/REPORT is ignored
        return Command(name)

    def execute(self, command: Command) -> str:
        """Dispatch a parsed Command to the robot."""
        if command.name == PLACE:
            self.robot.place(command.x, command.y, command.heading)
        elif command.name == MOVE:
            self.robot.move()
        elif command.name == LEFT:
            self.robot.left()
        elif command.name == RIGHT:
            self.robot.right()
        elif command.name == REPORT:
            return self.robot.report()
        else:
            raise ValueError(f"Unknown command: {command.name}")
        return ""

    def _parse_place(self, arguments: str) -> Command:
        fields = arguments.split(",")
        if len(fields) != 3:
            raise CommandError(INVALID_PLACE_PARAMETERS)

        x, y = (self._parse_coordinate(field) for field in fields[:2])

        try:
            heading = Heading.parse(fields[2])
        except ValueError:
            raise CommandError(INVALID_PLACE_HEADING) from None

        return Command(PLACE, x, y, heading)

    def _parse_coordinate(self, field: str) -> int:
        field = field.strip()
        if not COORDINATE.fullmatch(field):
            raise CommandError(INVALID_PLACE_COORDINATES)
        return int(field)

    def __repr__(self) -> str:
        return f"CommandInterpreter(robot={self.robot!r})"
