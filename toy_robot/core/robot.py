"""
core/robot.py

A robot on a table top.

It is either somewhere or nowhere. Never half of each,
never off the edge.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union
import logging

import numpy as np

from toy_robot.environments.table import TableConfig, is_integral

logger = logging.getLogger(__name__)

NOT_PLACED_REPORT = "Robot not placed on table"


class Heading(Enum):
    """Compass headings, in clockwise order."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def parse(cls, text: str) -> Heading:
        """Resolve a heading name, ignoring case and surrounding whitespace."""
        name = text.strip().upper() if isinstance(text, str) else ""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown heading: {text!r}") from None

    def left(self) -> Heading:
        """Rotate 90 degrees counter-clockwise."""
        return Heading((self.value + 3) % 4)

    def right(self) -> Heading:
        """Rotate 90 degrees clockwise."""
        return Heading((self.value + 1) % 4)

    @property
    def vector(self) -> np.ndarray:
        """Unit step (dx, dy) for one move in this heading."""
        return HEADING_VECTORS[self.value].copy()


# Indexed by Heading.value
HEADING_VECTORS = np.array([
    [0, 1],     # NORTH
    [1, 0],     # EAST
    [0, -1],    # SOUTH
    [-1, 0],    # WEST
], dtype=np.int64)


@dataclass(frozen=True)
class Unplaced:
    """The robot is not on the table."""

    def report(self) -> str:
        return NOT_PLACED_REPORT


@dataclass(frozen=True)
class Placed:
    """The robot is on the table at (x, y), facing heading."""
    x: int
    y: int
    heading: Heading

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def report(self) -> str:
        return f"{self.x}, {self.y}, {self.heading.name}"


Placement = Union[Unplaced, Placed]

UNPLACED = Unplaced()


class Robot:
    """
    A single robot confined to a table.

    Every transition goes through the same two guards:
    - nothing happens before a successful place()
    - nothing may leave the table

    Rejections are returned as False and logged; state is untouched.
    """

    def __init__(self, table: Optional[TableConfig] = None):
        self.table = table or TableConfig()
        self._placement: Placement = UNPLACED

    # ==================== State ====================

    @property
    def placement(self) -> Placement:
        return self._placement

    @property
    def is_placed(self) -> bool:
        return isinstance(self._placement, Placed)

    # ==================== Commands ====================

    def place(self, x: int, y: int, heading: Heading) -> bool:
        """
        Put the robot at (x, y) facing heading.

        Fails if (x, y) is not on the table, or if the arguments are not
        integer coordinates and a Heading; an earlier placement (or the
        lack of one) is kept.
        """
        if not (is_integral(x) and is_integral(y) and isinstance(heading, Heading)):
            logger.warning(f"Invalid placement arguments: ({x!r}, {y!r}, {heading!r})")
            return False

        if not self.table.contains(x, y):
            logger.warning(
                f"Placement at ({x}, {y}) is outside the "
                f"{self.table.width}x{self.table.height} table"
            )
            return False

        self._placement = Placed(int(x), int(y), heading)
        logger.debug(f"Placed at {self._placement.report()}")
        return True

    def move(self) -> bool:
        """Step one unit forward, unless that would leave the table."""
        current = self._require_placed()
        if current is None:
            return False

        dx, dy = (int(step) for step in current.heading.vector)
        x, y = current.x + dx, current.y + dy
        if not self.table.contains(x, y):
            logger.warning("Move will cause robot to fall")
            return False

        self._placement = Placed(x, y, current.heading)
        logger.debug(f"Moved to {self._placement.report()}")
        return True

    def left(self) -> bool:
        """Rotate 90 degrees counter-clockwise in place."""
        return self._rotate(Heading.left)

    def right(self) -> bool:
        """Rotate 90 degrees clockwise in place."""
        return self._rotate(Heading.right)

    def report(self) -> str:
        """'x, y, HEADING', or the not-placed sentinel."""
        return self._placement.report()

    # ==================== Internal Mechanisms ====================

    def _rotate(self, turn) -> bool:
        current = self._require_placed()
        if current is None:
            return False

        self._placement = Placed(current.x, current.y, turn(current.heading))
        logger.debug(f"Turned to {self._placement.heading.name}")
        return True

    def _require_placed(self) -> Optional[Placed]:
        """The current placement, or None (logged) if there is none."""
        if isinstance(self._placement, Placed):
            return self._placement
        logger.warning("Robot not placed")
        return None

    def __repr__(self) -> str:
        return f"Robot(table={self.table.width}x{self.table.height}, placement={self._placement})"
