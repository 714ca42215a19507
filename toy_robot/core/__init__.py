"""
Core components of the toy robot.

- robot: The Robot, its Heading, and where it stands
"""

from .robot import Robot, Heading, Placed, Unplaced, Placement, NOT_PLACED_REPORT

__all__ = ["Robot", "Heading", "Placed", "Unplaced", "Placement", "NOT_PLACED_REPORT"]
