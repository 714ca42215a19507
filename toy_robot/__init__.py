"""
Toy Robot: a single robot on a finite table top

Place it, turn it, walk it, ask where it is.
It will not walk off the edge.
"""

from toy_robot.environments.table import TableConfig
from toy_robot.core.robot import Robot, Heading
from toy_robot.commands.interpreter import CommandInterpreter

__version__ = "0.1.0"

__all__ = ["TableConfig", "Robot", "Heading", "CommandInterpreter"]
