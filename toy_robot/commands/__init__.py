"""
Text commands for the toy robot.

- interpreter: Parses one line and drives the robot with it
"""

from .interpreter import CommandInterpreter, Command, CommandError

__all__ = ["CommandInterpreter", "Command", "CommandError"]
