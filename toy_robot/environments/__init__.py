"""
Environments a robot can live in.

- table: The finite rectangular table top
"""

from .table import TableConfig

__all__ = ["TableConfig"]
