"""
environments/table.py

The table top: a finite rectangle of integer cells.

Nothing lives beyond the edge. A robot asks the table
before it goes anywhere.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional
import numpy as np


def is_integral(value) -> bool:
    """Whether value is an integer cell index or size. bool does not count."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass(frozen=True)
class TableConfig:
    """
    Dimensions of the table.

    Cells span [0, width) on the x axis and [0, height) on the y axis.
    Fixed at construction; nothing resizes a table in play.
    """
    width: int = 5
    height: int = 5

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if not is_integral(value):
                raise ValueError(f"Table {name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"Table {name} must be positive, got {value}")

    def contains(self, x: int, y: int) -> bool:
        """Whether (x, y) is a cell on the table."""
        return 0 <= x < self.width and 0 <= y < self.height

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> TableConfig:
        """
        Build a config from a parsed mapping (e.g. a YAML document).

        Missing keys keep their defaults; unknown keys are ignored.
        A nested ``table:`` section takes priority over top-level keys.
        """
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"Table config must be a mapping, got {type(data).__name__}")

        section = data.get("table", data)
        if section is None:
            section = {}
        if not isinstance(section, Mapping):
            raise ValueError("Table config section must be a mapping")

        kwargs = {}
        for key in ("width", "height"):
            if key in section:
                kwargs[key] = section[key]
        return cls(**kwargs)
