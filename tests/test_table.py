"""
Tests for environments/table.py

The table top and its edges.
"""

import numpy as np
import pytest

from toy_robot.environments.table import TableConfig, is_integral


class TestTableConfig:
    """Tests for TableConfig dataclass."""

    def test_default_config(self):
        config = TableConfig()
        assert config.width == 5
        assert config.height == 5

    def test_custom_config(self):
        config = TableConfig(width=3, height=7)
        assert config.width == 3
        assert config.height == 7

    def test_numpy_integer_size(self):
        config = TableConfig(width=np.int64(4))
        assert config.contains(3, 4)
        assert not config.contains(4, 0)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 5), (5, -3)])
    def test_non_positive_size_rejected(self, width, height):
        """Zero or negative sizes are configuration errors."""
        with pytest.raises(ValueError):
            TableConfig(width=width, height=height)

    @pytest.mark.parametrize("value", [2.5, "5", True, None])
    def test_non_integer_size_rejected(self, value):
        with pytest.raises(ValueError):
            TableConfig(width=value)

    def test_config_is_immutable(self):
        """Bounds cannot change once the table exists."""
        config = TableConfig()
        with pytest.raises(AttributeError):
            config.width = 10


class TestContains:
    """Tests for boundary checks."""

    def test_corners_are_on_table(self):
        config = TableConfig()
        for x, y in [(0, 0), (4, 0), (0, 4), (4, 4)]:
            assert config.contains(x, y)

    def test_outside_cells(self):
        config = TableConfig()
        for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5), (10, 10)]:
            assert not config.contains(x, y)

    def test_rectangular_table(self):
        config = TableConfig(width=2, height=4)
        assert config.contains(1, 3)
        assert not config.contains(2, 3)
        assert not config.contains(1, 4)

    def test_very_large_table(self):
        """Sizes beyond the int64 range still compare exactly."""
        config = TableConfig(width=2**64, height=5)
        assert config.contains(2**64 - 1, 0)
        assert not config.contains(2**64, 0)


class TestIsIntegral:
    """Tests for the integer coordinate check."""

    @pytest.mark.parametrize("value", [0, -3, 2**70, np.int32(2), np.int64(-1)])
    def test_integers(self, value):
        assert is_integral(value)

    @pytest.mark.parametrize("value", [1.5, 2.0, "1", None, True, False, np.float64(1.0)])
    def test_non_integers(self, value):
        assert not is_integral(value)


class TestFromDict:
    """Tests for building a config from parsed YAML."""

    def test_empty_mapping_gives_defaults(self):
        assert TableConfig.from_dict({}) == TableConfig()
        assert TableConfig.from_dict(None) == TableConfig()

    def test_top_level_keys(self):
        config = TableConfig.from_dict({"width": 8, "height": 6})
        assert config == TableConfig(width=8, height=6)

    def test_table_section(self):
        config = TableConfig.from_dict({"table": {"width": 3}})
        assert config == TableConfig(width=3, height=5)

    def test_unknown_keys_ignored(self):
        config = TableConfig.from_dict({"width": 4, "colour": "oak"})
        assert config == TableConfig(width=4, height=5)

    def test_invalid_values_rejected(self):
        with pytest.raises(ValueError):
            TableConfig.from_dict({"width": -2})

    def test_non_mapping_rejected(self):
        with pytest.raises(ValueError):
            TableConfig.from_dict([5, 5])
