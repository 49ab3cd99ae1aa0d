"""
Tests for simulator configuration.
"""

import random
from datetime import date
from pathlib import Path

import pytest

from binos_config import SimulatorConfig, default_log_file


class TestSimulatorConfig:

    def test_defaults(self):
        config = SimulatorConfig()
        assert config.delay_base_ms == 200
        assert config.delay_multiplier == 1.0
        assert config.progress_bar_length == 50
        assert config.max_binary_length == 8

    def test_default_log_file_is_dated(self):
        assert default_log_file(date(2024, 5, 1)) == Path('system_2024-05-01.log')

    def test_log_file_becomes_path(self):
        assert SimulatorConfig(log_file='boot.log').log_file == Path('boot.log')

    def test_negative_multiplier_rejected(self):
        with pytest.raises(ValueError):
            SimulatorConfig(delay_multiplier=-1)

    def test_width_above_eight_rejected(self):
        with pytest.raises(ValueError):
            SimulatorConfig(max_binary_length=9)

    def test_zero_multiplier_uses_minimum_delay(self):
        config = SimulatorConfig(delay_multiplier=0)
        assert config.delay_seconds(random.Random(1)) == pytest.approx(0.1)

    def test_delay_scales_with_multiplier(self):
        class Fixed:
            def random(self):
                return 0.5

        assert SimulatorConfig().delay_seconds(Fixed()) == pytest.approx(0.2)
        assert SimulatorConfig(delay_multiplier=2).delay_seconds(Fixed()) == pytest.approx(0.3)
