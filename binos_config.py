#!/usr/bin/env python3
"""
Configuration for Binary OS
Delay timing, progress bar size, binary width limit and log location
"""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from binos_engine import MAX_BITS


def default_log_file(today=None):
    """Dated log file in the working directory, e.g. system_2024-05-01.log"""
    today = today or date.today()
    return Path(f"system_{today.isoformat()}.log")


@dataclass
class SimulatorConfig:
    delay_base_ms: float = 200
    delay_multiplier: float = 1.0
    min_delay_ms: float = 100
    progress_bar_length: int = 50
    max_binary_length: int = MAX_BITS
    log_file: Path = field(default_factory=default_log_file)

    def __post_init__(self):
        if self.delay_multiplier < 0:
            raise ValueError(f"Delay multiplier cannot be negative: {self.delay_multiplier}")
        if not 1 <= self.max_binary_length <= MAX_BITS:
            raise ValueError(f"Binary width must be between 1 and {MAX_BITS}")
        self.log_file = Path(self.log_file)

    def delay_seconds(self, rng, base_ms=None):
        """Random delay scaled by the speed multiplier, never below min_delay_ms"""
        base = self.delay_base_ms if base_ms is None else base_ms
        return (rng.random() * base * self.delay_multiplier + self.min_delay_ms) / 1000
