#!/usr/bin/env python3
"""
Console output for Binary OS
Coloured lines, stage separators, progress bar and bit tables via rich
"""

from rich.console import Console
from rich.table import Table

COLORS = ('green', 'yellow', 'red', 'blue', 'cyan', 'magenta')


def render_separator(title='', length=50):
    padding = max(0, (length - len(title) - 4) // 2)
    return f"{'-' * padding} {title} {'-' * padding}"


def render_progress(percent, length=50):
    filled = round(length * (percent / 100))
    return f"[{'█' * filled}{'-' * (length - filled)}] {percent}%"


class Display:
    def __init__(self, console=None, err_console=None, bar_length=50):
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)
        self.bar_length = bar_length

    def line(self, message, color='green'):
        if color not in COLORS:
            raise ValueError(f"Unknown color: {color}")
        self.console.print(message, style=color, markup=False, highlight=False)

    def error(self, message):
        self.err_console.print(message, style='red', markup=False, highlight=False)

    def separator(self, title=''):
        self.line(render_separator(title, self.bar_length), 'yellow')

    def progress(self, percent):
        self.line(render_progress(percent, self.bar_length), 'green')

    def result_table(self, result):
        """Show every bit position of an OperationResult, MSB first"""
        table = Table(title=f"{result.operation.value} bit by bit")
        table.add_column("Bit", justify="right")
        table.add_column("A", justify="center")
        if not result.operation.is_unary:
            table.add_column("B", justify="center")
        table.add_column("Result", justify="center", style="green")

        for index, step in enumerate(result.steps):
            # Bit labels count down so the rightmost column is bit 0
            position = str(result.width - 1 - index)
            if result.operation.is_unary:
                table.add_row(position, step.bit_a, step.result)
            else:
                table.add_row(position, step.bit_a, step.bit_b, step.result)

        self.console.print(table)
