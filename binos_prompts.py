#!/usr/bin/env python3
"""
Input handling for Binary OS
Prompts for binary strings and an operation until the answers are valid
"""

import re

from binos_engine import MAX_BITS, InvalidOperation, Operation


class InputHandler:
    def __init__(self, display, ask=None, max_length=MAX_BITS):
        self.display = display
        self.ask = ask or display.console.input
        self.max_length = max_length
        self.pattern = re.compile(rf'^[01]{{1,{max_length}}}$')

    def ask_question(self, query):
        return self.ask(f"[cyan]{query}[/cyan]")

    def get_binary_input(self, prompt):
        """Keep asking until the answer is 1..max_length characters of 0/1"""
        while True:
            answer = self.ask_question(prompt).strip()

            if answer == '':
                self.display.line('Input cannot be empty. Please try again.', 'red')
                continue

            if self.pattern.match(answer):
                return answer

            self.display.line(
                f'Invalid input. Use only 0s and 1s, max {self.max_length} bits.', 'red'
            )

    def choose_operation(self):
        """Keep asking until the answer names a supported operation"""
        options = ', '.join(Operation.names())
        self.display.line(f'Available logical operations: {options}', 'yellow')

        while True:
            answer = self.ask_question('Select operation: ')
            try:
                return Operation.parse(answer)
            except InvalidOperation:
                self.display.line(f'Invalid choice. Options: {options}', 'red')
