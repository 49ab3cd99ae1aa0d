#!/usr/bin/env python3
"""
Core system for Binary OS
Runs the boot stages, collects the inputs and executes the chosen operation
"""

import logging
import random
import time
from collections import namedtuple

from binos_engine import evaluate
from binos_prompts import InputHandler

logger = logging.getLogger(__name__)

BootStage = namedtuple('BootStage', ['percent', 'title', 'lines', 'event'])

# Cosmetic stages before the user is asked for input
FIRMWARE_STAGES = [
    BootStage(0, 'Firmware Initialization', [
        ('Powering on: Distributing voltage to components...', 'blue'),
        ('Starting BIOS/UEFI...', 'blue'),
        ('Running POST: CPU, RAM and PCIe bus enumeration...', 'blue'),
        ('Firmware ready!', 'blue'),
    ], 'BIOS initialized'),
    BootStage(10, 'Bootloader Stage', [
        ('Scanning for boot device (HDD/SSD/USB)...', 'blue'),
        ('Loading GRUB into RAM...', 'blue'),
        ('Bootloader initialized!', 'blue'),
    ], 'Bootloader loaded'),
    BootStage(20, 'Kernel Loading', [
        ('Transferring kernel to RAM...', 'green'),
        ('Mapping NUMA memory topology...', 'green'),
        ('Kernel entered Ring 0!', 'green'),
    ], 'Kernel loaded'),
    BootStage(30, 'Kernel Modules', [
        ('Initializing kernel module loader...', 'green'),
        ('Modules linked successfully!', 'green'),
    ], 'Kernel modules loaded'),
]

# Cosmetic stages after the CPU has produced a result
SERVICE_STAGES = [
    BootStage(70, 'Service Manager', [
        ('Starting systemd (PID 1)...', 'blue'),
        ('Reached target: Multi-User System', 'blue'),
    ], 'Services started'),
    BootStage(80, 'Network Stack', [
        ('Bringing up loopback interface...', 'cyan'),
        ('Configuring TCP/IP stack...', 'cyan'),
        ('Network online!', 'cyan'),
    ], 'Network stack initialized'),
    BootStage(90, 'Security Hardening', [
        ('Seeding entropy pool...', 'magenta'),
        ('Applying sysctl hardening rules...', 'magenta'),
        ('Security policies enforced!', 'magenta'),
    ], 'Security hardening applied'),
    BootStage(100, 'System Ready', [
        ('All subsystems operational.', 'green'),
        ('Binary OS boot sequence complete!', 'green'),
    ], 'Boot sequence complete'),
]


class Simulator:
    def __init__(self, config, display, events, input_handler=None, sleep=None, rng=None):
        self.config = config
        self.display = display
        self.events = events
        self.input_handler = input_handler or InputHandler(
            display, max_length=config.max_binary_length
        )
        self.sleep = sleep or time.sleep
        self.rng = rng or random.Random()
        if self.events.on_error is None:
            self.events.on_error = self.report_log_failure

    def report_log_failure(self, error):
        self.display.error(f"System failure (logging): {error} [Code: LOG001]")

    def pause(self):
        """Simulate processing time"""
        self.sleep(self.config.delay_seconds(self.rng))

    def run_stage(self, func, context, error_code='GEN001'):
        """Run one stage; failures are logged and reported, the stage returns None"""
        try:
            return func()
        except EOFError:
            raise
        except Exception as e:
            logger.debug("Stage %s failed", context, exc_info=True)
            self.events.error(f"Error in {context}: {e}", error_code)
            self.display.error(f"System failure ({context}): {e}")
            return None

    def boot_stage(self, stage):
        """Print a cosmetic stage and advance the progress bar"""
        self.display.separator(f"{stage.percent}%: {stage.title}")
        for text, color in stage.lines:
            self.display.line(text, color)
            self.pause()
        self.events.operation(stage.event)
        self.display.progress(stage.percent)
        return stage.percent

    def get_input(self):
        """Collect both binary inputs from the user"""
        self.display.separator('40%: User Space Activation')
        self.display.line('Awaiting user input:', 'blue')
        binary1 = self.input_handler.get_binary_input('First binary (e.g., 101): ')
        binary2 = self.input_handler.get_binary_input('Second binary (e.g., 110): ')
        self.display.line(f'Inputs registered: {binary1}, {binary2}', 'blue')
        self.events.operation(f'User inputs: {binary1} and {binary2}')
        self.display.progress(40)
        return binary1, binary2

    def choose_operation(self):
        self.display.separator('50%: Operation Selection')
        operation = self.input_handler.choose_operation()
        self.display.line(f'Operation selected: {operation.value}', 'yellow')
        self.events.operation(f'Operation chosen: {operation.value}')
        self.display.progress(50)
        return operation

    def perform_operation(self, binary1, binary2, operation):
        """Execute the operation and show each bit as it is computed"""
        self.display.separator('60%: CPU Execution')
        self.display.line(f'Executing {operation.value} via CPU...', 'magenta')

        operand_b = binary2
        if operation.is_unary:
            self.display.line(f'NOT is unary: second input {binary2} ignored', 'yellow')
            operand_b = None

        result = evaluate(binary1, operand_b, operation, self.config.max_binary_length)

        for explanation in result.explanations:
            self.display.line(f'  {explanation}', 'cyan')
            self.pause()

        self.display.result_table(result)
        self.display.line(f'Result: {result.bits}', 'green')
        self.display.line(f'Decimal: {result.decimal}', 'green')
        self.events.operation(
            f'Operation {operation.value} executed. '
            f'Result: {result.bits} (decimal {result.decimal})'
        )
        self.display.progress(60)
        return result

    def run(self):
        """Main simulation; returns the OperationResult or None if a stage failed"""
        self.display.line('Initializing Binary OS Simulation...', 'green')
        if not self.events.available:
            self.report_log_failure(self.events.failure)
        self.pause()

        for stage in FIRMWARE_STAGES:
            self.run_stage(lambda: self.boot_stage(stage), stage.title)

        inputs = self.run_stage(self.get_input, 'user input', 'INP001')
        if inputs is None:
            return None

        operation = self.run_stage(self.choose_operation, 'operation selection', 'INP001')
        if operation is None:
            return None

        result = self.run_stage(
            lambda: self.perform_operation(inputs[0], inputs[1], operation),
            'CPU execution', 'CPU001'
        )
        if result is None:
            return None

        for stage in SERVICE_STAGES:
            self.run_stage(lambda: self.boot_stage(stage), stage.title)

        return result
