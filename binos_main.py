#!/usr/bin/env python3
"""
Binary OS - A simulated operating system boot with binary logic
Entry point that parses options, boots the system and runs the simulation
"""

import argparse
import sys

from binos_config import SimulatorConfig, default_log_file
from binos_core import Simulator
from binos_display import Display
from binos_eventlog import EventLog


def show_banner(display):
    """Display ASCII banner for BINARY OS"""
    banner = r"""
 ######  ### ##    ##    ###    ######  ##    ##     #######   ######
 ##   ##  #  ###   ##   ## ##   ##   ##  ##  ##     ##     ## ##
 ######   #  ## ## ##  ##   ##  ######    ####      ##     ##  ######
 ##   ##  #  ##  ####  #######  ##  ##     ##       ##     ##       ##
 ######  ### ##    ##  ##   ##  ##   ##    ##        #######   ######

     Binary OS - Boot Simulation with Logic Gates
     ============================================
    """
    display.console.print(banner, style='cyan', markup=False, highlight=False)


def speed(value):
    """argparse type for --speed: a non-negative delay multiplier"""
    try:
        multiplier = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid speed: {value!r}") from None
    if multiplier < 0:
        raise argparse.ArgumentTypeError(f"speed cannot be negative: {value!r}")
    return multiplier


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='binary-os-sim',
        description='Simulated OS boot with interactive binary logic operations',
    )
    parser.add_argument('--speed', type=speed, default=1.0,
                        help='delay multiplier, e.g. --speed=0.5 for faster boot')
    parser.add_argument('--log-file', default=None,
                        help='event log path (default: system_<date>.log)')
    return parser.parse_args(argv)


def boot_system(args, display):
    """Build the Binary OS components from command-line options"""
    config = SimulatorConfig(
        delay_multiplier=args.speed,
        log_file=args.log_file or default_log_file(),
    )
    display.bar_length = config.progress_bar_length
    events = EventLog(config.log_file)
    return Simulator(config, display, events)


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    display = Display()
    simulator = None

    try:
        show_banner(display)
        simulator = boot_system(args, display)
        simulator.run()

    except KeyboardInterrupt:
        display.line("\n\nSystem shutdown requested...", 'yellow')
    except EOFError:
        display.line("\n\nInput closed, shutting down...", 'yellow')
    except Exception as e:
        display.error(f"System error: {e}")
        sys.exit(1)
    finally:
        if simulator is not None:
            simulator.events.close()

    display.line("Binary OS shutdown complete.", 'green')


if __name__ == "__main__":
    main()
