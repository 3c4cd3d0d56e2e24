#!/usr/bin/env python3
"""
Command line entry point for memalloc.

Prints how the linked sections of an ELF image occupy the target's data
and instruction memory regions.
"""

import argparse
import logging
import sys

from .commands.report import add_report_arguments, run_report


def configure_logging(verbose: bool = False) -> None:
    """Configure basic logging for the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s: %(message)s'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog='memalloc',
        description='Report DRAM and IRAM allocation of a linked ELF image',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  memalloc target/riscv32imc-unknown-none-elf/release/firmware
  memalloc firmware.elf --verbose
        """
    )
    return add_report_arguments(parser)


def main(argv=None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    return run_report(args)


if __name__ == '__main__':
    sys.exit(main())
