"""Report command - prints how the target's memory regions are allocated."""

import argparse
import logging
from typing import List, Mapping

from ..analysis.elf import ELFObjectSource
from ..analysis.source import ObjectSource
from ..core.allocation import allocate
from ..core.models import AllocationReport, Region
from ..core.regions import DEFAULT_REGIONS, select
from ..core.symbols import order_symbols
from ..exceptions import AllocationError, ELFLoadError
from ..utils.formatter import (
    DEFAULT_TEMPLATE,
    build_allocation_template_context,
    render_allocation_template,
)

logger = logging.getLogger(__name__)


def add_report_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Add report arguments to a parser.

    Args:
        parser: Parser to extend

    Returns:
        The same parser
    """
    parser.add_argument('elf_path', help='Path to ELF file')
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging, including the symbols found in each region'
    )
    return parser


def _log_symbols(region: Region, symbols) -> None:
    """Log the ordered symbols of a region at debug level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    for address, name, symbol in order_symbols(select(region, symbols)):
        logger.debug("%x %s %r", address, name, symbol)


def generate_report(
    source: ObjectSource,
    regions: Mapping[str, Region] = DEFAULT_REGIONS
) -> List[AllocationReport]:
    """
    Generate the allocation report of every region.

    All regions are analysed before anything is returned, so a fatal error in
    any region yields no partial output.

    Args:
        source: Symbols and sections of the linked image
        regions: Regions to report on, in output order

    Returns:
        One AllocationReport per region

    Raises:
        ELFLoadError: If the image cannot be walked
        AllocationError: If a section name or alignment is invalid
    """
    symbols = source.symbols()
    sections = source.sections()
    logger.debug("Loaded %d symbols and %d sections", len(symbols), len(sections))

    reports = []
    for region in regions.values():
        _log_symbols(region, symbols)
        report = allocate(region, select(region, sections))
        logger.info(
            "%s: %d of %d bytes used (%.3f%%), %d free",
            region.name, report.total.value, region.capacity,
            report.percent, report.free.value)
        reports.append(report)
    return reports


def render_report(reports: List[AllocationReport], template: str = DEFAULT_TEMPLATE) -> str:
    """
    Render allocation reports as a human-readable table.

    Args:
        reports: Reports from generate_report()
        template: Name of a template shipped with the package

    Returns:
        Rendered text, one block per region
    """
    context = build_allocation_template_context(reports)
    return render_allocation_template(context, template)


def run_report(args: argparse.Namespace) -> int:
    """
    Execute the report command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        source = ELFObjectSource.from_path(args.elf_path)
    except ELFLoadError as e:
        logger.error("Failed to load ELF file: %s", e)
        return 1

    try:
        reports = generate_report(source)
    except (ELFLoadError, AllocationError) as e:
        logger.error("Failed to generate allocation report: %s", e)
        return 1

    print(render_report(reports), end='')
    return 0
