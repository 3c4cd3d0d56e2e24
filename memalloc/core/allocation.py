#!/usr/bin/env python3
"""
Region allocation analysis.

Walks the sections of one region in address order, attributing the gaps that
alignment forces between consecutive sections to padding, and accumulates
the bytes consumed against the region's capacity.
"""

import logging
from typing import Iterable

from ..exceptions import InvalidAlignmentError, SectionNameError
from .models import AllocationLine, AllocationReport, Region, Section
from .units import ByteCount

logger = logging.getLogger(__name__)


def alignment_padding(address: int, align: int) -> int:
    """Bytes needed to move ``address`` up to the next multiple of ``align``.

    Args:
        address: Address the previous section ended at
        align: Required alignment of the next section, a power of two

    Returns:
        Number of padding bytes, zero when the address is already aligned

    Raises:
        InvalidAlignmentError: If align is not a positive power of two
    """
    if align <= 0 or align & (align - 1):
        raise InvalidAlignmentError(f"Alignment must be a positive power of two, got {align}")
    mask = align - 1
    return -address & mask


def allocate(region: Region, sections: Iterable[Section]) -> AllocationReport:
    """Build the allocation report for the sections of one region.

    Args:
        region: Region being reported on
        sections: Sections inside the region, in any order

    Returns:
        AllocationReport with one line per section and per alignment gap

    Raises:
        SectionNameError: If a section name is not valid text
        InvalidAlignmentError: If a section alignment is not a power of two
    """
    capacity = region.capacity
    report = AllocationReport(region=region)
    last_address = region.start
    total = ByteCount(0)

    for section in sorted(sections, key=lambda s: s.address):
        if section.name is None:
            raise SectionNameError(
                f"Section at 0x{section.address:x} in {region.name} has a name "
                "that is not valid UTF-8")

        if section.address < last_address:
            logger.warning(
                "%s: section %s at 0x%x overlaps the previous section ending at 0x%x",
                region.name, section.name, section.address, last_address)

        pad = alignment_padding(last_address, section.align)
        if pad > 0:
            report.lines.append(AllocationLine(
                kind=AllocationLine.PADDING,
                size=ByteCount(pad),
                percent=pad / capacity * 100,
            ))

        size = ByteCount(section.size)
        end = section.address + size
        report.lines.append(AllocationLine(
            kind=AllocationLine.SECTION,
            size=size,
            percent=size.value / capacity * 100,
            start=section.address,
            end=end,
            name=section.name,
        ))

        total += size + pad
        last_address = end

    report.total = total
    if total.value > capacity:
        logger.warning(
            "%s: %d bytes allocated exceeds the region capacity of %d bytes",
            region.name, total.value, capacity)
    return report
