#!/usr/bin/env python3
"""
memalloc - memory region allocation reports for embedded ELF images.

Shows which sections occupy the target's DRAM and IRAM, how much padding
alignment introduces between them, and how much of each region is used.
"""

from .analysis.elf import ELFObjectSource
from .analysis.source import ObjectSource
from .commands.report import generate_report, render_report
from .core.allocation import allocate, alignment_padding
from .core.models import AllocationLine, AllocationReport, Region, Section, Symbol
from .core.regions import DEFAULT_REGIONS, DRAM, IRAM, select
from .core.symbols import order_symbols
from .core.units import ByteCount
from .exceptions import (
    AllocationError,
    ELFLoadError,
    InvalidAlignmentError,
    InvalidRegionError,
    MemAllocError,
    SectionNameError,
)

__all__ = [
    'ELFObjectSource', 'ObjectSource',
    'generate_report', 'render_report',
    'allocate', 'alignment_padding',
    'AllocationLine', 'AllocationReport', 'Region', 'Section', 'Symbol',
    'DEFAULT_REGIONS', 'DRAM', 'IRAM', 'select',
    'order_symbols', 'ByteCount',
    'AllocationError', 'ELFLoadError', 'InvalidAlignmentError',
    'InvalidRegionError', 'MemAllocError', 'SectionNameError',
]
