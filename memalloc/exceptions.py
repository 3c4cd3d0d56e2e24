#!/usr/bin/env python3
"""
Exception hierarchy for memalloc.

Library code raises these; only the command line layer catches them and
turns them into a diagnostic and a non-zero exit status.
"""


class MemAllocError(Exception):
    """Base exception for all memalloc errors"""


class ELFLoadError(MemAllocError):
    """Raised when the ELF image cannot be read or is not a valid ELF file"""


class InvalidRegionError(MemAllocError):
    """Raised when a memory region does not describe a non-empty interval"""


class AllocationError(MemAllocError):
    """Raised when an allocation report cannot be produced"""


class SectionNameError(AllocationError):
    """Raised when a section name is not valid text"""


class InvalidAlignmentError(AllocationError):
    """Raised when a section alignment is not a positive power of two"""
