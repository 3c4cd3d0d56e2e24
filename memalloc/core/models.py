#!/usr/bin/env python3
"""
Data models for memory region allocation analysis.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..exceptions import InvalidRegionError
from .units import ByteCount


@dataclass(frozen=True)
class Region:
    """A named half-open address interval ``[start, end)``"""
    name: str
    start: int
    end: int

    def __post_init__(self):
        if self.end <= self.start:
            raise InvalidRegionError(
                f"Region {self.name} must end after it starts: "
                f"[0x{self.start:x}, 0x{self.end:x})")

    @property
    def capacity(self) -> int:
        """Size of the region in bytes"""
        return self.end - self.start

    def contains(self, address: int) -> bool:
        """Check whether an address lies inside the region"""
        return self.start <= address < self.end


@dataclass(frozen=True)
class Symbol:
    """A symbol from the object file; name is None when it is not valid text"""
    address: int
    name: Optional[str]
    descriptor: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Section:
    """A section from the object file; name is None when it is not valid text"""
    address: int
    size: int
    align: int
    name: Optional[str]


@dataclass(frozen=True)
class AllocationLine:
    """One row of an allocation report: a section or an alignment gap"""
    kind: str
    size: ByteCount
    percent: float
    start: Optional[int] = None
    end: Optional[int] = None
    name: Optional[str] = None

    SECTION = 'section'
    PADDING = 'padding'

    @property
    def is_padding(self) -> bool:
        """True for alignment padding rows"""
        return self.kind == self.PADDING


@dataclass
class AllocationReport:
    """Allocation of one region: rows in address order and the running total"""
    region: Region
    lines: List[AllocationLine] = field(default_factory=list)
    total: ByteCount = field(default_factory=ByteCount)

    @property
    def percent(self) -> float:
        """Share of the region's capacity used, in percent"""
        return self.total.value / self.region.capacity * 100

    @property
    def free(self) -> ByteCount:
        """Unused bytes left in the region"""
        return ByteCount(max(self.region.capacity - self.total.value, 0))

    @property
    def sections(self) -> List[AllocationLine]:
        """Section rows only"""
        return [line for line in self.lines if not line.is_padding]

    @property
    def padding(self) -> List[AllocationLine]:
        """Padding rows only"""
        return [line for line in self.lines if line.is_padding]
