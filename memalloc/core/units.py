#!/usr/bin/env python3
"""
Byte counts and their human-readable rendering.

Sizes are rendered in binary units (powers of 1024). The fractional part is
computed from the exact remainder within the unit, so ``1536`` bytes renders
as ``1.500KiB`` rather than a rounded approximation of the whole value.
"""

from dataclasses import dataclass
from typing import Union

# Largest unit first; the first shift with a non-zero quotient wins
BINARY_UNITS = (
    (60, 'EiB'),
    (50, 'PiB'),
    (40, 'TiB'),
    (30, 'GiB'),
    (20, 'MiB'),
    (10, 'KiB'),
)
BYTES_SUFFIX = 'B'


@dataclass(frozen=True, order=True)
class ByteCount:
    """A non-negative size in bytes"""
    value: int = 0

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Byte count cannot be negative: {self.value}")

    def __add__(self, other: Union['ByteCount', int]) -> 'ByteCount':
        if isinstance(other, ByteCount):
            return ByteCount(self.value + other.value)
        if isinstance(other, int):
            return ByteCount(self.value + other)
        return NotImplemented

    def __radd__(self, other: int) -> int:
        # address + size -> address
        if isinstance(other, int):
            return other + self.value
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.human()

    def __format__(self, format_spec: str) -> str:
        if format_spec.endswith(('x', 'X')):
            return format(self.value, format_spec)
        return format(self.human(), format_spec)

    def hex(self) -> str:
        """Exact lowercase hexadecimal value, without prefix or unit."""
        return f"{self.value:x}"

    def human(self) -> str:
        """Render as ``<int>.<3 digit fraction><unit>``.

        The unit is the largest binary unit the value reaches, and the unit
        suffix is left-aligned in three characters (``B  `` for plain bytes).

        Examples:
            >>> ByteCount(1536).human()
            '1.500KiB'
            >>> ByteCount(0).human()
            '0.000B  '
        """
        whole, thousandths, suffix = self._decompose()
        return f"{whole}.{thousandths:03d}{suffix:<3}"

    def _decompose(self):
        for shift, suffix in BINARY_UNITS:
            whole = self.value >> shift
            if whole > 0:
                unit = 1 << shift
                # Truncated, so the fraction never carries into the whole part
                return whole, (self.value % unit) * 1000 // unit, suffix
        return self.value, 0, BYTES_SUFFIX
