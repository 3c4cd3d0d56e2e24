#!/usr/bin/env python3
"""
Memory regions of the target and selection of items that fall inside them.

The default regions follow the ESP32-C3 memory map used by esp-hal
(``esp32c3-hal/ld/db-esp32c3-memory.x``).
"""

from collections import OrderedDict
from typing import Iterable, List, Mapping, TypeVar

from .models import Region

T = TypeVar('T')

DRAM_BASE = 0x3FC80000
DRAM_SIZE = 0x50000 + 0x600

# IRAM starts after the 16K instruction cache and gives up 1K at the top
IRAM_BASE = 0x4037C000 + 0x4000
IRAM_SIZE = 400 * 1024 - 0x400

DRAM = Region('DRAM', DRAM_BASE, DRAM_BASE + DRAM_SIZE)
IRAM = Region('IRAM', IRAM_BASE, IRAM_BASE + IRAM_SIZE)

# Reported in this order
DEFAULT_REGIONS: Mapping[str, Region] = OrderedDict(
    (region.name, region) for region in (DRAM, IRAM)
)


def select(region: Region, items: Iterable[T]) -> List[T]:
    """Return the items whose ``address`` lies inside the region.

    Input order is preserved and the input is not modified.

    Args:
        region: Region to select for
        items: Symbols, sections, or anything else exposing ``address``

    Returns:
        List of the items inside ``[region.start, region.end)``
    """
    return [item for item in items if region.contains(item.address)]
