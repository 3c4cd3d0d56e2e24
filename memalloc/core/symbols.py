#!/usr/bin/env python3
"""Deterministic ordering of the symbols found in a region."""

import logging
from typing import Iterable, List, Tuple

from .models import Symbol

logger = logging.getLogger(__name__)


def order_symbols(symbols: Iterable[Symbol]) -> List[Tuple[int, str, Symbol]]:
    """Pair symbols with their names and sort them by address.

    Symbols sharing an address (start/end markers of the same object, for
    example) are ordered by descending name. Symbols without a valid name
    are skipped.

    Returns:
        List of ``(address, name, symbol)`` tuples
    """
    named = []
    for symbol in symbols:
        if symbol.name is None:
            logger.debug("Skipping symbol at 0x%x: name is not valid text", symbol.address)
            continue
        named.append((symbol.address, symbol.name, symbol))

    # Two stable passes: descending name, then ascending address
    named.sort(key=lambda entry: entry[1], reverse=True)
    named.sort(key=lambda entry: entry[0])
    return named
